"""Inversion Service — граница между внешним слоем и ядром инверсии.

Поток обработки запроса:
1. JSON контракт (inversion_request.json): для сырых dict payload
2. InversionRequest (pydantic)
3. validate() → INVALID report при отказе
4. MatrixInverter.invert() → SINGULAR или INVERTIBLE
5. format_matrix() в выбранном display_format

Display format влияет только на rendered, никогда на inverse.

Дополнительно: parse_matrix (ячейки-строки → float, пустая ячейка = 0)
и random_integer_matrix (пример со случайными целыми в [-10, 10]).
"""

import logging
import random
from typing import Any, Dict, Sequence

from src.core.contracts import validate_inversion_report, validate_inversion_request
from src.core.domain.inversion import InversionReport, InversionRequest, InversionStatus
from src.core.math.matrix import Matrix
from src.core.math.rational import format_matrix
from src.inversion.inverter import InverterConfig, MatrixInverter
from src.inversion.validation import validate

logger = logging.getLogger(__name__)

# Диапазон случайных целых для примера
EXAMPLE_VALUE_MIN = -10
EXAMPLE_VALUE_MAX = 10


class InversionService:
    """Обработка запросов на инверсию."""

    def __init__(self, config: InverterConfig | None = None):
        """
        Args:
            config: конфигурация инвертора (опционально, используется default)
        """
        self.config = config or InverterConfig()
        self._inverter = MatrixInverter(self.config)

    def process(self, request: InversionRequest) -> InversionReport:
        """Обработка запроса.

        Args:
            request: матрица и режим отображения

        Returns:
            InversionReport (INVERTIBLE / SINGULAR / INVALID)
        """
        matrix = request.matrix
        fmt = request.display_format
        size = len(matrix)

        validation = validate(matrix)
        if not validation.is_valid:
            logger.info("inversion rejected: %s (%s)", validation.reason.value, validation.details)
            return InversionReport(
                status=InversionStatus.INVALID,
                size=size,
                display_format=fmt,
                reason=validation.reason.value,
            )

        outcome = self._inverter.invert(matrix)
        if outcome.is_singular:
            logger.info("inversion singular: %dx%d rank %d", size, size, outcome.rank)
            return InversionReport(
                status=InversionStatus.SINGULAR,
                size=size,
                display_format=fmt,
                reason="SINGULAR",
                rank=outcome.rank,
            )

        logger.info("inversion succeeded: %s", outcome.details)
        return InversionReport(
            status=InversionStatus.INVERTIBLE,
            size=size,
            display_format=fmt,
            rank=outcome.rank,
            inverse=outcome.inverse,
            rendered=format_matrix(outcome.inverse, fmt, self.config.policy),
        )

    def process_payload(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Обработка сырого JSON payload с проверкой обоих контрактов.

        Raises:
            jsonschema.ValidationError: если payload не соответствует
                inversion_request.json
        """
        validate_inversion_request(data)
        report = self.process(InversionRequest.model_validate(data))
        payload = report.model_dump(mode="json")
        validate_inversion_report(payload)
        return payload


def invert_payload(data: Dict[str, Any]) -> Dict[str, Any]:
    """process_payload с конфигурацией по умолчанию."""
    return InversionService().process_payload(data)


# =============================================================================
# INPUT HELPERS
# =============================================================================


def parse_matrix(cells: Sequence[Sequence[str]]) -> Matrix:
    """Ячейки-строки → матрица float. Пустая ячейка = 0.0.

    Raises:
        ValueError: если ячейка не является числом
    """
    matrix: Matrix = []
    for i, row in enumerate(cells):
        parsed_row = []
        for j, cell in enumerate(row):
            text = cell.strip()
            if not text:
                parsed_row.append(0.0)
                continue
            try:
                parsed_row.append(float(text))
            except ValueError as e:
                raise ValueError(f"Cell [{i}][{j}] is not a number: {cell!r}") from e
        matrix.append(parsed_row)
    return matrix


def random_integer_matrix(
    n: int,
    low: int = EXAMPLE_VALUE_MIN,
    high: int = EXAMPLE_VALUE_MAX,
    rng: random.Random | None = None,
) -> Matrix:
    """Матрица n×n случайных целых из [low, high] (включительно)."""
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    if low > high:
        raise ValueError(f"low must be <= high, got low={low}, high={high}")
    rng = rng or random.Random()
    return [[float(rng.randint(low, high)) for _ in range(n)] for _ in range(n)]
