"""Inversion Driver — обратная матрица через RREF аугментированной [A | I].

Алгоритм:
1. n = 0 или не квадратная → Singular сразу
2. [A | I] (n × 2n)
3. RREF
4. Левый и правый блоки n×n
5. Левый блок ≈ I (поэлементно, EPS_IDENTITY) → rationalize(правый блок)
6. Иначе → Singular

Ранг левого блока (число пивотов в первых n столбцах): только
диагностика, на решение не влияет.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from src.core.math.matrix import (
    Matrix,
    augment_with_identity,
    ensure_finite,
    is_identity,
    is_square,
    max_abs_deviation_from_identity,
    multiply,
    split_columns,
)
from src.core.math.rational import rationalize
from src.core.math.rref import rref_with_pivots
from src.core.math.tolerance import DEFAULT_POLICY, TolerancePolicy

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class InversionOutcome:
    """Результат инверсии: Invertible(inverse) или Singular."""

    invertible: bool
    inverse: Optional[Matrix]

    # Диагностика
    rank: int  # ранг левого блока после RREF
    details: str

    @property
    def is_singular(self) -> bool:
        return not self.invertible

    @classmethod
    def singular(cls, rank: int, details: str) -> "InversionOutcome":
        return cls(invertible=False, inverse=None, rank=rank, details=details)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class InverterConfig:
    """Конфигурация MatrixInverter.

    verify_residual включает проверку max|A·A⁻¹ − I| после инверсии.
    """

    policy: TolerancePolicy = DEFAULT_POLICY
    verify_residual: bool = False
    residual_warning_threshold: float = 1e-6


# =============================================================================
# DRIVER
# =============================================================================


def residual_norm(matrix: Sequence[Sequence[float]], inverse: Sequence[Sequence[float]]) -> float:
    """max |A·A⁻¹ − I| по всем элементам."""
    return max_abs_deviation_from_identity(multiply(matrix, inverse))


class MatrixInverter:
    """Gauss-Jordan инверсия квадратной матрицы.

    Каждый вызов invert независим: общий изменяемый state отсутствует,
    экземпляр безопасно использовать из разных потоков.
    """

    def __init__(self, config: InverterConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or InverterConfig()

    def invert(self, matrix: Sequence[Sequence[float]]) -> InversionOutcome:
        """Инверсия матрицы.

        Args:
            matrix: квадратная матрица конечных чисел (не изменяется)

        Returns:
            InversionOutcome

        Raises:
            ValueError: если матрица содержит NaN/Inf
        """
        policy = self.config.policy
        n = len(matrix)

        if n == 0:
            return InversionOutcome.singular(rank=0, details="empty")
        if not is_square(matrix):
            return InversionOutcome.singular(rank=0, details="not_square")
        ensure_finite(matrix)

        augmented = augment_with_identity(matrix)
        reduced = rref_with_pivots(augmented, tolerance=policy.zero, policy=policy)
        left, right = split_columns(reduced.matrix, n)

        rank = sum(1 for col in reduced.pivot_columns if col < n)

        if not is_identity(left, policy.identity):
            logger.debug("invert: %dx%d singular, left block rank %d", n, n, rank)
            return InversionOutcome.singular(
                rank=rank,
                details=f"singular: rank {rank} < {n}",
            )

        inverse = rationalize(right, policy.rationalize)
        details = f"invertible: {n}x{n}, integer_mode={reduced.integer_mode}"

        if self.config.verify_residual:
            residual = residual_norm(matrix, inverse)
            details += f", residual={residual:.3e}"
            if residual > self.config.residual_warning_threshold:
                logger.warning(
                    "invert: residual %.3e exceeds %.1e for %dx%d matrix",
                    residual,
                    self.config.residual_warning_threshold,
                    n,
                    n,
                )

        logger.debug("invert: %s", details)
        return InversionOutcome(invertible=True, inverse=inverse, rank=rank, details=details)


_DEFAULT_INVERTER = MatrixInverter()


def compute_inverse(
    matrix: Sequence[Sequence[float]],
    policy: TolerancePolicy = DEFAULT_POLICY,
) -> InversionOutcome:
    """Инверсия с конфигурацией по умолчанию (или заданной policy).

    Ограничение: rationalize обнуляет элементы с |x| < policy.rationalize
    (абсолютный порог 1e-9). Для A с очень большими элементами настоящие
    малые элементы A⁻¹ теряются: [[1, 0], [0, 2e9]] даёт Invertible с
    [[1, 0], [0, 0]]. Такой результат обнаруживает только
    InverterConfig(verify_residual=True).
    """
    if policy is DEFAULT_POLICY:
        return _DEFAULT_INVERTER.invert(matrix)
    return MatrixInverter(InverterConfig(policy=policy)).invert(matrix)
