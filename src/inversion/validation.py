"""Validation — проверка входной матрицы перед инверсией.

Порядок проверок:
1. Квадратность (каждая строка длины n, n >= 1)
2. NaN (по всей матрице)
3. Inf (по всей матрице)
4. Не все элементы равны нулю

Результат: значение ValidationResult, не exception.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


class ValidationFailure(str, Enum):
    """Причина отказа валидации."""
    NON_SQUARE = "NON_SQUARE"
    CONTAINS_NAN = "CONTAINS_NAN"
    CONTAINS_INFINITE = "CONTAINS_INFINITE"
    ALL_ZERO = "ALL_ZERO"


@dataclass(frozen=True)
class ValidationResult:
    """Результат валидации матрицы."""

    is_valid: bool
    reason: Optional[ValidationFailure]

    # Детали
    details: str

    @classmethod
    def valid(cls, details: str = "") -> "ValidationResult":
        return cls(is_valid=True, reason=None, details=details)

    @classmethod
    def invalid(cls, reason: ValidationFailure, details: str) -> "ValidationResult":
        return cls(is_valid=False, reason=reason, details=details)


def validate(matrix: Sequence[Sequence[float]]) -> ValidationResult:
    """Проверка матрицы на пригодность к инверсии.

    Args:
        matrix: последовательность строк чисел

    Returns:
        ValidationResult.valid() или invalid(reason, details)
    """
    n = len(matrix)
    if n == 0:
        return ValidationResult.invalid(ValidationFailure.NON_SQUARE, "empty matrix")

    for i, row in enumerate(matrix):
        if len(row) != n:
            return ValidationResult.invalid(
                ValidationFailure.NON_SQUARE,
                f"row {i} has {len(row)} columns, expected {n}",
            )

    entries = [value for row in matrix for value in row]

    nan_count = sum(1 for value in entries if math.isnan(value))
    if nan_count:
        return ValidationResult.invalid(
            ValidationFailure.CONTAINS_NAN,
            f"{nan_count} NaN entries",
        )

    inf_count = sum(1 for value in entries if math.isinf(value))
    if inf_count:
        return ValidationResult.invalid(
            ValidationFailure.CONTAINS_INFINITE,
            f"{inf_count} infinite entries",
        )

    if all(value == 0 for value in entries):
        return ValidationResult.invalid(ValidationFailure.ALL_ZERO, "all entries are zero")

    return ValidationResult.valid(details=f"{n}x{n} matrix")
