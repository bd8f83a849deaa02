"""
Rationalization & Formatting — очистка float-результатов и отображение

- rationalize: near-zero → 0, near-integer → целое (копия матрицы)
- decimal_to_fraction: восстановление несократимой дроби из float
- format_number / format_matrix: два режима отображения (decimal, fraction)

ВАЖНО: decimal_to_fraction выполняет ограниченный перебор знаменателей
1..max_denominator (best-effort эвристика), а не алгоритм цепных дробей.
Для иррациональных значений возвращается лучшее найденное приближение.
Режим отображения влияет только на строки, никогда на сами значения.
"""

import math
from enum import Enum
from fractions import Fraction
from typing import Sequence

from src.core.math.matrix import Matrix
from src.core.math.tolerance import (
    DEFAULT_POLICY,
    EPS_FRACTION,
    EPS_RATIONALIZE,
    MAX_DENOMINATOR,
    TolerancePolicy,
    clean_value,
    is_near_zero,
    snap_to_integer,
)


class DisplayFormat(str, Enum):
    """Режим отображения чисел."""

    DECIMAL = "decimal"
    FRACTION = "fraction"


# =============================================================================
# RATIONALIZATION
# =============================================================================


def rationalize(
    matrix: Sequence[Sequence[float]],
    tolerance: float = EPS_RATIONALIZE,
) -> Matrix:
    """
    Очищенная копия матрицы: каждый элемент через clean_value.

    Идемпотентна: rationalize(rationalize(M)) == rationalize(M).

    Порог абсолютный: настоящие значения с |x| < tolerance (например,
    5e-10) тоже становятся 0.
    """
    return [[clean_value(float(value), tolerance) for value in row] for row in matrix]


def decimal_to_fraction(
    value: float,
    tolerance: float = EPS_FRACTION,
    max_denominator: int = MAX_DENOMINATOR,
) -> Fraction:
    """
    Поиск дроби numerator/denominator, ближайшей к value.

    Перебор denominator = 1..max_denominator, numerator = round(value × d).
    Первый кандидат с ошибкой < tolerance принимается сразу (early exit),
    иначе возвращается лучший после полного перебора.

    Args:
        value: Конечное число
        tolerance: Порог ошибки для early exit
        max_denominator: Граница перебора

    Returns:
        Несократимая Fraction, знак в числителе

    Raises:
        ValueError: Если value NaN/Inf или max_denominator < 1

    Examples:
        >>> decimal_to_fraction(0.5)
        Fraction(1, 2)
        >>> decimal_to_fraction(-0.75)
        Fraction(-3, 4)
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot convert NaN/Inf to fraction: {value}")
    if max_denominator < 1:
        raise ValueError(f"max_denominator must be >= 1, got {max_denominator}")

    best_numerator = round(value)
    best_denominator = 1
    best_error = abs(value - best_numerator)

    if best_error >= tolerance:
        for denominator in range(2, max_denominator + 1):
            numerator = round(value * denominator)
            error = abs(value - numerator / denominator)
            if error < best_error:
                best_numerator = numerator
                best_denominator = denominator
                best_error = error
            if error < tolerance:
                break

    # Fraction сокращает через gcd и держит знак в числителе
    return Fraction(best_numerator, best_denominator)


# =============================================================================
# FORMATTING
# =============================================================================


def format_number(
    value: float,
    fmt: DisplayFormat = DisplayFormat.DECIMAL,
    policy: TolerancePolicy = DEFAULT_POLICY,
) -> str:
    """
    Строковое представление числа.

    Args:
        value: Конечное число
        fmt: DECIMAL или FRACTION
        policy: Таблица tolerance (rationalize, fraction, decimal_places)

    Returns:
        FRACTION: "n" при знаменателе 1, иначе "n/d" (один ведущий минус)
        DECIMAL: целое как "n", иначе округление до decimal_places знаков
                 без хвостовых нулей
        Ноль всегда "0" (никогда "-0")
    """
    fmt = DisplayFormat(fmt)
    value = snap_to_integer(float(value), policy.rationalize)

    if is_near_zero(value, policy.rationalize):
        return "0"

    if fmt is DisplayFormat.FRACTION:
        fraction = decimal_to_fraction(value, policy.fraction, policy.max_denominator)
        if fraction.denominator == 1:
            return str(fraction.numerator)
        return f"{fraction.numerator}/{fraction.denominator}"

    if value == round(value):
        return str(int(value))

    text = f"{round(value, policy.decimal_places):.{policy.decimal_places}f}"
    text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def format_matrix(
    matrix: Sequence[Sequence[float]],
    fmt: DisplayFormat = DisplayFormat.DECIMAL,
    policy: TolerancePolicy = DEFAULT_POLICY,
) -> list[list[str]]:
    """Поэлементный format_number для всей матрицы."""
    return [[format_number(value, fmt, policy) for value in row] for row in matrix]
