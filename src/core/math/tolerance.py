"""
Tolerance Utilities — единая политика epsilon для RREF и рационализации

Модуль собирает в одном месте все пороги, которые используются при
Gauss-Jordan элиминации, проверке единичной матрицы и форматировании:
- zero-test (is_near_zero)
- integer-snap (snap_to_integer)
- zero-or-integer очистка (clean_value)
- классификация "целочисленной" матрицы (is_integer_valued)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции чистые, без побочных эффектов
2. Любой epsilon берётся из TolerancePolicy, не задаётся ad-hoc
3. Неположительный tolerance: ошибка программиста (ValueError)
"""

import math
from dataclasses import dataclass
from typing import Final, Sequence

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Zero-test, порог пивота, tolerance RREF по умолчанию
EPS_ZERO: Final[float] = 1e-10

# Пропуск scale-by-1 и add-0×row (чистая оптимизация)
EPS_ROW_OP_SKIP: Final[float] = 1e-15

# Integer-snap после каждого сложения строк
EPS_ROW_OP_SNAP: Final[float] = 1e-12

# Классификация входной матрицы как целочисленной
EPS_INTEGER_INPUT: Final[float] = 1e-8

# Эффективный tolerance элиминации в integer mode
EPS_INTEGER_MODE: Final[float] = 1e-10

# Проверка левого блока на единичную матрицу
EPS_IDENTITY: Final[float] = 1e-8

# Рационализация результата и snap при форматировании
EPS_RATIONALIZE: Final[float] = 1e-9

# Early-exit поиска дроби
EPS_FRACTION: Final[float] = 1e-10

# Граница перебора знаменателей
MAX_DENOMINATOR: Final[int] = 10000

# Точность десятичного отображения
DECIMAL_PLACES: Final[int] = 6


@dataclass(frozen=True)
class TolerancePolicy:
    """Таблица tolerance для всех путей кода.

    Один экземпляр передаётся через RREF, driver и форматирование,
    чтобы cleanup в разных местах не расходился.
    """

    zero: float = EPS_ZERO
    row_op_skip: float = EPS_ROW_OP_SKIP
    row_op_snap: float = EPS_ROW_OP_SNAP
    integer_input: float = EPS_INTEGER_INPUT
    integer_mode: float = EPS_INTEGER_MODE
    identity: float = EPS_IDENTITY
    rationalize: float = EPS_RATIONALIZE
    fraction: float = EPS_FRACTION
    max_denominator: int = MAX_DENOMINATOR
    decimal_places: int = DECIMAL_PLACES

    def __post_init__(self) -> None:
        for name in (
            "zero",
            "row_op_skip",
            "row_op_snap",
            "integer_input",
            "integer_mode",
            "identity",
            "rationalize",
            "fraction",
        ):
            validate_tolerance(getattr(self, name), name)
        if self.max_denominator < 1:
            raise ValueError(f"max_denominator must be >= 1, got {self.max_denominator}")
        if self.decimal_places < 0:
            raise ValueError(f"decimal_places must be non-negative, got {self.decimal_places}")


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def validate_tolerance(tolerance: float, name: str = "tolerance") -> None:
    """
    Валидация, что tolerance является конечным положительным числом.

    Raises:
        ValueError: Если tolerance <= 0 или NaN/Inf
    """
    if not is_valid_float(tolerance):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {tolerance}")
    if tolerance <= 0:
        raise ValueError(f"{name} must be positive, got {tolerance}")


def is_valid_float(value: float) -> bool:
    """True если значение конечное (не NaN, не Inf)."""
    return math.isfinite(value)


DEFAULT_POLICY: Final[TolerancePolicy] = TolerancePolicy()


# =============================================================================
# ZERO-TEST И INTEGER-SNAP
# =============================================================================


def is_near_zero(value: float, tolerance: float = EPS_ZERO) -> bool:
    """
    Проверка, близко ли значение к нулю.

    Строгое сравнение: abs(value) < tolerance.

    Examples:
        >>> is_near_zero(1e-12)
        True
        >>> is_near_zero(1e-10)
        False
    """
    return abs(value) < tolerance


def snap_to_integer(value: float, tolerance: float = EPS_ROW_OP_SNAP) -> float:
    """
    Притягивание значения к ближайшему целому.

    Подавляет floating-point drift, из-за которого матрица выглядела бы
    не единичной или не рациональной.

    Args:
        value: Исходное значение
        tolerance: Максимальное расстояние до целого

    Returns:
        float(round(value)) если |value - round(value)| < tolerance,
        иначе value без изменений

    Examples:
        >>> snap_to_integer(2.9999999999999, 1e-12)
        3.0
        >>> snap_to_integer(0.5, 1e-12)
        0.5
    """
    nearest = round(value)
    if abs(value - nearest) < tolerance:
        # float(0) вместо -0.0 для малых отрицательных
        return float(nearest)
    return value


def clean_value(value: float, tolerance: float = EPS_RATIONALIZE) -> float:
    """
    Очистка значения: ноль если near-zero, иначе integer-snap.

    Единое правило для post-pass RREF, rationalize и format_number.
    """
    if is_near_zero(value, tolerance):
        return 0.0
    return snap_to_integer(value, tolerance)


def is_integer_valued(
    matrix: Sequence[Sequence[float]],
    tolerance: float = EPS_INTEGER_INPUT,
) -> bool:
    """
    Проверка, что каждый элемент матрицы в пределах tolerance от целого.

    Пустая матрица считается целочисленной.
    """
    return all(
        abs(value - round(value)) < tolerance
        for row in matrix
        for value in row
    )
