"""
RREF Engine — Gauss-Jordan приведение к Reduced Row Echelon Form

Алгоритм (два курсора: r для текущей строки, lead для текущего столбца):
1. Pre-pass: если все элементы в пределах EPS_INTEGER_INPUT от целых,
   включается integer mode и эффективный tolerance снижается до
   min(tolerance, EPS_INTEGER_MODE)
2. Пока r < rows и lead < cols:
   - find_pivot(r, lead); нет пивота → lead += 1 (свободный столбец)
   - swap пивотной строки в позицию r
   - нормализация строки r (ведущий элемент ровно 1.0)
   - элиминация столбца lead во ВСЕХ остальных строках (выше и ниже)
   - r += 1, lead += 1
3. Post-pass: каждый элемент → clean_value(value, tolerance)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входная матрица никогда не изменяется (работа на копии)
2. Для строк < r ведущий столбец < lead
3. Каждый пивот равен 1.0 и является единственным ненулевым в столбце
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from src.core.math.matrix import Matrix, copy_matrix, ensure_finite, shape
from src.core.math.pivoting import find_pivot
from src.core.math.row_operations import add_scaled_row, scale_row, swap_rows
from src.core.math.tolerance import (
    DEFAULT_POLICY,
    EPS_ZERO,
    TolerancePolicy,
    clean_value,
    is_integer_valued,
    is_near_zero,
    snap_to_integer,
    validate_tolerance,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RrefResult:
    """Результат RREF."""

    matrix: Matrix
    pivot_columns: tuple[int, ...]

    # Диагностика
    integer_mode: bool
    tolerance: float  # эффективный tolerance элиминации

    @property
    def rank(self) -> int:
        return len(self.pivot_columns)


def rref(
    matrix: Sequence[Sequence[float]],
    tolerance: float = EPS_ZERO,
    policy: TolerancePolicy = DEFAULT_POLICY,
) -> Matrix:
    """Новая матрица в RREF. См. rref_with_pivots."""
    return rref_with_pivots(matrix, tolerance=tolerance, policy=policy).matrix


def rref_with_pivots(
    matrix: Sequence[Sequence[float]],
    tolerance: float = EPS_ZERO,
    policy: TolerancePolicy = DEFAULT_POLICY,
) -> RrefResult:
    """
    Приведение к RREF с информацией о пивотах.

    Args:
        matrix: Прямоугольная матрица конечных чисел (не изменяется)
        tolerance: Порог нуля для пивотов и post-pass очистки; в integer mode
            используется min(tolerance, policy.integer_mode), больший
            tolerance вызывающего не применяется
        policy: Таблица tolerance для row operations и integer mode

    Returns:
        RrefResult с новой матрицей, столбцами пивотов и диагностикой

    Raises:
        MatrixShapeError: Если строки разной длины
        ValueError: Если матрица содержит NaN/Inf или tolerance <= 0
    """
    validate_tolerance(tolerance)
    rows, cols = shape(matrix)
    ensure_finite(matrix)

    result = copy_matrix(matrix)
    if rows == 0 or cols == 0:
        return RrefResult(
            matrix=result,
            pivot_columns=(),
            integer_mode=False,
            tolerance=tolerance,
        )

    integer_mode = is_integer_valued(result, policy.integer_input)
    tol = min(tolerance, policy.integer_mode) if integer_mode else tolerance
    logger.debug("rref %dx%d integer_mode=%s tol=%.1e", rows, cols, integer_mode, tol)

    pivot_columns: list[int] = []
    r = 0
    lead = 0

    while r < rows and lead < cols:
        pivot_row = find_pivot(result, r, lead, tol)
        if pivot_row is None:
            logger.debug("rref: column %d has no pivot at or below row %d", lead, r)
            lead += 1
            continue

        swap_rows(result, pivot_row, r)

        pivot = result[r][lead]
        if is_near_zero(pivot, tol):
            # Вырожденный пивот: столбец свободный, строка не продвигается
            lead += 1
            continue

        scale_row(result, r, 1.0 / pivot, skip_eps=policy.row_op_skip)
        result[r][lead] = 1.0
        if integer_mode:
            result[r] = [snap_to_integer(value, tol) for value in result[r]]

        for i in range(rows):
            if i == r:
                continue
            factor = result[i][lead]
            if is_near_zero(factor, tol):
                result[i][lead] = 0.0
                continue
            add_scaled_row(
                result,
                r,
                i,
                -factor,
                skip_eps=policy.row_op_skip,
                snap_eps=policy.row_op_snap,
            )
            result[i][lead] = 0.0

        pivot_columns.append(lead)
        r += 1
        lead += 1

    # Post-pass: ноль или ближайшее целое
    result = [[clean_value(value, tol) for value in row] for row in result]

    logger.debug("rref: rank=%d pivots=%s", len(pivot_columns), pivot_columns)
    return RrefResult(
        matrix=result,
        pivot_columns=tuple(pivot_columns),
        integer_mode=integer_mode,
        tolerance=tol,
    )
