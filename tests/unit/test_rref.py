"""
Тесты для RREF Engine

Проверяемые инварианты:
1. Вход не изменяется (работа на копии)
2. Каждый пивот = 1 и единственный ненулевой в своём столбце
3. Пивоты строго сдвигаются вправо вниз по строкам
4. Rank-deficient столбцы пропускаются (свободные)
5. Integer mode снижает эффективный tolerance
6. Ошибки программиста (рваная матрица, NaN): fail fast
"""

import math
import random

import pytest

from src.core.math.matrix import MatrixShapeError
from src.core.math.rref import RrefResult, rref, rref_with_pivots
from src.core.math.tolerance import EPS_INTEGER_MODE


def assert_is_rref(matrix: list[list[float]]) -> None:
    """Структурная проверка RREF."""
    last_pivot = -1
    seen_zero_row = False
    for row in matrix:
        nonzero = [j for j, value in enumerate(row) if value != 0.0]
        if not nonzero:
            seen_zero_row = True
            continue
        assert not seen_zero_row, "non-zero row below a zero row"
        pivot = nonzero[0]
        assert pivot > last_pivot
        assert row[pivot] == 1.0
        for other in matrix:
            if other is not row:
                assert other[pivot] == 0.0
        last_pivot = pivot


# =============================================================================
# БАЗОВЫЕ СЛУЧАИ
# =============================================================================


class TestRrefBasics:
    """Базовые RREF сценарии."""

    def test_identity_unchanged(self) -> None:
        m = [[1.0, 0.0], [0.0, 1.0]]
        assert rref(m) == [[1.0, 0.0], [0.0, 1.0]]

    def test_simple_2x2(self) -> None:
        assert rref([[2.0, 4.0], [1.0, 3.0]]) == [[1.0, 0.0], [0.0, 1.0]]

    def test_augmented_system(self) -> None:
        """x + y = 3, x - y = 1 → x = 2, y = 1"""
        result = rref([[1.0, 1.0, 3.0], [1.0, -1.0, 1.0]])
        assert result == [[1.0, 0.0, 2.0], [0.0, 1.0, 1.0]]

    def test_input_not_mutated(self) -> None:
        m = [[0.0, 1.0], [2.0, 3.0]]
        snapshot = [row[:] for row in m]
        rows = list(m)
        rref(m)
        assert m == snapshot
        assert all(a is b for a, b in zip(m, rows))

    def test_result_does_not_alias_input(self) -> None:
        m = [[1.0, 0.0], [0.0, 1.0]]
        result = rref(m)
        result[0][0] = 99.0
        assert m[0][0] == 1.0

    def test_empty_matrix(self) -> None:
        result = rref_with_pivots([])
        assert result.matrix == []
        assert result.rank == 0


# =============================================================================
# RANK-DEFICIENT И ВЫРОЖДЕННЫЕ
# =============================================================================


class TestRrefRankDeficient:
    """Свободные столбцы и неполный ранг."""

    def test_dependent_rows(self) -> None:
        result = rref_with_pivots([[1.0, 2.0], [2.0, 4.0]])
        assert result.matrix == [[1.0, 2.0], [0.0, 0.0]]
        assert result.pivot_columns == (0,)
        assert result.rank == 1

    def test_zero_first_column_is_free(self) -> None:
        result = rref_with_pivots([[0.0, 1.0, 2.0], [0.0, 3.0, 4.0]])
        assert result.pivot_columns == (1, 2)
        assert result.matrix == [[0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]

    def test_zero_matrix(self) -> None:
        result = rref_with_pivots([[0.0, 0.0], [0.0, 0.0]])
        assert result.matrix == [[0.0, 0.0], [0.0, 0.0]]
        assert result.rank == 0

    def test_wide_matrix(self) -> None:
        result = rref_with_pivots([[1.0, 2.0, 3.0, 4.0], [2.0, 4.0, 7.0, 9.0]])
        assert result.pivot_columns == (0, 2)
        assert_is_rref(result.matrix)

    def test_tall_matrix(self) -> None:
        result = rref_with_pivots([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        assert result.matrix == [[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]]
        assert result.rank == 2


# =============================================================================
# PIVOTING И ЭЛИМИНАЦИЯ ВЫШЕ ПИВОТА
# =============================================================================


class TestRrefElimination:
    """Полная элиминация (выше и ниже пивота)."""

    def test_zero_leading_entry_requires_swap(self) -> None:
        assert rref([[0.0, 1.0], [1.0, 0.0]]) == [[1.0, 0.0], [0.0, 1.0]]

    def test_entries_above_pivot_eliminated(self) -> None:
        result = rref([[1.0, 2.0, 3.0], [0.0, 1.0, 4.0], [0.0, 0.0, 1.0]])
        assert result == [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]

    def test_random_matrices_are_rref(self) -> None:
        rng = random.Random(1234)
        for _ in range(25):
            rows = rng.randint(1, 5)
            cols = rng.randint(1, 6)
            m = [[float(rng.randint(-5, 5)) for _ in range(cols)] for _ in range(rows)]
            assert_is_rref(rref(m))


# =============================================================================
# INTEGER MODE
# =============================================================================


class TestRrefIntegerMode:
    """Классификация integer mode и эффективный tolerance."""

    def test_integer_input_detected(self) -> None:
        result = rref_with_pivots([[2.0, 1.0], [1.0, 3.0]], tolerance=1e-6)
        assert result.integer_mode
        assert result.tolerance == EPS_INTEGER_MODE

    def test_non_integer_input_keeps_tolerance(self) -> None:
        result = rref_with_pivots([[0.5, 1.0], [1.0, 3.0]], tolerance=1e-6)
        assert not result.integer_mode
        assert result.tolerance == 1e-6

    def test_integer_mode_never_raises_tolerance(self) -> None:
        result = rref_with_pivots([[2.0, 1.0], [1.0, 3.0]], tolerance=1e-12)
        assert result.tolerance == 1e-12

    def test_result_type(self) -> None:
        assert isinstance(rref_with_pivots([[1.0]]), RrefResult)


# =============================================================================
# ОШИБКИ ПРОГРАММИСТА
# =============================================================================


class TestRrefErrors:
    """Fail fast на некорректном входе."""

    def test_ragged_matrix_raises(self) -> None:
        with pytest.raises(MatrixShapeError, match="Ragged"):
            rref([[1.0, 2.0], [3.0]])

    def test_nan_raises(self) -> None:
        with pytest.raises(ValueError, match="NaN/Inf"):
            rref([[1.0, math.nan], [0.0, 1.0]])

    def test_non_positive_tolerance_raises(self) -> None:
        with pytest.raises(ValueError, match="tolerance must be positive"):
            rref([[1.0]], tolerance=0.0)
