"""
Matrix primitives — плотные матрицы как list[list[float]]

Строки снаружи, столбцы внутри. Все строки одной длины.

Модуль не содержит алгоритмики элиминации: только построение,
копирование, аугментация [A | I], разбиение на половины и умножение
(для проверки A·A⁻¹ ≈ I).
"""

import math
from typing import Sequence

Matrix = list[list[float]]


class MatrixShapeError(ValueError):
    """
    Матрица некорректной формы (строки разной длины, несовпадение размеров).

    Ошибка программиста: валидация должна была отсечь такой вход раньше.
    """
    pass


# =============================================================================
# ФОРМА
# =============================================================================


def shape(matrix: Sequence[Sequence[float]]) -> tuple[int, int]:
    """
    Размер матрицы (rows, cols).

    Raises:
        MatrixShapeError: Если строки разной длины
    """
    rows = len(matrix)
    if rows == 0:
        return 0, 0
    cols = len(matrix[0])
    for i, row in enumerate(matrix):
        if len(row) != cols:
            raise MatrixShapeError(
                f"Ragged matrix: row {i} has {len(row)} columns, expected {cols}"
            )
    return rows, cols


def is_square(matrix: Sequence[Sequence[float]]) -> bool:
    """True если матрица n×n с n >= 1."""
    n = len(matrix)
    return n > 0 and all(len(row) == n for row in matrix)


def ensure_finite(matrix: Sequence[Sequence[float]]) -> None:
    """
    Raises:
        ValueError: Если матрица содержит NaN/Inf
    """
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if not math.isfinite(value):
                raise ValueError(f"Matrix entry [{i}][{j}] is NaN/Inf: {value}")


# =============================================================================
# ПОСТРОЕНИЕ
# =============================================================================


def copy_matrix(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Глубокая копия: новые списки строк, значения приведены к float."""
    return [[float(value) for value in row] for row in matrix]


def identity_matrix(n: int) -> Matrix:
    """Единичная матрица n×n."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def augment_with_identity(matrix: Sequence[Sequence[float]]) -> Matrix:
    """
    Аугментация [A | I] для квадратной A.

    Returns:
        Новая матрица n × 2n, исходная не изменяется

    Raises:
        MatrixShapeError: Если A не квадратная
    """
    n = len(matrix)
    if not is_square(matrix):
        raise MatrixShapeError(f"Cannot augment non-square matrix with {n} rows")
    identity = identity_matrix(n)
    return [
        [float(value) for value in row] + identity[i]
        for i, row in enumerate(matrix)
    ]


def split_columns(matrix: Sequence[Sequence[float]], at: int) -> tuple[Matrix, Matrix]:
    """
    Разбиение по столбцу: (M[:, :at], M[:, at:]).

    Для augmented n × 2n при at=n: левый блок и правый блок.
    """
    rows, cols = shape(matrix)
    if not 0 <= at <= cols:
        raise MatrixShapeError(f"Split column {at} outside [0, {cols}]")
    left = [list(row[:at]) for row in matrix]
    right = [list(row[at:]) for row in matrix]
    return left, right


def is_identity(matrix: Sequence[Sequence[float]], tolerance: float) -> bool:
    """
    Проверка на единичную матрицу с поэлементным абсолютным допуском.

    Строгое сравнение: |M[i][j] - δij| < tolerance.
    """
    n = len(matrix)
    for i, row in enumerate(matrix):
        if len(row) != n:
            return False
        for j, value in enumerate(row):
            expected = 1.0 if i == j else 0.0
            if not abs(value - expected) < tolerance:
                return False
    return True


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """
    Произведение a·b.

    Raises:
        MatrixShapeError: Если число столбцов a не равно числу строк b
    """
    a_rows, a_cols = shape(a)
    b_rows, b_cols = shape(b)
    if a_cols != b_rows:
        raise MatrixShapeError(f"Cannot multiply {a_rows}x{a_cols} by {b_rows}x{b_cols}")
    return [
        [sum(a[i][k] * b[k][j] for k in range(a_cols)) for j in range(b_cols)]
        for i in range(a_rows)
    ]


def max_abs_deviation_from_identity(matrix: Sequence[Sequence[float]]) -> float:
    """max |M[i][j] - δij| — residual для проверки обратной матрицы."""
    deviation = 0.0
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            expected = 1.0 if i == j else 0.0
            deviation = max(deviation, abs(value - expected))
    return deviation
