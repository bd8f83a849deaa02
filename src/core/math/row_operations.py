"""
Row Operations — элементарные преобразования строк in place

Три операции Gauss-Jordan элиминации:
- swap_rows: перестановка строк
- scale_row: умножение строки на скаляр
- add_scaled_row: dst += factor × src

ВАЖНО: add_scaled_row после каждого сложения притягивает результат к
целому (snap_to_integer с EPS_ROW_OP_SNAP = 1e-12). Это намеренная
аппроксимация для подавления накопленной ошибки округления, а не точная
арифметика: значение, отстоящее от целого меньше чем на 1e-12, станет
этим целым.
"""

from src.core.math.matrix import Matrix, MatrixShapeError
from src.core.math.tolerance import EPS_ROW_OP_SKIP, EPS_ROW_OP_SNAP, snap_to_integer


def swap_rows(matrix: Matrix, i: int, j: int) -> None:
    """Перестановка строк i и j. No-op при i == j."""
    if i == j:
        return
    matrix[i], matrix[j] = matrix[j], matrix[i]


def scale_row(
    matrix: Matrix,
    i: int,
    factor: float,
    skip_eps: float = EPS_ROW_OP_SKIP,
) -> None:
    """
    Умножение строки i на factor.

    При |factor - 1| < skip_eps работа пропускается (без семантического
    эффекта).
    """
    if abs(factor - 1.0) < skip_eps:
        return
    row = matrix[i]
    for j in range(len(row)):
        row[j] *= factor


def add_scaled_row(
    matrix: Matrix,
    src: int,
    dst: int,
    factor: float,
    skip_eps: float = EPS_ROW_OP_SKIP,
    snap_eps: float = EPS_ROW_OP_SNAP,
) -> None:
    """
    dst[j] += factor × src[j] для всех столбцов.

    Args:
        matrix: Матрица (изменяется in place)
        src: Индекс строки-источника
        dst: Индекс изменяемой строки
        factor: Множитель
        skip_eps: При |factor| < skip_eps операция пропускается
        snap_eps: Tolerance integer-snap каждой суммы

    Raises:
        MatrixShapeError: Если строки src и dst разной длины
    """
    if abs(factor) < skip_eps:
        return
    source = matrix[src]
    target = matrix[dst]
    if len(source) != len(target):
        raise MatrixShapeError(
            f"Row length mismatch: src {src} has {len(source)}, dst {dst} has {len(target)}"
        )
    for j in range(len(target)):
        target[j] = snap_to_integer(target[j] + factor * source[j], snap_eps)
