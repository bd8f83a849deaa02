"""
Pivoting Strategy — partial pivoting

Выбор строки с максимальным |значением| в текущем столбце. Поиск только
внутри столбца (не complete pivoting по всей подматрице).
"""

from typing import Optional, Sequence

from src.core.math.tolerance import EPS_ZERO


def find_pivot(
    matrix: Sequence[Sequence[float]],
    start_row: int,
    col: int,
    tolerance: float = EPS_ZERO,
) -> Optional[int]:
    """
    Поиск пивота в столбце col среди строк start_row..rows-1.

    Args:
        matrix: Матрица
        start_row: Первая строка поиска
        col: Столбец
        tolerance: Порог, ниже которого столбец считается нулевым

    Returns:
        Индекс строки с максимальным |matrix[row][col]| (при равенстве
        первая такая строка), либо None если максимум < tolerance
        или строк для поиска нет
    """
    best_row: Optional[int] = None
    best_abs = 0.0

    for row in range(start_row, len(matrix)):
        candidate = abs(matrix[row][col])
        if best_row is None or candidate > best_abs:
            best_row = row
            best_abs = candidate

    if best_row is None or best_abs < tolerance:
        return None
    return best_row
