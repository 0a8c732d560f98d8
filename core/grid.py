# -*- coding: utf-8 -*-
# core/grid.py
import math

from .models import GridStats

# Допуск для дробных размеров: 0.3 / 0.1 == 2.9999999999999996
EPSILON = 1e-9
# Насколько занятый размах может превысить область из-за округления
RELATIVE_TOLERANCE = 1e-12

EMPTY_GRID = GridStats()


def _count(area: float, cell: float, gap: float) -> int:
    quotient = (area + gap) / (cell + gap)
    count = max(0, int(math.floor(quotient + EPSILON)))
    # EPSILON не должен добавлять ячейку, которая реально не помещается
    while count > 0 and count * cell + (count - 1) * gap - area > area * RELATIVE_TOLERANCE:
        count -= 1
    return count


def fit_grid(area_width: float, area_height: float,
             cell_width: float, cell_height: float,
             gap_x: float = 0.0, gap_y: float = 0.0) -> GridStats:
    """Сколько целых ячеек помещается в прямоугольную область.

    Зазоры ставятся только между соседними ячейками, поэтому
    used_width/used_height не включают хвостовой зазор.
    Невозможная геометрия дает нулевой результат, а не исключение.
    """
    values = (area_width, area_height, cell_width, cell_height, gap_x, gap_y)
    if not all(math.isfinite(value) for value in values):
        return EMPTY_GRID

    area_width = max(0.0, area_width)
    area_height = max(0.0, area_height)
    gap_x = max(0.0, gap_x)
    gap_y = max(0.0, gap_y)

    if area_width <= 0 or area_height <= 0 or cell_width <= 0 or cell_height <= 0:
        return EMPTY_GRID

    columns = _count(area_width, cell_width, gap_x)
    rows = _count(area_height, cell_height, gap_y)

    used_width = columns * cell_width + max(0, columns - 1) * gap_x
    used_height = rows * cell_height + max(0, rows - 1) * gap_y

    return GridStats(
        rows=rows,
        columns=columns,
        total=rows * columns,
        used_width=used_width,
        used_height=used_height
    )
