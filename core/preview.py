"""
Данные для предпросмотра раскладки: позиции изделий и метрики
"""
import logging
import math
from typing import Any, Dict, List

from .models import Layout, OptimizationResult

logger = logging.getLogger(__name__)

STATUS_NO_LAYOUT = "No valid layout: check dimensions, margins and gaps."
STATUS_IMPROVED = "An automatic improvement was found."


def get_tile_positions(layout: Layout) -> List[Dict[str, Any]]:
    """Координаты каждого изделия от левого верхнего угла листа"""
    positions = []
    margin = layout.sheet.margin
    for index, segment in enumerate(layout.segments):
        step_x = segment.cell.width + segment.gap.x
        step_y = segment.cell.height + segment.gap.y
        origin_x = margin + segment.offset[0]
        origin_y = margin + segment.offset[1]
        # Второй сегмент гибрида всегда в другой ориентации
        rotated = layout.rotated if index == 0 else not layout.rotated
        for row in range(segment.rows):
            for col in range(segment.columns):
                positions.append({
                    'x': origin_x + col * step_x,
                    'y': origin_y + row * step_y,
                    'width': segment.cell.width,
                    'height': segment.cell.height,
                    'rotated': rotated,
                    'segment': index
                })
    logger.debug(f"Tile positions: {len(positions)}")
    return positions


def metric_snapshot(label: str, layout: Layout) -> Dict[str, Any]:
    if layout is None or not math.isfinite(layout.total) or layout.total <= 0:
        return {'label': label, 'total': 0, 'rows': 0, 'columns': 0,
                'usage': 0.0, 'waste': 100.0, 'summary': None}

    usage = max(0.0, min(100.0, layout.usage))
    return {
        'label': label,
        'total': layout.total,
        'rows': layout.rows,
        'columns': layout.columns,
        'usage': usage,
        'waste': 100.0 - usage,
        'summary': layout.summary
    }


def get_preview_data(result: OptimizationResult) -> Dict[str, Any]:
    strict = metric_snapshot('Strict', result.strict)
    optimized = metric_snapshot('Optimized', result.optimized)
    show_optimized = optimized['total'] > strict['total']

    if not strict['total'] and not optimized['total']:
        status = STATUS_NO_LAYOUT
    elif show_optimized:
        status = STATUS_IMPROVED
    else:
        status = ''

    return {
        'strict': strict,
        'optimized': optimized,
        'show_optimized': show_optimized,
        'gain': optimized['total'] - strict['total'] if show_optimized else 0,
        'usage_gain': round(max(0.0, optimized['usage'] - strict['usage'])) if show_optimized else 0,
        'status': status
    }
