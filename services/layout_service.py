# -*- coding: utf-8 -*-
# services/layout_service.py
import logging
from typing import Any, Dict

from api.schemas import LayoutRequest, LayoutResponse, SheetsRequest, SheetsResponse
from core.config import LayoutConfig, from_millimeters, round_for_unit
from core.exceptions import LayoutCalculationError
from core.layout_calculator import LayoutCalculator
from core.models import Layout, OptimizationResult
from core.preview import get_preview_data, get_tile_positions

logger = logging.getLogger(__name__)


def layout_to_dict(layout: Layout, metrics: Dict[str, Any], unit: str = 'mm',
                   include_positions: bool = False) -> Dict[str, Any]:
    """Раскладка в JSON-совместимом виде, размеры в единицах unit"""
    def length(value: float) -> float:
        return from_millimeters(value, unit)

    sheet_width, sheet_height = length(layout.sheet.width), length(layout.sheet.height)
    result = {
        **metrics,
        'rotated': layout.rotated,
        'hybrid': layout.is_hybrid,
        'unit': unit,
        'sheet_label': (f"{round_for_unit(sheet_width, unit):g} × "
                        f"{round_for_unit(sheet_height, unit):g} {unit}"),
        'sheet': {
            'width': sheet_width,
            'height': sheet_height,
            'margin': length(layout.sheet.margin)
        },
        'cell': {'width': length(layout.cell.width), 'height': length(layout.cell.height)},
        'gap': {'x': length(layout.gap.x), 'y': length(layout.gap.y)},
        'segments': [
            {
                'rows': segment.rows,
                'columns': segment.columns,
                'total': segment.total,
                'label': segment.label,
                'cell': {'width': length(segment.cell.width), 'height': length(segment.cell.height)},
                'offset': {'x': length(segment.offset[0]), 'y': length(segment.offset[1])}
            }
            for segment in layout.segments
        ]
    }
    if include_positions:
        result['positions'] = [
            {
                **position,
                'x': length(position['x']),
                'y': length(position['y']),
                'width': length(position['width']),
                'height': length(position['height'])
            }
            for position in get_tile_positions(layout)
        ]
    return result


class LayoutService:
    @staticmethod
    def _optimize(request: LayoutRequest) -> OptimizationResult:
        config = LayoutConfig(
            preset=request.preset,
            sheet_width=request.sheet_width,
            sheet_height=request.sheet_height,
            item_width=request.item_width,
            item_height=request.item_height,
            margin=request.margin,
            gap_x=request.gap_x,
            gap_y=request.gap_y,
            allow_rotation=request.allow_rotation,
            unit=request.unit
        )
        sheet, item, gap = config.to_specs()
        return LayoutCalculator.optimize(sheet, item, gap, config.allow_rotation)

    async def calculate_layout(self, request: LayoutRequest) -> LayoutResponse:
        """Расчет раскладки изделий на листе"""
        result = self._optimize(request)
        preview = get_preview_data(result)

        if result.optimized.total == 0:
            logger.warning(f"No valid layout for item {request.item_width}x{request.item_height} "
                           f"{request.unit}")
            raise LayoutCalculationError(preview['status'])

        return LayoutResponse(
            success=True,
            strict=layout_to_dict(result.strict, preview['strict'],
                                  request.unit, request.include_positions),
            optimized=layout_to_dict(result.optimized, preview['optimized'],
                                     request.unit, request.include_positions),
            gain=preview['gain'],
            usage_gain=preview['usage_gain'],
            status=preview['status']
        )

    async def calculate_sheets(self, request: SheetsRequest) -> SheetsResponse:
        """Расчет количества листов для тиража"""
        result = self._optimize(request)
        sheets = LayoutCalculator.calculate_sheets_needed(request.quantity, result.optimized)
        return SheetsResponse(
            success=result.optimized.total > 0,
            sheets=sheets,
            per_sheet=result.optimized.total
        )
