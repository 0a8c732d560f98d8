"""
Расчет раскладки одинаковых изделий на листе
"""
import logging
import math
from typing import Optional, Tuple

from .exceptions import ValidationError
from .grid import fit_grid
from .models import GapSpec, ItemSpec, Layout, OptimizationResult, Segment, SheetSpec

logger = logging.getLogger(__name__)

ORIGINAL_LABEL = "Original"
ROTATED_LABEL = "Rotated"
EMPTY_SUMMARY = "--"


def _usage(used_area: float, sheet: SheetSpec) -> float:
    sheet_area = sheet.area
    if not math.isfinite(sheet_area) or sheet_area <= 0:
        return 0.0
    return used_area / sheet_area * 100


def _empty_layout(sheet: SheetSpec, cell: ItemSpec, gap: GapSpec, rotated: bool) -> Layout:
    return Layout(
        total=0,
        rows=0,
        columns=0,
        usage=0.0,
        summary=EMPTY_SUMMARY,
        sheet=sheet,
        cell=cell,
        gap=gap,
        rotated=rotated,
        segments=()
    )


def layout_single(sheet: SheetSpec, item: ItemSpec, gap: GapSpec,
                  rotated: bool = False) -> Layout:
    """Раскладка одной ориентацией на всю печатную область"""
    cell = item.rotated() if rotated else item
    stats = fit_grid(sheet.printable_width, sheet.printable_height,
                     cell.width, cell.height, gap.x, gap.y)

    if stats.total == 0:
        return _empty_layout(sheet, cell, gap, rotated)

    label = ROTATED_LABEL if rotated else ORIGINAL_LABEL
    segment = Segment(
        rows=stats.rows,
        columns=stats.columns,
        cell=cell,
        offset=(0.0, 0.0),
        gap=gap,
        total=stats.total,
        label=label
    )
    return Layout(
        total=stats.total,
        rows=stats.rows,
        columns=stats.columns,
        usage=_usage(segment.used_area, sheet),
        summary=f"{segment.describe()} ({label})",
        sheet=sheet,
        cell=cell,
        gap=gap,
        rotated=rotated,
        segments=(segment,)
    )


def layout_hybrid(sheet: SheetSpec, primary_item: ItemSpec, secondary_item: ItemSpec,
                  gap: GapSpec, labels: Tuple[str, str] = (ORIGINAL_LABEL, ROTATED_LABEL),
                  rotated: bool = False) -> Optional[Layout]:
    """Основная сетка плюс вторая ориентация в оставшейся полосе.

    Полоса ищется снизу и сбоку от основной сетки независимо,
    возвращается лучший вариант либо None.
    """
    printable_width = sheet.printable_width
    printable_height = sheet.printable_height

    base = fit_grid(printable_width, printable_height,
                    primary_item.width, primary_item.height, gap.x, gap.y)
    if base.total == 0:
        return None

    primary_label, secondary_label = labels
    primary = Segment(
        rows=base.rows,
        columns=base.columns,
        cell=primary_item,
        offset=(0.0, 0.0),
        gap=gap,
        total=base.total,
        label=primary_label
    )

    strips = []

    # Снизу
    taken_height = base.used_height + (gap.y if base.rows > 0 else 0)
    remaining_height = printable_height - taken_height
    if remaining_height > 0:
        strips.append((printable_width, remaining_height, (0.0, taken_height)))

    # Сбоку
    taken_width = base.used_width + (gap.x if base.columns > 0 else 0)
    remaining_width = printable_width - taken_width
    if remaining_width > 0:
        strips.append((remaining_width, printable_height, (taken_width, 0.0)))

    best = None
    for strip_width, strip_height, offset in strips:
        stats = fit_grid(strip_width, strip_height,
                         secondary_item.width, secondary_item.height, gap.x, gap.y)
        if stats.total == 0:
            continue

        secondary = Segment(
            rows=stats.rows,
            columns=stats.columns,
            cell=secondary_item,
            offset=offset,
            gap=gap,
            total=stats.total,
            label=secondary_label
        )
        candidate = Layout(
            total=primary.total + secondary.total,
            rows=primary.rows,
            columns=primary.columns,
            usage=_usage(primary.used_area + secondary.used_area, sheet),
            summary=(f"{primary.label}: {primary.describe()} + "
                     f"{secondary.label}: {secondary.describe()}"),
            sheet=sheet,
            cell=primary_item,
            gap=gap,
            rotated=rotated,
            segments=(primary, secondary)
        )
        best = pick_better(best, candidate)

    return best


def pick_better(current: Optional[Layout], candidate: Optional[Layout]) -> Optional[Layout]:
    """Больше изделий, при равенстве плотнее; при полном равенстве остается current"""
    if candidate is None or candidate.total <= 0:
        return current
    if current is None or candidate.total > current.total:
        return candidate
    if candidate.total == current.total and candidate.usage > current.usage:
        return candidate
    return current


def optimize(sheet: SheetSpec, item: ItemSpec, gap: GapSpec,
             allow_rotation: bool = True) -> OptimizationResult:
    """Строгая раскладка и лучшая из строгой, повернутой и двух гибридных"""
    sheet = SheetSpec(sheet.width, sheet.height, max(sheet.margin, 0.0))
    gap = GapSpec(max(gap.x, 0.0), max(gap.y, 0.0))

    strict = layout_single(sheet, item, gap, rotated=False)
    optimized = strict

    if allow_rotation:
        rotated_item = item.rotated()
        candidates = (
            layout_single(sheet, item, gap, rotated=True),
            layout_hybrid(sheet, item, rotated_item, gap,
                          labels=(ORIGINAL_LABEL, ROTATED_LABEL), rotated=False),
            layout_hybrid(sheet, rotated_item, item, gap,
                          labels=(ROTATED_LABEL, ORIGINAL_LABEL), rotated=True),
        )
        for candidate in candidates:
            if candidate is not None:
                logger.debug(f"Candidate: {candidate.summary}, total={candidate.total}, "
                             f"usage={candidate.usage:.1f}%")
            optimized = pick_better(optimized, candidate)

    logger.info(f"Layout: strict={strict.total} ({strict.summary}), "
                f"optimized={optimized.total} ({optimized.summary})")
    return OptimizationResult(strict=strict, optimized=optimized)


class LayoutCalculator:
    @staticmethod
    def optimize(sheet: SheetSpec, item: ItemSpec, gap: GapSpec,
                 allow_rotation: bool = True) -> OptimizationResult:
        return optimize(sheet, item, gap, allow_rotation)

    @staticmethod
    def calculate_sheets_needed(quantity: int, layout: Layout) -> int:
        """Рассчитать количество листов для тиража"""
        if quantity < 0:
            raise ValidationError(f"Тираж не может быть отрицательным: {quantity}")
        if quantity == 0 or layout.total <= 0:
            return 0
        sheets = (quantity + layout.total - 1) // layout.total
        logger.info(f"Sheets needed: {sheets} for {quantity} pieces")
        return sheets
