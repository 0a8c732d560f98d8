"""
Core module for Sheet Layout Optimizer
"""

from .models import (
    SheetSpec, ItemSpec, GapSpec, GridStats, Segment, Layout, OptimizationResult
)
from .grid import fit_grid
from .layout_calculator import (
    LayoutCalculator, layout_single, layout_hybrid, pick_better, optimize
)
from .config import LayoutConfig, AppConfig, SHEET_PRESETS, UNIT_FACTORS_MM

__all__ = [
    'SheetSpec',
    'ItemSpec',
    'GapSpec',
    'GridStats',
    'Segment',
    'Layout',
    'OptimizationResult',
    'fit_grid',
    'LayoutCalculator',
    'layout_single',
    'layout_hybrid',
    'pick_better',
    'optimize',
    'LayoutConfig',
    'AppConfig',
    'SHEET_PRESETS',
    'UNIT_FACTORS_MM'
]
