# -*- coding: utf-8 -*-
# core/config.py
import logging
import math
import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .exceptions import ValidationError
from .models import GapSpec, ItemSpec, SheetSpec

logger = logging.getLogger(__name__)

# Стандартные форматы листов (ширина × высота в мм)
SHEET_PRESETS: Dict[str, Tuple[float, float]] = {
    'letter': (215.9, 279.4),
    'legal': (215.9, 355.6),
    'tabloid': (279.4, 431.8),
    'a4': (210, 297),
    'a3': (297, 420),
    'a3plus': (329, 483),
}

# Сколько миллиметров в единице измерения
UNIT_FACTORS_MM: Dict[str, float] = {
    'mm': 1,
    'cm': 10,
    'in': 25.4,
}

# Допустимые размеры листа и изделия в каждой единице
LIMITS: Dict[str, Tuple[float, float]] = {
    'mm': (1, 1000),
    'cm': (0.1, 100),
    'in': (0.05, 40),
}


def _unit_factor(unit: str) -> float:
    try:
        return UNIT_FACTORS_MM[unit]
    except KeyError:
        raise ValidationError(f"Неизвестная единица измерения: {unit}")


def to_millimeters(value: float, unit: str) -> float:
    factor = _unit_factor(unit)
    if not math.isfinite(value):
        return math.nan
    return value * factor


def from_millimeters(value: float, unit: str) -> float:
    factor = _unit_factor(unit)
    if not math.isfinite(value):
        return math.nan
    return value / factor


def round_for_unit(value: float, unit: str) -> float:
    """Округление для отображения в выбранных единицах"""
    if not math.isfinite(value):
        return value
    if unit == 'mm':
        return float(round(value))
    if unit in ('cm', 'in'):
        return round(value * 10) / 10
    return round(value, 2)


def get_preset_dimensions(preset: str) -> Tuple[float, float]:
    try:
        return SHEET_PRESETS[preset.lower()]
    except KeyError:
        raise ValidationError(f"Неизвестный формат листа: {preset}")


@dataclass
class LayoutConfig:
    """Параметры раскладки в единицах unit"""
    preset: Optional[str] = 'a4'
    sheet_width: Optional[float] = None
    sheet_height: Optional[float] = None
    item_width: float = math.nan
    item_height: float = math.nan
    margin: float = 5.0
    gap_x: float = 3.0
    gap_y: float = 3.0
    allow_rotation: bool = True
    unit: str = 'mm'

    def get_sheet_dimensions(self) -> Tuple[float, float]:
        """Размер листа в мм: явный размер важнее пресета"""
        if (self.sheet_width is None) != (self.sheet_height is None):
            raise ValidationError("Нужно задать и ширину, и высоту листа")
        if self.sheet_width is not None:
            self._check_limits(sheet_width=self.sheet_width, sheet_height=self.sheet_height)
            return (to_millimeters(self.sheet_width, self.unit),
                    to_millimeters(self.sheet_height, self.unit))
        if self.preset is None:
            raise ValidationError("Не задан ни формат, ни размер листа")
        result = get_preset_dimensions(self.preset)
        logger.debug(f"Sheet dimensions: {result}")
        return result

    def _check_limits(self, **values: float):
        """Размеры вне LIMITS отклоняются; незаполненные (NaN) пропускаются"""
        _unit_factor(self.unit)
        minimum, maximum = LIMITS[self.unit]
        for name, value in values.items():
            if math.isfinite(value) and not minimum <= value <= maximum:
                raise ValidationError(
                    f"{name}={value} {self.unit} вне диапазона {minimum}..{maximum}")

    def to_specs(self) -> Tuple[SheetSpec, ItemSpec, GapSpec]:
        sheet_width, sheet_height = self.get_sheet_dimensions()
        self._check_limits(item_width=self.item_width, item_height=self.item_height)
        sheet = SheetSpec(sheet_width, sheet_height,
                          to_millimeters(self.margin, self.unit))
        item = ItemSpec(to_millimeters(self.item_width, self.unit),
                        to_millimeters(self.item_height, self.unit))
        gap = GapSpec(to_millimeters(self.gap_x, self.unit),
                      to_millimeters(self.gap_y, self.unit))
        return sheet, item, gap


@dataclass
class AppConfig:
    app_name: str = "Sheet Layout Optimizer"
    version: str = "1.0.0"
    debug: bool = field(default_factory=lambda: os.getenv('LAYOUT_DEBUG', '').lower() in ('1', 'true', 'yes'))
    host: str = field(default_factory=lambda: os.getenv('LAYOUT_HOST', '0.0.0.0'))
    port: int = field(default_factory=lambda: int(os.getenv('LAYOUT_PORT', 8000)))
    log_dir: str = field(default_factory=lambda: os.getenv('LAYOUT_LOG_DIR', 'logs'))
