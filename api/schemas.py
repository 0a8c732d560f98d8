# -*- coding: utf-8 -*-
# api/schemas.py
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class LayoutRequest(BaseModel):
    preset: Optional[str] = 'a4'
    sheet_width: Optional[float] = None
    sheet_height: Optional[float] = None
    item_width: float
    item_height: float
    margin: float = 5
    gap_x: float = 3
    gap_y: float = 3
    allow_rotation: bool = True
    unit: str = 'mm'
    include_positions: bool = False


class SheetsRequest(LayoutRequest):
    quantity: int


class LayoutResponse(BaseModel):
    success: bool
    strict: Dict[str, Any] = {}
    optimized: Dict[str, Any] = {}
    gain: int = 0
    usage_gain: int = 0
    status: str = ''
    error: Optional[str] = None


class SheetsResponse(BaseModel):
    success: bool
    sheets: int = 0
    per_sheet: int = 0
    error: Optional[str] = None


class PresetsResponse(BaseModel):
    presets: Dict[str, List[float]]
    units: List[str]
