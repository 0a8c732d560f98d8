# -*- coding: utf-8 -*-
# api/endpoints.py
import logging

from fastapi import APIRouter, HTTPException

from api.schemas import LayoutRequest, LayoutResponse, PresetsResponse, SheetsRequest, SheetsResponse
from core.config import SHEET_PRESETS, UNIT_FACTORS_MM
from core.exceptions import LayoutCalculationError, ValidationError
from services.layout_service import LayoutService

logger = logging.getLogger(__name__)

# Создаем роутер
api_router = APIRouter()

layout_service = LayoutService()


@api_router.post("/calculate-layout", response_model=LayoutResponse)
async def calculate_layout(request: LayoutRequest):
    try:
        return await layout_service.calculate_layout(request)
    except ValidationError as e:
        raise HTTPException(400, str(e))
    except LayoutCalculationError as e:
        return LayoutResponse(success=False, error=str(e))


@api_router.post("/sheets-needed", response_model=SheetsResponse)
async def sheets_needed(request: SheetsRequest):
    try:
        return await layout_service.calculate_sheets(request)
    except ValidationError as e:
        raise HTTPException(400, str(e))


@api_router.get("/presets", response_model=PresetsResponse)
async def get_presets():
    return PresetsResponse(
        presets={name: [width, height] for name, (width, height) in SHEET_PRESETS.items()},
        units=list(UNIT_FACTORS_MM)
    )
