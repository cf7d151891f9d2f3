"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from sealforge.dependencies import get_font_catalog, get_layout_config
from sealforge.engine.config import preset_names
from sealforge.engine.registry import get_registry
from sealforge.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        fonts_registered=len(get_font_catalog()),
        layers_registered=get_registry().count,
        layout_preset=get_layout_config().name,
    )


@router.get("/presets")
async def presets() -> list[str]:
    return preset_names()
