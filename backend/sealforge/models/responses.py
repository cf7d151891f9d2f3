"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    fonts_registered: int = 0
    layers_registered: int = 0
    layout_preset: str = ""


class SealImageData(BaseModel):
    image: str = Field(..., description="PNG as a data URL")
    config: dict[str, Any] = Field(default_factory=dict)


class SealResponse(BaseModel):
    success: bool = True
    data: SealImageData


class LayoutResponse(BaseModel):
    preset: str
    font_scale: float
    code: str
    instructions: list[dict[str, Any]] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    success: bool = False
    error: dict[str, Any] = Field(default_factory=dict)
