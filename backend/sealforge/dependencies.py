"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from sealforge.config import settings
from sealforge.engine.compositor import SealCompositor
from sealforge.engine.config import LayoutConfig, get_preset
from sealforge.region import RegionCodeProvider
from sealforge.render import FontCatalog, PillowRenderBackend, RenderBackend, SvgRenderBackend


def get_settings():
    return settings


@lru_cache
def get_font_catalog() -> FontCatalog:
    return FontCatalog.load(
        settings.font_dir,
        aliases=settings.font_aliases,
        default_family=settings.default_font_family,
    )


@lru_cache
def get_layout_config() -> LayoutConfig:
    config = get_preset(settings.layout_preset)
    if settings.vertical_stretch is not None:
        config = config.with_overrides(vertical_stretch=settings.vertical_stretch)
    return config


@lru_cache
def get_compositor() -> SealCompositor:
    return SealCompositor(config=get_layout_config(), region_provider=RegionCodeProvider())


def get_renderer() -> RenderBackend:
    if settings.png_renderer == "cairosvg":
        return SvgRenderBackend()
    return PillowRenderBackend(get_font_catalog())
