"""Render backends: draw instructions in, image bytes out."""

from sealforge.render.backend import RenderBackend
from sealforge.render.fonts import FontCatalog
from sealforge.render.pillow_backend import PillowRenderBackend
from sealforge.render.svg_backend import SvgRenderBackend

__all__ = ["RenderBackend", "FontCatalog", "PillowRenderBackend", "SvgRenderBackend"]
