"""Vector output: draw instructions as SVG, optionally rasterized by CairoSVG."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any

from sealforge.errors import RenderFailure
from sealforge.models.instructions import Circle, DrawInstruction, FilledPolygon, Glyph, canvas_extent
from sealforge.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)


def _num(value: float) -> str:
    return f"{round(value, 3):g}"


def instruction_to_element(ins: DrawInstruction) -> dict[str, Any]:
    if isinstance(ins, Circle):
        return {
            "tag": "circle",
            "cx": _num(ins.center[0]),
            "cy": _num(ins.center[1]),
            "r": _num(ins.radius),
            "fill": "none",
            "stroke": ins.stroke_color,
            "stroke-width": _num(ins.stroke_width),
        }
    if isinstance(ins, FilledPolygon):
        return {
            "tag": "polygon",
            "points": " ".join(f"{_num(x)},{_num(y)}" for x, y in ins.points),
            "fill": ins.fill_color,
        }
    if isinstance(ins, Glyph):
        transform = f"translate({_num(ins.position[0])} {_num(ins.position[1])})"
        degrees = math.degrees(ins.rotation)
        if degrees % 360:
            transform += f" rotate({_num(degrees)})"
        if ins.vertical_scale != 1.0:
            transform += f" scale(1 {_num(ins.vertical_scale)})"
        return {
            "tag": "text",
            "text": ins.char,
            "transform": transform,
            "font-size": _num(ins.font_size),
            "font-family": ins.font_family,
            "fill": ins.color,
            "text-anchor": "middle",
            "dominant-baseline": "central",
        }
    raise TypeError(f"Unsupported draw instruction: {type(ins).__name__}")


class SvgRenderBackend:
    """``render_svg`` emits markup; ``render`` rasterizes it to PNG via CairoSVG.

    CairoSVG resolves font families through the system font configuration.
    """

    media_type = "image/png"

    def render_svg(self, instructions: Sequence[DrawInstruction], title: str = "") -> str:
        width, height = canvas_extent(instructions)
        if width <= 0 or height <= 0:
            raise RenderFailure("Nothing to render: instructions define an empty canvas")
        elements = [instruction_to_element(ins) for ins in instructions]
        return serialize_svg(elements, canvas_w=width, canvas_h=height, title=title)

    def render(self, instructions: Sequence[DrawInstruction], scale: int = 1) -> bytes:
        import cairosvg

        svg = self.render_svg(instructions)
        try:
            return cairosvg.svg2png(bytestring=svg.encode("utf-8"), scale=scale)
        except Exception as e:
            logger.warning("Failed to render SVG to PNG: %s", e)
            raise RenderFailure(f"SVG rasterization failed: {e}") from e
