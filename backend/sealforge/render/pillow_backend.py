"""Rasterize draw instructions to PNG with Pillow."""

from __future__ import annotations

import io
import logging
import math
from collections.abc import Sequence

from PIL import Image, ImageDraw

from sealforge.errors import RenderFailure
from sealforge.models.instructions import Circle, DrawInstruction, FilledPolygon, Glyph, canvas_extent
from sealforge.render.fonts import FontCatalog

logger = logging.getLogger(__name__)

# Transparent margin around each glyph tile so rotation never clips it
_GLYPH_PADDING = 4


class PillowRenderBackend:
    """Draws onto a transparent RGBA canvas sized from the instructions."""

    media_type = "image/png"

    def __init__(
        self,
        fonts: FontCatalog | None = None,
        background: tuple[int, int, int, int] = (0, 0, 0, 0),
    ) -> None:
        self.fonts = fonts or FontCatalog()
        self.background = background

    def render_image(self, instructions: Sequence[DrawInstruction], scale: int = 1) -> Image.Image:
        width, height = canvas_extent(instructions)
        if width <= 0 or height <= 0:
            raise RenderFailure("Nothing to render: instructions define an empty canvas")

        image = Image.new("RGBA", (width * scale, height * scale), self.background)
        draw = ImageDraw.Draw(image)

        try:
            for ins in instructions:
                if isinstance(ins, Circle):
                    self._draw_circle(draw, ins, scale)
                elif isinstance(ins, FilledPolygon):
                    draw.polygon([(x * scale, y * scale) for x, y in ins.points], fill=ins.fill_color)
                elif isinstance(ins, Glyph):
                    self._draw_glyph(image, ins, scale)
        except (OSError, ValueError) as e:
            raise RenderFailure(f"Drawing failed: {e}") from e

        return image

    def render(self, instructions: Sequence[DrawInstruction], scale: int = 1) -> bytes:
        image = self.render_image(instructions, scale)
        buf = io.BytesIO()
        try:
            image.save(buf, format="PNG")
        except OSError as e:
            raise RenderFailure(f"PNG encoding failed: {e}") from e
        logger.debug("Rendered %d instructions to %dx%d PNG", len(instructions), *image.size)
        return buf.getvalue()

    def _draw_circle(self, draw: ImageDraw.ImageDraw, circle: Circle, scale: int) -> None:
        cx, cy = circle.center[0] * scale, circle.center[1] * scale
        stroke = circle.stroke_width * scale
        # Pillow strokes inward from the bbox, so the bbox is the stroke's outer edge
        reach = circle.radius * scale + stroke / 2
        draw.ellipse(
            [cx - reach, cy - reach, cx + reach, cy + reach],
            outline=circle.stroke_color,
            width=max(1, round(stroke)),
        )

    def _draw_glyph(self, image: Image.Image, glyph: Glyph, scale: int) -> None:
        font = self.fonts.font(glyph.font_family, glyph.font_size * scale)
        left, top, right, bottom = font.getbbox(glyph.char)
        w = max(1, int(math.ceil(right - left)))
        h = max(1, int(math.ceil(bottom - top)))

        pad = _GLYPH_PADDING * scale
        tile = Image.new("RGBA", (w + 2 * pad, h + 2 * pad), (0, 0, 0, 0))
        ImageDraw.Draw(tile).text((pad - left, pad - top), glyph.char, font=font, fill=glyph.color)

        if glyph.vertical_scale != 1.0:
            stretched = max(1, round(tile.height * glyph.vertical_scale))
            tile = tile.resize((tile.width, stretched), Image.Resampling.BICUBIC)

        degrees = math.degrees(glyph.rotation)
        if degrees % 360:
            # Pillow rotates counter-clockwise; instruction rotations are clockwise on screen
            tile = tile.rotate(-degrees, resample=Image.Resampling.BICUBIC, expand=True)

        px, py = glyph.position[0] * scale, glyph.position[1] * scale
        dest = (int(round(px - tile.width / 2)), int(round(py - tile.height / 2)))
        image.paste(tile, dest, tile)
