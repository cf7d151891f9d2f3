"""L2 — Center emblem: a filled five-pointed star or a single centered text glyph."""

from __future__ import annotations

from sealforge.engine.context import CompositionContext
from sealforge.engine.registry import Layer, layer_step
from sealforge.models.instructions import FilledPolygon, Glyph
from sealforge.models.seal import StarEmblem, TextEmblem
from sealforge.utils.geometry import star_polygon


@layer_step(id="L2.emblem", layer=Layer.EMBLEM, description="Center star or text")
def emblem(ctx: CompositionContext) -> None:
    design = ctx.design
    center = ctx.layout.center
    em = design.emblem

    if isinstance(em, StarEmblem):
        points = star_polygon(em.size / 2, center, rotation=em.rotation)
        ctx.emit(FilledPolygon(points=tuple(points), fill_color=ctx.color))
    elif isinstance(em, TextEmblem):
        ctx.emit(
            Glyph(
                char=em.content,
                position=center,
                rotation=0.0,
                font_size=float(em.font_size),
                font_family=design.font_family,
                color=ctx.color,
            )
        )
