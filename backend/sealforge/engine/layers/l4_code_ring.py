"""L4 — Registration code along the bottom arc, read left to right."""

from __future__ import annotations

from sealforge.engine.context import CompositionContext
from sealforge.engine.registry import Layer, layer_step
from sealforge.models.instructions import Glyph
from sealforge.utils.geometry import bottom_arc_positions


@layer_step(id="L4.code_ring", layer=Layer.CODE_RING, description="Registration code arc")
def code_ring(ctx: CompositionContext) -> None:
    layout = ctx.layout
    if not layout.has_code_ring:
        return

    config = layout.config
    placements = bottom_arc_positions(
        layout.code,
        layout.center,
        layout.code_radius,
        max_span=config.bottom_max_span,
        per_char=config.bottom_per_char,
    )
    ctx.emit(
        *(
            Glyph(
                char=p.char,
                position=p.position,
                rotation=p.rotation,
                font_size=float(ctx.design.bottom_font_size),
                font_family=ctx.design.font_family,
                color=ctx.color,
            )
            for p in placements
        )
    )
