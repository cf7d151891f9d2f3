"""L3 — Company name along the top arc.

Glyph tops point away from the center; the font size already carries the
adaptive scale for long names.
"""

from __future__ import annotations

from sealforge.engine.context import CompositionContext
from sealforge.engine.registry import Layer, layer_step
from sealforge.models.instructions import Glyph
from sealforge.utils.geometry import arc_text_positions


@layer_step(id="L3.name_ring", layer=Layer.NAME_RING, description="Company name arc")
def name_ring(ctx: CompositionContext) -> None:
    layout = ctx.layout
    placements = arc_text_positions(
        ctx.design.company_name,
        layout.center,
        layout.name_radius,
        layout.name_arc,
        char_spacing=layout.char_spacing,
    )
    ctx.emit(
        *(
            Glyph(
                char=p.char,
                position=p.position,
                rotation=p.rotation,
                font_size=layout.name_font_size,
                font_family=ctx.design.font_family,
                color=ctx.color,
                vertical_scale=layout.config.vertical_stretch,
            )
            for p in placements
        )
    )
