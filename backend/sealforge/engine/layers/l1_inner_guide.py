"""L1 — Thin inner guide circle (legacy look only)."""

from __future__ import annotations

from sealforge.engine.context import CompositionContext
from sealforge.engine.registry import Layer, layer_step
from sealforge.models.instructions import Circle


@layer_step(id="L1.inner_guide", layer=Layer.INNER_GUIDE, description="Inner guide circle")
def inner_guide(ctx: CompositionContext) -> None:
    config = ctx.layout.config
    if not config.inner_guide:
        return
    ctx.emit(
        Circle(
            center=ctx.layout.center,
            radius=ctx.layout.outer_radius - config.inner_guide_inset,
            stroke_color=ctx.color,
            stroke_width=config.inner_guide_width,
        )
    )
