"""L0 — Outer border circle.

Stroke only; radius = (diameter - border width) / 2 so the stroke's outer
edge touches the canvas.
"""

from __future__ import annotations

from sealforge.engine.context import CompositionContext
from sealforge.engine.registry import Layer, layer_step
from sealforge.models.instructions import Circle


@layer_step(id="L0.border", layer=Layer.BORDER, description="Outer border circle")
def border(ctx: CompositionContext) -> None:
    ctx.emit(
        Circle(
            center=ctx.layout.center,
            radius=ctx.layout.outer_radius,
            stroke_color=ctx.color,
            stroke_width=float(ctx.design.border_width),
        )
    )
