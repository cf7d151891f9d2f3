"""SealForge seal layout engine."""

from sealforge.engine.registry import layer_step, Layer, get_registry
from sealforge.engine.context import CompositionContext
from sealforge.engine.compositor import SealCompositor, render_instructions
from sealforge.engine.policy import LayoutPolicy, ResolvedLayout

__all__ = [
    "layer_step",
    "Layer",
    "get_registry",
    "CompositionContext",
    "SealCompositor",
    "render_instructions",
    "LayoutPolicy",
    "ResolvedLayout",
]
