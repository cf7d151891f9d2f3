"""Layer registry — every seal layer is a standalone function registered via decorator.

Usage:
    @layer_step(id="L2.emblem", layer=Layer.EMBLEM, description="Center star or text")
    def emblem(ctx: CompositionContext) -> None:
        ctx.emit(FilledPolygon(...))

Adding a new layer = creating one file under ``sealforge/engine/layers`` with the
decorator. Steps run in ``Layer`` order, which is the seal's z-order.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from sealforge.engine.context import CompositionContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    BORDER = 0
    INNER_GUIDE = 1
    EMBLEM = 2
    NAME_RING = 3
    CODE_RING = 4


@dataclass
class StepSpec:
    id: str
    layer: Layer
    fn: Callable[["CompositionContext"], None]
    description: str = ""


class StepRegistry:
    """Registry of layer steps, ordered bottom to top."""

    def __init__(self) -> None:
        self._steps: dict[str, StepSpec] = {}

    def register(self, spec: StepSpec) -> None:
        if spec.id in self._steps:
            raise ValueError(f"Duplicate layer step ID: {spec.id}")
        self._steps[spec.id] = spec
        logger.debug("Registered layer step %s (%s)", spec.id, spec.layer.name)

    def get(self, step_id: str) -> StepSpec:
        return self._steps[step_id]

    def get_layer(self, layer: Layer) -> list[StepSpec]:
        specs = [s for s in self._steps.values() if s.layer == layer]
        return sorted(specs, key=lambda s: s.id)

    def ordered(self) -> list[StepSpec]:
        return sorted(self._steps.values(), key=lambda s: (s.layer, s.id))

    @property
    def count(self) -> int:
        return len(self._steps)


# Module-level singleton
_registry = StepRegistry()


def get_registry() -> StepRegistry:
    return _registry


def layer_step(*, id: str, layer: Layer, description: str = ""):
    """Decorator to register a layer step function."""

    def decorator(fn: Callable[["CompositionContext"], None]):
        _registry.register(StepSpec(id=id, layer=layer, fn=fn, description=description))
        return fn

    return decorator
