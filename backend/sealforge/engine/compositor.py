"""SealCompositor — turns a SealDesign into an ordered DrawInstruction tuple."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from collections.abc import Iterable

from sealforge.engine.config import LayoutConfig
from sealforge.engine.context import CompositionContext
from sealforge.engine.policy import LayoutPolicy, RegionCodeLookup, ResolvedLayout
from sealforge.engine.registry import StepRegistry, get_registry
from sealforge.errors import DesignValidationError
from sealforge.models.instructions import DrawInstruction
from sealforge.models.seal import SealDesign

logger = logging.getLogger(__name__)

_layers_loaded = False


def register_layers() -> None:
    """Import every module under ``sealforge.engine.layers`` so @layer_step fires."""
    global _layers_loaded
    if _layers_loaded:
        return
    package = importlib.import_module("sealforge.engine.layers")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"sealforge.engine.layers.{module_name}")
    _layers_loaded = True


class SealCompositor:
    """Validate, lay out and sequence one seal. Holds no per-render state."""

    def __init__(
        self,
        config: LayoutConfig | None = None,
        region_provider: RegionCodeLookup | None = None,
        registry: StepRegistry | None = None,
    ) -> None:
        if registry is None:
            register_layers()
        self.registry = registry or get_registry()
        self.policy = LayoutPolicy(config)
        self.region_provider = region_provider

    def resolve(self, design: SealDesign) -> ResolvedLayout:
        return self.policy.resolve(design, self.region_provider)

    def compose(self, design: SealDesign) -> tuple[DrawInstruction, ...]:
        start = time.perf_counter()
        layout = self.resolve(design)
        ctx = CompositionContext(design=design, layout=layout)

        for spec in self.registry.ordered():
            spec.fn(ctx)
            ctx.completed_steps.append(spec.id)

        elapsed = (time.perf_counter() - start) * 1000
        logger.debug(
            "Composed %r: %d instructions via %s in %.1fms",
            design.company_name,
            len(ctx.instructions),
            layout.config.name,
            elapsed,
        )
        return tuple(ctx.instructions)

    def validate_all(self, designs: Iterable[SealDesign]) -> list[SealDesign]:
        """Validate every design, raising on the first invalid one."""
        checked = []
        for index, design in enumerate(designs):
            try:
                self.policy.validate(design)
            except DesignValidationError:
                logger.info("Batch rejected at item %d (%r)", index, design.company_name)
                raise
            checked.append(design)
        return checked

    def compose_batch(self, designs: Iterable[SealDesign]) -> list[tuple[DrawInstruction, ...]]:
        """Fail-fast batch: nothing is composed unless every design is valid."""
        checked = self.validate_all(designs)
        return [self.compose(d) for d in checked]


def render_instructions(
    design: SealDesign,
    config: LayoutConfig | None = None,
    region_provider: RegionCodeLookup | None = None,
) -> tuple[DrawInstruction, ...]:
    """Convenience wrapper: one design in, its instruction tuple out."""
    return SealCompositor(config=config, region_provider=region_provider).compose(design)
