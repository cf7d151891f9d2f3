"""CompositionContext — scratch state for a single compose() call.

A fresh context is built per design and dropped once its instructions are
frozen into a tuple, so nothing is shared between renders.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sealforge.engine.policy import ResolvedLayout
from sealforge.models.instructions import DrawInstruction
from sealforge.models.seal import SealDesign


@dataclass
class CompositionContext:
    design: SealDesign
    layout: ResolvedLayout
    instructions: list[DrawInstruction] = field(default_factory=list)
    completed_steps: list[str] = field(default_factory=list)

    def emit(self, *instructions: DrawInstruction) -> None:
        self.instructions.extend(instructions)

    @property
    def color(self) -> str:
        return self.design.color
