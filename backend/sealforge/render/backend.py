"""RenderBackend contract shared by the Pillow and SVG backends."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from sealforge.models.instructions import DrawInstruction


class RenderBackend(Protocol):
    media_type: str

    def render(self, instructions: Sequence[DrawInstruction], scale: int = 1) -> bytes:
        """Rasterize ``instructions`` at ``scale``. Raises RenderFailure."""
        ...
