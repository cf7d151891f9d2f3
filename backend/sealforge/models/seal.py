"""SealDesign — the immutable input of one seal render."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

DEFAULT_COLOR = "#CC0000"
DEFAULT_FONT_FAMILY = "ChangChengDaBiaoSong"


@dataclass(frozen=True)
class StarEmblem:
    # Outer diameter of the star in px
    size: float = 100.0
    # Degrees added to the top-pointing base orientation
    rotation: float = 0.0


@dataclass(frozen=True)
class TextEmblem:
    content: str = "印"
    font_size: float = 40.0


Emblem = Union[StarEmblem, TextEmblem]


@dataclass(frozen=True)
class SealDesign:
    """Everything needed to lay out one seal.

    ``bottom_code`` is ``None`` when the caller omitted it (the region code
    provider is asked); an empty string means no code ring at all.
    ``company_start_angle``/``company_end_angle`` only apply to the
    legacy-fixed-angle preset.
    """

    company_name: str
    diameter: float = 300.0
    border_width: float = 6.0
    color: str = DEFAULT_COLOR
    company_font_size: float = 36.0
    font_family: str = DEFAULT_FONT_FAMILY
    company_char_spacing: float = 0.0
    company_start_angle: float | None = None
    company_end_angle: float | None = None
    bottom_code: str | None = None
    bottom_font_size: float = 16.0
    emblem: Emblem = field(default_factory=StarEmblem)
    export_scale: int = 2
    preset: str | None = None

    @property
    def center(self) -> tuple[float, float]:
        return (self.diameter / 2, self.diameter / 2)

    @property
    def outer_radius(self) -> float:
        return (self.diameter - self.border_width) / 2
