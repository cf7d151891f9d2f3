"""Layout configuration — named presets controlling ring geometry."""

from __future__ import annotations

from dataclasses import dataclass, replace

ADAPTIVE_CENTERED = "adaptive-centered"
LEGACY_FIXED_ANGLE = "legacy-fixed-angle"


@dataclass(frozen=True)
class LayoutConfig:
    """Constants of one layout preset. Instances are shared and never mutated."""

    name: str = ADAPTIVE_CENTERED

    # Name ring span policy: True = fixed span centered on the top,
    # False = caller-supplied start/end angles
    adaptive_span: bool = True
    name_span: float = 240.0  # degrees, adaptive mode only
    legacy_start_angle: float = 225.0  # used when a legacy design omits angles
    legacy_end_angle: float = 315.0

    # Adaptive font scaling: names longer than the threshold shrink
    scale_threshold: int = 12
    min_font_scale: float = 0.6
    adaptive_font_scale: bool = True

    # Condensed seal typefaces read better stretched along the glyph's vertical axis
    vertical_stretch: float = 1.55

    # Thin inner guide circle drawn inside the border (legacy look)
    inner_guide: bool = False
    inner_guide_inset: float = 14.0
    inner_guide_width: float = 1.0

    # Ring radii: outer radius minus (fixed inset + font size * factor)
    name_ring_inset: float = 0.0
    name_ring_inset_factor: float = 0.8
    code_ring_inset: float = 0.0
    code_ring_inset_factor: float = 1.0

    # Bottom code ring span: min(max, chars * per_char)
    bottom_max_span: float = 80.0
    bottom_per_char: float = 6.5

    def with_overrides(self, **changes: object) -> LayoutConfig:
        return replace(self, **changes)


_PRESETS: dict[str, LayoutConfig] = {
    ADAPTIVE_CENTERED: LayoutConfig(),
    LEGACY_FIXED_ANGLE: LayoutConfig(
        name=LEGACY_FIXED_ANGLE,
        adaptive_span=False,
        adaptive_font_scale=False,
        vertical_stretch=1.0,
        inner_guide=True,
        name_ring_inset=28.0,
        name_ring_inset_factor=0.0,
        code_ring_inset=35.0,
        code_ring_inset_factor=0.0,
    ),
}


def preset_names() -> list[str]:
    return sorted(_PRESETS)


def get_preset(name: str) -> LayoutConfig:
    try:
        return _PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown layout preset: {name!r} (expected one of {preset_names()})") from None
