"""LayoutPolicy — design validation and the adaptive ring rules.

Validation always runs to completion before any geometry is computed, so an
invalid design never yields partial instructions.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from PIL import ImageColor

from sealforge.engine.config import ADAPTIVE_CENTERED, LayoutConfig, get_preset, preset_names
from sealforge.errors import (
    EmptyField,
    InvalidChoice,
    InvalidColor,
    MissingRequiredField,
    NonFiniteValue,
    RingTooSmall,
    ValueOutOfRange,
)
from sealforge.models.seal import SealDesign, StarEmblem, TextEmblem
from sealforge.utils.geometry import TOP_ANGLE, ArcSpan, bottom_arc_span

logger = logging.getLogger(__name__)

RegionCodeLookup = Callable[[str], str]

DIAMETER_BOUNDS = (100, 1000)
FONT_SIZE_BOUNDS = (10, 100)
BORDER_WIDTH_BOUNDS = (1, 20)
STAR_SIZE_BOUNDS = (10, 150)
EXPORT_SCALE_BOUNDS = (1, 8)


def adaptive_font_scale(char_count: int, threshold: int = 12, min_scale: float = 0.6) -> float:
    """1.0 up to ``threshold`` chars, then threshold/n, never below ``min_scale``."""
    if char_count <= threshold:
        return 1.0
    return max(min_scale, threshold / char_count)


@dataclass(frozen=True)
class ResolvedLayout:
    """Every number the compositor needs, derived from one validated design."""

    config: LayoutConfig
    center: tuple[float, float]
    outer_radius: float

    name_font_size: float
    font_scale: float
    name_arc: ArcSpan
    name_radius: float
    char_spacing: float

    # Empty string = no code ring
    code: str
    code_span: float
    code_radius: float

    @property
    def has_code_ring(self) -> bool:
        return bool(self.code)


def _check_range(field: str, value: float, bounds: tuple[float, float]) -> None:
    lo, hi = bounds
    if value is None:
        raise MissingRequiredField(field)
    if not lo <= value <= hi:
        raise ValueOutOfRange(field, lo, hi, value)


def _check_finite(field: str, value: float | None) -> None:
    if value is not None and not math.isfinite(value):
        raise NonFiniteValue(field, value)


class LayoutPolicy:
    """Validates designs and resolves them against a layout preset.

    ``config`` is the fallback preset for designs that do not name one.
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self.config = config or get_preset(ADAPTIVE_CENTERED)

    def config_for(self, design: SealDesign) -> LayoutConfig:
        if design.preset is None or design.preset == self.config.name:
            return self.config
        return get_preset(design.preset)

    def validate(self, design: SealDesign) -> None:
        if design.company_name is None:
            raise MissingRequiredField("company_name")
        if not design.company_name.strip():
            raise EmptyField("company_name")

        _check_range("diameter", design.diameter, DIAMETER_BOUNDS)
        _check_range("border_width", design.border_width, BORDER_WIDTH_BOUNDS)
        _check_range("company_font_size", design.company_font_size, FONT_SIZE_BOUNDS)
        _check_range("bottom_font_size", design.bottom_font_size, FONT_SIZE_BOUNDS)

        emblem = design.emblem
        if isinstance(emblem, StarEmblem):
            _check_range("star_size", emblem.size, STAR_SIZE_BOUNDS)
            _check_finite("star_rotation", emblem.rotation)
        elif isinstance(emblem, TextEmblem):
            if not emblem.content or not emblem.content.strip():
                raise EmptyField("center_text")
            _check_range("center_font_size", emblem.font_size, FONT_SIZE_BOUNDS)
        else:
            raise MissingRequiredField("emblem")

        _check_finite("company_start_angle", design.company_start_angle)
        _check_finite("company_end_angle", design.company_end_angle)
        _check_finite("company_char_spacing", design.company_char_spacing)

        _check_range("export_scale", design.export_scale, EXPORT_SCALE_BOUNDS)

        if not design.color:
            raise EmptyField("color")
        try:
            ImageColor.getrgb(design.color)
        except ValueError:
            raise InvalidColor("color", design.color) from None

        if not design.font_family or not design.font_family.strip():
            raise EmptyField("font_family")

        if design.preset is not None and design.preset not in preset_names():
            raise InvalidChoice("preset", design.preset, preset_names())

        config = self.config_for(design)
        name_radius, code_radius = self._ring_radii(design, config, self.font_scale(design, config))
        if name_radius <= 0:
            raise RingTooSmall("company_font_size", name_radius)
        # An explicit empty code never draws the code ring
        if design.bottom_code != "" and code_radius <= 0:
            raise RingTooSmall("bottom_font_size", code_radius)

    def _ring_radii(
        self, design: SealDesign, config: LayoutConfig, scale: float
    ) -> tuple[float, float]:
        outer = design.outer_radius
        name_font_size = design.company_font_size * scale
        name_radius = outer - (config.name_ring_inset + name_font_size * config.name_ring_inset_factor)
        code_radius = outer - (
            config.code_ring_inset + design.bottom_font_size * config.code_ring_inset_factor
        )
        return name_radius, code_radius

    def name_arc(self, design: SealDesign, config: LayoutConfig) -> ArcSpan:
        if config.adaptive_span:
            return ArcSpan.centered(TOP_ANGLE, config.name_span)
        start = design.company_start_angle
        end = design.company_end_angle
        return ArcSpan(
            start=config.legacy_start_angle if start is None else start,
            end=config.legacy_end_angle if end is None else end,
        )

    def font_scale(self, design: SealDesign, config: LayoutConfig) -> float:
        if not config.adaptive_font_scale:
            return 1.0
        return adaptive_font_scale(
            len(design.company_name), config.scale_threshold, config.min_font_scale
        )

    def resolve_code(self, design: SealDesign, region_provider: RegionCodeLookup | None) -> str:
        if design.bottom_code is not None:
            return design.bottom_code
        if region_provider is None:
            return ""
        code = region_provider(design.company_name)
        if not code:
            logger.debug("No region code for %r, skipping code ring", design.company_name)
        return code

    def resolve(
        self,
        design: SealDesign,
        region_provider: RegionCodeLookup | None = None,
    ) -> ResolvedLayout:
        self.validate(design)
        config = self.config_for(design)

        scale = self.font_scale(design, config)
        name_radius, code_radius = self._ring_radii(design, config, scale)
        code = self.resolve_code(design, region_provider)

        return ResolvedLayout(
            config=config,
            center=design.center,
            outer_radius=design.outer_radius,
            name_font_size=design.company_font_size * scale,
            font_scale=scale,
            name_arc=self.name_arc(design, config),
            name_radius=name_radius,
            char_spacing=0.0 if config.adaptive_span else design.company_char_spacing,
            code=code,
            code_span=bottom_arc_span(len(code), config.bottom_max_span, config.bottom_per_char),
            code_radius=code_radius,
        )
