"""API request models.

Field names are accepted in snake_case or camelCase (``fontSize``). Bounds are
checked by LayoutPolicy, not here.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sealforge.models.seal import DEFAULT_COLOR, SealDesign, StarEmblem, TextEmblem


class SealOptions(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    font_size: int = Field(default=36, description="Company name font size")
    size: int = Field(default=300, description="Seal diameter in px")
    color: str = Field(default=DEFAULT_COLOR, description="Seal color")
    border_width: int = Field(default=6, description="Border stroke width in px")
    font_family: str | None = Field(default=None, description="Font family; server default if omitted")

    center_type: Literal["star", "text"] = Field(default="star", description="Center emblem kind")
    star_size: int = Field(default=100, description="Star outer diameter in px")
    star_rotation: float = Field(default=0.0, description="Star rotation in degrees")
    center_text: str = Field(default="印", description="Center text when center_type is text")
    center_font_size: int = Field(default=40, description="Center text font size")

    code: str | None = Field(
        default=None,
        description="Registration code; omitted = derived from the name, empty = no code ring",
    )
    code_font_size: int = Field(default=16, description="Code ring font size")

    preset: str | None = Field(default=None, description="adaptive-centered or legacy-fixed-angle")
    start_angle: float | None = Field(default=None, description="Legacy name arc start (degrees)")
    end_angle: float | None = Field(default=None, description="Legacy name arc end (degrees)")
    char_spacing: float = Field(default=4.0, description="Legacy extra spacing between chars (degrees)")

    scale: int = Field(default=2, description="Export scale multiplier, 1 to 8")

    def to_design(self, name: str | None, default_family: str) -> SealDesign:
        if self.center_type == "text":
            emblem = TextEmblem(content=self.center_text, font_size=self.center_font_size)
        else:
            emblem = StarEmblem(size=self.star_size, rotation=self.star_rotation)

        return SealDesign(
            company_name=name,
            diameter=self.size,
            border_width=self.border_width,
            color=self.color,
            company_font_size=self.font_size,
            font_family=self.font_family or default_family,
            company_char_spacing=self.char_spacing,
            company_start_angle=self.start_angle,
            company_end_angle=self.end_angle,
            bottom_code=self.code,
            bottom_font_size=self.code_font_size,
            emblem=emblem,
            export_scale=self.scale,
            preset=self.preset,
        )


class SealRequest(SealOptions):
    name: str | None = Field(default=None, description="Company name (required)")


class BatchSealRequest(SealOptions):
    names: list[str] = Field(..., description="Company names, one seal each")
