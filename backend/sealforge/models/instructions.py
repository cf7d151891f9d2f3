"""Drawing instructions produced by the compositor and consumed by render backends."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Union

Point = tuple[float, float]


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
    stroke_color: str
    stroke_width: float

    kind = "circle"


@dataclass(frozen=True)
class FilledPolygon:
    points: tuple[Point, ...]
    fill_color: str

    kind = "polygon"


@dataclass(frozen=True)
class Glyph:
    """One run of text drawn centered on ``position``.

    ``rotation`` is in radians, clockwise on a y-down canvas. ``vertical_scale``
    stretches the glyph along its own vertical axis before rotation.
    """

    char: str
    position: Point
    rotation: float
    font_size: float
    font_family: str
    color: str
    vertical_scale: float = 1.0

    kind = "glyph"


DrawInstruction = Union[Circle, FilledPolygon, Glyph]


def instruction_to_dict(instruction: DrawInstruction) -> dict[str, Any]:
    data = asdict(instruction)
    data["kind"] = instruction.kind
    if isinstance(instruction, FilledPolygon):
        data["points"] = [list(p) for p in instruction.points]
    return data


def canvas_extent(instructions: tuple[DrawInstruction, ...] | list[DrawInstruction]) -> tuple[int, int]:
    """(width, height) of the canvas the instructions are drawn on.

    Circles bound the canvas, so a seal is always as wide as its border and
    an emblem reaching past the border is clipped. Polygons only count when
    there is no circle at all. Glyphs never count.
    """
    circles = [ins for ins in instructions if isinstance(ins, Circle)]
    max_x = 0.0
    max_y = 0.0
    if circles:
        for c in circles:
            reach = c.radius + c.stroke_width / 2
            max_x = max(max_x, c.center[0] + reach)
            max_y = max(max_y, c.center[1] + reach)
    else:
        for ins in instructions:
            if isinstance(ins, FilledPolygon):
                for x, y in ins.points:
                    max_x = max(max_x, x)
                    max_y = max(max_y, y)
    return (int(math.ceil(max_x - 1e-9)), int(math.ceil(max_y - 1e-9)))
