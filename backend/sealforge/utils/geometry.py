"""Leaf-node seal geometry. No engine imports.

Angles are in degrees on a y-down canvas: 0° points right, 90° points down,
-90° points up. Rotations returned to callers are radians.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

# Golden-ratio proportion between a five-pointed star's inner and outer radius.
STAR_INNER_RATIO = 0.382
STAR_POINTS = 5

TOP_ANGLE = -90.0
BOTTOM_ANGLE = 90.0

# Bottom code ring: each char claims 6.5°, never more than 80° in total.
BOTTOM_MAX_SPAN = 80.0
BOTTOM_PER_CHAR_DEGREES = 6.5


@dataclass(frozen=True)
class ArcSpan:
    start: float
    end: float

    @classmethod
    def centered(cls, reference: float, span: float) -> ArcSpan:
        return cls(start=reference - span / 2, end=reference + span / 2)

    @property
    def span(self) -> float:
        return self.end - self.start

    @property
    def midpoint(self) -> float:
        return (self.start + self.end) / 2


@dataclass(frozen=True)
class ArcPlacement:
    char: str
    position: tuple[float, float]
    # Radians
    rotation: float
    # Degrees, where on the circle the char sits
    angle: float


def _points_on_circle(
    center: tuple[float, float], radii: NDArray[np.float64], angles_deg: NDArray[np.float64]
) -> NDArray[np.float64]:
    rad = np.deg2rad(angles_deg)
    xs = center[0] + radii * np.cos(rad)
    ys = center[1] + radii * np.sin(rad)
    return np.column_stack((xs, ys))


def star_polygon(
    outer_radius: float,
    center: tuple[float, float],
    rotation: float = 0.0,
) -> list[tuple[float, float]]:
    """Ten vertices of a five-pointed star, alternating outer/inner radius.

    Vertex i sits at i·36° - 90° + rotation, so vertex 0 is straight above
    the center when rotation is 0.
    """
    n = STAR_POINTS * 2
    idx = np.arange(n)
    radii = np.where(idx % 2 == 0, outer_radius, outer_radius * STAR_INNER_RATIO).astype(np.float64)
    angles = idx * (360.0 / n) + TOP_ANGLE + rotation
    pts = _points_on_circle(center, radii, angles)
    return [(float(x), float(y)) for x, y in pts]


def _arc_angles(n: int, arc: ArcSpan, char_spacing: float) -> NDArray[np.float64]:
    if n == 1:
        return np.array([arc.midpoint])
    # Spacing is taken out of the step and added back per char, so the
    # first and last chars always land on the span ends.
    step = (arc.span - char_spacing * (n - 1)) / (n - 1)
    return arc.start + np.arange(n) * (step + char_spacing)


def arc_text_positions(
    text: str,
    center: tuple[float, float],
    radius: float,
    arc: ArcSpan,
    char_spacing: float = 0.0,
) -> list[ArcPlacement]:
    """Distribute ``text`` clockwise along ``arc``, glyph tops pointing outward."""
    chars = list(text)
    if not chars:
        return []

    angles = _arc_angles(len(chars), arc, char_spacing)
    pts = _points_on_circle(center, np.full(len(chars), float(radius)), angles)
    rotations = np.deg2rad(angles + 90.0)

    return [
        ArcPlacement(
            char=ch,
            position=(float(pts[i, 0]), float(pts[i, 1])),
            rotation=float(rotations[i]),
            angle=float(angles[i]),
        )
        for i, ch in enumerate(chars)
    ]


def bottom_arc_span(
    char_count: int,
    max_span: float = BOTTOM_MAX_SPAN,
    per_char: float = BOTTOM_PER_CHAR_DEGREES,
) -> float:
    return min(max_span, char_count * per_char)


def bottom_arc_positions(
    code: str,
    center: tuple[float, float],
    radius: float,
    max_span: float = BOTTOM_MAX_SPAN,
    per_char: float = BOTTOM_PER_CHAR_DEGREES,
) -> list[ArcPlacement]:
    """Lay ``code`` along the bottom of the circle, readable left to right.

    Chars walk by decreasing angle from 90° + span/2, and each is rotated by
    angle - 90° so it stands upright for a viewer, not radially.
    """
    chars = list(code)
    if not chars:
        return []

    n = len(chars)
    span = bottom_arc_span(n, max_span, per_char)
    start = BOTTOM_ANGLE + span / 2
    if n == 1:
        angles = np.array([BOTTOM_ANGLE])
    else:
        angles = start - np.arange(n) * (span / (n - 1))

    pts = _points_on_circle(center, np.full(n, float(radius)), angles)
    rotations = np.deg2rad(angles - 90.0)

    return [
        ArcPlacement(
            char=ch,
            position=(float(pts[i, 0]), float(pts[i, 1])),
            rotation=float(rotations[i]),
            angle=float(angles[i]),
        )
        for i, ch in enumerate(chars)
    ]


def polar_angle(center: tuple[float, float], point: tuple[float, float]) -> float:
    """Angle of ``point`` around ``center`` in degrees, in (-180, 180]."""
    return math.degrees(math.atan2(point[1] - center[1], point[0] - center[0]))
