"""Straight line segments drawn and edited on the canvas."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from linesketch_playground.geometry import (
    Point,
    angle_deg,
    as_point,
    euclid_len,
    is_degenerate,
    offset,
    point_line_distance,
)
from linesketch_playground.surface import DrawingSurface

PROXIMITY_TOLERANCE = 5.0
CAPTURE_RADIUS = 10.0

HANDLE_START = "start"
HANDLE_END = "end"


@dataclass
class Segment:
    """One editable line from ``start`` to ``end``.

    ``start == end`` is allowed; such a segment is invisible but still hit
    testable around its single point.
    """

    start: Point
    end: Point
    selected: bool = False

    def __post_init__(self) -> None:
        self.start = as_point(self.start)
        self.end = as_point(self.end)

    def draw(self, surface: DrawingSurface) -> None:
        surface.stroke_line(self.start, self.end)

    def hit_test(
        self,
        point: Point,
        *,
        proximity: float = PROXIMITY_TOLERANCE,
        capture_radius: float = CAPTURE_RADIUS,
    ) -> Optional[str]:
        """Return which endpoint handle ``point`` grabs, if any.

        The point has to lie within ``proximity`` of the line through the
        segment and within ``capture_radius`` of an endpoint. ``start`` is
        checked first, so it wins when both handles are in reach. Points near
        the middle of a long segment grab nothing.
        """
        if point_line_distance(point, self.start, self.end) >= proximity:
            return None
        if euclid_len(self.start, point) < capture_radius:
            return HANDLE_START
        if euclid_len(self.end, point) < capture_radius:
            return HANDLE_END
        return None

    def translate(self, dx: float, dy: float) -> None:
        self.start = offset(self.start, dx, dy)
        self.end = offset(self.end, dx, dy)

    def set_end(self, point: Point) -> None:
        self.end = as_point(point)

    def length(self) -> float:
        return euclid_len(self.start, self.end)

    def angle_deg(self) -> float:
        return angle_deg(self.start, self.end)

    def is_degenerate(self) -> bool:
        return is_degenerate(self.start, self.end)


__all__ = [
    "Segment",
    "PROXIMITY_TOLERANCE",
    "CAPTURE_RADIUS",
    "HANDLE_START",
    "HANDLE_END",
]
