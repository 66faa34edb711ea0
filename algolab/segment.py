"""Line segments in the plane and their intersection."""

from __future__ import annotations

import math
from dataclasses import dataclass

from algolab.geometry import Point


@dataclass(frozen=True)
class Segment:
    """A segment between two points; both points may coincide."""

    start: Point
    end: Point

    def slope(self) -> float:
        """Return the slope of the line through the segment."""
        dx = self.start.x - self.end.x
        if dx == 0:
            raise ValueError("a vertical segment has no slope")
        return (self.start.y - self.end.y) / dx

    def intercept(self) -> float:
        """Return where the line through the segment meets the y axis."""
        return self.start.y - self.slope() * self.start.x

    def length(self) -> float:
        """Return the distance between the end points."""
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

    def point_at(self, x: float) -> Point:
        """Return the point of the segment's line with abscissa ``x``."""
        return Point(x, self.slope() * x + self.intercept())

    def _x_range(self) -> tuple[float, float]:
        return min(self.start.x, self.end.x), max(self.start.x, self.end.x)

    def __str__(self) -> str:
        return f"[{self.start} ; {self.end}]"


def segment_intersect(first: Segment, second: Segment) -> Segment | None:
    """Return the common part of two segments, or None if they do not meet.

    Crossing segments give a segment whose two end points are the crossing
    point; overlapping segments on one line give the overlap.
    """
    k1, k2 = first.slope(), second.slope()
    m1, m2 = first.intercept(), second.intercept()
    left1, right1 = first._x_range()
    left2, right2 = second._x_range()
    if k1 == k2:
        if m1 != m2 or left2 > right1 or right2 < left1:
            return None
        left, right = max(left1, left2), min(right1, right2)
        return Segment(first.point_at(left), first.point_at(right))
    x = (m2 - m1) / (k1 - k2)
    if left1 <= x <= right1 and left2 <= x <= right2:
        crossing = first.point_at(x)
        return Segment(crossing, crossing)
    return None