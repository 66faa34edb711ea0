"""Polygons in the plane: convexity, area, point location, hull and crossings."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from operator import itemgetter

from algolab.geometry import Point, Vector, cos_angle, cross_product, is_left_turn
from algolab.segment import Segment, segment_intersect

INSIDE = -1
ON_BOUNDARY = 0
OUTSIDE = 1

_ANGLE_PRECISION = 1e-11


def _edge_crossing(a: Point, b: Point, point: Point) -> int:
    """Return -1 if edge ab crosses the ray from ``point``, 0 if it holds it, else 1."""
    ax, ay = a.x - point.x, a.y - point.y
    bx, by = b.x - point.x, b.y - point.y
    if ay * by > 0:
        return 1
    turn = ax * by - ay * bx
    sign = (turn > 0) - (turn < 0)
    if sign == 0:
        return ON_BOUNDARY if ax * bx <= 0 else OUTSIDE
    if ay < 0:
        return -sign
    if by < 0:
        return sign
    return 1


class Polygon:
    """A closed polygon given by its vertices in order."""

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._points: tuple[Point, ...] = tuple(points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"Polygon({list(self._points)!r})"

    def _edges(self) -> Iterator[tuple[Point, Point]]:
        points = self._points
        for i, start in enumerate(points):
            yield start, points[(i + 1) % len(points)]

    def is_convex(self) -> bool:
        """Report whether every turn goes the same way; polygons under 3 vertices are convex."""
        points = self._points
        count = len(points)
        if count < 3:
            return True
        turns = [
            cross_product(
                Vector.between(points[i - 1], points[i]),
                Vector.between(points[i], points[(i + 1) % count]),
            ).z
            >= 0
            for i in range(count)
        ]
        return all(turns) or not any(turns)

    def area(self) -> float:
        """Return the enclosed area, whatever the orientation."""
        points = self._points
        count = len(points)
        doubled = sum(
            point.x * (points[i - 1].y - points[(i + 1) % count].y)
            for i, point in enumerate(points)
        )
        return abs(doubled) / 2

    def contains_point(self, point: Point) -> int:
        """Return INSIDE, ON_BOUNDARY or OUTSIDE for ``point``."""
        result = 1
        for start, end in self._edges():
            result *= _edge_crossing(start, end, point)
        return result

    def intersect_segment(self, segment: Segment) -> list[Segment]:
        """Return the intersection of ``segment`` with each edge that it meets.

        Edges and the segment must not be vertical.
        """
        found = []
        for start, end in self._edges():
            common = segment_intersect(segment, Segment(start, end))
            if common is not None:
                found.append(common)
        return found

    def __str__(self) -> str:
        return "".join(f"{point}\n" for point in self._points)


def convex_hull(points: Iterable[Point]) -> Polygon:
    """Return the convex hull by Graham's scan, counter-clockwise from the lowest point.

    Of several points in one direction from the start, only the farthest is kept.
    """
    items = list(points)
    if not items:
        return Polygon()
    start = min(items, key=lambda p: (p.y, p.x))
    axis = Vector(1, 0)
    entries = sorted(
        (
            (point, cos_angle(Vector.between(start, point), axis))
            for point in items
            if point != start
        ),
        key=itemgetter(1),
    )
    if not entries:
        return Polygon([start])

    descending = entries[::-1]
    current, previous_cos = descending[0]
    best_length = Vector.between(start, current).length()
    unique: list[Point] = []
    for point, cosine in descending[1:]:
        length = Vector.between(start, point).length()
        if previous_cos - cosine < _ANGLE_PRECISION:
            if length > best_length:
                best_length = length
                current = point
        else:
            unique.append(current)
            current = point
            best_length = length
        previous_cos = cosine
    unique.append(current)

    hull = [start, unique[0]]
    for point in unique[1:]:
        while len(hull) >= 2 and not is_left_turn(
            Vector.between(hull[-2], hull[-1]), Vector.between(hull[-1], point)
        ):
            hull.pop()
        hull.append(point)
    return Polygon(hull)