"""Axis-aligned ellipses and their crossings with segments."""

from __future__ import annotations

import math
from dataclasses import dataclass

from algolab.geometry import Point
from algolab.segment import Segment


def solve_quadratic(k2: float, k1: float, k0: float) -> list[float]:
    """Return the real roots of k2*x**2 + k1*x + k0 = 0.

    A linear equation has one root; a quadratic one has two, listed with
    the larger-numerator root first (equal when the discriminant is zero),
    or none when the discriminant is negative.
    """
    if k2 == 0:
        if k1 == 0:
            raise ValueError("the equation has no unknown")
        return [-k0 / k1]
    discriminant = k1 * k1 - 4 * k2 * k0
    if discriminant < 0:
        return []
    root = math.sqrt(discriminant)
    return [(-k1 + root) / (2 * k2), (-k1 - root) / (2 * k2)]


@dataclass(frozen=True)
class Ellipse:
    """An ellipse centred at (x, y) with semi-axes a (along x) and b (along y)."""

    x: float = 0.0
    y: float = 0.0
    a: float = 0.0
    b: float = 0.0

    def area(self) -> float:
        """Return the enclosed area."""
        return math.pi * self.a * self.b

    def intersect_segment(self, segment: Segment) -> list[Point]:
        """Return the points where ``segment`` meets the ellipse's boundary."""
        k = segment.slope()
        shift = segment.intercept() - self.y
        a2, b2 = self.a * self.a, self.b * self.b
        k2 = b2 + a2 * k * k
        k1 = 2 * a2 * k * shift - 2 * b2 * self.x
        k0 = b2 * self.x * self.x + a2 * shift * shift - a2 * b2
        left = min(segment.start.x, segment.end.x)
        right = max(segment.start.x, segment.end.x)
        return [
            segment.point_at(x)
            for x in solve_quadratic(k2, k1, k0)
            if left <= x <= right
        ]