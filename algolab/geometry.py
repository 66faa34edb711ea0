"""Points and vectors in the plane with products and orientation tests."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


@dataclass(frozen=True)
class Vector:
    """A vector in space; plane vectors have ``z`` equal to zero."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def between(cls, first: Point, second: Point) -> Vector:
        """Return the vector from ``first`` to ``second``."""
        return cls(second.x - first.x, second.y - first.y)

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


def dot_product(first: Vector, second: Vector) -> float:
    """Return the scalar product."""
    return first.x * second.x + first.y * second.y + first.z * second.z


def cross_product(first: Vector, second: Vector) -> Vector:
    """Return the vector product; its ``z`` is the signed parallelogram area."""
    return Vector(
        first.y * second.z - first.z * second.y,
        first.x * second.z - first.z * second.x,
        first.x * second.y - first.y * second.x,
    )


def _norms(first: Vector, second: Vector) -> float:
    norms = first.length() * second.length()
    if norms == 0:
        raise ValueError("angle with a zero-length vector is undefined")
    return norms


def cos_angle(first: Vector, second: Vector) -> float:
    """Return the cosine of the angle between the vectors."""
    return dot_product(first, second) / _norms(first, second)


def sin_angle(first: Vector, second: Vector) -> float:
    """Return the (non-negative) sine of the angle between the vectors."""
    return cross_product(first, second).length() / _norms(first, second)


def triangle_area(first: Vector, second: Vector) -> float:
    """Return the area of the triangle spanned by the vectors."""
    return cross_product(first, second).length() / 2


def is_left_turn(first: Vector, second: Vector) -> bool:
    """Report whether ``second`` turns counter-clockwise from ``first``."""
    return cross_product(first, second).z > 0


def is_right_turn(first: Vector, second: Vector) -> bool:
    """Report whether ``second`` turns clockwise from ``first``."""
    return cross_product(first, second).z < 0


def is_collinear(first: Vector, second: Vector) -> bool:
    """Report whether the vectors lie on one line."""
    return cross_product(first, second).z == 0