import math

import pytest

from algolab.geometry import (
    Point,
    Vector,
    cos_angle,
    cross_product,
    dot_product,
    is_collinear,
    is_left_turn,
    is_right_turn,
    sin_angle,
    triangle_area,
)


def test_point_str_format():
    assert str(Point(1, 2.5)) == "(1, 2.5)"


def test_point_equality():
    assert Point(1, 2) == Point(1.0, 2.0)
    assert Point(1, 2) != Point(2, 1)


def test_vector_between_points():
    v = Vector.between(Point(1, 1), Point(4, 5))
    assert (v.x, v.y, v.z) == (3, 4, 0)
    assert v.length() == 5.0


def test_dot_product_of_perpendicular_vectors_is_zero():
    assert dot_product(Vector(2, 3), Vector(-3, 2)) == 0


def test_dot_product_is_symmetric():
    a, b = Vector(1.5, -2), Vector(4, 7)
    assert dot_product(a, b) == dot_product(b, a)


def test_cos_of_vector_with_itself():
    assert cos_angle(Vector(3, 4), Vector(3, 4)) == pytest.approx(1.0)


@pytest.mark.parametrize("a,b", [(Vector(1, 2), Vector(3, -1)), (Vector(-2, 5), Vector(4, 4))])
def test_sin_cos_identity(a, b):
    assert sin_angle(a, b) ** 2 + cos_angle(a, b) ** 2 == pytest.approx(1.0)


def test_angle_with_zero_vector_raises():
    with pytest.raises(ValueError):
        cos_angle(Vector(0, 0), Vector(1, 0))
    with pytest.raises(ValueError):
        sin_angle(Vector(1, 0), Vector(0, 0))


def test_cross_product_is_antisymmetric():
    a, b = Vector(2, 5), Vector(-1, 3)
    assert cross_product(a, b).z == -cross_product(b, a).z


def test_orientation():
    east, north = Vector(1, 0), Vector(0, 1)
    assert is_left_turn(east, north)
    assert not is_right_turn(east, north)
    assert is_right_turn(north, east)
    assert not is_left_turn(north, east)


def test_collinear():
    assert is_collinear(Vector(1, 2), Vector(-2, -4))
    assert not is_collinear(Vector(1, 2), Vector(2, 1))
    assert not is_left_turn(Vector(1, 2), Vector(3, 6))


def test_triangle_area():
    assert triangle_area(Vector(2, 0), Vector(0, 2)) == 2.0


def test_triangle_area_invariant_under_swap():
    a, b = Vector(3, 1), Vector(-2, 7)
    assert triangle_area(a, b) == triangle_area(b, a)
    assert math.isclose(triangle_area(a, b) * 2, abs(cross_product(a, b).z))