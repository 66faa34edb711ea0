import pytest

from algolab.geometry import Point
from algolab.segment import Segment, segment_intersect


def seg(x1, y1, x2, y2):
    return Segment(Point(x1, y1), Point(x2, y2))


def test_str_format():
    assert str(seg(0, 0, 2, 2)) == "[(0, 0) ; (2, 2)]"


def test_slope_and_intercept_reproduce_end_points():
    s = seg(1, 3, 4, 9)
    assert s.point_at(1) == Point(1, 3)
    assert s.point_at(4) == Point(4, 9)
    assert s.intercept() == s.point_at(0).y


def test_slope_direction_independent():
    assert seg(1, 3, 4, 9).slope() == seg(4, 9, 1, 3).slope()


def test_vertical_segment_has_no_slope():
    with pytest.raises(ValueError):
        seg(1, 0, 1, 5).slope()


def test_length():
    assert seg(0, 0, 3, 4).length() == 5.0
    assert seg(2, 2, 2, 2).length() == 0


def test_crossing_segments():
    result = segment_intersect(seg(0, 0, 2, 2), seg(0, 2, 2, 0))
    assert result == Segment(Point(1.0, 1.0), Point(1.0, 1.0))


def test_crossing_is_symmetric():
    a, b = seg(-1, -3, 4, 2), seg(0, 5, 3, -4)
    ab, ba = segment_intersect(a, b), segment_intersect(b, a)
    assert ab.start.x == pytest.approx(ba.start.x)
    assert ab.start.y == pytest.approx(ba.start.y)
    assert ab.start == ab.end


def test_crossing_point_lies_on_both_lines():
    a, b = seg(-1, -3, 4, 2), seg(0, 5, 3, -4)
    p = segment_intersect(a, b).start
    assert b.point_at(p.x).y == pytest.approx(p.y)


def test_lines_cross_outside_segments():
    assert segment_intersect(seg(0, 0, 1, 1), seg(3, 0, 4, -1)) is None


def test_parallel_segments_do_not_meet():
    assert segment_intersect(seg(0, 0, 2, 2), seg(0, 1, 2, 3)) is None


def test_collinear_overlap():
    result = segment_intersect(seg(0, 0, 2, 2), seg(3, 3, 1, 1))
    assert result == Segment(Point(1, 1), Point(2, 2))


def test_collinear_disjoint():
    assert segment_intersect(seg(0, 0, 1, 1), seg(2, 2, 3, 3)) is None


def test_touching_at_end_point():
    result = segment_intersect(seg(0, 0, 2, 0), seg(2, 0, 4, 2))
    assert result == Segment(Point(2, 0), Point(2, 0))