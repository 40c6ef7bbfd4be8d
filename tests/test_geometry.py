import math

import pytest

from floorplan.models import (
    Point, distance, distance_to_segment, line_angle, point_at_fraction,
    project_fraction, snap_point, snap_value,
)


def test_distance():
    assert distance(Point(x=0, y=0), Point(x=3, y=4)) == pytest.approx(5.0)


@pytest.mark.parametrize(
    "end, expected",
    [
        (Point(x=10, y=0), 0.0),
        (Point(x=0, y=10), 90.0),
        (Point(x=-10, y=0), 180.0),
        (Point(x=0, y=-10), -90.0),
    ],
)
def test_line_angle(end, expected):
    assert line_angle(Point(x=0, y=0), end) == pytest.approx(expected)


def test_point_at_fraction():
    mid = point_at_fraction(Point(x=0, y=0), Point(x=120, y=40), 0.5)
    assert (mid.x, mid.y) == pytest.approx((60.0, 20.0))


def test_snap_value_rounds_to_nearest_increment():
    assert snap_value(61, 60) == 60
    assert snap_value(95, 60) == 120
    assert snap_value(-29, 60) == 0


def test_snap_is_idempotent_on_aligned_values():
    for value in (0.0, 60.0, 120.0, -180.0):
        assert snap_value(value, 60) == value
    aligned = Point(x=120, y=-60)
    assert snap_point(aligned, 60) == aligned


def test_snap_point_is_per_axis():
    snapped = snap_point(Point(x=64, y=29), 60)
    assert (snapped.x, snapped.y) == (60, 0)


def test_snap_with_non_positive_increment_is_identity():
    assert snap_value(13.7, 0) == 13.7


def test_project_fraction_clamps_to_segment():
    a, b = Point(x=0, y=0), Point(x=100, y=0)
    assert project_fraction(a, b, Point(x=25, y=10)) == pytest.approx(0.25)
    assert project_fraction(a, b, Point(x=150, y=0)) == 1.0
    assert project_fraction(a, b, Point(x=-5, y=3)) == 0.0


def test_project_fraction_degenerate_segment():
    p = Point(x=5, y=5)
    assert project_fraction(p, p, Point(x=9, y=9)) == 0.0


def test_distance_to_segment():
    a, b = Point(x=0, y=0), Point(x=100, y=0)
    assert distance_to_segment(a, b, Point(x=50, y=10)) == pytest.approx(10.0)
    assert distance_to_segment(a, b, Point(x=103, y=4)) == pytest.approx(5.0)


def test_wall_angle_of_diagonal():
    assert line_angle(Point(x=0, y=0), Point(x=1, y=1)) == pytest.approx(math.degrees(math.pi / 4))
