import logging
import math
import pytest
import numpy as np

from fractions import Fraction

from geometry import (
    AngularKey,
    EmptyInputError,
    Orientation,
    Point,
    as_points,
    compare_distance,
    hull_contains,
    is_convex,
    orient,
    same_direction,
    select_pivot,
)
from log_setup import setup_logging


def test_point_equality_is_exact():
    assert Point(1.0, 2.0) == Point(1.0, 2.0)
    assert Point(1.0, 2.0) != Point(1.0, 2.0 + 1e-15)
    assert Point(1.0, 2.0).isclose(Point(1.0, 2.0 + 1e-15))
    assert not Point(1.0, 2.0).isclose(Point(1.0, 2.1), eps=0.01)
    assert len({Point(0.0, 0.0), Point(0.0, 0.0), Point(0.0, 1.0)}) == 2


def test_pick_left():
    a, b = Point(1.0, 2.0), Point(0.0, 3.0)
    assert a.pick_left(b) is a
    assert b.pick_left(a) is a

    # equal y: smaller x wins
    c, d = Point(5.0, 1.0), Point(-1.0, 1.0)
    assert c.pick_left(d) is d
    assert d.pick_left(c) is d

    # equal points: the other one is returned
    e, f = Point(1.0, 1.0), Point(1.0, 1.0)
    assert e.pick_left(f) is f


def test_orientation():
    a, b, c = Point(1.0, 1.0), Point(2.0, 2.0), Point(3.0, 2.5)
    assert a.orientation(b, c) is Orientation.CLOCKWISE
    assert not a.ccw(b, c)

    a, b, c = Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 0.0)
    assert a.ccw(c, b)
    assert a.orientation(b, c) is Orientation.CLOCKWISE

    assert Point(0.0, 0.0).orientation(Point(1.0, 0.0), Point(2.0, 0.0)) is Orientation.COLLINEAR
    assert not Point(0.0, 0.0).ccw(Point(1.0, 0.0), Point(2.0, 0.0))


def test_orientation_tolerance():
    a, b, c = Point(0.0, 0.0), Point(1.0, 0.0), Point(2.0, 1e-13)
    assert a.orientation(b, c) is Orientation.COUNTERCLOCKWISE
    assert a.orientation(b, c, tol=1e-9) is Orientation.COLLINEAR


def test_distance_and_angle():
    assert Point(0.0, 0.0).distance_to(Point(3.0, 4.0)) == 5.0
    assert Point(1.0, 3.0).polar_angle_from(Point(1.0, 2.0)) == pytest.approx(math.pi / 2)
    assert Point(-1.0, 0.0).polar_angle_from(Point(0.0, 0.0)) == pytest.approx(math.pi)


def test_angular_key():
    key = AngularKey.from_point(Point(1.0, 2.0), Point(1.0, 3.0))
    assert key == AngularKey(1.0, 2.0, distance=1.0, angle=-math.pi / 2)
    assert key.point == Point(1.0, 2.0)


def test_angular_key_order():
    pivot = Point(0.0, 0.0)
    far = AngularKey.from_point(Point(2.0, 2.0), pivot)
    near = AngularKey.from_point(Point(1.0, 1.0), pivot)
    low = AngularKey.from_point(Point(5.0, 0.0), pivot)
    assert sorted([far, near, low]) == [low, near, far]


def test_as_points():
    source = [(1, 2), Point(3.0, 4.0)]
    points = as_points(source)
    assert points == [Point(1.0, 2.0), Point(3.0, 4.0)]
    assert source == [(1, 2), Point(3.0, 4.0)]

    arr = np.array([[0.5, 1.5], [2.5, 3.5]])
    assert as_points(arr) == [Point(0.5, 1.5), Point(2.5, 3.5)]
    assert all(type(p.x) is float for p in as_points(arr))


def test_select_pivot():
    assert select_pivot([(1, 2), (1, 3), (1, 4)]) == Point(1.0, 2.0)
    assert select_pivot([(3, 0), (1, 5), (-2, 0), (0, 0)]) == Point(-2.0, 0.0)
    assert select_pivot([Point(7.0, 7.0)]) == Point(7.0, 7.0)


def test_select_pivot_empty():
    with pytest.raises(EmptyInputError):
        select_pivot([])


def test_hull_contains():
    square = as_points([(0, 0), (2, 0), (2, 2), (0, 2)])
    assert hull_contains(square, Point(1.0, 1.0))
    assert hull_contains(square, Point(2.0, 1.0))
    assert hull_contains(square, Point(0.0, 0.0))
    assert not hull_contains(square, Point(3.0, 1.0))

    segment = as_points([(0, 0), (2, 2)])
    assert hull_contains(segment, Point(1.0, 1.0))
    assert not hull_contains(segment, Point(3.0, 3.0))
    assert not hull_contains(segment, Point(1.0, 0.0))

    assert hull_contains([Point(1.0, 1.0)], Point(1.0, 1.0))
    assert not hull_contains([], Point(1.0, 1.0))


def test_is_convex():
    assert is_convex(as_points([(0, 0), (2, 0), (2, 2), (0, 2)]))
    assert not is_convex(as_points([(0, 0), (2, 0), (1, 0.5), (2, 2), (0, 2)]))
    assert is_convex(as_points([(0, 0), (1, 1)]))


def exact_cross_sign(o, a, b):
    det = (
        (Fraction(a.x) - Fraction(o.x)) * (Fraction(b.y) - Fraction(o.y))
        - (Fraction(a.y) - Fraction(o.y)) * (Fraction(b.x) - Fraction(o.x))
    )
    return (det > 0) - (det < 0)


@pytest.mark.parametrize("direction", [(0.1, 0.3), (1 / 3, 0.7), (-0.3, 0.9)])
def test_orient_is_exact_on_near_collinear_points(direction):
    np.random.seed(1)
    dx, dy = direction
    for _ in range(2000):
        t = np.random.uniform(-5, 5, 3)
        o, a, b = (Point(float(dx * ti), float(dy * ti)) for ti in t)
        assert orient(o, a, b) == exact_cross_sign(o, a, b)
        assert o.orientation(a, b) == exact_cross_sign(o, a, b)


def test_orient_general_position():
    assert orient(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)) == 1
    assert orient(Point(0.0, 0.0), Point(0.0, 1.0), Point(1.0, 0.0)) == -1
    assert orient(Point(1e-200, 1e-200), Point(2e-200, 2e-200), Point(3e-200, 3e-200)) == 0
    assert orient(Point(0.0, 0.0), Point(1e300, 1e300), Point(-1e300, 1e300)) == 1


def test_orientation_negative_tolerance():
    with pytest.raises(ValueError):
        Point(0.0, 0.0).orientation(Point(1.0, 0.0), Point(0.0, 1.0), tol=-1.0)


def test_compare_distance_and_direction():
    o = Point(0.0, 0.0)
    near, far, behind = Point(0.1, 0.3), Point(0.2, 0.6), Point(-0.3, -0.9)
    assert compare_distance(o, near, far) == 1
    assert compare_distance(o, far, near) == -1
    assert compare_distance(o, near, Point(0.1, 0.3)) == 0
    assert same_direction(o, near, far)
    assert not same_direction(o, near, behind)


def test_as_points_rejects_non_finite():
    with pytest.raises(ValueError):
        as_points([(0.0, float('nan'))])
    with pytest.raises(ValueError):
        as_points([Point(float('-inf'), 0.0)])


def test_setup_logging_installs_handlers_once(tmp_path):
    log_file = tmp_path / "logs" / "hull.log"
    setup_logging(logging.INFO)
    setup_logging(logging.DEBUG, log_file=str(log_file))
    setup_logging(logging.DEBUG, log_file=str(log_file))

    names = [h.get_name() for h in logging.getLogger().handlers]
    assert names.count("convex_hull.console") == 1
    assert names.count("convex_hull.file") == 1

    logging.getLogger("test").debug("hello")
    for h in logging.getLogger().handlers:
        h.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")

    for h in list(logging.getLogger().handlers):
        if h.get_name() == "convex_hull.file":
            logging.getLogger().removeHandler(h)
            h.close()
    logging.getLogger().setLevel(logging.WARNING)
