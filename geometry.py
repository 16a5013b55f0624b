import enum
import math
import warnings

from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable

# Relative error bound of the floating point cross product,
# (3 + 16 * eps) * eps with eps = 2 ** -53 (Shewchuk's ccwerrboundA).
CROSS_ERROR_BOUND = (3.0 + 16.0 * 2.0 ** -53) * 2.0 ** -53
# Below this magnitude the products may lose precision to underflow.
CROSS_MIN_MAGNITUDE = 1e-290


class EmptyInputError(ValueError):
    """Raised when a hull or a pivot is requested for an empty point set."""


class DegenerateInputWarning(UserWarning):
    """All input points are identical or lie on a single line."""


class Orientation(enum.IntEnum):
    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTERCLOCKWISE = 1


@dataclass(frozen=True)
class Point:
    """
    Point in the plane.

    Equality and hashing are exact on both coordinates. Use `isclose`
    for an epsilon-tolerant comparison of noisy data.
    Coordinates must be finite.
    """
    x: float
    y: float

    def __lt__(self, other):
        return (self.x, self.y) < (other.x, other.y)

    def isclose(self, other: 'Point', eps: float = 1e-12) -> bool:
        return abs(self.x - other.x) <= eps and abs(self.y - other.y) <= eps

    def pick_left(self, other: 'Point') -> 'Point':
        """
        Return the lower of two points (min y, then min x).
        `other` is returned when both points are equal.
        """
        if self == other:
            return other
        if self.y != other.y:
            return self if self.y < other.y else other
        return self if self.x < other.x else other

    def orientation(self, b: 'Point', c: 'Point', tol: float = 0.0) -> Orientation:
        """
        Turn direction of the corner self -> b -> c.

        With tol == 0 the sign of the cross product is exact for any finite
        coordinates. With a positive tol, rounded cross products within
        [-tol, tol] are reported as collinear.
        """
        if tol == 0:
            return Orientation(orient(self, b, c))
        if tol < 0:
            raise ValueError(f"Orientation tolerance must be non-negative, got {tol}")

        d = cross(self, b, c)
        if d > tol:
            return Orientation.COUNTERCLOCKWISE
        if d < -tol:
            return Orientation.CLOCKWISE
        return Orientation.COLLINEAR

    def ccw(self, b: 'Point', c: 'Point', tol: float = 0.0) -> bool:
        return self.orientation(b, c, tol) is Orientation.COUNTERCLOCKWISE

    def distance_to(self, other: 'Point') -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def polar_angle_from(self, pivot: 'Point') -> float:
        return math.atan2(self.y - pivot.y, self.x - pivot.x)


@dataclass(frozen=True)
class AngularKey(Point):
    """
    Point annotated with its distance and polar angle relative to a pivot.
    Ordered by angle, ties broken by distance (nearer first).
    """
    distance: float
    angle: float

    @classmethod
    def from_point(cls, point: Point, pivot: Point) -> 'AngularKey':
        return cls(point.x, point.y, point.distance_to(pivot), point.polar_angle_from(pivot))

    def __lt__(self, other):
        return (self.angle, self.distance) < (other.angle, other.distance)

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


def cross(o: Point, a: Point, b: Point) -> float:
    """
    Cross product of segments oa and ob, rounded.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def orient(o: Point, a: Point, b: Point) -> int:
    """
    Exact sign of cross(o, a, b).

    The floating point product is trusted when it is farther from zero
    than its error bound, otherwise the sign is recomputed on rationals.
    """
    left = (a.x - o.x) * (b.y - o.y)
    right = (a.y - o.y) * (b.x - o.x)
    det = left - right
    detsum = abs(left) + abs(right)
    if CROSS_MIN_MAGNITUDE < detsum < math.inf and abs(det) > CROSS_ERROR_BOUND * detsum:
        return 1 if det > 0 else -1

    ox, oy = Fraction(o.x), Fraction(o.y)
    det = (Fraction(a.x) - ox) * (Fraction(b.y) - oy) - (Fraction(a.y) - oy) * (Fraction(b.x) - ox)
    return (det > 0) - (det < 0)


def compare_distance(o: Point, a: Point, b: Point) -> int:
    """
    Exact sign of |ob| - |oa|.
    """
    ox, oy = Fraction(o.x), Fraction(o.y)
    da = (Fraction(a.x) - ox) ** 2 + (Fraction(a.y) - oy) ** 2
    db = (Fraction(b.x) - ox) ** 2 + (Fraction(b.y) - oy) ** 2
    return (db > da) - (db < da)


def same_direction(o: Point, a: Point, b: Point) -> bool:
    """
    For b collinear with segment oa: b lies on the ray from o through a.
    """
    return (a.x - o.x) * (b.x - o.x) + (a.y - o.y) * (b.y - o.y) > 0


def as_points(points: Iterable) -> list[Point]:
    """
    Copy points given as `Point`s, (x, y) pairs or rows of an n x 2 array.
    """
    result = []
    for p in points:
        x, y = (p.x, p.y) if isinstance(p, Point) else p
        x, y = float(x), float(y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Point coordinates must be finite, got ({x}, {y})")
        result.append(Point(x, y))
    return result


def lowest_point(points: list[Point]) -> Point:
    """
    Lowest point (min y, then min x) of a list of points, without copying it.
    """
    if len(points) == 0:
        raise EmptyInputError("cannot select a pivot from an empty point set")

    pivot = points[0]
    for point in points:
        pivot = point.pick_left(pivot)
    return pivot


def select_pivot(points: Iterable) -> Point:
    """
    Lowest point of the set (min y, then min x). Always a hull vertex.
    """
    return lowest_point(as_points(points))


def warn_if_degenerate(hull: list[Point], n_points: int):
    if len(hull) < 3 and n_points > len(hull):
        warnings.warn(
            f"{n_points} points reduce to a degenerate hull of {len(hull)} vertices",
            DegenerateInputWarning,
            stacklevel=3,
        )


def on_segment(p: Point, a: Point, b: Point, tol: float = 0.0) -> bool:
    if a.orientation(b, p, tol) is not Orientation.COLLINEAR:
        return False
    return (
        min(a.x, b.x) <= p.x <= max(a.x, b.x)
        and min(a.y, b.y) <= p.y <= max(a.y, b.y)
    )


def hull_contains(hull: list[Point], point: Point, tol: float = 0.0) -> bool:
    """
    Check that point lies inside or on the boundary of a counterclockwise hull.
    Hulls with one or two vertices are treated as a point and a segment.
    """
    if len(hull) == 0:
        return False
    if len(hull) == 1:
        return hull[0] == point
    if len(hull) == 2:
        return on_segment(point, hull[0], hull[1], tol)

    for i, a in enumerate(hull):
        b = hull[(i + 1) % len(hull)]
        if a.orientation(b, point, tol) is Orientation.CLOCKWISE:
            return False
    return True


def is_convex(hull: list[Point], tol: float = 0.0) -> bool:
    """
    No cyclic triple of a counterclockwise hull turns clockwise.
    """
    n = len(hull)
    if n < 3:
        return True
    return all(
        hull[i].orientation(hull[(i + 1) % n], hull[(i + 2) % n], tol) is not Orientation.CLOCKWISE
        for i in range(n)
    )
