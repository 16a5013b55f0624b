import functools
import logging

from typing import Iterable
from geometry import (
    AngularKey,
    Orientation,
    Point,
    as_points,
    compare_distance,
    lowest_point,
    orient,
    warn_if_degenerate,
)

logger = logging.getLogger(__name__)


class AngularSweepHull:
    """
    Graham scan: sort points by polar angle around the pivot
    and sweep them with a stack, popping every non-left turn.

    Time complexity: O(n*log(n)).
    """

    def __init__(self, tol: float = 0.0):
        if tol < 0:
            raise ValueError(f"Orientation tolerance must be non-negative, got {tol}")
        self.tol: float = tol

    @staticmethod
    def compare_around(pivot: Point):
        """
        Comparator of points around the pivot: counterclockwise first, nearer first on one ray.
        Every point lies in the half-plane above the pivot, so the order is total.
        """
        def compare(a: Point, b: Point) -> int:
            turn = orient(pivot, a, b)
            if turn != 0:
                return -turn
            return -compare_distance(pivot, a, b)
        return compare

    def angular_order(self, points: list[Point], pivot: Point) -> list[AngularKey]:
        """
        Sort points other than the pivot by angle, then distance.
        Of the points lying on one ray from the pivot only the farthest is kept,
        nearer ones can never be hull vertices.
        """
        keys = sorted(AngularKey.from_point(p, pivot) for p in points if p != pivot)
        # atan2 gets the order almost right, the exact comparator settles rounding
        keys.sort(key=functools.cmp_to_key(self.compare_around(pivot)))

        ordered: list[AngularKey] = []
        for key in keys:
            if ordered and pivot.orientation(ordered[-1], key, self.tol) is Orientation.COLLINEAR:
                if compare_distance(pivot, ordered[-1], key) > 0:
                    ordered[-1] = key
                continue
            ordered.append(key)
        return ordered

    def compute(self, points: Iterable) -> list[Point]:
        points = as_points(points)
        pivot = lowest_point(points)
        logger.debug("graham scan: %d points, pivot %s", len(points), pivot)

        ordered = [key.point for key in self.angular_order(points, pivot)]

        # identical points or a single line through the pivot
        if len(ordered) <= 1:
            hull = [pivot] + ordered
            warn_if_degenerate(hull, len(points))
            return hull

        stack = [pivot, ordered[0]]
        for p in ordered[1:]:
            while len(stack) >= 2 and not stack[-2].ccw(stack[-1], p, self.tol):
                stack.pop()
            stack.append(p)

        logger.debug("graham scan: hull of %d vertices", len(stack))
        warn_if_degenerate(stack, len(points))
        return stack
