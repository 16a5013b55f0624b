import logging

from typing import Iterable
from geometry import (
    Orientation,
    Point,
    as_points,
    compare_distance,
    lowest_point,
    same_direction,
    warn_if_degenerate,
)

logger = logging.getLogger(__name__)


class GiftWrapHull:
    """
    Jarvis march: starting from the pivot, repeatedly pick the point that leaves
    every other point on the left of (or on) the current edge, until the walk
    returns to the pivot. The input order is left untouched.

    Time complexity: O(n*h), where h is the number of hull vertices.
    """

    def __init__(self, tol: float = 0.0):
        if tol < 0:
            raise ValueError(f"Orientation tolerance must be non-negative, got {tol}")
        self.tol: float = tol

    def next_vertex(self, current: Point, points: list[Point]) -> Point | None:
        """
        Most clockwise point as seen from current; the farthest one among points
        on the same ray. Returns None when every point coincides with current.
        """
        candidate = None
        for q in points:
            if q == current:
                continue
            if candidate is None:
                candidate = q
                continue

            turn = current.orientation(candidate, q, self.tol)
            if turn is Orientation.CLOCKWISE or (
                turn is Orientation.COLLINEAR
                and same_direction(current, candidate, q)
                and compare_distance(current, candidate, q) > 0
            ):
                candidate = q
        return candidate

    def compute(self, points: Iterable) -> list[Point]:
        points = as_points(points)
        pivot = lowest_point(points)
        logger.debug("jarvis march: %d points, pivot %s", len(points), pivot)

        hull = [pivot]
        visited = {pivot}
        current = pivot
        while True:
            candidate = self.next_vertex(current, points)
            if candidate is None or candidate == pivot:
                break
            if candidate in visited:
                # a tolerant orientation is not transitive, the walk may skip the pivot
                logger.debug("jarvis march: closed at %s instead of the pivot", candidate)
                break
            hull.append(candidate)
            visited.add(candidate)
            current = candidate

        logger.debug("jarvis march: hull of %d vertices", len(hull))
        warn_if_degenerate(hull, len(points))
        return hull
