import logging
import time

from dataclasses import dataclass
from typing import Callable, Iterable
from convex_hull_sweep import AngularSweepHull
from convex_hull_wrap import GiftWrapHull
from geometry import Point, as_points

logger = logging.getLogger(__name__)


ALGORITHMS = {
    "graham_scan": AngularSweepHull,
    "jarvis_march": GiftWrapHull,
}


@dataclass(frozen=True)
class Timing:
    """
    Elapsed wall-clock duration in several units.
    """
    seconds: float

    @property
    def milliseconds(self) -> float:
        return self.seconds * 1e3

    @property
    def nanoseconds(self) -> float:
        return self.seconds * 1e9


@dataclass
class BenchmarkResult:
    timing: Timing
    hull: list[Point]


def benchmark_convex_hull_algorithms(
    points: Iterable,
    algorithms: dict[str, Callable] | None = None,
    repeat: int = 1,
    tol: float = 0.0,
) -> dict[str, BenchmarkResult]:
    """
    Run every algorithm on the same input and keep the best time out of `repeat` runs.
    `algorithms` maps a name to a hull class taking `tol`.
    """
    if repeat < 1:
        raise ValueError(f"repeat must be positive, got {repeat}")
    if algorithms is None:
        algorithms = ALGORITHMS

    points = as_points(points)
    results = {}
    for name, algo_class in algorithms.items():
        algo = algo_class(tol=tol)

        best = float('inf')
        hull = []
        for _ in range(repeat):
            start = time.perf_counter()
            hull = algo.compute(points)
            best = min(best, time.perf_counter() - start)

        results[name] = BenchmarkResult(Timing(best), hull)
        logger.info("%s: %.6f s, %d points, %d hull vertices", name, best, len(points), len(hull))

    return results
