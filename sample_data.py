import math

import numpy as np

from geometry import Point, as_points

DISTRIBUTIONS = ("uniform", "circle", "gaussian", "clusters", "convex", "polygon")


def generate_points(
    n: int,
    distribution: str = "uniform",
    seed: int | None = 42,
    n_vertices: int = 3,
) -> list[Point]:
    """
    Random point sets for benchmarking.

    `convex` puts every point on a circle, so the hull has n vertices.
    `polygon` fills a regular polygon with `n_vertices` corners (corners included),
    so the hull has exactly `n_vertices` vertices.
    """
    rng = np.random.default_rng(seed)

    if distribution == "uniform":
        xs = rng.uniform(0, 1000, n)
        ys = rng.uniform(0, 1000, n)
    elif distribution == "circle":
        angle = rng.uniform(0, 2 * np.pi, n)
        r = 500 * np.sqrt(rng.uniform(0, 1, n))
        xs = 500 + r * np.cos(angle)
        ys = 500 + r * np.sin(angle)
    elif distribution == "gaussian":
        xs = rng.normal(500, 150, n)
        ys = rng.normal(500, 150, n)
    elif distribution == "clusters":
        n_clusters = 5
        centers = rng.uniform(100, 900, (n_clusters, 2))
        labels = rng.integers(0, n_clusters, n)
        xs = rng.normal(centers[labels, 0], 50)
        ys = rng.normal(centers[labels, 1], 50)
    elif distribution == "convex":
        angle = np.sort(rng.uniform(0, 2 * np.pi, n))
        xs = 500 + 500 * np.cos(angle)
        ys = 500 + 500 * np.sin(angle)
    elif distribution == "polygon":
        return polygon_points(n, n_vertices, rng)
    else:
        raise ValueError(f"Unknown distribution: {distribution!r}, expected one of {DISTRIBUTIONS}")

    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def polygon_points(n: int, n_vertices: int, rng: np.random.Generator) -> list[Point]:
    """
    Corners of a regular polygon followed by random points inside it.
    Interior points are convex combinations of the center and two adjacent
    corners, shrunk slightly so none of them lands on an edge.
    """
    if n_vertices < 3:
        raise ValueError(f"A polygon needs at least 3 vertices, got {n_vertices}")
    if n < n_vertices:
        raise ValueError(f"Cannot place {n_vertices} corners with only {n} points")

    phi = 2 * np.pi * np.arange(n_vertices) / n_vertices
    corners = np.column_stack((500 + 500 * np.cos(phi), 500 + 500 * np.sin(phi)))

    m = n - n_vertices
    sector = rng.integers(0, n_vertices, m)
    u, v = rng.uniform(0, 1, m), rng.uniform(0, 1, m)
    flip = u + v > 1
    u[flip], v[flip] = 1 - u[flip], 1 - v[flip]
    u, v = 0.95 * u, 0.95 * v

    a = corners[sector]
    b = corners[(sector + 1) % n_vertices]
    inner = 500 + u[:, None] * (a - 500) + v[:, None] * (b - 500)

    return as_points(np.vstack((corners, inner)))


def load_points(filename: str) -> list[Point]:
    """
    Read points from a text file: number of points on the first line,
    then one "x y" pair per line.
    """
    points = []
    with open(filename, 'r', encoding='utf-8') as f:
        header = f.readline().strip()
        try:
            n = int(header)
        except ValueError:
            raise ValueError(f"{filename}: expected the number of points, got {header!r}") from None

        for line_no, line in enumerate(f, start=2):
            line = line.strip()
            if not line:
                continue
            try:
                x, y = map(float, line.split())
            except ValueError:
                raise ValueError(f"{filename}:{line_no}: expected 'x y', got {line!r}") from None
            if not (math.isfinite(x) and math.isfinite(y)):
                raise ValueError(f"{filename}:{line_no}: coordinates must be finite, got {line!r}")
            points.append(Point(x, y))

    if len(points) != n:
        raise ValueError(f"{filename}: header declares {n} points, found {len(points)}")
    return points


def save_points(filename: str, points) -> None:
    points = as_points(points)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(f"{len(points)}\n")
        for p in points:
            f.write(f"{p.x!r} {p.y!r}\n")
