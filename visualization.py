import itertools

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from geometry import Point


def plot_points(points: list[Point], ax: Axes, **kwargs):
    x = [p.x for p in points]
    y = [p.y for p in points]
    ax.scatter(x, y, **kwargs)


def plot_hull(hull: list[Point], ax: Axes, color: str = 'r'):
    """
    Draw the closed hull polygon and mark the pivot (first vertex).
    """
    if not hull:
        return
    closed = hull + [hull[0]] if len(hull) > 2 else hull
    ax.plot([p.x for p in closed], [p.y for p in closed], c=color)
    ax.scatter([p.x for p in hull], [p.y for p in hull], c=color, s=12, zorder=3)
    ax.scatter([hull[0].x], [hull[0].y], c='k', marker='x', s=40, zorder=4)


def plot_hulls(points: list[Point], hulls: dict[str, list[Point]]) -> Figure:
    """
    One panel per algorithm with the input points and the computed hull.
    """
    clrs = ['r', 'g', 'b', 'm', 'c', 'y']
    color_cycle = itertools.cycle(clrs)

    fig = Figure(figsize=(6 * max(len(hulls), 1), 6))
    axes = fig.subplots(1, max(len(hulls), 1), squeeze=False)[0]
    for ax, (name, hull) in zip(axes, hulls.items()):
        plot_points(points, ax, s=2, c='gray')
        plot_hull(hull, ax, color=next(color_cycle))
        ax.set_title(f"{name}: {len(hull)} of {len(points)} points")
        ax.set_aspect('equal', adjustable='datalim')
        ax.grid(True, alpha=0.3)
    return fig
