import argparse
import logging
import os
import sys

from benchmark import ALGORITHMS, benchmark_convex_hull_algorithms
from geometry import EmptyInputError
from log_setup import setup_logging
from sample_data import DISTRIBUTIONS, generate_points, load_points

logger = logging.getLogger(__name__)


def non_negative_float(value: str) -> float:
    tol = float(value)
    if not tol >= 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative number, got {value}")
    return tol


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark convex hull algorithms on a 2D point set")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", type=str, help="Point file: count on the first line, then 'x y' per line.")
    source.add_argument("--generate", type=int, metavar="N", help="Generate N random points.")
    parser.add_argument("--distribution", type=str, default="uniform", choices=DISTRIBUTIONS,
                        help="Distribution of generated points.")
    parser.add_argument("--vertices", type=int, default=3,
                        help="Number of polygon corners for the 'polygon' distribution.")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for generated points.")
    parser.add_argument("--algorithm", type=str, default="all", choices=[*ALGORITHMS, "all"],
                        help="Algorithm to run.")
    parser.add_argument("--repeat", type=int, default=1, help="Runs per algorithm, the best time is reported.")
    parser.add_argument("--tol", type=non_negative_float, default=0.0,
                        help="Orientation tolerance, 0 for exact comparisons.")
    parser.add_argument("--plot", type=str, help="Save a picture of the hulls to this file.")
    parser.add_argument("--log-file", type=str, help="Also write the log to this file.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    try:
        if args.input:
            points = load_points(args.input)
            logger.info("Loaded %d points from %s", len(points), os.path.basename(args.input))
        else:
            points = generate_points(args.generate, args.distribution, seed=args.seed, n_vertices=args.vertices)
            logger.info("Generated %d points (%s)", len(points), args.distribution)

        algorithms = ALGORITHMS if args.algorithm == "all" else {args.algorithm: ALGORITHMS[args.algorithm]}
        results = benchmark_convex_hull_algorithms(points, algorithms, repeat=args.repeat, tol=args.tol)
    except EmptyInputError as e:
        logger.error("Nothing to compute: %s", e)
        return 1
    except (OSError, ValueError) as e:
        logger.error("Invalid input: %s", e)
        return 1

    for name, res in results.items():
        print(f"{name}: {res.timing.seconds:.6f} s, {len(res.hull)} hull vertices")

    if args.plot:
        from visualization import plot_hulls

        fig = plot_hulls(points, {name: res.hull for name, res in results.items()})
        fig.savefig(args.plot, dpi=300, bbox_inches='tight')
        logger.info("Saved plot to %s", args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
