"""Command-line interface for the Jacobi speedup benchmark.

This module provides the argument parser shared by the ``jacobi-bench``
entry point and the experiment scripts.
"""

import os
from argparse import ArgumentParser, ArgumentTypeError, Namespace
from typing import List

from Jacobi.datastructures import BenchmarkConfig
from Jacobi.errors import InvalidConfiguration


def int_list(value: str) -> List[int]:
    """Parse a comma separated list of integers, e.g. ``"200,500,1000"``."""
    tokens = [token.strip() for token in value.split(",") if token.strip()]
    if not tokens:
        raise ArgumentTypeError(f"expected a comma separated list of integers, got '{value}'")
    try:
        return [int(token) for token in tokens]
    except ValueError as exc:
        raise ArgumentTypeError(f"could not parse '{value}' as a list of integers") from exc


def create_parser(description: str = "Sequential vs. threaded Jacobi benchmark") -> ArgumentParser:
    """Create argument parser for the benchmark.

    Parameters
    ----------
    description : str
        Parser description

    Returns
    -------
    ArgumentParser
        Configured argument parser

    Examples
    --------
    >>> parser = create_parser()
    >>> options = parser.parse_args(["--sizes", "50,100", "--threads", "2,4", "--seed", "42"])
    >>> options.sizes
    [50, 100]
    """
    parser = ArgumentParser(description=description)

    # Problem sizes
    parser.add_argument(
        "--sizes",
        type=int_list,
        default=[200, 500, 1000],
        help="Comma separated matrix sizes to benchmark (default: 200,500,1000).",
    )

    # Worker counts
    parser.add_argument(
        "--threads",
        type=int_list,
        default=[1, os.cpu_count() or 1],
        help="Comma separated worker thread counts; 1 is always included (default: 1,<cpu count>).",
    )

    # Convergence tolerance
    parser.add_argument(
        "--tolerance",
        type=float,
        default=1e-8,
        help="Convergence threshold on the maximum per-component change.",
    )

    # Iteration control
    parser.add_argument(
        "--max-iter",
        type=int,
        default=10_000,
        help="Maximum number of iterations.",
    )

    # Reproducibility
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Base random seed; the system of size n is generated with seed + n.",
    )

    # Kernel
    parser.add_argument(
        "--no-numba",
        dest="use_numba",
        action="store_false",
        help="Use the numpy kernel instead of the numba JIT kernel.",
    )

    # Output file
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Save the measurements to this parquet file.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print progress for every timed run.",
    )

    return parser


def parse_benchmark_config(options: Namespace, parser: ArgumentParser | None = None) -> BenchmarkConfig:
    """Turn parsed options into a validated BenchmarkConfig.

    If ``parser`` is given, invalid values are reported through
    ``parser.error`` (which exits); otherwise InvalidConfiguration is raised.
    """
    try:
        return BenchmarkConfig(
            sizes=tuple(options.sizes),
            threads=tuple(options.threads),
            tolerance=options.tolerance,
            max_iter=options.max_iter,
            seed=options.seed,
            use_numba=options.use_numba,
        )
    except InvalidConfiguration as exc:
        if parser is None:
            raise
        parser.error(str(exc))
