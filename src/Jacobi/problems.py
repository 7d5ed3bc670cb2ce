"""Test problems for the Jacobi solvers.

Random systems are drawn from an explicitly passed ``numpy.random.Generator``.
Unseeded calls share one process-wide default generator; reproducible calls
get their own generator from ``rng_for_size``.
"""

from __future__ import annotations

import numpy as np

from .datastructures import require_positive_float, require_positive_int
from .system import LinearSystem

_DEFAULT_RNG = np.random.default_rng()


def default_rng() -> np.random.Generator:
    """Process-wide generator used when no seed is given."""
    return _DEFAULT_RNG


def rng_for_size(seed: int | None, size: int) -> np.random.Generator:
    """Generator for the benchmark system of a given size.

    With a seed the generator is seeded with ``seed + size`` so every size
    gets a different but reproducible system.

    Examples
    --------
    >>> a = diagonally_dominant_system(5, rng=rng_for_size(42, 5))
    >>> b = diagonally_dominant_system(5, rng=rng_for_size(42, 5))
    >>> bool((a.coefficients == b.coefficients).all())
    True
    """
    if seed is None:
        return _DEFAULT_RNG
    # Negative sums wrap to 64 bits, numpy only accepts non-negative seeds
    return np.random.default_rng((seed + size) & 0xFFFF_FFFF_FFFF_FFFF)


def diagonally_dominant_system(
    size: int,
    min_diagonal_gap: float = 5.0,
    rng: np.random.Generator | None = None,
) -> LinearSystem:
    """Generate a random strictly diagonally dominant system.

    Off-diagonal entries are uniform in [-10, 10), each diagonal entry is
    the sum of the absolute off-diagonal entries of its row plus
    ``min_diagonal_gap``, and the constants are uniform in [-20, 20).

    Parameters
    ----------
    size : int
        Number of equations n
    min_diagonal_gap : float, default 5.0
        Margin by which |a_ii| exceeds the off-diagonal row sum
    rng : np.random.Generator, optional
        Random source (process-wide default if omitted)

    Returns
    -------
    LinearSystem

    Raises
    ------
    InvalidConfiguration
        If size or min_diagonal_gap is not positive
    """
    size = require_positive_int(size, "size")
    min_diagonal_gap = require_positive_float(min_diagonal_gap, "min_diagonal_gap")
    if rng is None:
        rng = _DEFAULT_RNG

    A = rng.uniform(-10.0, 10.0, size=(size, size))
    np.fill_diagonal(A, 0.0)
    np.fill_diagonal(A, np.abs(A).sum(axis=1) + min_diagonal_gap)
    b = rng.uniform(-20.0, 20.0, size=size)

    return LinearSystem(A, b)


def setup_benchmark_problem(size: int, seed: int | None = None, min_diagonal_gap: float = 5.0) -> LinearSystem:
    """System used by the benchmark for one matrix size."""
    return diagonally_dominant_system(size, min_diagonal_gap, rng=rng_for_size(seed, size))
