"""Data structures for solver configuration, results and benchmark settings."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field

import numpy as np

from .errors import InvalidConfiguration


def _default_threads() -> tuple[int, ...]:
    return (1, os.cpu_count() or 1)


def require_positive_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
        raise InvalidConfiguration(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def require_positive_float(value, name: str) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfiguration(f"{name} must be a positive number, got {value!r}") from exc
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidConfiguration(f"{name} must be a positive number, got {value!r}")
    return value


@dataclass
class RuntimeConfig:
    """Solver configuration shared by the sequential and threaded solvers."""
    # Stopping criterion
    tolerance: float = 1e-8
    max_iter: int = 10_000

    # Execution
    num_workers: int = 1
    use_numba: bool = True
    method: str = ""


@dataclass(frozen=True, eq=False)
class JacobiResult:
    """Outcome of a single solve call.

    Attributes
    ----------
    solution : np.ndarray
        Read-only copy of the final iterate
    iterations : int
        Rounds actually performed (the converging round is counted)
    residual_norm : float
        ||Ax - b||_2 of ``solution``, recomputed from the system
    wall_time : float
        Elapsed wall-clock time in seconds
    converged : bool
        Whether the last maximum per-component delta was within tolerance
    """
    solution: np.ndarray
    iterations: int
    residual_norm: float
    wall_time: float
    converged: bool
    final_delta: float = math.inf
    method: str = ""
    num_workers: int = 1

    @property
    def elapsed_ms(self) -> float:
        return self.wall_time * 1000.0


@dataclass(frozen=True, eq=False)
class SpeedupMeasurement:
    """Timing of one worker count against the single-thread baseline."""
    size: int
    num_threads: int
    baseline: JacobiResult
    measured: JacobiResult
    speedup: float


@dataclass
class BenchmarkConfig:
    """Which systems and worker counts to benchmark.

    Sizes and thread counts are normalized to sorted, de-duplicated tuples
    and a thread count of 1 is always present.
    """
    sizes: tuple[int, ...] = (200, 500, 1000)
    threads: tuple[int, ...] = field(default_factory=_default_threads)
    tolerance: float = 1e-8
    max_iter: int = 10_000
    seed: int | None = None
    use_numba: bool = True
    min_diagonal_gap: float = 5.0

    def __post_init__(self):
        if not self.sizes:
            raise InvalidConfiguration("At least one matrix size is required")
        if not self.threads:
            raise InvalidConfiguration("At least one thread count is required")

        sizes = {require_positive_int(s, "size") for s in self.sizes}
        threads = {require_positive_int(t, "thread count") for t in self.threads}
        threads.add(1)

        self.sizes = tuple(sorted(sizes))
        self.threads = tuple(sorted(threads))
        self.tolerance = require_positive_float(self.tolerance, "tolerance")
        self.max_iter = require_positive_int(self.max_iter, "max_iter")
        self.min_diagonal_gap = require_positive_float(self.min_diagonal_gap, "min_diagonal_gap")
        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, (int, np.integer)):
                raise InvalidConfiguration(f"seed must be an integer, got {self.seed!r}")
            self.seed = int(self.seed)

    @property
    def parallel_threads(self) -> tuple[int, ...]:
        """Thread counts benchmarked against the baseline (all except 1)."""
        return tuple(t for t in self.threads if t > 1)
