"""Speedup measurements of the threaded solver against the sequential one."""

from __future__ import annotations

import math
from collections.abc import Iterable

import pandas as pd

from .datastructures import JacobiResult, SpeedupMeasurement
from .sequential import SequentialJacobi
from .system import LinearSystem
from .threaded import ThreadedJacobi


def compute_speedup(baseline: JacobiResult, measured: JacobiResult) -> float:
    """Baseline time over measured time; infinite if the measured time is zero."""
    if measured.elapsed_ms == 0:
        return math.inf
    return baseline.elapsed_ms / measured.elapsed_ms


class PerformanceEvaluator:
    """Time one sequential baseline and a series of threaded configurations.

    Runs are strictly one after another so that configurations never
    compete for CPU time.

    Parameters
    ----------
    baseline_solver : SequentialJacobi, optional
        Single-thread reference solver (a new one is created if omitted)
    use_numba : bool, default True
        Kernel used for solvers built from plain worker counts
    verbose : bool, default False
        Print one line per timed run

    Examples
    --------
    >>> evaluator = PerformanceEvaluator(use_numba=False)
    >>> measurements = evaluator.evaluate(system, [2, 4], tolerance=1e-8, max_iter=1000)
    >>> [m.num_threads for m in measurements]
    [1, 2, 4]
    """

    def __init__(self, baseline_solver: SequentialJacobi | None = None, use_numba: bool = True, verbose: bool = False):
        if baseline_solver is None:
            baseline_solver = SequentialJacobi(use_numba=use_numba)
        self.baseline_solver = baseline_solver
        self.use_numba = use_numba
        self.verbose = verbose

    def evaluate(
        self,
        system: LinearSystem,
        parallel_configurations: Iterable[int | ThreadedJacobi],
        tolerance: float,
        max_iter: int,
    ) -> list[SpeedupMeasurement]:
        """Benchmark every configuration against the sequential baseline.

        Parameters
        ----------
        system : LinearSystem
            System to solve
        parallel_configurations : iterable of int or ThreadedJacobi
            Worker counts or ready-made solvers, evaluated in the given order
        tolerance : float
            Convergence threshold
        max_iter : int
            Iteration cap

        Returns
        -------
        list[SpeedupMeasurement]
            Baseline first (1 thread, speedup 1.0), then one entry per
            configuration

        Raises
        ------
        InvalidConfiguration, SingularPivot, DimensionMismatch
            Precondition violations abort the whole evaluation
        """
        # Build all solvers first so an invalid worker count fails before any timing
        solvers = [self._as_solver(config) for config in parallel_configurations]

        self._warmup(self.baseline_solver)
        baseline = self.baseline_solver.solve(system, tolerance, max_iter)
        self._log(system, 1, baseline)

        measurements = [SpeedupMeasurement(system.size, 1, baseline, baseline, 1.0)]

        for solver in solvers:
            self._warmup(solver)
            measured = solver.solve(system, tolerance, max_iter)
            self._log(system, solver.num_workers, measured)
            measurements.append(
                SpeedupMeasurement(
                    system.size,
                    solver.num_workers,
                    baseline,
                    measured,
                    compute_speedup(baseline, measured),
                )
            )

        return measurements

    def _as_solver(self, config) -> ThreadedJacobi:
        if isinstance(config, ThreadedJacobi):
            return config
        return ThreadedJacobi(num_workers=config, use_numba=self.use_numba)

    def _warmup(self, solver):
        if solver.config.use_numba:
            solver.warmup()

    def _log(self, system, num_threads, result):
        if self.verbose:
            print(
                f"N={system.size} threads={num_threads}: {result.elapsed_ms:.2f} ms, "
                f"{result.iterations} iterations, converged={result.converged}"
            )


def measurements_to_dataframe(measurements: Iterable[SpeedupMeasurement]) -> pd.DataFrame:
    """Flatten measurements into one row per (size, thread count)."""
    rows = [
        {
            "size": m.size,
            "num_threads": m.num_threads,
            "effective_workers": m.measured.num_workers,
            "method": m.measured.method,
            "wall_time": m.measured.wall_time,
            "elapsed_ms": m.measured.elapsed_ms,
            "iterations": m.measured.iterations,
            "residual_norm": m.measured.residual_norm,
            "converged": m.measured.converged,
            "speedup": m.speedup,
            "baseline_ms": m.baseline.elapsed_ms,
        }
        for m in measurements
    ]
    columns = [
        "size", "num_threads", "effective_workers", "method", "wall_time", "elapsed_ms",
        "iterations", "residual_norm", "converged", "speedup", "baseline_ms",
    ]
    return pd.DataFrame(rows, columns=columns)
