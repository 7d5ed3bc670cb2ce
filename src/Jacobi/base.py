"""Base class for Jacobi solvers."""

from __future__ import annotations

import numpy as np

from .datastructures import JacobiResult, RuntimeConfig, require_positive_float, require_positive_int
from .errors import DimensionMismatch, SingularPivot
from .kernels import select_kernel
from .system import LinearSystem


class JacobiSolver:
    """Base class for all Jacobi solvers.

    Provides shared validation, kernel selection and result bookkeeping.
    Subclasses override solve() to implement a specific strategy.

    Parameters
    ----------
    tolerance : float, default 1e-8
        Default convergence threshold on the maximum per-component change
    max_iter : int, default 10000
        Default iteration cap
    use_numba : bool, default True
        Use the numba JIT kernel instead of the numpy kernel
    verbose : bool, default False
        Print convergence info
    """

    method = ""

    def __init__(self, **kwargs):
        # Extract verbose before passing to RuntimeConfig
        self.verbose = kwargs.pop("verbose", False)
        self.config = RuntimeConfig(**kwargs)
        self.config.method = self.method
        self._step = select_kernel(self.config.use_numba)

    def solve(self, system, tolerance=None, max_iter=None, initial_guess=None) -> JacobiResult:
        """Solve the linear system. Subclasses must override this."""
        raise NotImplementedError("Subclass must implement solve()")

    @property
    def num_workers(self) -> int:
        return self.config.num_workers

    def warmup(self, n: int = 4) -> None:
        """Warmup the kernel (trigger JIT compilation) on a tiny system."""
        A = np.full((n, n), 1.0) + np.eye(n) * n
        A.setflags(write=False)
        b = np.ones(n)
        b.setflags(write=False)
        current = np.zeros(n)
        nxt = np.zeros(n)

        for _ in range(3):
            self._step(A, b, current, nxt, 0, n)
            current, nxt = nxt, current

    # ============================================================================
    # Internal methods
    # ============================================================================

    def _prepare(self, system: LinearSystem, tolerance, max_iter, initial_guess):
        """Validate the inputs of a solve call before any iteration runs.

        Returns
        -------
        tuple
            (tolerance, max_iter, initial iterate as a fresh writable array)
        """
        tolerance = require_positive_float(
            self.config.tolerance if tolerance is None else tolerance, "tolerance"
        )
        max_iter = require_positive_int(
            self.config.max_iter if max_iter is None else max_iter, "max_iter"
        )

        n = system.size
        if initial_guess is None:
            current = np.zeros(n)
        else:
            current = np.array(initial_guess, dtype=np.float64, copy=True)
            if current.shape != (n,):
                raise DimensionMismatch(
                    f"Initial guess must have shape ({n},), got {current.shape}"
                )

        if system.has_zero_on_diagonal():
            raise SingularPivot("Jacobi iteration requires a non-zero main diagonal")

        return tolerance, max_iter, current

    def _finish(
        self,
        system: LinearSystem,
        solution: np.ndarray,
        iterations: int,
        max_delta: float,
        tolerance: float,
        wall_time: float,
        num_workers: int = 1,
    ) -> JacobiResult:
        """Build the result and report convergence."""
        converged = bool(max_delta <= tolerance)

        if self.verbose:
            if converged:
                print(f"Converged at iteration {iterations} (max delta: {max_delta:.2e})")
            else:
                print(f"Did not converge after {iterations} iterations (max delta: {max_delta:.2e})")

        solution = solution.copy()
        residual = system.residual_norm(solution)
        solution.setflags(write=False)

        return JacobiResult(
            solution=solution,
            iterations=iterations,
            residual_norm=residual,
            wall_time=wall_time,
            converged=converged,
            final_delta=float(max_delta),
            method=self.config.method,
            num_workers=num_workers,
        )
