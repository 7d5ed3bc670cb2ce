"""Sequential Jacobi solver."""

import time

import numpy as np

from .base import JacobiSolver
from .datastructures import JacobiResult
from .system import LinearSystem


class SequentialJacobi(JacobiSolver):
    """Single-thread Jacobi solver; the reference for all speedup figures."""

    method = "sequential"

    def __init__(self, **kwargs):
        kwargs.setdefault("num_workers", 1)
        super().__init__(**kwargs)

    def solve(
        self,
        system: LinearSystem,
        tolerance: float | None = None,
        max_iter: int | None = None,
        initial_guess=None,
    ) -> JacobiResult:
        """Solve using sequential Jacobi iteration.

        Every component of round k+1 is computed from round k only: the two
        buffers are swapped after a full sweep, never updated in place.

        Parameters
        ----------
        system : LinearSystem
            System to solve; must have a non-zero diagonal
        tolerance : float, optional
            Stop once max_i |x_new[i] - x_old[i]| <= tolerance
        max_iter : int, optional
            Iteration cap
        initial_guess : array_like, optional
            Starting iterate (zeros if omitted)

        Returns
        -------
        JacobiResult

        Raises
        ------
        SingularPivot
            If a diagonal entry is zero
        DimensionMismatch
            If the initial guess has the wrong length
        InvalidConfiguration
            If tolerance or max_iter is not positive
        """
        tolerance, max_iter, current = self._prepare(system, tolerance, max_iter, initial_guess)

        A = system.coefficients
        b = system.constants
        n = system.size
        nxt = np.empty_like(current)

        iteration = 0
        max_delta = np.inf
        t_start = time.perf_counter()

        # Main iteration loop
        while iteration < max_iter:
            max_delta = self._step(A, b, current, nxt, 0, n)
            iteration += 1
            current, nxt = nxt, current

            # Check convergence
            if max_delta <= tolerance:
                break

        wall_time = time.perf_counter() - t_start

        return self._finish(system, current, iteration, max_delta, tolerance, wall_time)
