"""Computational kernels for the Jacobi solvers.

Each kernel updates a contiguous block of rows ``[start, stop)``: it reads
only from ``current`` and writes only ``nxt[start:stop]``, so several
threads can run a kernel concurrently on disjoint row ranges of the same
buffers. Both kernels return the maximum absolute change over their rows.
A NaN change is propagated so a diverging iteration is never reported as
converged.
"""

from __future__ import annotations

import numpy as np
from numba import njit


def jacobi_rows_numpy(
    A: np.ndarray,
    b: np.ndarray,
    current: np.ndarray,
    nxt: np.ndarray,
    start: int,
    stop: int,
) -> float:
    """Jacobi update of rows ``start:stop`` using numpy.

    The off-diagonal sum is computed as the full row product minus the
    diagonal term; the matrix product runs in BLAS, which releases the GIL.

    Parameters
    ----------
    A : np.ndarray
        Coefficient matrix, shape (n, n)
    b : np.ndarray
        Constant vector, shape (n,)
    current : np.ndarray
        Previous iterate (read only), shape (n,)
    nxt : np.ndarray
        Output buffer, only ``nxt[start:stop]`` is written
    start, stop : int
        Half-open row range

    Returns
    -------
    float
        max_i |nxt[i] - current[i]| over the row range

    """
    if stop <= start:
        return 0.0

    rows = A[start:stop]
    diag = np.diagonal(A)[start:stop]
    old = current[start:stop]

    off_diag = rows @ current - diag * old
    new = (b[start:stop] - off_diag) / diag
    nxt[start:stop] = new

    return float(np.max(np.abs(new - old)))


@njit(nogil=True, cache=True)
def jacobi_rows_numba(
    A: np.ndarray,
    b: np.ndarray,
    current: np.ndarray,
    nxt: np.ndarray,
    start: int,
    stop: int,
) -> float:
    """Jacobi update of rows ``start:stop`` with explicit loops.

    Compiled without the GIL so worker threads execute it in parallel.
    """
    n = current.shape[0]
    local_max = 0.0

    for i in range(start, stop):
        s = 0.0
        for j in range(n):
            if j != i:
                s += A[i, j] * current[j]

        value = (b[i] - s) / A[i, i]
        nxt[i] = value

        delta = abs(value - current[i])
        # NaN compares False, keep it sticky
        if delta > local_max or delta != delta:
            if local_max == local_max:
                local_max = delta

    return local_max


def select_kernel(use_numba: bool):
    """Return the row-range kernel for the requested backend."""
    if use_numba:
        return jacobi_rows_numba
    return jacobi_rows_numpy
