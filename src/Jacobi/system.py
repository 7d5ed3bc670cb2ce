"""Dense linear system ``Ax = b`` used as input by all solvers."""

from __future__ import annotations

import math

import numpy as np

from .errors import DimensionMismatch

# Smallest positive double; anything below it on the diagonal is a zero pivot
_TINY = np.nextafter(0.0, 1.0)


def _frozen_copy(values, ndim: int, name: str) -> np.ndarray:
    array = np.array(values, dtype=np.float64, order="C", copy=True)
    if array.ndim != ndim:
        raise DimensionMismatch(f"{name} must be {ndim}-dimensional, got shape {array.shape}")
    array.setflags(write=False)
    return array


class LinearSystem:
    """Immutable square system of linear equations.

    The coefficient matrix and the constant vector are copied into private,
    read-only, C-contiguous float64 buffers. Operations that would modify
    the system return a new instance instead.

    Parameters
    ----------
    coefficients : array_like
        Square matrix A, shape (n, n)
    constants : array_like
        Right-hand side b, shape (n,)

    Raises
    ------
    DimensionMismatch
        If A is not square, is empty, or b does not have length n

    Examples
    --------
    >>> system = LinearSystem([[10.0, 1.0], [1.0, 10.0]], [11.0, 11.0])
    >>> system.residual_norm([1.0, 1.0])
    0.0

    """

    __slots__ = ("_coefficients", "_constants")

    def __init__(self, coefficients, constants):
        A = _frozen_copy(coefficients, 2, "coefficients")
        b = _frozen_copy(constants, 1, "constants")

        rows, cols = A.shape
        if rows != cols:
            raise DimensionMismatch(f"Coefficient matrix must be square, got shape {A.shape}")
        if rows == 0:
            raise DimensionMismatch("A linear system needs at least one equation")
        if b.shape[0] != rows:
            raise DimensionMismatch(
                f"Constant vector has length {b.shape[0]}, expected {rows}"
            )

        self._coefficients = A
        self._constants = b

    def __repr__(self):
        return f"LinearSystem(size={self.size})"

    @property
    def coefficients(self) -> np.ndarray:
        return self._coefficients

    @property
    def constants(self) -> np.ndarray:
        return self._constants

    @property
    def size(self) -> int:
        return self._constants.shape[0]

    @property
    def diagonal(self) -> np.ndarray:
        return np.diagonal(self._coefficients)

    def has_zero_on_diagonal(self) -> bool:
        """Return True if any pivot a_ii is numerically zero."""
        return bool(np.any(np.abs(self.diagonal) < _TINY))

    def is_diagonally_dominant(self) -> bool:
        """Row-wise (weak) diagonal dominance: |a_ii| >= sum_{j != i} |a_ij|."""
        magnitudes = np.abs(self._coefficients)
        diag = np.diagonal(magnitudes)
        off_diag = magnitudes.sum(axis=1) - diag
        return bool(np.all(diag >= off_diag))

    def multiply(self, vector) -> np.ndarray:
        """Matrix-vector product A @ vector."""
        x = self._check_vector(vector, "vector")
        return self._coefficients @ x

    def residual_norm(self, solution) -> float:
        """Euclidean norm of Ax - b for a candidate solution x."""
        r = self.multiply(solution) - self._constants
        return math.sqrt(float(np.dot(r, r)))

    def copy(self) -> LinearSystem:
        """Deep copy of the system (no buffers are shared)."""
        return LinearSystem(self._coefficients, self._constants)

    def with_constants(self, constants) -> LinearSystem:
        """Same coefficient matrix with a different right-hand side."""
        return LinearSystem(self._coefficients, constants)

    def _check_vector(self, vector, name: str) -> np.ndarray:
        x = np.asarray(vector, dtype=np.float64)
        if x.shape != (self.size,):
            raise DimensionMismatch(
                f"{name} must have shape ({self.size},), got {x.shape}"
            )
        return x
