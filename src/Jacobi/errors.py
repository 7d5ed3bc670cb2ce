"""Exceptions raised by the Jacobi solvers and the benchmark layer.

Non-convergence is not an error: it is reported through
``JacobiResult.converged``.
"""


class JacobiError(Exception):
    """Base class for all errors raised by this package."""


class InvalidConfiguration(JacobiError, ValueError):
    """Malformed or non-positive size, worker count, tolerance or iteration cap."""


class DimensionMismatch(JacobiError, ValueError):
    """Matrix, right-hand side or vector shapes do not agree."""


class SingularPivot(JacobiError, ZeroDivisionError):
    """A diagonal entry is zero, so the Jacobi update is undefined."""
