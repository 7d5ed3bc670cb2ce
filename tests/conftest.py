"""Shared fixtures for the solver tests."""

import numpy as np
import pytest

from Jacobi import LinearSystem, setup_benchmark_problem


@pytest.fixture(params=[False, True], ids=["numpy", "numba"])
def use_numba(request):
    """Run a test with both row kernels."""
    return request.param


@pytest.fixture
def scenario_a():
    """2x2 system with exact solution [1, 1]."""
    return LinearSystem([[10.0, 1.0], [1.0, 10.0]], [11.0, 11.0])


@pytest.fixture(scope="session")
def seeded_system():
    """Generated 50x50 diagonally dominant system, seed 42."""
    return setup_benchmark_problem(50, seed=42)


@pytest.fixture
def zero_pivot_system():
    """System with a zero on the main diagonal."""
    return LinearSystem([[4.0, 1.0, 0.0], [1.0, 0.0, 1.0], [0.0, 1.0, 4.0]], [1.0, 2.0, 3.0])


@pytest.fixture
def tridiagonal_system():
    """Strictly diagonally dominant tridiagonal system of size 17 with known solution."""
    n = 17
    A = 4.0 * np.eye(n) - np.eye(n, k=1) - np.eye(n, k=-1)
    x_true = np.linspace(-1.0, 1.0, n)
    return LinearSystem(A, A @ x_true), x_true
