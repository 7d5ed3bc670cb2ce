"""
test_kernels.py - Unit tests for the row-range Jacobi kernels

Run with: pytest tests/test_kernels.py -v
"""

import math

import numpy as np
import pytest

from Jacobi.kernels import jacobi_rows_numba, jacobi_rows_numpy, select_kernel


@pytest.fixture
def small_problem():
    A = np.array([[4.0, 1.0, 1.0], [2.0, 5.0, 1.0], [1.0, 1.0, 3.0]])
    b = np.array([6.0, 8.0, 5.0])
    current = np.array([1.0, -1.0, 0.5])
    return A, b, current


def reference_update(A, b, current):
    n = len(b)
    nxt = np.empty(n)
    for i in range(n):
        s = sum(A[i, j] * current[j] for j in range(n) if j != i)
        nxt[i] = (b[i] - s) / A[i, i]
    return nxt


@pytest.mark.parametrize("kernel", [jacobi_rows_numpy, jacobi_rows_numba], ids=["numpy", "numba"])
class TestRowKernels:
    """Both kernels implement the same per-row update"""

    def test_full_sweep(self, kernel, small_problem):
        A, b, current = small_problem
        nxt = np.zeros(3)

        delta = kernel(A, b, current, nxt, 0, 3)

        expected = reference_update(A, b, current)
        np.testing.assert_allclose(nxt, expected, rtol=1e-14)
        assert delta == pytest.approx(np.max(np.abs(expected - current)))

    def test_only_owned_rows_written(self, kernel, small_problem):
        A, b, current = small_problem
        nxt = np.full(3, -99.0)
        before = current.copy()

        kernel(A, b, current, nxt, 1, 2)

        assert nxt[0] == -99.0
        assert nxt[2] == -99.0
        assert nxt[1] == pytest.approx(reference_update(A, b, current)[1])
        np.testing.assert_array_equal(current, before)

    def test_local_delta_covers_own_rows_only(self, kernel, small_problem):
        A, b, current = small_problem
        expected = reference_update(A, b, current)

        delta = kernel(A, b, current, np.zeros(3), 2, 3)

        assert delta == pytest.approx(abs(expected[2] - current[2]))

    def test_empty_range(self, kernel, small_problem):
        A, b, current = small_problem
        nxt = np.zeros(3)
        assert kernel(A, b, current, nxt, 2, 2) == 0.0
        np.testing.assert_array_equal(nxt, 0.0)

    def test_read_only_inputs(self, kernel, small_problem):
        A, b, current = small_problem
        A.setflags(write=False)
        b.setflags(write=False)
        nxt = np.zeros(3)

        kernel(A, b, current, nxt, 0, 3)

        np.testing.assert_allclose(nxt, reference_update(A, b, current), rtol=1e-14)

    @pytest.mark.filterwarnings("ignore::RuntimeWarning")
    def test_nan_delta_propagates(self, kernel):
        A = np.array([[1.0, 0.0], [0.0, 1.0]])
        b = np.array([1.0, 1.0])
        current = np.array([np.nan, 0.0])

        delta = kernel(A, b, current, np.zeros(2), 0, 2)

        assert math.isnan(delta)


def test_select_kernel():
    assert select_kernel(True) is jacobi_rows_numba
    assert select_kernel(False) is jacobi_rows_numpy
