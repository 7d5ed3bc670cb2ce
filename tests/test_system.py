"""
test_system.py - Unit tests for LinearSystem

Run with: pytest tests/test_system.py -v
"""

import math

import numpy as np
import pytest

from Jacobi import DimensionMismatch, LinearSystem


class TestConstruction:
    """Validation of the matrix and constant vector"""

    def test_non_square_matrix(self):
        with pytest.raises(DimensionMismatch):
            LinearSystem([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], [1.0, 2.0])

    def test_constants_length_mismatch(self):
        with pytest.raises(DimensionMismatch):
            LinearSystem([[1.0, 0.0], [0.0, 1.0]], [1.0, 2.0, 3.0])

    def test_wrong_dimensionality(self):
        with pytest.raises(DimensionMismatch):
            LinearSystem([1.0, 2.0], [1.0, 2.0])
        with pytest.raises(DimensionMismatch):
            LinearSystem([[1.0]], [[1.0]])

    def test_empty_system(self):
        with pytest.raises(DimensionMismatch):
            LinearSystem(np.zeros((0, 0)), np.zeros(0))

    def test_dimension_mismatch_is_value_error(self):
        """Callers catching ValueError also see DimensionMismatch"""
        with pytest.raises(ValueError):
            LinearSystem([[1.0, 2.0]], [1.0])


class TestImmutability:
    """The system owns read-only copies of its buffers"""

    def test_buffers_are_read_only(self, scenario_a):
        with pytest.raises(ValueError):
            scenario_a.coefficients[0, 0] = 0.0
        with pytest.raises(ValueError):
            scenario_a.constants[0] = 0.0

    def test_caller_arrays_not_aliased(self):
        A = np.array([[2.0, 1.0], [1.0, 2.0]])
        b = np.array([3.0, 3.0])
        system = LinearSystem(A, b)

        A[0, 0] = 100.0
        b[0] = 100.0

        assert system.coefficients[0, 0] == 2.0
        assert system.constants[0] == 3.0

    def test_layout(self, scenario_a):
        assert scenario_a.coefficients.dtype == np.float64
        assert scenario_a.coefficients.flags["C_CONTIGUOUS"]
        assert scenario_a.size == 2

    def test_copy_is_independent(self, scenario_a):
        clone = scenario_a.copy()
        assert clone is not scenario_a
        assert not np.shares_memory(clone.coefficients, scenario_a.coefficients)
        np.testing.assert_array_equal(clone.coefficients, scenario_a.coefficients)
        np.testing.assert_array_equal(clone.constants, scenario_a.constants)

    def test_with_constants(self, scenario_a):
        other = scenario_a.with_constants([10.0, 1.0])
        np.testing.assert_array_equal(other.coefficients, scenario_a.coefficients)
        np.testing.assert_array_equal(other.constants, [10.0, 1.0])
        np.testing.assert_array_equal(scenario_a.constants, [11.0, 11.0])

        with pytest.raises(DimensionMismatch):
            scenario_a.with_constants([1.0])


class TestQueries:
    """Diagonal checks, products and residuals"""

    def test_zero_on_diagonal(self, zero_pivot_system, scenario_a):
        assert zero_pivot_system.has_zero_on_diagonal()
        assert not scenario_a.has_zero_on_diagonal()

    def test_tiny_diagonal_is_not_zero(self):
        system = LinearSystem([[1e-300, 0.0], [0.0, 1.0]], [1.0, 1.0])
        assert not system.has_zero_on_diagonal()

    def test_diagonal_dominance(self, scenario_a):
        assert scenario_a.is_diagonally_dominant()
        assert not LinearSystem([[1.0, 2.0], [2.0, 1.0]], [1.0, 1.0]).is_diagonally_dominant()

    def test_weak_dominance_counts(self):
        """Equality |a_ii| == sum |a_ij| is still dominant"""
        system = LinearSystem([[2.0, -1.0, 1.0], [0.0, 1.0, 1.0], [0.0, 0.0, 3.0]], [0.0, 0.0, 0.0])
        assert system.is_diagonally_dominant()

    def test_dominance_uses_magnitudes(self):
        system = LinearSystem([[-5.0, 2.0], [-3.0, -4.0]], [0.0, 0.0])
        assert system.is_diagonally_dominant()

    def test_multiply(self, scenario_a):
        np.testing.assert_array_equal(scenario_a.multiply([1.0, 2.0]), [12.0, 21.0])

    def test_multiply_wrong_length(self, scenario_a):
        with pytest.raises(DimensionMismatch):
            scenario_a.multiply([1.0, 2.0, 3.0])

    def test_residual_norm(self, scenario_a):
        assert scenario_a.residual_norm([1.0, 1.0]) == 0.0
        # A @ [0, 0] - b = [-11, -11]
        assert scenario_a.residual_norm([0.0, 0.0]) == pytest.approx(11.0 * math.sqrt(2.0))

    def test_residual_wrong_length(self, scenario_a):
        with pytest.raises(DimensionMismatch):
            scenario_a.residual_norm([1.0])
