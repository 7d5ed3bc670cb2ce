"""
test_problems.py - Unit tests for the random system generator

Run with: pytest tests/test_problems.py -v
"""

import numpy as np
import pytest

from Jacobi import InvalidConfiguration, diagonally_dominant_system, rng_for_size, setup_benchmark_problem
from Jacobi.problems import default_rng


class TestGenerator:
    """Diagonally dominant random systems"""

    @pytest.mark.parametrize("size", [1, 2, 10, 64])
    def test_strictly_dominant(self, size):
        system = diagonally_dominant_system(size, rng=np.random.default_rng(0))

        A = system.coefficients
        off_diag = np.abs(A).sum(axis=1) - np.abs(np.diagonal(A))
        assert system.size == size
        assert system.is_diagonally_dominant()
        assert np.all(np.diagonal(A) >= off_diag + 5.0 - 1e-9)
        assert not system.has_zero_on_diagonal()

    def test_value_ranges(self):
        system = diagonally_dominant_system(40, rng=np.random.default_rng(1))

        A = system.coefficients.copy()
        np.fill_diagonal(A, 0.0)
        assert np.all(A >= -10.0) and np.all(A < 10.0)
        assert np.all(system.constants >= -20.0) and np.all(system.constants < 20.0)

    def test_custom_gap(self):
        system = diagonally_dominant_system(1, min_diagonal_gap=2.5, rng=np.random.default_rng(3))
        assert system.coefficients[0, 0] == 2.5

    @pytest.mark.parametrize("size", [0, -3])
    def test_invalid_size(self, size):
        with pytest.raises(InvalidConfiguration):
            diagonally_dominant_system(size)

    @pytest.mark.parametrize("gap", [0.0, -1.0])
    def test_invalid_gap(self, gap):
        with pytest.raises(InvalidConfiguration):
            diagonally_dominant_system(5, min_diagonal_gap=gap)


class TestRandomSource:
    """Seeded generation is reproducible, unseeded uses the shared generator"""

    def test_seeded_is_deterministic(self):
        a = setup_benchmark_problem(30, seed=7)
        b = setup_benchmark_problem(30, seed=7)

        np.testing.assert_array_equal(a.coefficients, b.coefficients)
        np.testing.assert_array_equal(a.constants, b.constants)

    def test_seed_offset_by_size(self):
        """seed + size: (seed=10, n=5) and (seed=12, n=3) share a generator seed"""
        a = diagonally_dominant_system(3, rng=rng_for_size(10, 5))
        b = diagonally_dominant_system(3, rng=rng_for_size(12, 3))
        np.testing.assert_array_equal(a.coefficients, b.coefficients)

    def test_different_seeds_differ(self):
        a = setup_benchmark_problem(10, seed=1)
        b = setup_benchmark_problem(10, seed=2)
        assert not np.array_equal(a.coefficients, b.coefficients)

    def test_negative_seed(self):
        system = setup_benchmark_problem(4, seed=-100)
        assert system.size == 4

    def test_unseeded_uses_default(self):
        assert rng_for_size(None, 10) is default_rng()
        a = setup_benchmark_problem(10)
        b = setup_benchmark_problem(10)
        assert not np.array_equal(a.coefficients, b.coefficients)
