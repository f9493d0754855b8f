"""
pytest configuration and shared fixtures.
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_int_matrix(rng):
    """Factory for small random integer matrices with Python int entries."""
    def make(height, width, low=-5, high=6):
        return Matrix.from_rows(rng.integers(low, high, size=(height, width)).tolist())
    return make


@pytest.fixture
def random_fraction_matrix(random_int_matrix):
    """Factory for random matrices with exact Fraction entries."""
    def make(height, width):
        return random_int_matrix(height, width).convert(Fraction)
    return make


@pytest.fixture
def invertible_fraction_matrix(random_fraction_matrix):
    """4x4 Fraction matrix with nonzero determinant."""
    while True:
        m = random_fraction_matrix(4, 4)
        if m.det() != 0:
            return m
