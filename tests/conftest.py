"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from smallmat.matrix import mat2f, mat3f, mat4f


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_mat2(rng):
    """Well-conditioned random 2×2 matrix (diagonally dominated)."""
    return mat2f.from_array(rng.standard_normal((2, 2)) + 3.0 * np.eye(2))


@pytest.fixture
def random_mat3(rng):
    """Well-conditioned random 3×3 matrix (diagonally dominated)."""
    return mat3f.from_array(rng.standard_normal((3, 3)) + 4.0 * np.eye(3))


@pytest.fixture
def random_mat4(rng):
    """Random 4×4 matrix."""
    return mat4f.from_array(rng.standard_normal((4, 4)))


@pytest.fixture
def worked_example_3x3():
    """
    Rows [[4, 1, 1], [2, 1, -1], [1, 1, 1]] and their exact inverse.

    det = 6, so every inverse entry is a multiple of 1/6.
    """
    m = mat3f.new(4, 2, 1, 1, 1, 1, 1, -1, 1)
    expected = mat3f.new(1 / 3, -0.5, 1 / 6, 0, 0.5, -0.5, -1 / 3, 1, 1 / 3)
    return m, expected
