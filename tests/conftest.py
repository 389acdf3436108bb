"""Pytest configuration for raycore tests.

Shared fixtures: a default unit sphere and the matrices that several test
modules reuse.
"""

import pytest

from raycore import Matrix, Sphere


@pytest.fixture
def unit_sphere():
    """Untransformed unit sphere at the origin."""
    return Sphere()


@pytest.fixture
def invertible_matrix():
    """4x4 matrix with determinant 532 and a known inverse."""
    return Matrix(4, [-5, 2, 6, -8, 1, -5, 1, 8, 7, 7, -6, -7, 1, -3, 7, 4])


@pytest.fixture
def singular_matrix():
    """4x4 matrix with determinant 0."""
    return Matrix(4, [-4, 2, -2, -3, 9, 6, 2, 6, 0, -5, 1, -5, 0, 0, 0, 0])
