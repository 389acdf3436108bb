"""
tolerance.py - Floating-point equality for the geometry kernel

Two reals are considered equal when their absolute difference is strictly
below EPSILON. Every equality check in the package (tuples, vectors,
points, matrices, rays) goes through this module component by component.
"""

import numpy as np

# Absolute tolerance shared by the whole package
EPSILON = 1e-5


def approx_equal(a: float, b: float) -> bool:
    """
    Compare two reals within EPSILON.

    Parameters
    ----------
    a : float
        First value
    b : float
        Second value

    Returns
    -------
    bool
        True if |a - b| < EPSILON. A difference of exactly EPSILON
        compares as not equal.
    """
    return abs(a - b) < EPSILON


def approx_equal_arrays(a: np.ndarray, b: np.ndarray) -> bool:
    """
    Element-wise approx_equal for two arrays.

    Arrays of different shapes are never equal.
    """
    if a.shape != b.shape:
        return False
    return bool(np.all(np.abs(a - b) < EPSILON))
