"""
transformations.py - 4x4 affine transform builders

Each builder returns a Matrix that maps object space into world space.
Transforms compose by matrix multiplication; the rightmost factor is
applied first, so

    scaling(5, 5, 5) @ rotation_x(pi / 2) @ p

rotates p and then scales it. chain() takes the transforms in the order
they are applied instead.

Rotation angles are in radians. A quarter turn about x takes the y axis
onto the z axis, about y takes z onto x, about z takes x onto y.
"""

from functools import reduce

import numpy as np

from .matrices import Matrix


def translation(x: float, y: float, z: float) -> Matrix:
    """Move points by (x, y, z). Vectors are unaffected."""
    return Matrix(4, [
        1, 0, 0, x,
        0, 1, 0, y,
        0, 0, 1, z,
        0, 0, 0, 1,
    ])


def scaling(x: float, y: float, z: float) -> Matrix:
    """Scale each axis independently; negative factors reflect."""
    return Matrix(4, [
        x, 0, 0, 0,
        0, y, 0, 0,
        0, 0, z, 0,
        0, 0, 0, 1,
    ])


def rotation_x(radians: float) -> Matrix:
    """Rotate around the x axis."""
    c, s = np.cos(radians), np.sin(radians)
    return Matrix(4, [
        1, 0, 0, 0,
        0, c, -s, 0,
        0, s, c, 0,
        0, 0, 0, 1,
    ])


def rotation_y(radians: float) -> Matrix:
    """Rotate around the y axis."""
    c, s = np.cos(radians), np.sin(radians)
    return Matrix(4, [
        c, 0, s, 0,
        0, 1, 0, 0,
        -s, 0, c, 0,
        0, 0, 0, 1,
    ])


def rotation_z(radians: float) -> Matrix:
    """Rotate around the z axis."""
    c, s = np.cos(radians), np.sin(radians)
    return Matrix(4, [
        c, -s, 0, 0,
        s, c, 0, 0,
        0, 0, 1, 0,
        0, 0, 0, 1,
    ])


def shearing(
    xy: float,
    xz: float,
    yx: float,
    yz: float,
    zx: float,
    zy: float
) -> Matrix:
    """
    Shear one coordinate in proportion to another.

    Parameters
    ----------
    xy, xz : float
        Change of x in proportion to y and to z
    yx, yz : float
        Change of y in proportion to x and to z
    zx, zy : float
        Change of z in proportion to x and to y

    Returns
    -------
    Matrix
        4x4 shearing transform
    """
    return Matrix(4, [
        1, xy, xz, 0,
        yx, 1, yz, 0,
        zx, zy, 1, 0,
        0, 0, 0, 1,
    ])


def chain(*transforms: Matrix) -> Matrix:
    """
    Compose transforms given in the order they are applied.

    chain(a, b, c) == c @ b @ a. With no arguments the 4x4 identity is
    returned.
    """
    return reduce(lambda composed, step: step @ composed, transforms, Matrix.identity(4))
