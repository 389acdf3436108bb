"""
raycore - Geometry and linear-algebra kernel for a ray tracer

Vectors and points with tolerance-based equality, square matrices with
inversion, affine transforms, rays, intersections and renderable shapes.
"""

import logging

from .tolerance import EPSILON, approx_equal
from .errors import RayCoreError, ShapeMismatchError, SingularMatrixError, DegenerateVectorError
from .tuples import Tuple4, Vector, Point
from .matrices import Matrix
from .transformations import translation, scaling, rotation_x, rotation_y, rotation_z
from .transformations import shearing, chain
from .rays import Ray
from .intersections import Intersection, Intersections
from .surfaces import Renderable, Sphere

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Tolerance
    "EPSILON",
    "approx_equal",
    # Errors
    "RayCoreError",
    "ShapeMismatchError",
    "SingularMatrixError",
    "DegenerateVectorError",
    # Tuples
    "Tuple4",
    "Vector",
    "Point",
    # Matrices
    "Matrix",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "chain",
    # Rays
    "Ray",
    "Intersection",
    "Intersections",
    # Shapes
    "Renderable",
    "Sphere",
]
