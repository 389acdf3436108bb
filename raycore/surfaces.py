"""
surfaces.py - Renderable shapes for ray intersection

Every renderable owns:
    - A 4x4 transform mapping object space into world space
    - The inverse of that transform, computed once per assignment

and answers two queries in world space:
    - intersect(ray): hits along a ray, tagged with the shape
    - normal_at(point): unit surface normal at a point on the shape

Subclasses only describe the shape in its own object space through
local_intersect() and local_normal_at(); the base class handles the
change of frame. Normals go back to world space through the transpose of
the inverse transform, then get re-normalized to undo non-uniform scale.

Shape types:
    - Sphere: unit sphere centered at the object-space origin
"""

import logging
import math
from typing import Optional, Tuple

from .intersections import Intersection, Intersections
from .matrices import Matrix
from .rays import Ray
from .tolerance import approx_equal
from .tuples import Point, Vector

logger = logging.getLogger(__name__)


class Renderable:
    """
    Base class for all renderable shapes.

    The transform and its inverse are stored together in a single
    attribute and replaced in one assignment, so a reader never sees a
    transform paired with a stale inverse.

    Attributes
    ----------
    transform : Matrix
        Object-to-world transform (identity by default)
    inverse_transform : Matrix
        World-to-object transform, cached
    """

    def __init__(self, transform: Optional[Matrix] = None):
        """
        Initialize a Renderable.

        Parameters
        ----------
        transform : Matrix, optional
            Object-to-world transform (default: 4x4 identity)

        Raises
        ------
        SingularMatrixError
            If the transform cannot be inverted
        """
        if transform is None:
            identity = Matrix.identity(4)
            self._frame: Tuple[Matrix, Matrix] = (identity, identity)
        else:
            self._frame = (transform, transform.inverse())

    @property
    def transform(self) -> Matrix:
        return self._frame[0]

    @transform.setter
    def transform(self, transform: Matrix) -> None:
        # Invert before touching _frame so a singular matrix leaves the old pair
        self._frame = (transform, transform.inverse())
        logger.debug("%s transform replaced:\n%r", self.__class__.__name__, transform)

    @property
    def inverse_transform(self) -> Matrix:
        return self._frame[1]

    def intersect(self, ray: Ray) -> Intersections:
        """
        Intersect a world-space ray with the shape.

        Parameters
        ----------
        ray : Ray
            Ray in world space

        Returns
        -------
        Intersections
            Zero or more hits, each tagged with this shape
        """
        _, inverse = self._frame
        return self.local_intersect(ray.transform(inverse))

    def normal_at(self, point: Point) -> Vector:
        """
        Calculate the world-space surface normal at a point.

        Parameters
        ----------
        point : Point
            Point on the surface, in world space

        Returns
        -------
        Vector
            Unit normal vector in world space
        """
        _, inverse = self._frame
        object_normal = self.local_normal_at(inverse @ point)
        world_normal = inverse.transpose() @ object_normal
        return world_normal.normalize()

    def local_intersect(self, ray: Ray) -> Intersections:
        """
        Intersect a ray already expressed in object space.

        Must be implemented by subclasses.

        Parameters
        ----------
        ray : Ray
            Ray in object space

        Returns
        -------
        Intersections
            Hits tagged with this shape
        """
        raise NotImplementedError("Subclasses must implement local_intersect()")

    def local_normal_at(self, point: Point) -> Vector:
        """
        Calculate the object-space normal at an object-space point.

        Must be implemented by subclasses.
        """
        raise NotImplementedError("Subclasses must implement local_normal_at()")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(transform=\n{self.transform!r})"


class Sphere(Renderable):
    """
    Unit sphere centered at the object-space origin.

    Substituting the ray P(t) = O + t*D into |P|^2 = 1 gives

        a*t^2 + b*t + c = 0

    with a = D.D, b = 2*D.S, c = S.S - 1, where S = O - origin. The sign
    of the discriminant b^2 - 4ac separates misses, tangent hits and
    two-sided hits. Size and position in world space come entirely from
    the transform.
    """

    def local_intersect(self, ray: Ray) -> Intersections:
        """
        Solve the ray-sphere quadratic in object space.

        Parameters
        ----------
        ray : Ray
            Ray in object space

        Returns
        -------
        Intersections
            Empty on a miss, one hit for a tangent ray, otherwise two hits
            with t1 <= t2. Hits behind the origin are kept (negative t).
        """
        sphere_to_ray = ray.origin - Point.origin()
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0:
            return Intersections()

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)

        # Tangent ray: report the touching point once
        if approx_equal(t1, t2):
            return Intersections(Intersection(t1, self))

        return Intersections(Intersection(t1, self), Intersection(t2, self))

    def local_normal_at(self, point: Point) -> Vector:
        """
        Outward normal: the direction from the center to the point.

        Parameters
        ----------
        point : Point
            Point on the unit sphere, in object space

        Returns
        -------
        Vector
            Unit normal vector
        """
        return (point - Point.origin()).normalize()
