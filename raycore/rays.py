"""
rays.py - Ray class for the geometry kernel

A ray is defined by:
    - Origin point P = (x, y, z)
    - Direction vector D = (dx, dy, dz)

Points along the ray are P(t) = P + t * D. The direction is kept as given
(not normalized), so t is measured in multiples of D. That keeps t values
consistent when a ray is carried into a shape's object space by a scaling
transform.
"""

from .errors import DegenerateVectorError
from .matrices import Matrix
from .tuples import Point, Vector


class Ray:
    """
    Immutable ray with an origin point and a direction vector.

    Attributes
    ----------
    origin : Point
        Starting position of the ray
    direction : Vector
        Direction of travel (any non-zero length)

    Examples
    --------
    >>> ray = Ray(Point(2, 3, 4), Vector(1, 0, 0))
    >>> ray.position_at(2.5)
    Point(4.5, 3, 4)
    """

    __slots__ = ("_origin", "_direction")
    __hash__ = None

    def __init__(self, origin: Point, direction: Vector):
        """
        Initialize a Ray.

        Parameters
        ----------
        origin : Point
            Starting position
        direction : Vector
            Direction of travel

        Raises
        ------
        TypeError
            If origin is not a Point or direction is not a Vector
        DegenerateVectorError
            If direction has zero length
        """
        if not isinstance(origin, Point):
            raise TypeError(f"Ray origin must be a Point, got {type(origin).__name__}")
        if not isinstance(direction, Vector):
            raise TypeError(
                f"Ray direction must be a Vector, got {type(direction).__name__}"
            )
        if direction.magnitude() == 0.0:
            raise DegenerateVectorError("Ray direction must not be the zero vector")
        self._origin = origin
        self._direction = direction

    @property
    def origin(self) -> Point:
        return self._origin

    @property
    def direction(self) -> Vector:
        return self._direction

    def position_at(self, t: float) -> Point:
        """
        Get the point along the ray at parameter t.

        Parameters
        ----------
        t : float
            Parameter value; negative values lie behind the origin

        Returns
        -------
        Point
            origin + direction * t
        """
        return self._origin + self._direction * t

    def transform(self, matrix: Matrix) -> 'Ray':
        """
        Apply a transform to both origin and direction.

        Used to carry a world-space ray into a shape's object space with
        the shape's inverse transform.

        Parameters
        ----------
        matrix : Matrix
            4x4 transform

        Returns
        -------
        Ray
            New transformed ray; this one is left unchanged

        Raises
        ------
        DegenerateVectorError
            If the matrix maps the direction to the zero vector
        """
        return Ray(matrix @ self._origin, matrix @ self._direction)

    @classmethod
    def from_two_points(cls, start: Point, through: Point) -> 'Ray':
        """
        Create a ray defined by two points.

        Parameters
        ----------
        start : Point
            Origin of the ray
        through : Point
            Point reached at t = 1

        Returns
        -------
        Ray
            New ray from start toward through

        Raises
        ------
        DegenerateVectorError
            If start and through are the same point
        """
        return cls(start, through - start)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self._origin == other._origin and self._direction == other._direction

    def __repr__(self) -> str:
        return f"Ray(origin={self._origin!r}, direction={self._direction!r})"
