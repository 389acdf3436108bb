"""
tuples.py - Homogeneous tuples, free vectors and affine points

A Tuple4 is the raw (x, y, z, w) quadruple that 4x4 matrices operate on:
    - w = 0 marks a free vector (a displacement)
    - w = 1 marks an affine point (a location)

Vector and Point are the typed views of those two cases. They only combine
in the ways affine geometry allows:
    Vector + Vector -> Vector
    Point  + Vector -> Point
    Point  - Point  -> Vector
    Vector - Vector -> Vector
Any other pairing is rejected with TypeError.

All values are immutable once constructed.
"""

import numbers
from typing import Iterator, Sequence

import numpy as np

from .errors import DegenerateVectorError, ShapeMismatchError
from .tolerance import approx_equal, approx_equal_arrays


def _freeze(values) -> np.ndarray:
    """Copy values into a read-only float64 array."""
    array = np.array(values, dtype=np.float64)
    array.flags.writeable = False
    return array


class Tuple4:
    """
    Homogeneous 4-component tuple.

    Attributes
    ----------
    x, y, z : float
        Spatial components
    w : float
        Discriminant: 0 for vectors, 1 for points

    Examples
    --------
    >>> Tuple4(4.3, -4.2, 3.1, 1.0).is_point
    True
    >>> Tuple4(1, 2, 3, 0) + Tuple4(1, 1, 1, 1)
    Tuple4(2, 3, 4, 1)
    """

    __slots__ = ("_values",)
    __hash__ = None
    # Make numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, x: float, y: float, z: float, w: float):
        self._values = _freeze([x, y, z, w])

    @classmethod
    def from_values(cls, values: Sequence[float]) -> 'Tuple4':
        """
        Build a tuple from any sequence of exactly four numbers.

        Raises
        ------
        ShapeMismatchError
            If the sequence does not hold exactly four elements
        """
        if len(values) != 4:
            raise ShapeMismatchError(
                f"A tuple needs exactly 4 values, got {len(values)}"
            )
        return cls._wrap(values)

    @classmethod
    def _wrap(cls, values) -> 'Tuple4':
        result = cls.__new__(cls)
        result._values = _freeze(values)
        return result

    @property
    def x(self) -> float:
        return float(self._values[0])

    @property
    def y(self) -> float:
        return float(self._values[1])

    @property
    def z(self) -> float:
        return float(self._values[2])

    @property
    def w(self) -> float:
        return float(self._values[3])

    @property
    def is_point(self) -> bool:
        """True if w marks an affine point."""
        return approx_equal(self.w, 1.0)

    @property
    def is_vector(self) -> bool:
        """True if w marks a free vector."""
        return approx_equal(self.w, 0.0)

    def __len__(self) -> int:
        return 4

    def __getitem__(self, index: int) -> float:
        return float(self._values[index])

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._values)

    def __add__(self, other: 'Tuple4') -> 'Tuple4':
        if not isinstance(other, Tuple4):
            return NotImplemented
        if self.is_point and other.is_point:
            raise TypeError("Cannot add two points")
        return Tuple4._wrap(self._values + other._values)

    def __sub__(self, other: 'Tuple4') -> 'Tuple4':
        if not isinstance(other, Tuple4):
            return NotImplemented
        if self.is_vector and other.is_point:
            raise TypeError("Cannot subtract a point from a vector")
        return Tuple4._wrap(self._values - other._values)

    def __neg__(self) -> 'Tuple4':
        return Tuple4._wrap(-self._values)

    def __mul__(self, scalar: float) -> 'Tuple4':
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Tuple4._wrap(self._values * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Tuple4':
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Tuple4._wrap(self._values / scalar)

    def dot(self, other: 'Tuple4') -> float:
        """Dot product over all four components."""
        return float(np.dot(self._values, other._values))

    def magnitude(self) -> float:
        """Euclidean length over all four components."""
        return float(np.linalg.norm(self._values))

    def normalize(self) -> 'Tuple4':
        """
        Scale the tuple to unit length.

        Raises
        ------
        DegenerateVectorError
            If the tuple has zero magnitude
        """
        magnitude = self.magnitude()
        if magnitude == 0.0:
            raise DegenerateVectorError("Cannot normalize zero-length tuple")
        return Tuple4._wrap(self._values / magnitude)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tuple4):
            return NotImplemented
        return approx_equal_arrays(self._values, other._values)

    def __repr__(self) -> str:
        return f"Tuple4({self.x:g}, {self.y:g}, {self.z:g}, {self.w:g})"


class _Triple:
    """Storage and comparison shared by Vector and Point."""

    __slots__ = ("_values",)
    __hash__ = None
    __array_ufunc__ = None

    # Homogeneous coordinate used when converting to a Tuple4
    W = 0.0

    def __init__(self, x: float, y: float, z: float):
        self._values = _freeze([x, y, z])

    @classmethod
    def _wrap(cls, values):
        result = cls.__new__(cls)
        result._values = _freeze(values)
        return result

    @classmethod
    def from_tuple(cls, t: Tuple4):
        """
        Take the spatial part of a homogeneous tuple.

        The w component is dropped rather than checked: multiplying a
        vector by the inverse-transpose of an affine matrix can leave a
        non-zero w that carries no meaning for the result.
        """
        return cls._wrap(t._values[:3])

    def to_tuple(self) -> Tuple4:
        """Homogeneous form with w set for this type."""
        return Tuple4(self.x, self.y, self.z, self.W)

    @property
    def x(self) -> float:
        return float(self._values[0])

    @property
    def y(self) -> float:
        return float(self._values[1])

    @property
    def z(self) -> float:
        return float(self._values[2])

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        return float(self._values[index])

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._values)

    def __eq__(self, other) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return approx_equal_arrays(self._values, other._values)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.x:g}, {self.y:g}, {self.z:g})"


class Vector(_Triple):
    """
    Free vector: a displacement with no fixed location.

    Examples
    --------
    >>> Vector(1, 2, 3).cross(Vector(2, 3, 4))
    Vector(-1, 2, -1)
    >>> Vector(4, 0, 0).normalize()
    Vector(1, 0, 0)
    """

    __slots__ = ()
    W = 0.0

    @classmethod
    def zero(cls) -> 'Vector':
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: 'Vector') -> 'Vector':
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector._wrap(self._values + other._values)

    def __sub__(self, other: 'Vector') -> 'Vector':
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector._wrap(self._values - other._values)

    def __neg__(self) -> 'Vector':
        return Vector._wrap(-self._values)

    def __mul__(self, scalar: float) -> 'Vector':
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector._wrap(self._values * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Vector':
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector._wrap(self._values / scalar)

    def dot(self, other: 'Vector') -> float:
        """Dot product."""
        return float(np.dot(self._values, other._values))

    def cross(self, other: 'Vector') -> 'Vector':
        """Cross product (right-handed)."""
        return Vector._wrap(np.cross(self._values, other._values))

    def magnitude(self) -> float:
        """Euclidean length."""
        return float(np.linalg.norm(self._values))

    def normalize(self) -> 'Vector':
        """
        Normalize the vector to unit length.

        Returns
        -------
        Vector
            Unit vector in the same direction

        Raises
        ------
        DegenerateVectorError
            If the vector has zero magnitude
        """
        magnitude = self.magnitude()
        if magnitude == 0.0:
            raise DegenerateVectorError("Cannot normalize zero vector")
        return Vector._wrap(self._values / magnitude)


class Point(_Triple):
    """
    Affine point: a location in space.

    Points only move by vectors; two points differ by a vector.
    """

    __slots__ = ()
    W = 1.0

    @classmethod
    def origin(cls) -> 'Point':
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: Vector) -> 'Point':
        if not isinstance(other, Vector):
            return NotImplemented
        return Point._wrap(self._values + other._values)

    def __sub__(self, other: 'Point') -> Vector:
        if not isinstance(other, Point):
            return NotImplemented
        return Vector._wrap(self._values - other._values)
