"""
matrices.py - Square matrices for affine transforms

A Matrix is an immutable N x N grid of floats addressed as m[row, column].
Values passed to the constructor are read row by row. The same (row,
column) convention is used by multiply, transpose, submatrix, cofactors
and inverse, so results compose correctly.

The determinant uses plain cofactor expansion along the first row. That
is exponential in N but the kernel only works with sizes up to 4.

Example
-------
>>> m = Matrix(2, [1, 5, -3, 2])
>>> m.determinant()
17.0
>>> Matrix.identity(4).inverse() == Matrix.identity(4)
True
"""

import logging
from typing import List, Sequence, Tuple

import numpy as np

from .errors import ShapeMismatchError, SingularMatrixError
from .tolerance import approx_equal_arrays
from .tuples import Point, Tuple4, Vector

logger = logging.getLogger(__name__)


class Matrix:
    """
    Immutable square matrix.

    Attributes
    ----------
    size : int
        Number of rows (and columns)
    """

    __slots__ = ("_values",)
    __hash__ = None
    __array_ufunc__ = None

    def __init__(self, size: int, values: Sequence[float]):
        """
        Initialize a Matrix.

        Parameters
        ----------
        size : int
            Number of rows and columns
        values : sequence of float
            size * size numbers in row-major order

        Raises
        ------
        ShapeMismatchError
            If values does not hold exactly size * size elements
        """
        if len(values) != size * size:
            raise ShapeMismatchError(
                f"values must have a length of size*size (={size * size}) "
                f"but was {len(values)}"
            )
        array = np.array(values, dtype=np.float64).reshape(size, size)
        array.flags.writeable = False
        self._values = array

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> 'Matrix':
        """
        Build a matrix from a list of rows.

        Raises
        ------
        ShapeMismatchError
            If any row length differs from the number of rows
        """
        size = len(rows)
        for row in rows:
            if len(row) != size:
                raise ShapeMismatchError(
                    f"Every row of a {size}x{size} matrix needs {size} values, "
                    f"got a row of {len(row)}"
                )
        return cls(size, [value for row in rows for value in row])

    @classmethod
    def _from_array(cls, array: np.ndarray) -> 'Matrix':
        return cls(array.shape[0], array.ravel())

    @classmethod
    def identity(cls, size: int) -> 'Matrix':
        """Multiplicative identity of the given size."""
        return cls._from_array(np.identity(size))

    @property
    def size(self) -> int:
        return self._values.shape[0]

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, column = index
        return float(self._values[row, column])

    def rows(self) -> List[List[float]]:
        """Values as nested lists, one per row."""
        return self._values.tolist()

    def to_array(self) -> np.ndarray:
        """Writable copy of the values."""
        return self._values.copy()

    def __matmul__(self, other):
        """
        Matrix product with another matrix, a Tuple4, a Point or a Vector.

        Points and vectors are multiplied through their homogeneous form,
        so translation moves points but leaves vectors unchanged.

        Raises
        ------
        ShapeMismatchError
            If the operand sizes disagree
        """
        if isinstance(other, Matrix):
            if self.size != other.size:
                raise ShapeMismatchError(
                    "Matrices that are multiplied must have the same size, "
                    f"actual were {self.size} vs. {other.size}"
                )
            return Matrix._from_array(self._values @ other._values)
        if isinstance(other, Tuple4):
            if self.size != len(other):
                raise ShapeMismatchError(
                    "A matrix multiplied by a tuple must have the same size "
                    f"vs. length, actual were {self.size} vs. {len(other)}"
                )
            return Tuple4._wrap(self._values @ other._values)
        if isinstance(other, (Point, Vector)):
            return type(other).from_tuple(self @ other.to_tuple())
        return NotImplemented

    def transpose(self) -> 'Matrix':
        """Swap rows and columns."""
        return Matrix._from_array(self._values.T)

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.

        Returns
        -------
        float
            1 for the empty 0x0 matrix (the minor of a 1x1), ad - bc for
            a 2x2 matrix, otherwise sum(m[0, column] * cofactor(0, column))
        """
        if self.size == 0:
            return 1.0
        if self.size == 1:
            return float(self._values[0, 0])
        if self.size == 2:
            (a, b), (c, d) = self._values
            return float(a * d - b * c)

        result = 0.0
        for column in range(self.size):
            result += self._values[0, column] * self.cofactor(0, column)
        return float(result)

    def submatrix(self, row: int, column: int) -> 'Matrix':
        """Copy with the given row and column removed."""
        values = np.delete(np.delete(self._values, row, axis=0), column, axis=1)
        return Matrix._from_array(values)

    def minor(self, row: int, column: int) -> float:
        """Determinant of submatrix(row, column)."""
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        """Minor, negated when row + column is odd."""
        minor = self.minor(row, column)
        if (row + column) % 2 != 0:
            return -minor
        return minor

    def cofactors(self) -> 'Matrix':
        """Matrix of every cofactor."""
        values = [
            self.cofactor(row, column)
            for row in range(self.size)
            for column in range(self.size)
        ]
        return Matrix(self.size, values)

    def is_invertible(self) -> bool:
        """True unless the determinant is exactly zero."""
        return self.determinant() != 0

    def inverse(self) -> 'Matrix':
        """
        Inverse computed as adjugate / determinant.

        Raises
        ------
        SingularMatrixError
            If the determinant is zero
        """
        determinant = self.determinant()
        if determinant == 0:
            logger.debug("Refusing to invert singular matrix:\n%r", self)
            raise SingularMatrixError(
                "Matrix is not invertible, has a zero determinant"
            )

        adjugate = self.cofactors().transpose()
        return Matrix._from_array(adjugate._values / determinant)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return approx_equal_arrays(self._values, other._values)

    def __repr__(self) -> str:
        return "\n".join(
            "| " + " | ".join(f"{value:g}" for value in row) + " |"
            for row in self._values
        )
