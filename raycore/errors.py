"""
errors.py - Exceptions raised by the geometry kernel

All of them are ValueError subclasses so callers that already guard
numeric input with ``except ValueError`` keep working.
"""


class RayCoreError(Exception):
    """Base class for errors raised by raycore."""


class ShapeMismatchError(RayCoreError, ValueError):
    """Operand sizes or element counts disagree."""


class SingularMatrixError(RayCoreError, ValueError):
    """An inverse was requested for a matrix with a zero determinant."""


class DegenerateVectorError(RayCoreError, ValueError):
    """A zero-length vector cannot be normalized."""
