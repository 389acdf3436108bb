"""
intersections.py - Ray hits and hit collections

An Intersection pairs a ray parameter t with the shape that was struck.
Negative t means the hit lies behind the ray origin.

An Intersections set holds the hits produced by one or more intersect
calls. It keeps insertion order and never merges duplicate hits; callers
sort it or ask for the hit (nearest non-negative t) explicitly.
"""

from functools import total_ordering
from typing import Iterator, Optional

from .tolerance import approx_equal


@total_ordering
class Intersection:
    """
    A single ray-shape intersection.

    Attributes
    ----------
    t : float
        Ray parameter of the hit
    shape : object
        The shape that was struck (compared by identity)
    """

    __slots__ = ("_t", "_shape")
    __hash__ = None

    def __init__(self, t: float, shape):
        self._t = float(t)
        self._shape = shape

    @property
    def t(self) -> float:
        return self._t

    @property
    def shape(self):
        return self._shape

    def __lt__(self, other: 'Intersection') -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self._t < other._t

    def __eq__(self, other) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self._shape is other._shape and approx_equal(self._t, other._t)

    def __repr__(self) -> str:
        return f"Intersection(t={self._t:g}, shape={self._shape!r})"


class Intersections:
    """
    Ordered, immutable collection of intersections.

    Examples
    --------
    >>> xs = Intersections(Intersection(-1, s), Intersection(1, s))
    >>> xs.hit().t
    1.0
    """

    __slots__ = ("_items",)
    __hash__ = None

    def __init__(self, *items: Intersection):
        self._items = tuple(items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __add__(self, other: 'Intersections') -> 'Intersections':
        if not isinstance(other, Intersections):
            return NotImplemented
        return Intersections(*self._items, *other._items)

    def sorted(self) -> 'Intersections':
        """New collection ordered by ascending t (stable for equal t)."""
        return Intersections(*sorted(self._items))

    def hit(self) -> Optional[Intersection]:
        """
        Find the first visible intersection.

        Returns
        -------
        Intersection or None
            The intersection with the smallest non-negative t, or None if
            every intersection lies behind the ray origin
        """
        visible = [item for item in self._items if item.t >= 0]
        if not visible:
            return None
        return min(visible)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Intersections):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Intersections({', '.join(repr(item) for item in self._items)})"
