"""
Point value type - an integer cell coordinate on the grid.
"""

from typing import NamedTuple

from .constants import Direction


class Point(NamedTuple):
    """
    Immutable (x, y) grid coordinate.

    Being a tuple, a Point compares equal to the plain ``(x, y)`` pair,
    so callers may pass either.
    """
    x: int
    y: int

    def moved(self, direction: Direction) -> "Point":
        """Return the neighbouring cell one step along ``direction``."""
        dx, dy = direction.delta
        return Point(self.x + dx, self.y + dy)

    def in_bounds(self, bound: int) -> bool:
        return 0 <= self.x < bound and 0 <= self.y < bound
