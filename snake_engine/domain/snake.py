"""
Snake entity for the game engine.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from .constants import Direction, INITIAL_LENGTH
from .point import Point


@dataclass(frozen=True)
class Snake:
    """
    Represents the snake on the board.

    Attributes:
        segments: tuple of Points from head at index 0 to tail at the end
        direction: heading used for the next move
    """

    segments: Tuple[Point, ...]
    direction: Direction = Direction.RIGHT

    def __post_init__(self) -> None:
        # Normalise plain (x, y) pairs and lists so equality and hashing behave
        segments = tuple(Point(*seg) for seg in self.segments)
        if len(segments) < INITIAL_LENGTH:
            raise ValueError(
                f"Snake needs at least {INITIAL_LENGTH} segments, got {len(segments)}."
            )
        object.__setattr__(self, "segments", segments)
        object.__setattr__(self, "direction", Direction(self.direction))

    @classmethod
    def from_positions(cls, positions: Iterable[Tuple[int, int]], direction: Direction) -> "Snake":
        return cls(tuple(Point(x, y) for x, y in positions), direction)

    @property
    def head(self) -> Point:
        """Return the head position (first element)."""
        return self.segments[0]

    @property
    def body(self) -> Tuple[Point, ...]:
        return self.segments[1:]

    def __len__(self) -> int:
        return len(self.segments)

    def occupies(self, point: Tuple[int, int]) -> bool:
        return point in self.segments

    def turned(self, direction: Direction) -> "Snake":
        """Return a copy heading in ``direction``. No validity check is made here."""
        if direction == self.direction:
            return self
        return Snake(self.segments, direction)
