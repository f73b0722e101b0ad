"""
GameState enum, Score and GameSnapshot - the observable side of a session.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .constants import Direction
from .point import Point


class GameState(Enum):
    """Lifecycle phase of the game. Only RUNNING advances the simulation."""
    PAUSED = "paused"
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class Score:
    """
    Result of one session, computed once at the RUNNING -> OVER transition.

    Attributes:
        growth: final segment count minus the initial segment count
        elapsed_seconds: wall-clock duration of the session
    """

    growth: int
    elapsed_seconds: float


@dataclass(frozen=True)
class GameSnapshot:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        state: lifecycle phase when the snapshot was taken
        segments: snake segments, head first (empty before the first session)
        direction: snake heading, if a session has been seeded
        fruit: fruit position, if a session has been seeded
        score: final score of the last finished session, if any
        current_speed: speed the tick period is derived from
        tick_count: ticks applied in the current session
        grid_bound: side length of the square grid
    """

    state: GameState
    segments: Tuple[Point, ...]
    direction: Optional[Direction]
    fruit: Optional[Point]
    score: Optional[Score]
    current_speed: float
    tick_count: int
    grid_bound: int

    def render_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = fruit
        S = snake body
        H = snake head
        Row 0 is printed first, matching screen coordinates.
        Segments outside the grid (a wall crash) are skipped.
        """
        board = [['.' for _ in range(self.grid_bound)] for _ in range(self.grid_bound)]

        if self.fruit is not None and self.fruit.in_bounds(self.grid_bound):
            board[self.fruit.y][self.fruit.x] = 'F'

        for idx, seg in enumerate(self.segments):
            if not seg.in_bounds(self.grid_bound):
                continue
            board[seg.y][seg.x] = 'H' if idx == 0 else 'S'

        result = []
        for y in range(self.grid_bound):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # x-axis labels, last digit only so the columns stay aligned
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_bound)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-friendly representation. Python's json library turns the
        (x, y) tuples into [x, y] lists.
        """
        return {
            "state": self.state.value,
            "segments": [tuple(seg) for seg in self.segments],
            "direction": self.direction.value if self.direction is not None else None,
            "fruit": tuple(self.fruit) if self.fruit is not None else None,
            "score": (
                {"growth": self.score.growth, "elapsed_seconds": self.score.elapsed_seconds}
                if self.score is not None else None
            ),
            "current_speed": self.current_speed,
            "tick_count": self.tick_count,
            "grid_bound": self.grid_bound,
        }

    def __repr__(self):
        return (
            f"<GameSnapshot state={self.state.value}, tick={self.tick_count}, "
            f"length={len(self.segments)}, fruit={self.fruit}, score={self.score}>"
        )
