"""
Exceptions raised by the snake engine.
"""


class SnakeEngineError(Exception):
    """Base class for engine errors."""


class SpawnExhausted(SnakeEngineError):
    """
    No free cell is left in the fruit arena.

    Raised by spawn_fruit once the snake covers every cell a fruit
    could be placed on.
    """

    def __init__(self, arena_bound: int, occupied: int):
        self.arena_bound = arena_bound
        self.occupied = occupied
        super().__init__(
            f"No free cell for fruit in arena of bound {arena_bound} "
            f"({occupied} cells occupied by the snake)."
        )
