"""
Base player interface for headless play.
"""

from typing import Optional

from ..domain.constants import Direction
from ..domain.game_state import GameSnapshot


class Player:
    """
    Base class/interface for input logic.

    A player stands in for the input collaborator: it looks at the current
    snapshot and emits a logical direction event (or nothing) before each tick.
    """

    def get_move(self, snapshot: GameSnapshot) -> Optional[Direction]:
        """
        Return a direction event given the current snapshot.

        Args:
            snapshot: Current state of the game

        Returns:
            A Direction, or None to keep the current heading
        """
        raise NotImplementedError
