"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from ..domain.constants import Direction, VALID_MOVES
from ..domain.game_state import GameSnapshot
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.

    Only the current heading and the two perpendicular turns are considered,
    since a reversal would be ignored by the lifecycle anyway.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, snapshot: GameSnapshot) -> Optional[Direction]:
        if not snapshot.segments or snapshot.direction is None:
            return None

        head = snapshot.segments[0]
        bound = snapshot.grid_bound

        candidates = [move for move in VALID_MOVES if move != snapshot.direction.opposite]
        # Sort first so a seeded rng gives the same choice on every run
        candidates.sort(key=lambda move: move.value)

        # Filter out moves that:
        # 1. Hit walls
        # 2. Hit own body (except tail, which will move)
        safe_moves: List[Direction] = []
        for move in candidates:
            target = head.moved(move)
            if not target.in_bounds(bound):
                continue
            if target in snapshot.segments[:-1]:
                continue
            safe_moves.append(move)

        # Prefer the fruit when it is one step away
        for move in safe_moves:
            if head.moved(move) == snapshot.fruit:
                return move

        # If no safe moves, keep going (we'll die anyway)
        if not safe_moves:
            return None

        return self.rng.choice(safe_moves)
