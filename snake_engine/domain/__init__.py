"""
Domain entities for the snake engine.

This module contains the core game value types that are independent of
rendering, input binding and scheduling concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    Direction, INITIAL_LENGTH, FRUIT_ARENA_BOUND,
)
from .point import Point
from .snake import Snake
from .game_state import GameState, GameSnapshot, Score

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'Direction', 'INITIAL_LENGTH', 'FRUIT_ARENA_BOUND',
    'Point',
    'Snake',
    'GameState',
    'GameSnapshot',
    'Score',
]
