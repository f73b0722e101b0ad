"""
Snake game-state engine.

Tick-driven simulation of a single snake on a square grid (movement,
turning, growth, collisions, fruit placement, speed progression) and the
PAUSED / RUNNING / OVER lifecycle around it. Rendering and input binding
are left to the caller, which reads GameSnapshot values and feeds logical
Direction events back in.
"""

from .config import Settings
from .domain import Direction, GameSnapshot, GameState, Point, Score, Snake
from .engine import TickResult
from .errors import SnakeEngineError, SpawnExhausted
from .lifecycle import GameLifecycle
from .scheduler import TickScheduler

__all__ = [
    'Settings',
    'Direction',
    'GameSnapshot',
    'GameState',
    'Point',
    'Score',
    'Snake',
    'TickResult',
    'SnakeEngineError',
    'SpawnExhausted',
    'GameLifecycle',
    'TickScheduler',
]
