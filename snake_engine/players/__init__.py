"""
Player implementations for headless play.

Players stand in for the input collaborator and emit logical direction
events from game snapshots.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
