"""
Engine configuration.

Settings are an immutable value passed explicitly to the engine and the
lifecycle. The lifecycle is the only writer of ``current_speed`` and does
so by swapping in a new Settings value.

Values can be loaded from SNAKE_* environment variables (or a .env file):
SNAKE_GRID_BOUND, SNAKE_BASE_SPEED, SNAKE_SPEED_INCREMENT,
SNAKE_BASE_TICK_MILLIS, SNAKE_SEGMENT_PIXEL_SIZE, SNAKE_FRUIT_ARENA_BOUND,
SNAKE_MAX_SPAWN_ATTEMPTS.
"""

import os
import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

from .domain.constants import FRUIT_ARENA_BOUND, MAX_SPAWN_ATTEMPTS, SEED_RIGHT_MARGIN

load_dotenv()
logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_SEGMENT_PIXEL_SIZE = 20
DEFAULT_GRID_BOUND = 30
DEFAULT_BASE_SPEED = 2.0  # Change this to raise difficulty
DEFAULT_BASE_TICK_MILLIS = 150.0
SPEED_INCREMENT_DIVISOR = 25


@dataclass(frozen=True)
class Settings:
    """
    Engine and lifecycle configuration.

    Attributes:
        segment_pixel_size: cell size in pixels, only used by renderers
        grid_bound: side length of the square grid (cells are [0, grid_bound))
        base_speed: speed every session starts at
        current_speed: speed the tick period is derived from; defaults to base_speed
        speed_increment: added to current_speed per fruit eaten;
            defaults to base_speed / 25
        base_tick_millis: tick period at speed 1.0
        fruit_arena_bound: fruit spawns in [1, fruit_arena_bound - 1] on both axes
        max_spawn_attempts: rejection-sampling budget before the exhaustive fallback
    """

    segment_pixel_size: int = DEFAULT_SEGMENT_PIXEL_SIZE
    grid_bound: int = DEFAULT_GRID_BOUND
    base_speed: float = DEFAULT_BASE_SPEED
    current_speed: Optional[float] = None
    speed_increment: Optional[float] = None
    base_tick_millis: float = DEFAULT_BASE_TICK_MILLIS
    fruit_arena_bound: int = FRUIT_ARENA_BOUND
    max_spawn_attempts: int = MAX_SPAWN_ATTEMPTS

    def __post_init__(self) -> None:
        if self.current_speed is None:
            object.__setattr__(self, "current_speed", self.base_speed)
        if self.speed_increment is None:
            object.__setattr__(self, "speed_increment", self.base_speed / SPEED_INCREMENT_DIVISOR)

        if self.segment_pixel_size < 1:
            raise ValueError("segment_pixel_size must be >= 1")
        if self.grid_bound <= SEED_RIGHT_MARGIN + 1:
            raise ValueError(f"grid_bound must be > {SEED_RIGHT_MARGIN + 1}")
        if self.base_speed <= 0:
            raise ValueError("base_speed must be > 0")
        if self.current_speed <= 0:
            raise ValueError("current_speed must be > 0")
        if self.speed_increment < 0:
            raise ValueError("speed_increment must be >= 0")
        if self.base_tick_millis <= 0:
            raise ValueError("base_tick_millis must be > 0")
        if self.fruit_arena_bound < 2:
            raise ValueError("fruit_arena_bound must be >= 2")
        if self.max_spawn_attempts < 1:
            raise ValueError("max_spawn_attempts must be >= 1")

    @property
    def tick_interval_ms(self) -> float:
        """Tick period in milliseconds: higher speed, shorter period."""
        return self.base_tick_millis / self.current_speed

    def with_speed(self, speed: float) -> "Settings":
        return replace(self, current_speed=speed)

    def increase_speed(self) -> "Settings":
        return self.with_speed(self.current_speed + self.speed_increment)

    def reset_speed(self) -> "Settings":
        return self.with_speed(self.base_speed)

    @classmethod
    def from_env(cls, **overrides) -> "Settings":
        """
        Build Settings from SNAKE_* environment variables.

        Unset variables fall back to the dataclass defaults. Keyword
        overrides win over the environment.

        Raises:
            ValueError: If a variable is set but cannot be parsed, or the
                resulting settings are invalid
        """
        values = {
            "segment_pixel_size": _env("SNAKE_SEGMENT_PIXEL_SIZE", int),
            "grid_bound": _env("SNAKE_GRID_BOUND", int),
            "base_speed": _env("SNAKE_BASE_SPEED", float),
            "speed_increment": _env("SNAKE_SPEED_INCREMENT", float),
            "base_tick_millis": _env("SNAKE_BASE_TICK_MILLIS", float),
            "fruit_arena_bound": _env("SNAKE_FRUIT_ARENA_BOUND", int),
            "max_spawn_attempts": _env("SNAKE_MAX_SPAWN_ATTEMPTS", int),
        }
        values = {key: value for key, value in values.items() if value is not None}
        values.update(overrides)
        settings = cls(**values)
        logger.debug(f"Loaded settings from environment: {settings}")
        return settings


def _sanitize_env_value(value: Optional[str]) -> Optional[str]:
    """
    Clean up env-provided strings that may include surrounding quotes or whitespace.
    """
    if value is None:
        return None
    cleaned = value.strip()
    if len(cleaned) >= 2 and (
        (cleaned[0] == '"' and cleaned[-1] == '"') or (cleaned[0] == "'" and cleaned[-1] == "'")
    ):
        cleaned = cleaned[1:-1].strip()
    return cleaned or None


def _env(name: str, parse: Callable[[str], T]) -> Optional[T]:
    raw = _sanitize_env_value(os.getenv(name))
    if raw is None:
        return None
    try:
        return parse(raw)
    except ValueError:
        raise ValueError(f"{name} must be a valid {parse.__name__}, got {raw!r}") from None
