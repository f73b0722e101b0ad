"""
Game lifecycle: the PAUSED / RUNNING / OVER state machine around the engine.

GameLifecycle owns one session's snake, fruit, speed and timing. It gates
ticks and turn requests on the current state, buffers the latest valid turn
until the next tick, and computes the Score when the session ends.

Transitions:
  PAUSED/OVER --start()--> RUNNING   fresh snake and fruit, speed reset
  RUNNING --tick()--> RUNNING        move, maybe eat (grow + speed up)
  RUNNING --tick()--> OVER           wall/self collision or full board
  RUNNING --end()--> OVER            session stopped by the caller
  RUNNING --pause()--> PAUSED        session kept, resumable
  PAUSED --resume()--> RUNNING       paused session continues
"""

import time
import random
import logging
from typing import Any, Callable, Dict, List, Optional

from . import engine
from .config import Settings
from .domain.constants import Direction, INITIAL_LENGTH
from .domain.game_state import GameSnapshot, GameState, Score
from .domain.point import Point
from .domain.snake import Snake
from .engine import TickResult

logger = logging.getLogger(__name__)

Listener = Callable[[GameSnapshot], None]


class GameLifecycle:
    """
    Manages:
      - Game state (PAUSED, RUNNING, OVER)
      - Snake and fruit of the current session
      - Pending turn (latest valid request before the next tick)
      - Speed progression
      - Session timing and score
      - Optional snapshot history for replay
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        record_history: bool = False,
    ):
        self.settings = settings or Settings()
        self.state = GameState.PAUSED
        self.snake: Optional[Snake] = None
        self.fruit: Optional[Point] = None
        self.score: Optional[Score] = None
        self.pending_direction: Optional[Direction] = None
        self.tick_count = 0
        self.end_reason: Optional[str] = None
        self.record_history = record_history
        self.history: List[GameSnapshot] = []

        self._rng = rng
        self._clock = clock
        self._session_start: Optional[float] = None
        self._paused_at: Optional[float] = None
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def current_speed(self) -> float:
        return self.settings.current_speed

    @property
    def tick_interval_ms(self) -> float:
        return self.settings.tick_interval_ms

    @property
    def arena_bound(self) -> int:
        """Fixed fruit spawn arena; independent of grid_bound."""
        return self.settings.fruit_arena_bound

    @property
    def elapsed_seconds(self) -> float:
        """Session time so far; the final value once the session is over."""
        if self.score is not None:
            return self.score.elapsed_seconds
        if self._session_start is None:
            return 0.0
        now = self._paused_at if self._paused_at is not None else self._clock()
        return now - self._session_start

    @property
    def has_session(self) -> bool:
        """True while a started session has not finished yet."""
        return self.snake is not None and self.score is None

    def snapshot(self) -> GameSnapshot:
        """
        Return a snapshot of the current game as a GameSnapshot.
        """
        return GameSnapshot(
            state=self.state,
            segments=self.snake.segments if self.snake is not None else (),
            direction=self.snake.direction if self.snake is not None else None,
            fruit=self.fruit,
            score=self.score,
            current_speed=self.current_speed,
            tick_count=self.tick_count,
            grid_bound=self.settings.grid_bound,
        )

    def add_listener(self, listener: Listener) -> None:
        """Register a callback receiving a snapshot after every transition and tick."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """
        Begin a fresh session from PAUSED or OVER.

        Returns:
            True if a session was started, False if one is already running
        """
        if self.state == GameState.RUNNING:
            logger.debug("Start signal ignored: game is already running.")
            return False

        self.settings = self.settings.reset_speed()
        self.snake, self.fruit = engine.initialize(
            self.settings.grid_bound,
            rng=self._rng,
            arena_bound=self.arena_bound,
            max_attempts=self.settings.max_spawn_attempts,
        )
        self.pending_direction = None
        self.score = None
        self.tick_count = 0
        self.end_reason = None
        self.history = []
        self._session_start = self._clock()
        self._paused_at = None
        self.state = GameState.RUNNING

        logger.info(f"Session started: snake at {list(self.snake.segments)}, fruit at {self.fruit}")
        self._record_and_notify()
        return True

    def request_turn(self, direction: Direction) -> bool:
        """
        Buffer a turn for the next tick.

        The request is checked against the direction the snake will have at
        the next tick (the pending turn, if any), so the last valid request
        wins. A request that brings the heading back to where the snake is
        moving now cancels the pending turn. A result that would reverse
        the snake into its own neck is ignored, as are requests outside
        RUNNING.

        Returns:
            True if the request was accepted
        """
        if self.state != GameState.RUNNING:
            return False

        direction = Direction(direction)
        current = self.snake.direction
        target = self.pending_direction or current
        validated = engine.request_turn(target, direction)
        if validated == target:
            logger.debug(f"Ignored turn {direction.value} while heading {target.value}")
            return False
        if validated == current.opposite:
            logger.debug(f"Ignored turn {direction.value}: reverses {current.value}")
            return False

        self.pending_direction = None if validated == current else validated
        return True

    def tick(self) -> Optional[TickResult]:
        """
        Execute one tick:
          1) If the game is not running, do nothing
          2) Apply the pending turn, if any
          3) Move the snake, growing if it is about to eat
          4) On eating, increase the speed
          5) On collision or a full board, end the session

        Returns:
            The TickResult, or None when the game is not running
        """
        if self.state != GameState.RUNNING:
            return None

        snake = self.snake
        if self.pending_direction is not None:
            snake = snake.turned(self.pending_direction)
            self.pending_direction = None

        result = engine.step(
            snake,
            self.fruit,
            self.settings.grid_bound,
            rng=self._rng,
            arena_bound=self.arena_bound,
            max_attempts=self.settings.max_spawn_attempts,
        )
        self.tick_count += 1
        self.snake = result.snake

        if result.ate:
            self.settings = self.settings.increase_speed()
            logger.debug(f"Fruit eaten, speed now {self.current_speed:.2f}")

        if result.game_over:
            reason = result.collision or "board_full"
            if result.fruit is not None:
                self.fruit = result.fruit
            self._finish(reason)
        else:
            self.fruit = result.fruit
            self._record_and_notify()

        return result

    def end(self, reason: str = "stopped") -> bool:
        """
        End the running session now and compute its score.

        Returns:
            True if a running session was ended
        """
        if self.state != GameState.RUNNING:
            return False
        self._finish(reason)
        return True

    def pause(self) -> bool:
        """Suspend the running session. Paused time is not counted."""
        if self.state != GameState.RUNNING:
            return False
        self._paused_at = self._clock()
        self.state = GameState.PAUSED
        logger.info(f"Session paused after {self.tick_count} ticks")
        self._record_and_notify()
        return True

    def resume(self) -> bool:
        """Continue a paused session. Use start() for a fresh one."""
        if self.state != GameState.PAUSED or not self.has_session:
            return False
        self._session_start += self._clock() - self._paused_at
        self._paused_at = None
        self.state = GameState.RUNNING
        logger.info("Session resumed")
        self._record_and_notify()
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _finish(self, reason: str) -> None:
        self.pending_direction = None
        self.end_reason = reason
        self.score = Score(
            growth=len(self.snake) - INITIAL_LENGTH,
            elapsed_seconds=self._clock() - self._session_start,
        )
        self.settings = self.settings.reset_speed()
        self.state = GameState.OVER
        logger.info(
            f"Game Over ({reason}): growth {self.score.growth}, "
            f"time {self.score.elapsed_seconds:.2f}s, ticks {self.tick_count}"
        )
        self._record_and_notify()

    def _record_and_notify(self) -> None:
        snapshot = self.snapshot()
        if self.record_history:
            self.history.append(snapshot)
        for listener in list(self._listeners):
            listener(snapshot)

    def serialize_history(self) -> List[Dict[str, Any]]:
        """
        Convert the recorded snapshots to a JSON-serializable list of dicts.
        """
        return [snapshot.to_dict() for snapshot in self.history]
