"""
Tick scheduler: the single timer that drives a GameLifecycle.

One timer is pending at most. It is re-armed only after the previous tick
has been applied, with a period of ``base_tick_millis / current_speed``, so
the snake speeds up as soon as a fruit is eaten. Ticks, turn requests and
start/pause signals all go through one lock, so input arriving from another
thread never interleaves with a tick.

Whenever the game leaves RUNNING the pending timer is cancelled. A timer
that still fires after cancellation carries an outdated generation number
and is ignored.
"""

import threading
import logging
from typing import Callable, Optional

from .domain.constants import Direction
from .domain.game_state import GameState
from .lifecycle import GameLifecycle

logger = logging.getLogger(__name__)

TimerFactory = Callable[..., threading.Timer]


class TickScheduler:
    """
    Drives ``lifecycle.tick()`` on a re-armed, cancellable timer.

    Args:
        lifecycle: the game to drive
        timer_factory: builds the timer; called like ``threading.Timer(interval,
            function, args=...)`` and must return an object with ``start()``
            and ``cancel()``
    """

    def __init__(
        self,
        lifecycle: GameLifecycle,
        timer_factory: TimerFactory = threading.Timer,
    ):
        self.lifecycle = lifecycle
        self._timer_factory = timer_factory
        self._lock = threading.RLock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0

    @property
    def armed(self) -> bool:
        """True while a tick is pending."""
        return self._timer is not None

    def start(self) -> bool:
        """Start a fresh session and arm the first tick."""
        with self._lock:
            if not self.lifecycle.start():
                return False
            self._cancel()
            self._arm()
            return True

    def resume(self) -> bool:
        with self._lock:
            if not self.lifecycle.resume():
                return False
            self._cancel()
            self._arm()
            return True

    def pause(self) -> bool:
        with self._lock:
            self._cancel()
            return self.lifecycle.pause()

    def turn(self, direction: Direction) -> bool:
        """Forward a logical direction event to the lifecycle."""
        with self._lock:
            return self.lifecycle.request_turn(direction)

    def stop(self) -> None:
        """Cancel the pending tick and end the running session, if any."""
        with self._lock:
            self._cancel()
            self.lifecycle.end()

    def _arm(self) -> None:
        self._generation += 1
        generation = self._generation
        interval = self.lifecycle.tick_interval_ms / 1000.0
        timer = self._timer_factory(interval, self._fire, args=(generation,))
        timer.daemon = True
        self._timer = timer
        timer.start()
        logger.debug(f"Tick {generation} armed in {interval * 1000:.1f}ms")

    def _cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            logger.debug(f"Tick {self._generation} cancelled")
        self._generation += 1

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug(f"Stale tick {generation} ignored")
                return
            self._timer = None
            try:
                self.lifecycle.tick()
            finally:
                # Re-arm even if a listener raised
                if self.lifecycle.state == GameState.RUNNING:
                    self._arm()
