"""
Headless session driver.

Runs one session without a timer or a display: a Player supplies the
direction events and the lifecycle is ticked back to back. Session time is
simulated from the tick periods the scheduler would have used, so a seeded
run is fully reproducible.
"""

import random
import logging
from typing import Any, Dict, Optional

from .config import Settings
from .domain.game_state import GameState
from .lifecycle import GameLifecycle
from .players import Player, RandomPlayer

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 10_000


class SimulatedClock:
    """Clock that only moves when advanced, in seconds."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def run_simulation(
    settings: Optional[Settings] = None,
    player: Optional[Player] = None,
    max_ticks: int = DEFAULT_MAX_TICKS,
    seed: Optional[int] = None,
    record_history: bool = False,
) -> Dict[str, Any]:
    """
    Runs a single headless session.

    Args:
        settings: engine configuration (defaults to Settings())
        player: source of direction events (defaults to a RandomPlayer)
        max_ticks: the session is ended once this many ticks have run
        seed: seeds both the engine and the default player
        record_history: keep a snapshot per tick in the result

    Returns:
        A dictionary summarizing the session (growth, elapsed_seconds,
        ticks, end_reason, final_length and optionally history).
    """
    if max_ticks < 1:
        raise ValueError("max_ticks must be >= 1")

    rng = random.Random(seed)
    player = player or RandomPlayer(random.Random(seed))
    clock = SimulatedClock()
    game = GameLifecycle(settings, rng=rng, clock=clock, record_history=record_history)

    game.start()
    while game.state == GameState.RUNNING and game.tick_count < max_ticks:
        move = player.get_move(game.snapshot())
        if move is not None:
            game.request_turn(move)
        clock.advance(game.tick_interval_ms / 1000.0)
        game.tick()

    if game.state == GameState.RUNNING:
        game.end("max_ticks")

    logger.info(
        f"Simulation finished: {game.end_reason}, growth {game.score.growth} "
        f"after {game.tick_count} ticks"
    )

    result = {
        "growth": game.score.growth,
        "elapsed_seconds": game.score.elapsed_seconds,
        "ticks": game.tick_count,
        "end_reason": game.end_reason,
        "final_length": len(game.snake),
    }
    if record_history:
        result["history"] = game.serialize_history()
    return result
