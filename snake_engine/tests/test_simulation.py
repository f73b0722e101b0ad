"""
Tests for headless play: players/ and simulation.py.
"""

import random

import pytest

from snake_engine.config import Settings
from snake_engine.domain import GameSnapshot, GameState, Point, UP, DOWN, LEFT, RIGHT
from snake_engine.players import Player, RandomPlayer
from snake_engine.simulation import SimulatedClock, run_simulation


def snapshot_for(segments, direction, fruit=(20, 20), grid_bound=30):
    return GameSnapshot(
        state=GameState.RUNNING,
        segments=tuple(Point(*seg) for seg in segments),
        direction=direction,
        fruit=Point(*fruit),
        score=None,
        current_speed=2.0,
        tick_count=0,
        grid_bound=grid_bound,
    )


class ScriptedPlayer(Player):
    """Replays a fixed list of moves, then keeps the heading."""

    def __init__(self, moves):
        self.moves = list(moves)

    def get_move(self, snapshot):
        return self.moves.pop(0) if self.moves else None


class TestRandomPlayer:
    """Tests for the RandomPlayer."""

    def test_base_player_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(snapshot_for([(5, 5), (4, 5)], RIGHT))

    def test_avoids_wall(self):
        player = RandomPlayer(random.Random(0))
        snapshot = snapshot_for([(29, 5), (28, 5)], RIGHT)

        for _ in range(50):
            assert player.get_move(snapshot) in (UP, DOWN)

    def test_never_reverses(self):
        player = RandomPlayer(random.Random(1))
        snapshot = snapshot_for([(10, 10), (9, 10)], RIGHT)

        for _ in range(50):
            assert player.get_move(snapshot) != LEFT

    def test_avoids_own_body(self):
        player = RandomPlayer(random.Random(2))
        # Body wraps above the head; only DOWN is safe
        snapshot = snapshot_for([(5, 5), (4, 5), (4, 4), (5, 4), (6, 4), (6, 5), (6, 6)], RIGHT)

        assert player.get_move(snapshot) == DOWN

    def test_takes_adjacent_fruit(self):
        player = RandomPlayer(random.Random(3))
        snapshot = snapshot_for([(10, 10), (9, 10)], RIGHT, fruit=(10, 9))

        assert player.get_move(snapshot) == UP

    def test_trapped_keeps_heading(self):
        player = RandomPlayer(random.Random(4))
        snapshot = snapshot_for([(0, 0), (1, 0), (1, 1), (0, 1), (0, 2)], LEFT)

        assert player.get_move(snapshot) is None

    def test_no_session(self):
        snapshot = snapshot_for([(1, 1), (2, 1)], None)
        assert RandomPlayer().get_move(snapshot) is None


class TestSimulatedClock:
    def test_advance(self):
        clock = SimulatedClock(1.5)
        clock.advance(0.25)
        assert clock() == 1.75


class TestRunSimulation:
    """Tests for the headless session driver."""

    def test_same_seed_same_result(self):
        assert run_simulation(seed=11) == run_simulation(seed=11)

    def test_result_summary(self):
        result = run_simulation(seed=5)

        assert result["end_reason"] in ("wall", "self", "board_full", "max_ticks")
        assert result["growth"] == result["final_length"] - 2
        assert result["ticks"] >= 1
        assert result["elapsed_seconds"] > 0

    def test_max_ticks_ends_session(self):
        result = run_simulation(seed=0, max_ticks=3)

        assert result["ticks"] == 3
        assert result["end_reason"] == "max_ticks"
        # Eating only shortens the period, so 3 ticks at base speed is the ceiling
        assert 0 < result["elapsed_seconds"] <= 3 * 0.075 + 1e-9

    def test_scripted_player_hits_wall(self):
        settings = Settings(grid_bound=12)
        player = ScriptedPlayer([UP])

        result = run_simulation(settings, player=player, seed=0)

        assert result["end_reason"] in ("wall", "self")
        assert result["ticks"] <= 12

    def test_history(self):
        result = run_simulation(seed=2, max_ticks=5, record_history=True)

        history = result["history"]
        assert history[0]["state"] == "running"
        assert history[0]["tick_count"] == 0
        assert history[-1]["state"] == "over"

    def test_invalid_max_ticks(self):
        with pytest.raises(ValueError):
            run_simulation(max_ticks=0)
