"""
Simulation engine: movement, turning, growth, collisions and fruit placement.

Every function here works on immutable value types and returns the next
state instead of mutating anything. Randomness comes from the ``rng``
argument (the module-level ``random`` generator when omitted), so a seeded
``random.Random`` replays a session exactly.
"""

import random
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .domain.constants import (
    Direction,
    FRUIT_ARENA_BOUND,
    MAX_SPAWN_ATTEMPTS,
    SEED_RIGHT_MARGIN,
)
from .domain.point import Point
from .domain.snake import Snake
from .errors import SpawnExhausted

logger = logging.getLogger(__name__)

WALL = "wall"
SELF = "self"


@dataclass(frozen=True)
class TickResult:
    """
    Outcome of one atomic tick.

    Attributes:
        snake: the snake after the move
        fruit: fruit position after the tick; a fresh one if it was eaten,
            None if it was eaten and no free cell was left
        ate: whether the fruit was eaten (the snake grew by one)
        collision: WALL, SELF, or None
    """

    snake: Snake
    fruit: Optional[Point]
    ate: bool
    collision: Optional[str] = None

    @property
    def board_full(self) -> bool:
        return self.fruit is None

    @property
    def game_over(self) -> bool:
        return self.collision is not None or self.board_full


def initialize(
    grid_bound: int,
    rng: Optional[random.Random] = None,
    arena_bound: int = FRUIT_ARENA_BOUND,
    max_attempts: int = MAX_SPAWN_ATTEMPTS,
) -> Tuple[Snake, Point]:
    """
    Seed a new session.

    The snake is a horizontal pair heading RIGHT. Its tail x is drawn from
    [1, grid_bound - 10] so the head starts well clear of the right wall;
    y is drawn from [1, grid_bound - 1].

    Args:
        grid_bound: side length of the grid
        rng: random source
        arena_bound: fruit spawns in [1, arena_bound - 1] on both axes
        max_attempts: rejection-sampling budget for the fruit

    Returns:
        (snake, fruit)
    """
    rng = rng or random
    x = rng.randint(1, grid_bound - SEED_RIGHT_MARGIN)
    y = rng.randint(1, grid_bound - 1)
    snake = Snake((Point(x + 1, y), Point(x, y)), Direction.RIGHT)
    fruit = spawn_fruit(snake, arena_bound, rng=rng, max_attempts=max_attempts)
    return snake, fruit


def request_turn(current: Direction, requested: Direction) -> Direction:
    """
    Filter a turn request.

    A turn is only valid onto the other axis: repeating the current
    direction or reversing it returns ``current`` unchanged.
    """
    if requested == current:
        return current
    if requested.is_vertical == current.is_vertical:
        return current
    return requested


def next_head(snake: Snake) -> Point:
    """Cell the head moves into on the next tick."""
    return snake.head.moved(snake.direction)


def tick(snake: Snake, grow: bool = False) -> Snake:
    """
    Advance the snake one cell along its direction.

    The tail is dropped unless ``grow`` is set, in which case it is kept
    and the snake is one segment longer.
    """
    kept = snake.segments if grow else snake.segments[:-1]
    return Snake((next_head(snake),) + kept, snake.direction)


def check_eating(snake: Snake, fruit: Optional[Tuple[int, int]]) -> bool:
    """
    True if the head is about to move onto the fruit.

    This looks one cell ahead of the current head, so growth is decided
    before the move that lands on the fruit.
    """
    if fruit is None:
        return False
    return next_head(snake) == fruit


def check_wall_collision(snake: Snake, bound: int) -> bool:
    """True if the head lies outside [0, bound) on either axis."""
    return not snake.head.in_bounds(bound)


def check_self_collision(snake: Snake) -> bool:
    """True if any non-head segment shares the head's cell."""
    return snake.head in snake.body


def free_cells(snake: Snake, arena_bound: int) -> List[Point]:
    """All fruit-arena cells not covered by the snake."""
    occupied = set(snake.segments)
    return [
        Point(x, y)
        for x in range(1, arena_bound)
        for y in range(1, arena_bound)
        if (x, y) not in occupied
    ]


def spawn_fruit(
    snake: Snake,
    arena_bound: int = FRUIT_ARENA_BOUND,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_SPAWN_ATTEMPTS,
) -> Point:
    """
    Place a fruit in [1, arena_bound - 1] on both axes, off the snake.

    Rejection-samples up to ``max_attempts`` times. If every sample hits the
    snake, picks uniformly among the remaining free cells instead.

    Raises:
        SpawnExhausted: If the snake covers the whole arena
    """
    rng = rng or random
    occupied = set(snake.segments)
    for _ in range(max_attempts):
        candidate = Point(rng.randint(1, arena_bound - 1), rng.randint(1, arena_bound - 1))
        if candidate not in occupied:
            return candidate

    cells = free_cells(snake, arena_bound)
    if not cells:
        raise SpawnExhausted(arena_bound, len(occupied))
    logger.warning(
        f"Fruit sampling missed {max_attempts} times; "
        f"choosing among {len(cells)} free cells"
    )
    return rng.choice(cells)


def step(
    snake: Snake,
    fruit: Point,
    bound: int,
    rng: Optional[random.Random] = None,
    arena_bound: int = FRUIT_ARENA_BOUND,
    max_attempts: int = MAX_SPAWN_ATTEMPTS,
) -> TickResult:
    """
    Execute one tick and report every verdict at once:
      1) Decide growth with the look-ahead eating check
      2) Move the snake (keeping the tail if it ate)
      3) Check wall and self collisions on the moved snake
      4) Respawn the fruit if it was eaten and the snake survived

    The caller must already have applied any pending turn to
    ``snake.direction``.
    """
    ate = check_eating(snake, fruit)
    moved = tick(snake, grow=ate)

    collision = None
    if check_wall_collision(moved, bound):
        collision = WALL
    elif check_self_collision(moved):
        collision = SELF

    next_fruit: Optional[Point] = fruit
    if ate and collision is None:
        try:
            next_fruit = spawn_fruit(moved, arena_bound, rng=rng, max_attempts=max_attempts)
        except SpawnExhausted as e:
            logger.info(f"Board full: {e}")
            next_fruit = None
        else:
            logger.debug(f"Fruit eaten at {fruit}, respawned at {next_fruit}")

    return TickResult(snake=moved, fruit=next_fruit, ate=ate, collision=collision)
