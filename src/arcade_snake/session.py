"""Per-game state and the one-tick simulation step."""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass, field

from .config import FOOD_REWARD, GRID_SIZE, INITIAL_DIRECTION
from .direction import DirectionBuffer
from .food import place_food
from .grid import Cell, in_bounds, step_cell
from .snake import Snake, initial_snake

logger = logging.getLogger(__name__)


class StepOutcome(enum.Enum):
    MOVED = "moved"
    ATE = "ate"
    HIT_WALL = "hit_wall"
    HIT_SELF = "hit_self"
    BOARD_FULL = "board_full"

    @property
    def terminal(self) -> bool:
        return self in (
            StepOutcome.HIT_WALL,
            StepOutcome.HIT_SELF,
            StepOutcome.BOARD_FULL,
        )


@dataclass(slots=True)
class Session:
    """Everything that lives for exactly one round of play."""

    snake: Snake
    food: Cell | None
    directions: DirectionBuffer
    rng: random.Random
    score: int = 0
    ticks: int = 0
    size: int = GRID_SIZE
    last_outcome: StepOutcome | None = field(default=None)


def new_session(rng: random.Random | None = None, size: int = GRID_SIZE) -> Session:
    """Fresh snake moving up, zero score and a first food placement."""
    rng = rng or random.Random()
    snake = initial_snake()
    return Session(
        snake=snake,
        food=place_food(snake, size, rng),
        directions=DirectionBuffer(INITIAL_DIRECTION),
        rng=rng,
        size=size,
    )


def step(session: Session) -> StepOutcome:
    """Advance the session by exactly one grid cell.

    Collisions are checked before anything moves, so a terminal outcome
    leaves snake, food and score as they were. The self check runs
    against the whole current body, tail included: entering the cell the
    tail is about to leave ends the game.
    """
    direction = session.directions.commit()
    new_head = step_cell(session.snake.head, direction)

    if not in_bounds(new_head, session.size):
        session.last_outcome = StepOutcome.HIT_WALL
        return session.last_outcome
    if new_head in session.snake:
        session.last_outcome = StepOutcome.HIT_SELF
        return session.last_outcome

    session.snake.push_head(new_head)
    session.ticks += 1

    if new_head == session.food:
        session.score += FOOD_REWARD
        session.food = place_food(session.snake, session.size, session.rng)
        if session.food is None:
            logger.info("Board is full at length %d", len(session.snake))
            session.last_outcome = StepOutcome.BOARD_FULL
        else:
            session.last_outcome = StepOutcome.ATE
        return session.last_outcome

    session.snake.pop_tail()
    session.last_outcome = StepOutcome.MOVED
    return session.last_outcome
