"""Food placement on free grid cells."""

from __future__ import annotations

import logging
import random

from .config import FOOD_SAMPLE_ATTEMPTS, GRID_SIZE
from .grid import Cell, all_cells
from .snake import Snake

logger = logging.getLogger(__name__)


def free_cells(snake: Snake, size: int = GRID_SIZE) -> list[Cell]:
    return [cell for cell in all_cells(size) if cell not in snake]


def place_food(
    snake: Snake,
    size: int = GRID_SIZE,
    rng: random.Random | None = None,
    attempts: int = FOOD_SAMPLE_ATTEMPTS,
) -> Cell | None:
    """Return a random cell that does not collide with the snake.

    Rejection sampling runs for at most ``attempts`` draws; after that the
    free cells are enumerated and one is picked uniformly. Returns None
    when the snake covers the whole board.
    """
    rng = rng or random.Random()
    if len(snake) >= size * size:
        return None

    for _ in range(attempts):
        cell = (rng.randrange(size), rng.randrange(size))
        if cell not in snake:
            return cell

    options = free_cells(snake, size)
    logger.debug(
        "Food sampling fell back to a scan (%d free cells)", len(options)
    )
    if not options:
        return None
    return rng.choice(options)
