"""Tests for food placement."""

import random

from arcade_snake.food import free_cells, place_food
from arcade_snake.grid import all_cells
from arcade_snake.snake import Snake, initial_snake


class TestPlaceFood:
    def test_never_lands_on_snake(self, rng):
        snake = initial_snake()
        for _ in range(500):
            cell = place_food(snake, rng=rng)
            assert cell not in snake
            assert 0 <= cell[0] < 30 and 0 <= cell[1] < 30

    def test_seeded_placement_is_reproducible(self):
        snake = initial_snake()
        first = place_food(snake, rng=random.Random(7))
        second = place_food(snake, rng=random.Random(7))
        assert first == second

    def test_falls_back_to_scan_when_sampling_misses(self):
        """A nearly full board still yields its single free cell."""
        cells = [cell for cell in all_cells(4) if cell != (2, 3)]
        snake = Snake(cells)
        assert place_food(snake, size=4, rng=random.Random(0), attempts=0) == (2, 3)

    def test_full_board_returns_none(self):
        snake = Snake(list(all_cells(3)))
        assert place_food(snake, size=3, rng=random.Random(0)) is None

    def test_free_cells(self):
        snake = Snake([(0, 0), (1, 0)])
        assert free_cells(snake, size=2) == [(0, 1), (1, 1)]
