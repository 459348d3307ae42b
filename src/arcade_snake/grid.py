"""Grid coordinate helpers."""

from __future__ import annotations

from typing import Iterator

from .config import GRID_SIZE

Cell = tuple[int, int]


def in_bounds(cell: Cell, size: int = GRID_SIZE) -> bool:
    """Return True when the cell lies on a ``size`` x ``size`` board."""
    x, y = cell
    return 0 <= x < size and 0 <= y < size


def step_cell(cell: Cell, direction: tuple[int, int]) -> Cell:
    return (cell[0] + direction[0], cell[1] + direction[1])


def area(size: int = GRID_SIZE) -> int:
    return size * size


def all_cells(size: int = GRID_SIZE) -> Iterator[Cell]:
    """Yield every cell row by row, top-left first."""
    for y in range(size):
        for x in range(size):
            yield (x, y)
