"""Snake body storage."""

from __future__ import annotations

from collections import Counter, deque
from typing import Iterable, Iterator

from .config import INITIAL_SNAKE
from .grid import Cell


class Snake:
    """
    Ordered body segments, head at index 0 and tail at the end.

    Segments live in a deque so growing at the head and dropping the tail
    are both O(1). A Counter mirrors the body for O(1) membership tests.
    """

    def __init__(self, segments: Iterable[Cell]):
        self._body: deque[Cell] = deque(tuple(cell) for cell in segments)
        if not self._body:
            raise ValueError("a snake needs at least one segment")
        self._occupied: Counter[Cell] = Counter(self._body)
        if len(self._occupied) != len(self._body):
            raise ValueError("snake segments must not overlap")

    @property
    def head(self) -> Cell:
        return self._body[0]

    @property
    def tail(self) -> Cell:
        return self._body[-1]

    @property
    def segments(self) -> tuple[Cell, ...]:
        """Immutable copy of the body, head first."""
        return tuple(self._body)

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._body)

    def __contains__(self, cell: object) -> bool:
        return self._occupied[cell] > 0  # type: ignore[index]

    def push_head(self, cell: Cell) -> None:
        self._body.appendleft(cell)
        self._occupied[cell] += 1

    def pop_tail(self) -> Cell:
        if len(self._body) <= 1:
            raise ValueError("cannot shrink a snake below one segment")
        cell = self._body.pop()
        self._occupied[cell] -= 1
        if self._occupied[cell] <= 0:
            del self._occupied[cell]
        return cell

    def __repr__(self) -> str:
        return f"Snake({list(self._body)!r})"


def initial_snake() -> Snake:
    """Three segments stacked vertically, head on top, ready to move up."""
    return Snake(INITIAL_SNAKE)
