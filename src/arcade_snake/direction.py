"""Direction parsing and the per-tick direction buffer."""

from __future__ import annotations

import logging
from typing import Any

from .config import DIRECTIONS, INITIAL_DIRECTION, NO_DIRECTION

logger = logging.getLogger(__name__)

Vector = tuple[int, int]

_VALID_VECTORS = frozenset(DIRECTIONS.values())


def parse_direction(value: Any) -> Vector | None:
    """Turn a name like ``"up"`` or a unit vector into a vector; None if malformed."""
    if isinstance(value, str):
        return DIRECTIONS.get(value.strip().upper())
    try:
        dx, dy = value
    except (TypeError, ValueError):
        return None
    if isinstance(dx, bool) or isinstance(dy, bool):
        return None
    if not isinstance(dx, int) or not isinstance(dy, int):
        return None
    vector = (dx, dy)
    return vector if vector in _VALID_VECTORS else None


def is_opposite(a: Vector, b: Vector) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def direction_name(vector: Vector) -> str:
    for name, candidate in DIRECTIONS.items():
        if candidate == vector:
            return name
    return "NONE"


class DirectionBuffer:
    """Holds the committed direction and the one requested for the next tick.

    Input may arrive any number of times between ticks; only the latest
    valid request survives, and ``commit`` applies at most one change per
    tick. A request is checked against the committed direction, never the
    pending one.
    """

    def __init__(self, initial: Vector | str = INITIAL_DIRECTION) -> None:
        vector = parse_direction(initial)
        if vector is None:
            raise ValueError(f"invalid initial direction: {initial!r}")
        self.committed: Vector = vector
        self.pending: Vector = vector

    def request(self, value: Any) -> bool:
        vector = parse_direction(value)
        if vector is None:
            logger.debug("Ignoring malformed direction request %r", value)
            return False
        if is_opposite(vector, self.committed):
            logger.debug(
                "Ignoring reversal %s while moving %s",
                direction_name(vector),
                direction_name(self.committed),
            )
            return False
        self.pending = vector
        return True

    def commit(self) -> Vector:
        if self.pending != NO_DIRECTION and not is_opposite(
            self.pending, self.committed
        ):
            self.committed = self.pending
        return self.committed
