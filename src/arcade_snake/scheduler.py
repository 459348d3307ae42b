"""Fixed-interval tick scheduler driven by elapsed frame time."""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

TickCallback = Callable[[], object]


class TickScheduler:
    """Calls a callback once per interval; time is fed in from the outside.

    The frame loop passes elapsed milliseconds to ``advance``; tests can
    call ``tick`` directly instead. Only one schedule exists at a time:
    ``start`` replaces whatever was running.
    """

    def __init__(self) -> None:
        self.interval_ms: int | None = None
        self.paused: bool = False
        self._callback: TickCallback | None = None
        self._accumulator: float = 0.0

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, interval_ms: int, callback: TickCallback) -> None:
        if interval_ms <= 0:
            raise ValueError(f"tick interval must be positive, got {interval_ms}")
        self.stop()
        self.interval_ms = interval_ms
        self._callback = callback
        self._accumulator = 0.0
        self.paused = False
        logger.debug("Scheduler started at %d ms", interval_ms)

    def stop(self) -> None:
        if self._callback is None:
            return
        self._callback = None
        self.interval_ms = None
        self._accumulator = 0.0
        self.paused = False
        logger.debug("Scheduler stopped")

    def pause(self) -> None:
        if self.running:
            self.paused = True

    def resume(self) -> None:
        if self.running and self.paused:
            self.paused = False
            self._accumulator = 0.0

    def tick(self) -> bool:
        """Fire the callback once; returns False when nothing is scheduled."""
        if self._callback is None or self.paused:
            return False
        self._callback()
        return True

    def advance(self, elapsed_ms: float) -> int:
        """Accumulate elapsed time and fire one tick per whole interval."""
        if self._callback is None or self.paused or elapsed_ms <= 0:
            return 0
        self._accumulator += elapsed_ms
        fired = 0
        # The callback may stop or pause the schedule mid-loop.
        while (
            self.interval_ms is not None
            and not self.paused
            and self._accumulator >= self.interval_ms
        ):
            self._accumulator -= self.interval_ms
            if self.tick():
                fired += 1
        return fired
