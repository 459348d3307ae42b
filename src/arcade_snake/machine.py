"""Menu / playing / game-over state machine around a play session."""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from typing import Any, Callable

from .config import DEFAULT_SPEED, SPEED_PRESETS
from .grid import Cell
from .scheduler import TickScheduler
from .session import Session, StepOutcome, new_session, step

logger = logging.getLogger(__name__)


class GameStatus(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Read-only view handed to the renderer."""

    status: GameStatus
    snake: tuple[Cell, ...]
    food: Cell | None
    score: int
    final_score: int | None
    best_score: int
    speed: str
    paused: bool = False
    outcome: StepOutcome | None = None


RenderCallback = Callable[[GameSnapshot], None]


def resolve_speed(name: Any) -> str | None:
    if not isinstance(name, str):
        return None
    key = name.strip().upper()
    return key if key in SPEED_PRESETS else None


class SnakeGame:
    """Owns the status, the active session and the tick scheduler.

    Input only ever reaches the session's direction buffer; snake, food
    and score change inside ``on_tick`` alone.
    """

    def __init__(
        self,
        render: RenderCallback | None = None,
        scheduler: TickScheduler | None = None,
        rng: random.Random | None = None,
        speed: str = DEFAULT_SPEED,
    ) -> None:
        self.render = render
        self.scheduler = scheduler or TickScheduler()
        self.rng = rng or random.Random()
        self.status = GameStatus.MENU
        self.session: Session | None = None
        self.speed = resolve_speed(speed) or DEFAULT_SPEED
        self.final_score: int | None = None
        self.best_score: int = 0

    # --- Settings ------------------------------------------------------

    @property
    def interval_ms(self) -> int:
        return SPEED_PRESETS[self.speed]

    def select_speed(self, name: Any) -> bool:
        """Store a preset for the next session; a running one keeps its pace."""
        resolved = resolve_speed(name)
        if resolved is None:
            logger.debug("Unknown speed preset %r", name)
            return False
        self.speed = resolved
        return True

    # --- Transitions ---------------------------------------------------

    def start(self) -> bool:
        """Menu -> Playing."""
        if self.status is not GameStatus.MENU:
            logger.debug("start ignored while %s", self.status.value)
            return False
        self._begin_session()
        return True

    def restart(self) -> bool:
        """GameOver -> Playing."""
        if self.status is not GameStatus.GAME_OVER:
            logger.debug("restart ignored while %s", self.status.value)
            return False
        self._begin_session()
        return True

    def return_to_menu(self) -> bool:
        """Playing | GameOver -> Menu, dropping the session."""
        if self.status is GameStatus.MENU:
            logger.debug("return_to_menu ignored while already in menu")
            return False
        self.scheduler.stop()
        self.session = None
        self.final_score = None
        self.status = GameStatus.MENU
        logger.info("Returned to menu")
        return True

    def toggle_pause(self) -> bool:
        if self.status is not GameStatus.PLAYING:
            return False
        if self.scheduler.paused:
            self.scheduler.resume()
        else:
            self.scheduler.pause()
        return True

    def _begin_session(self) -> None:
        self.scheduler.stop()
        self.session = new_session(self.rng)
        self.final_score = None
        self.status = GameStatus.PLAYING
        self.scheduler.start(self.interval_ms, self.on_tick)
        logger.info(
            "Session started at %s speed (%d ms per tick)",
            self.speed,
            self.interval_ms,
        )
        self._emit()

    def _finish(self, session: Session, outcome: StepOutcome) -> None:
        self.scheduler.stop()
        self.final_score = session.score
        self.best_score = max(self.best_score, self.final_score)
        self.status = GameStatus.GAME_OVER
        logger.info(
            "Game over (%s) with score %d after %d ticks",
            outcome.value,
            self.final_score,
            session.ticks,
        )

    # --- Input / ticks -------------------------------------------------

    def on_direction_request(self, direction: Any) -> bool:
        if self.status is not GameStatus.PLAYING or self.session is None:
            return False
        return self.session.directions.request(direction)

    def on_tick(self) -> StepOutcome | None:
        """Run one simulation step; render only when the game goes on."""
        if self.status is not GameStatus.PLAYING or self.session is None:
            return None
        outcome = step(self.session)
        if outcome.terminal:
            self._finish(self.session, outcome)
        else:
            self._emit()
        return outcome

    # --- Views ---------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        session = self.session
        return GameSnapshot(
            status=self.status,
            snake=session.snake.segments if session else (),
            food=session.food if session else None,
            score=session.score if session else 0,
            final_score=self.final_score,
            best_score=self.best_score,
            speed=self.speed,
            paused=self.scheduler.paused,
            outcome=session.last_outcome if session else None,
        )

    def _emit(self) -> None:
        if self.render is not None:
            self.render(self.snapshot())
