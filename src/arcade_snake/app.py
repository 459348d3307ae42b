"""pygame front end: window, renderer, keyboard input and the frame loop."""

from __future__ import annotations

import argparse
import logging
import random

import pygame

from .config import (
    BLOCK,
    DEFAULT_SPEED,
    ENV_LOG_LEVEL,
    ENV_SEED,
    ENV_SPEED,
    FONT_NAME,
    FONT_SIZE,
    FPS,
    KEY_TO_DIRECTION,
    KEY_TO_SPEED,
    LOG_FORMAT,
    PALETTE,
    SPEED_PRESETS,
    WINDOW_SIZE,
)
from .grid import Cell
from .machine import GameSnapshot, GameStatus, SnakeGame

logger = logging.getLogger(__name__)

SPEED_ORDER: tuple[str, ...] = tuple(SPEED_PRESETS)
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class Renderer:
    """Projects a snapshot onto an offscreen scene; never touches game state."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.scene = pygame.Surface((WINDOW_SIZE, WINDOW_SIZE), pygame.SRCALPHA)
        self.background = self._build_background()
        self.scanlines = self._build_scanlines()
        self.scanlines_enabled: bool = True
        self.frames: int = 0

    def _build_background(self) -> pygame.Surface:
        """Create a gradient grid background once to keep draws light."""
        surface = pygame.Surface((WINDOW_SIZE, WINDOW_SIZE))
        top, bottom = PALETTE["bg_top"], PALETTE["bg_bottom"]
        for y in range(WINDOW_SIZE):
            t = y / WINDOW_SIZE
            r = int(top.r + (bottom.r - top.r) * t)
            g = int(top.g + (bottom.g - top.g) * t)
            b = int(top.b + (bottom.b - top.b) * t)
            pygame.draw.line(surface, (r, g, b), (0, y), (WINDOW_SIZE, y))
        for i in range(0, WINDOW_SIZE, BLOCK):
            pygame.draw.line(surface, PALETTE["grid"], (i, 0), (i, WINDOW_SIZE), 1)
            pygame.draw.line(surface, PALETTE["grid"], (0, i), (WINDOW_SIZE, i), 1)
        return surface

    def _build_scanlines(self) -> pygame.Surface:
        overlay = pygame.Surface((WINDOW_SIZE, WINDOW_SIZE), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 0))
        for y in range(0, WINDOW_SIZE, 2):
            pygame.draw.line(overlay, (0, 0, 0, 60), (0, y), (WINDOW_SIZE, y))
        return overlay

    @staticmethod
    def cell_rect(cell: Cell) -> pygame.Rect:
        # 1px gap on every side so neighbouring segments read as tiles
        return pygame.Rect(cell[0] * BLOCK + 1, cell[1] * BLOCK + 1, BLOCK - 2, BLOCK - 2)

    def _draw_food(self, cell: Cell) -> None:
        rect = self.cell_rect(cell)
        halo = pygame.Surface((BLOCK * 2, BLOCK * 2), pygame.SRCALPHA)
        pygame.draw.circle(halo, PALETTE["food_glow"], (BLOCK, BLOCK), BLOCK * 3 // 4)
        self.scene.blit(halo, halo.get_rect(center=rect.center))
        pygame.draw.rect(self.scene, PALETTE["food"], rect, border_radius=4)

    def _draw_snake(self, segments: tuple[Cell, ...]) -> None:
        body = pygame.Surface((BLOCK, BLOCK), pygame.SRCALPHA)
        for idx, cell in enumerate(segments):
            rect = self.cell_rect(cell)
            if idx == 0:
                pygame.draw.rect(self.scene, PALETTE["head"], rect, border_radius=4)
                continue
            body.fill((0, 0, 0, 0))
            pygame.draw.rect(
                body, PALETTE["body"], body.get_rect().inflate(-2, -2), border_radius=4
            )
            self.scene.blit(body, (rect.left - 1, rect.top - 1))

    def _draw_hud(self, snapshot: GameSnapshot) -> None:
        text = self.font.render(f"SCORE {snapshot.score:04}", True, PALETTE["text"])
        hud_rect = pygame.Rect(10, 10, text.get_width() + 16, text.get_height() + 10)
        hud = pygame.Surface(hud_rect.size, pygame.SRCALPHA)
        hud.fill(PALETTE["hud"])
        if snapshot.snake and hud_rect.colliderect(self.cell_rect(snapshot.snake[0])):
            hud.set_alpha(70)
        hud.blit(text, (8, 5))
        self.scene.blit(hud, hud_rect.topleft)

    def _draw_overlay(self, lines: list[str]) -> None:
        overlay = pygame.Surface((WINDOW_SIZE, WINDOW_SIZE), pygame.SRCALPHA)
        overlay.fill((5, 5, 15, 160))
        top = WINDOW_SIZE // 2 - (len(lines) * (FONT_SIZE + 8)) // 2
        for idx, text in enumerate(lines):
            surf = self.font.render(text, True, PALETTE["text"])
            rect = surf.get_rect(center=(WINDOW_SIZE // 2, top + idx * (FONT_SIZE + 8)))
            overlay.blit(surf, rect)
        self.scene.blit(overlay, (0, 0))

    def render(self, snapshot: GameSnapshot) -> None:
        """Draw one fully-resolved tick (or a menu / game-over screen)."""
        self.frames += 1
        self.scene.blit(self.background, (0, 0))

        if snapshot.status is GameStatus.MENU:
            self._draw_overlay(menu_lines(snapshot.speed))
        else:
            if snapshot.food is not None:
                self._draw_food(snapshot.food)
            self._draw_snake(snapshot.snake)
            self._draw_hud(snapshot)
            if snapshot.status is GameStatus.GAME_OVER:
                self._draw_overlay(
                    [
                        "Game Over",
                        f"Score: {snapshot.final_score or 0}",
                        f"Best:  {snapshot.best_score}",
                        "R to restart / M for menu / Q to quit",
                    ]
                )
            elif snapshot.paused:
                self._draw_overlay(["Paused", "Press SPACE to resume"])

        if self.scanlines_enabled:
            self.scene.blit(self.scanlines, (0, 0))


def menu_lines(selected: str) -> list[str]:
    choices = "  ".join(
        f"[{name}]" if name == selected else name for name in SPEED_ORDER
    )
    return [
        "ARCADE SNAKE",
        "",
        choices,
        "1/2/3 or LEFT/RIGHT: speed",
        "ENTER to start",
    ]


def cycle_speed(current: str, step: int) -> str:
    idx = SPEED_ORDER.index(current) if current in SPEED_ORDER else 0
    return SPEED_ORDER[(idx + step) % len(SPEED_ORDER)]


class ArcadeSnake:
    """Window + input source + UI shell wired to a SnakeGame."""

    def __init__(
        self,
        speed: str = ENV_SPEED,
        seed: int | None = ENV_SEED,
        window_flags: int = pygame.DOUBLEBUF | pygame.SCALED,
    ) -> None:
        pygame.init()
        self._base_window_flags = window_flags
        self.fullscreen = False
        self.window = pygame.display.set_mode(
            (WINDOW_SIZE, WINDOW_SIZE), self._base_window_flags
        )
        pygame.display.set_caption("Arcade Snake")
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.renderer = Renderer(self.font)
        self.game = SnakeGame(
            render=self.renderer.render,
            rng=random.Random(seed),
            speed=speed,
        )
        if seed is not None:
            logger.info("Using RNG seed %d", seed)

    def _apply_display_mode(self) -> None:
        """Recreate the main window honoring the fullscreen toggle."""
        flags = self._base_window_flags
        if self.fullscreen:
            flags |= pygame.FULLSCREEN
        try:
            self.window = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE), flags)
        except pygame.error as exc:
            logger.warning("Could not switch display mode: %s", exc)
            self.fullscreen = not self.fullscreen
            return
        title = "Arcade Snake" + (" [Fullscreen]" if self.fullscreen else "")
        pygame.display.set_caption(title)

    # --- Input ---------------------------------------------------------

    def handle_key(self, key: int) -> bool:
        """Translate one key press into a game intent. Returns False to quit."""
        game = self.game

        if key in (pygame.K_f, pygame.K_F11):
            self.fullscreen = not self.fullscreen
            self._apply_display_mode()
            return True
        if key == pygame.K_c:
            self.renderer.scanlines_enabled = not self.renderer.scanlines_enabled
            return True

        if game.status is GameStatus.MENU:
            if key in KEY_TO_SPEED:
                game.select_speed(KEY_TO_SPEED[key])
            elif key in (pygame.K_LEFT, pygame.K_a):
                game.select_speed(cycle_speed(game.speed, -1))
            elif key in (pygame.K_RIGHT, pygame.K_d):
                game.select_speed(cycle_speed(game.speed, 1))
            elif key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
                game.start()
            elif key in (pygame.K_q, pygame.K_ESCAPE):
                return False
            return True

        if game.status is GameStatus.GAME_OVER:
            if key in (pygame.K_r, pygame.K_RETURN, pygame.K_KP_ENTER):
                game.restart()
            elif key in (pygame.K_m, pygame.K_ESCAPE):
                game.return_to_menu()
            elif key == pygame.K_q:
                return False
            return True

        if key == pygame.K_SPACE:
            game.toggle_pause()
        elif key in (pygame.K_m, pygame.K_ESCAPE):
            game.return_to_menu()
        elif key in KEY_TO_DIRECTION:
            game.on_direction_request(KEY_TO_DIRECTION[key])
        return True

    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and not self.handle_key(event.key):
                return False
        return True

    # --- Main loop -----------------------------------------------------

    def present(self) -> None:
        self.window.fill((0, 0, 0))
        self.window.blit(self.renderer.scene, (0, 0))
        pygame.display.update()

    def frame(self, elapsed_ms: float) -> None:
        """Feed elapsed time to the scheduler, then refresh the window."""
        if self.game.status is GameStatus.PLAYING:
            self.game.scheduler.advance(elapsed_ms)
        # Ticks render themselves; everything else is redrawn here.
        if self.game.status is not GameStatus.PLAYING or self.game.scheduler.paused:
            self.renderer.render(self.game.snapshot())
        self.present()

    def start(self) -> None:
        """Run the frame loop until the window closes or the player quits."""
        clock = pygame.time.Clock()
        self.renderer.render(self.game.snapshot())
        running = True
        while running:
            elapsed = clock.tick(FPS)
            running = self.handle_events()
            if running:
                self.frame(elapsed)
        self.game.scheduler.stop()
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Classic grid snake.")
    parser.add_argument(
        "--speed",
        type=str.upper,
        choices=SPEED_ORDER,
        default=ENV_SPEED if ENV_SPEED in SPEED_PRESETS else DEFAULT_SPEED,
        help="Tick speed preset preselected in the menu",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=ENV_SEED,
        help="Seed for food placement (reproducible games)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=ENV_LOG_LEVEL if ENV_LOG_LEVEL in LOG_LEVELS else "INFO",
        choices=LOG_LEVELS,
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    app = ArcadeSnake(speed=args.speed, seed=args.seed)
    app.start()


if __name__ == "__main__":
    main()
