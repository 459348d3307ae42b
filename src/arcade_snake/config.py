"""Centralized configuration and palette definitions for Arcade Snake."""

from __future__ import annotations

import os

import pygame

GRID_SIZE: int = 30
BLOCK: int = 20  # 600 / 20 => 30 cells
WINDOW_SIZE: int = GRID_SIZE * BLOCK
FONT_NAME: str = "consolas"
FONT_SIZE: int = 24
FPS: int = 120

FOOD_REWARD: int = 10
FOOD_SAMPLE_ATTEMPTS: int = 64
INITIAL_SNAKE: tuple[tuple[int, int], ...] = ((10, 10), (10, 11), (10, 12))
INITIAL_DIRECTION: str = "UP"

# Tick interval in milliseconds per speed preset.
SPEED_PRESETS: dict[str, int] = {
    "SLOW": 150,
    "MEDIUM": 100,
    "FAST": 60,
}
DEFAULT_SPEED: str = "MEDIUM"

DIRECTIONS: dict[str, tuple[int, int]] = {
    "UP": (0, -1),
    "DOWN": (0, 1),
    "LEFT": (-1, 0),
    "RIGHT": (1, 0),
}
NO_DIRECTION: tuple[int, int] = (0, 0)
KEY_TO_DIRECTION = {
    pygame.K_UP: "UP",
    pygame.K_w: "UP",
    pygame.K_DOWN: "DOWN",
    pygame.K_s: "DOWN",
    pygame.K_LEFT: "LEFT",
    pygame.K_a: "LEFT",
    pygame.K_RIGHT: "RIGHT",
    pygame.K_d: "RIGHT",
}
KEY_TO_SPEED = {
    pygame.K_1: "SLOW",
    pygame.K_2: "MEDIUM",
    pygame.K_3: "FAST",
}

PALETTE = {
    "bg_top": pygame.Color(7, 10, 18),
    "bg_bottom": pygame.Color(2, 24, 43),
    "grid": pygame.Color(10, 40, 60),
    "food": pygame.Color(255, 71, 87),
    "food_glow": pygame.Color(255, 71, 87, 90),
    "head": pygame.Color(0, 255, 136),
    "body": pygame.Color(0, 255, 136, 178),
    "text": pygame.Color(216, 239, 255),
    "muted": pygame.Color(120, 150, 170),
    "hud": pygame.Color(10, 10, 10, 150),
}

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(message)s"


def _env_seed() -> int | None:
    raw = os.getenv("ARCADE_SNAKE_SEED")
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        return None


ENV_SPEED: str = (os.getenv("ARCADE_SNAKE_SPEED") or DEFAULT_SPEED).upper()
ENV_SEED: int | None = _env_seed()
ENV_LOG_LEVEL: str = (os.getenv("ARCADE_SNAKE_LOG_LEVEL") or "INFO").upper()
