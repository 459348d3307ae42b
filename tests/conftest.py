"""Shared fixtures; pygame runs headless for the whole test session."""

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from arcade_snake.direction import DirectionBuffer
from arcade_snake.session import Session
from arcade_snake.snake import Snake


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_session(rng):
    """Build a session with an explicit body, food cell and heading."""

    def _make(segments, food, direction="UP", size=30, score=0):
        return Session(
            snake=Snake(segments),
            food=food,
            directions=DirectionBuffer(direction),
            rng=rng,
            score=score,
            size=size,
        )

    return _make
