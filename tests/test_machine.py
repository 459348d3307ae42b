"""Tests for the menu / playing / game-over state machine."""

import random
from unittest.mock import Mock

import pytest

from arcade_snake.config import SPEED_PRESETS
from arcade_snake.machine import GameSnapshot, GameStatus, SnakeGame
from arcade_snake.session import StepOutcome


@pytest.fixture
def render():
    return Mock()


@pytest.fixture
def game(render):
    return SnakeGame(render=render, rng=random.Random(42))


def run_until_over(game, limit=50):
    for _ in range(limit):
        if game.status is not GameStatus.PLAYING:
            return
        game.scheduler.tick()
    raise AssertionError("game never ended")


class TestTransitions:
    def test_starts_in_menu(self, game, render):
        assert game.status is GameStatus.MENU
        assert game.session is None
        assert game.scheduler.running is False
        render.assert_not_called()

    def test_start_begins_session_and_renders_once(self, game, render):
        assert game.start() is True
        assert game.status is GameStatus.PLAYING
        assert game.scheduler.running
        assert game.scheduler.interval_ms == SPEED_PRESETS["MEDIUM"]
        render.assert_called_once()
        snapshot = render.call_args.args[0]
        assert isinstance(snapshot, GameSnapshot)
        assert snapshot.snake == ((10, 10), (10, 11), (10, 12))
        assert snapshot.score == 0
        assert snapshot.food not in snapshot.snake

    def test_tick_renders_after_each_step(self, game, render):
        game.start()
        game.scheduler.tick()
        game.scheduler.tick()
        assert render.call_count == 3
        assert render.call_args.args[0].snake[0] == (10, 8)

    def test_wall_hit_ends_game(self, game, render):
        game.start()
        run_until_over(game)
        assert game.status is GameStatus.GAME_OVER
        assert game.scheduler.running is False
        assert game.final_score == game.session.score
        assert game.snapshot().outcome is StepOutcome.HIT_WALL
        # 1 render on start plus one per non-terminal tick (10 moves up).
        assert render.call_count == 11

    def test_no_mutation_after_game_over(self, game):
        game.start()
        run_until_over(game)
        frozen = game.snapshot()
        assert game.scheduler.tick() is False
        assert game.on_tick() is None
        assert game.on_direction_request("LEFT") is False
        assert game.snapshot() == frozen

    def test_restart_from_game_over(self, game, render):
        game.start()
        run_until_over(game)
        old_session = game.session
        renders = render.call_count
        assert game.restart() is True
        assert render.call_count == renders + 1
        snapshot = render.call_args.args[0]
        assert snapshot.status is GameStatus.PLAYING
        assert snapshot.score == 0
        assert snapshot.snake == ((10, 10), (10, 11), (10, 12))
        assert game.status is GameStatus.PLAYING
        assert game.session is not old_session
        assert game.session.score == 0
        assert game.final_score is None
        assert game.scheduler.running

    def test_return_to_menu_from_playing(self, game):
        game.start()
        assert game.return_to_menu() is True
        assert game.status is GameStatus.MENU
        assert game.session is None
        assert game.scheduler.running is False

    def test_return_to_menu_from_game_over(self, game):
        game.start()
        run_until_over(game)
        assert game.return_to_menu() is True
        assert game.status is GameStatus.MENU
        assert game.final_score is None

    def test_invalid_transitions_are_noops(self, game):
        assert game.restart() is False
        assert game.return_to_menu() is False
        game.start()
        session = game.session
        assert game.start() is False
        assert game.restart() is False
        assert game.session is session

    def test_best_score_survives_sessions(self, game):
        game.start()
        game.session.score = 40
        run_until_over(game)
        game.restart()
        run_until_over(game)
        assert game.best_score >= 40
        assert game.snapshot().best_score == game.best_score


class TestSpeed:
    def test_unknown_preset_is_ignored(self, game):
        assert game.select_speed("ludicrous") is False
        assert game.speed == "MEDIUM"

    def test_selection_applies_on_next_start(self, game):
        assert game.select_speed("fast") is True
        game.start()
        assert game.scheduler.interval_ms == SPEED_PRESETS["FAST"]

    def test_change_mid_session_waits_for_next_session(self, game):
        game.start()
        game.select_speed("SLOW")
        assert game.scheduler.interval_ms == SPEED_PRESETS["MEDIUM"]
        run_until_over(game)
        game.restart()
        assert game.scheduler.interval_ms == SPEED_PRESETS["SLOW"]

    def test_bad_initial_speed_falls_back(self):
        assert SnakeGame(speed="warp").speed == "MEDIUM"

    @pytest.mark.parametrize("value", [None, 150, ("FAST",)])
    def test_non_string_preset_is_ignored(self, game, value):
        """Garbage speed values leave the running session alone."""
        game.start()
        assert game.select_speed(value) is False
        assert game.speed == "MEDIUM"
        assert game.status is GameStatus.PLAYING
        assert game.scheduler.interval_ms == SPEED_PRESETS["MEDIUM"]

    def test_non_string_initial_speed_falls_back(self):
        assert SnakeGame(speed=None).speed == "MEDIUM"


class TestInput:
    def test_direction_ignored_outside_playing(self, game):
        assert game.on_direction_request("LEFT") is False

    def test_direction_reaches_buffer(self, game):
        game.start()
        assert game.on_direction_request("LEFT") is True
        assert game.on_direction_request("RIGHT") is True
        assert game.on_direction_request("DOWN") is False
        game.scheduler.tick()
        assert game.session.snake.head == (11, 10)

    def test_malformed_direction_keeps_session_running(self, game):
        game.start()
        assert game.on_direction_request(object()) is False
        assert game.status is GameStatus.PLAYING

    def test_pause_stops_ticks(self, game, render):
        game.start()
        assert game.toggle_pause() is True
        assert game.snapshot().paused
        assert game.scheduler.advance(1000) == 0
        game.toggle_pause()
        assert game.scheduler.advance(SPEED_PRESETS["MEDIUM"]) == 1

    def test_pause_outside_playing(self, game):
        assert game.toggle_pause() is False

    def test_works_without_renderer(self):
        game = SnakeGame(rng=random.Random(3))
        game.start()
        assert game.on_tick() in (StepOutcome.MOVED, StepOutcome.ATE)
