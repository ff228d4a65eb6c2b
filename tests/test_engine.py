from __future__ import annotations

import logging

import pygame
import pytest

from conftest import key_event
from game_context import GameContext
from snowman_game.engine import SnowmanEngine
from snowman_game.renderer import PygameRenderer


@pytest.fixture
def engine(surface: pygame.Surface, ice_context: GameContext) -> SnowmanEngine:
    return SnowmanEngine(PygameRenderer(surface), ice_context)


def _press(engine: SnowmanEngine, keys: str) -> None:
    for key in keys:
        engine.handle_events([key_event(key)])


def test_engine_starts_game_from_context(engine: SnowmanEngine) -> None:
    assert engine.game.puzzle_word == "ice"
    assert engine.game.word_status == "___"
    assert engine.result_message() is None


def test_key_press_requests_render(engine: SnowmanEngine) -> None:
    assert engine.handle_events([key_event("i", pygame.K_i)])
    assert engine.game.word_status == "i__"


def test_non_key_events_are_ignored(engine: SnowmanEngine) -> None:
    events = [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10))]

    assert not engine.handle_events(events)
    assert engine.game.wrong_guesses == 0


def test_modifier_key_counts_as_wrong_guess(engine: SnowmanEngine) -> None:
    engine.handle_events([key_event("", pygame.K_LSHIFT)])

    assert engine.game.wrong_guesses == 1
    assert engine.game.guessed_keys == [pygame.key.name(pygame.K_LSHIFT)]


def test_no_wrong_guesses(engine: SnowmanEngine) -> None:
    _press(engine, "ice")

    assert engine.result_message() == "No wrong guesses!"


def test_one_wrong_guess(engine: SnowmanEngine) -> None:
    _press(engine, "zice")

    assert engine.result_message() == "One wrong guess!"


def test_several_wrong_guesses(engine: SnowmanEngine) -> None:
    _press(engine, "zyice")

    assert engine.result_message() == "2 wrong guesses."


def test_uppercase_guesses_win(engine: SnowmanEngine) -> None:
    _press(engine, "ICE")

    assert engine.game.word_status == "ice"
    assert engine.result_message() == "No wrong guesses!"


def test_seven_absent_letters_end_the_game(engine: SnowmanEngine) -> None:
    _press(engine, "abdfghj")

    assert engine.result_message() == "Game Over"
    assert not engine.handle_events([key_event("i")])
    assert engine.game.word_status == "___"
    assert engine.game.wrong_guesses == 7


def test_key_pressed_after_win_is_ignored(engine: SnowmanEngine) -> None:
    _press(engine, "ice")

    assert not engine.key_pressed("z")
    assert engine.game.wrong_guesses == 0


def test_render_stops_accepting_keys_when_word_is_complete(engine: SnowmanEngine) -> None:
    engine.game.word_status = "ice"

    engine.render()

    assert not engine.game.accept_keys


def test_render_draws_on_surface(engine: SnowmanEngine, surface: pygame.Surface) -> None:
    surface.fill((0, 0, 0))

    engine.render()

    assert tuple(surface.get_at((700, 50)))[:3] == (255, 255, 255)


def test_debug_mode_logs_hidden_parts(engine: SnowmanEngine, caplog: pytest.LogCaptureFixture) -> None:
    engine.game_context.debug_mode = True
    caplog.set_level(logging.DEBUG, logger="snowman_game.engine")

    _press(engine, "zy")

    assert "Hidden snowman parts: mouth, buttons" in caplog.text


def test_game_end_logs_result(engine: SnowmanEngine, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="snowman_game.engine")

    _press(engine, "izce")

    assert "Result (won): One wrong guess!" in caplog.text
