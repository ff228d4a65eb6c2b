import os
import sys

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pygame
import pytest

from game_context import GameContext


@pytest.fixture
def pygame_env():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def surface(pygame_env) -> pygame.Surface:
    return pygame.Surface((800, 500))


@pytest.fixture
def ice_context() -> GameContext:
    context = GameContext()
    context.puzzle_word = "ice"
    return context


def key_event(char: str, key: int = 0) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key, unicode=char, mod=0)
