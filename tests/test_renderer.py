from __future__ import annotations

import pygame
import pytest

from snowman_game.drawing import (
    ALICE_BLUE, BLACK, ORANGE, WHITE,
    Shape, ShapeKind, Style, Text, TextAlign, build_draw_instructions,
)
from snowman_game.game import SnowmanGame
from snowman_game.renderer import FontLoadError, PygameRenderer


def _color_at(surface: pygame.Surface, pos: tuple[int, int]) -> tuple[int, int, int]:
    return tuple(surface.get_at(pos))[:3]


def _draw_after(surface: pygame.Surface, wrong_keys: str) -> None:
    game = SnowmanGame("ice")
    for key in wrong_keys:
        game.guess(key)
    PygameRenderer(surface).draw(build_draw_instructions(game))


def test_full_snowman_pixels(surface: pygame.Surface) -> None:
    _draw_after(surface, "")

    assert _color_at(surface, (190, 350)) == ALICE_BLUE  # lower body
    assert _color_at(surface, (140, 180)) == ORANGE  # nose
    assert _color_at(surface, (130, 80)) == BLACK  # hat
    assert _color_at(surface, (700, 50)) == WHITE  # background


def test_nose_is_gone_after_three_wrong_guesses(surface: pygame.Surface) -> None:
    _draw_after(surface, "xyz")

    assert _color_at(surface, (140, 180)) == ALICE_BLUE


def test_hat_is_gone_after_five_wrong_guesses(surface: pygame.Surface) -> None:
    _draw_after(surface, "uvxyz")

    assert _color_at(surface, (130, 80)) == WHITE


def test_stroke_is_drawn_over_fill(surface: pygame.Surface) -> None:
    renderer = PygameRenderer(surface)
    renderer.draw_shape(Shape(ShapeKind.RECTANGLE, (10, 10), (50, 50), Style(fill=WHITE, stroke=BLACK, stroke_weight=2)))

    assert _color_at(surface, (10, 30)) == BLACK
    assert _color_at(surface, (35, 35)) == WHITE


def test_text_alignment(surface: pygame.Surface) -> None:
    renderer = PygameRenderer(surface)
    surface.fill(WHITE)

    renderer.draw_text(Text("Game Over", (400, 250), 65, (255, 0, 0), TextAlign.CENTER))

    changed = [
        (x, y) for x in range(0, 800, 2) for y in range(0, 500, 2)
        if _color_at(surface, (x, y)) != WHITE
    ]
    assert changed
    xs = [x for x, _ in changed]
    ys = [y for _, y in changed]
    assert min(xs) < 400 < max(xs)
    assert min(ys) < 250 < max(ys)


def test_status_text_sits_above_its_anchor(surface: pygame.Surface) -> None:
    renderer = PygameRenderer(surface)
    surface.fill(WHITE)

    renderer.draw_text(Text("___", (355, 250), 45, (30, 144, 255), TextAlign.LEFT_BOTTOM))

    changed = [
        (x, y) for x in range(0, 800, 2) for y in range(0, 500, 2)
        if _color_at(surface, (x, y)) != WHITE
    ]
    assert changed
    assert min(x for x, _ in changed) >= 355
    assert max(y for _, y in changed) < 250


def test_fonts_are_cached_per_size(surface: pygame.Surface) -> None:
    renderer = PygameRenderer(surface)

    assert renderer.load_font(65) is renderer.load_font(65)
    assert set(renderer.fonts) == {45, 65}


def test_missing_font_fails_fast(surface: pygame.Surface) -> None:
    with pytest.raises(FontLoadError):
        PygameRenderer(surface, font_path="/nonexistent/SyneMono-Regular.ttf")
