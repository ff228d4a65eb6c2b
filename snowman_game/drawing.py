"""
Draw instructions for the snowman game screen.

This module maps the game state to a list of draw instructions (shapes and
text). It never touches pygame, so the whole screen layout can be checked
without a display. The PygameRenderer turns the instructions into pixels.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union
from snowman_game.game import SnowmanGame

Color = Tuple[int, int, int]
Point = Tuple[float, float]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
ALICE_BLUE: Color = (240, 248, 255)
ORANGE: Color = (255, 165, 0)
DODGER_BLUE: Color = (30, 144, 255)
SUCCESS_COLOR: Color = (0, 128, 0)
FAILURE_COLOR: Color = (255, 0, 0)

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 500

# Center of the snowman on the X axis
SNOWMAN_X = 130

# The word status is drawn right of the snowman, anchored at its bottom left
STATUS_POSITION: Point = (SNOWMAN_X + 225, 250)
STATUS_TEXT_SIZE = 45
RESULT_TEXT_SIZE = 65


class ShapeKind(Enum):
    """Primitive shapes supported by the renderer."""
    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"


class TextAlign(Enum):
    """Which point of the text box is placed at the text position."""
    CENTER = "center"
    LEFT_BOTTOM = "left_bottom"


@dataclass(frozen=True)
class Style:
    """Fill and outline of a shape. No stroke if stroke is None."""
    fill: Color
    stroke: Optional[Color] = None
    stroke_weight: int = 0


@dataclass(frozen=True)
class Shape:
    """
    A primitive shape.

    Circles use position as center and size as diameter. Rectangles use
    position as top left corner and size as (width, height). Triangles use
    position as the three corners and have no size.
    """
    kind: ShapeKind
    position: Union[Point, Tuple[Point, Point, Point]]
    size: Union[float, Tuple[float, float], None]
    style: Style


@dataclass(frozen=True)
class Text:
    """A single line of text."""
    content: str
    position: Point
    size: int
    color: Color
    alignment: TextAlign


DrawInstruction = Union[Shape, Text]

BODY_STYLE = Style(fill=ALICE_BLUE, stroke=BLACK, stroke_weight=2)
SOLID_BLACK = Style(fill=BLACK)


def _circle(x: float, y: float, diameter: float, style: Style) -> Shape:
    return Shape(ShapeKind.CIRCLE, (SNOWMAN_X + x, y), diameter, style)


def _rect(x: float, y: float, width: float, height: float, style: Style) -> Shape:
    return Shape(ShapeKind.RECTANGLE, (SNOWMAN_X + x, y), (width, height), style)


def _lower_body() -> List[Shape]:
    return [_circle(0, 350, 250, BODY_STYLE)]


def _upper_body() -> List[Shape]:
    return [_circle(0, 175, 150, BODY_STYLE)]


def _eyes() -> List[Shape]:
    return [_circle(-25, 150, 25, SOLID_BLACK), _circle(25, 150, 25, SOLID_BLACK)]


def _nose() -> List[Shape]:
    corners = ((0, 195), (0, 165), (40, 180))
    return [Shape(
        ShapeKind.TRIANGLE,
        tuple((SNOWMAN_X + x, y) for x, y in corners),
        None,
        Style(fill=ORANGE)
    )]


def _mouth() -> List[Shape]:
    """Six dots on an arc below the nose, forming a smile."""
    style = Style(fill=BLACK, stroke=BLACK, stroke_weight=1)
    shapes = []
    for i in range(6):
        angle = math.radians(45 + 18 * i)
        shapes.append(_circle(40 * math.cos(angle), 180 + 40 * math.sin(angle), 12, style))
    return shapes


def _buttons() -> List[Shape]:
    return [_circle(0, 275 + 25 * i, 15, SOLID_BLACK) for i in range(6)]


def _hat() -> List[Shape]:
    return [_rect(-85, 110, 170, 10, SOLID_BLACK), _rect(-50, 50, 100, 60, SOLID_BLACK)]


@dataclass(frozen=True)
class SnowmanPart:
    """A part of the snowman that is visible while wrong guesses < threshold."""
    name: str
    threshold: int
    build: Callable[[], List[Shape]]

    def is_visible(self, wrong_guesses: int) -> bool:
        return wrong_guesses < self.threshold


# Parts in paint order (body first, hat last so it covers the head)
SNOWMAN_PARTS: List[SnowmanPart] = [
    SnowmanPart("lower_body", 7, _lower_body),
    SnowmanPart("upper_body", 6, _upper_body),
    SnowmanPart("eyes", 4, _eyes),
    SnowmanPart("nose", 3, _nose),
    SnowmanPart("mouth", 2, _mouth),
    SnowmanPart("buttons", 1, _buttons),
    SnowmanPart("hat", 5, _hat),
]


def visible_parts(wrong_guesses: int) -> List[SnowmanPart]:
    """
    Get the snowman parts still shown for a number of wrong guesses.

    Left out parts are additive: after 3 wrong guesses the parts for
    1, 2 and 3 wrong guesses (buttons, mouth, nose) are all gone.

    Args:
        wrong_guesses: Number of wrong guesses so far

    Returns:
        Visible parts in paint order
    """
    return [part for part in SNOWMAN_PARTS if part.is_visible(wrong_guesses)]


def hidden_parts(wrong_guesses: int) -> List[SnowmanPart]:
    """Get the snowman parts already removed for a number of wrong guesses."""
    return [part for part in SNOWMAN_PARTS if not part.is_visible(wrong_guesses)]


def get_result_message(win: bool, wrong_guesses: int) -> str:
    """
    Get the text shown at the end of the game.

    Args:
        win: False if the player reached the maximum wrong guesses, otherwise True
        wrong_guesses: Number of wrong guesses

    Returns:
        "Game Over" on a loss. On a win "No wrong guesses!", "One wrong guess!"
        or "n wrong guesses." depending on the number of wrong guesses.
    """
    if not win:
        return "Game Over"

    match wrong_guesses:
        case 0:
            return "No wrong guesses!"
        case 1:
            return "One wrong guess!"
        case _:
            return f"{wrong_guesses} wrong guesses."


def build_snowman(wrong_guesses: int) -> List[Shape]:
    """Build the shapes of every visible snowman part."""
    shapes = []
    for part in visible_parts(wrong_guesses):
        shapes.extend(part.build())
    return shapes


def build_draw_instructions(game: SnowmanGame, width: int = CANVAS_WIDTH,
                            height: int = CANVAS_HEIGHT) -> List[DrawInstruction]:
    """
    Project the game state to draw instructions.

    Reads the game's phase but never changes the game.

    Args:
        game: Game to draw
        width: Canvas width
        height: Canvas height

    Returns:
        Draw instructions in paint order, starting with the background
    """
    instructions: List[DrawInstruction] = [
        Shape(ShapeKind.RECTANGLE, (0, 0), (width, height), Style(fill=WHITE))
    ]

    if game.is_over:
        win = not game.is_lost
        instructions.append(Text(
            content=get_result_message(win, game.wrong_guesses),
            position=(width // 2, height // 2),
            size=RESULT_TEXT_SIZE,
            color=SUCCESS_COLOR if win else FAILURE_COLOR,
            alignment=TextAlign.CENTER
        ))
        return instructions

    instructions.extend(build_snowman(game.wrong_guesses))
    instructions.append(Text(
        content=game.word_status,
        position=STATUS_POSITION,
        size=STATUS_TEXT_SIZE,
        color=DODGER_BLUE,
        alignment=TextAlign.LEFT_BOTTOM
    ))
    return instructions
