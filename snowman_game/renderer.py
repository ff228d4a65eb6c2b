"""Pygame renderer for snowman draw instructions."""

import logging
import pygame
from typing import Dict, Iterable, Optional
from snowman_game.drawing import (
    DrawInstruction, Shape, ShapeKind, Text, TextAlign, STATUS_TEXT_SIZE
)

logger = logging.getLogger(__name__)


class FontLoadError(Exception):
    """Raised when the text font cannot be loaded."""


def create_surface(width: int, height: int, caption: str) -> pygame.Surface:
    """
    Create the display surface.

    Must be called once before anything is drawn.

    Args:
        width: Window width in pixels
        height: Window height in pixels
        caption: Window title

    Returns:
        The display surface
    """
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)
    return screen


class PygameRenderer:
    """
    Draws shapes and text on a pygame surface.

    Fonts are loaded once per text size. The first font is loaded when the
    renderer is created so that a broken font file stops the game before
    it starts.
    """

    def __init__(self, surface: pygame.Surface, font_path: Optional[str] = None):
        """
        Initialize the renderer.

        Args:
            surface: Pygame surface to draw on
            font_path: Path to a TTF/OTF font, or None for the pygame default font

        Raises:
            FontLoadError: If the font cannot be loaded
        """
        self.surface = surface
        self.font_path = font_path
        self.fonts: Dict[int, pygame.font.Font] = {}
        self.load_font(STATUS_TEXT_SIZE)

    def load_font(self, size: int) -> pygame.font.Font:
        """
        Get the font for a text size, loading it on first use.

        Args:
            size: Text size in pixels

        Returns:
            The loaded font

        Raises:
            FontLoadError: If the font cannot be loaded
        """
        if size not in self.fonts:
            try:
                self.fonts[size] = pygame.font.Font(self.font_path, size)
            except (OSError, pygame.error) as err:
                raise FontLoadError(f"Could not load font '{self.font_path}': {err}") from err
            logger.debug("Loaded font %s at size %d", self.font_path or "<default>", size)
        return self.fonts[size]

    def draw(self, instructions: Iterable[DrawInstruction]) -> None:
        """
        Draw instructions in order.

        Args:
            instructions: Shapes and texts to draw
        """
        for instruction in instructions:
            if isinstance(instruction, Text):
                self.draw_text(instruction)
            else:
                self.draw_shape(instruction)

    def draw_shape(self, shape: Shape) -> None:
        """
        Draw a filled shape and its outline.

        Args:
            shape: Shape to draw
        """
        style = shape.style
        self._draw_primitive(shape, style.fill, 0)
        if style.stroke is not None and style.stroke_weight > 0:
            self._draw_primitive(shape, style.stroke, style.stroke_weight)

    def _draw_primitive(self, shape: Shape, color, width: int) -> None:
        """Draw the shape's outline (width > 0) or its filled area (width 0)."""
        match shape.kind:
            case ShapeKind.CIRCLE:
                pygame.draw.circle(self.surface, color, shape.position, shape.size / 2, width)
            case ShapeKind.RECTANGLE:
                x, y = shape.position
                w, h = shape.size
                pygame.draw.rect(self.surface, color, pygame.Rect(round(x), round(y), round(w), round(h)), width)
            case ShapeKind.TRIANGLE:
                pygame.draw.polygon(self.surface, color, shape.position, width)

    def draw_text(self, text: Text) -> None:
        """
        Draw a line of text.

        Args:
            text: Text to draw
        """
        font = self.load_font(text.size)
        text_surface = font.render(text.content, True, text.color)
        match text.alignment:
            case TextAlign.CENTER:
                text_rect = text_surface.get_rect(center=text.position)
            case TextAlign.LEFT_BOTTOM:
                text_rect = text_surface.get_rect(bottomleft=text.position)
        self.surface.blit(text_surface, text_rect)
