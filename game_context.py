"""
Game context for settings shared across game states.

The GameContext holds the settings every state needs (puzzle word, wrong
guess limit, canvas size, font, debug flag). The state of a running game
lives in the SnowmanGame owned by the engine, not here.
"""

import logging
from typing import Optional
from snowman_game.game import PUZZLE_WORD, MAX_WRONG_GUESSES
from snowman_game.drawing import CANVAS_WIDTH, CANVAS_HEIGHT

logger = logging.getLogger(__name__)


class GameContext:
    """
    Shared settings container.

    This object is passed to all game states. The puzzle word is an embedded
    constant and is not read from user input.
    """

    def __init__(self, font_path: Optional[str] = None):
        """
        Initialize game context with default values.

        Args:
            font_path: Path to the font used for text, None for the pygame default
        """
        self.puzzle_word: str = PUZZLE_WORD
        self.max_wrong_guesses: int = MAX_WRONG_GUESSES
        self.width: int = CANVAS_WIDTH
        self.height: int = CANVAS_HEIGHT
        self.caption: str = "Snowman"
        self.font_path: Optional[str] = font_path

        # Debug mode flag (set by StateManager)
        self.debug_mode: bool = False

    def _debug_print(self) -> None:
        """Log debug information about the game context."""
        logger.debug("Puzzle Word: %s", self.puzzle_word)
        logger.debug("Max Wrong Guesses: %d", self.max_wrong_guesses)
        logger.debug("Canvas: %dx%d", self.width, self.height)
        logger.debug("Font: %s", self.font_path or "<default>")
        logger.debug("Debug Mode: %s", self.debug_mode)
