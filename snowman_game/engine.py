"""Snowman game engine."""

import logging
import pygame
from typing import Optional
from game_context import GameContext
from snowman_game.game import SnowmanGame
from snowman_game.drawing import build_draw_instructions, get_result_message, hidden_parts
from snowman_game.renderer import PygameRenderer

logger = logging.getLogger(__name__)


class SnowmanEngine:
    """
    Snowman game engine.

    This engine turns key presses into guesses and draws the game through
    the renderer. It's independent of the state machine.
    """

    def __init__(self, renderer: PygameRenderer, game_context: GameContext):
        """
        Initialize the snowman engine and start a new game.

        Args:
            renderer: Renderer that draws on the game surface
            game_context: Game context with the puzzle word and limits
        """
        self.renderer = renderer
        self.game_context = game_context
        self.game = SnowmanGame(game_context.puzzle_word, game_context.max_wrong_guesses)

        if self.game_context.debug_mode:
            logger.debug("New game: %r", self.game)

    def handle_events(self, events: list[pygame.event.Event]) -> bool:
        """
        Handle key presses as guesses.

        Args:
            events: List of pygame events

        Returns:
            True if the screen needs to be drawn again
        """
        needs_render = False
        for event in events:
            if event.type == pygame.KEYDOWN:
                key = event.unicode or pygame.key.name(event.key)
                if self.key_pressed(key):
                    needs_render = True
        return needs_render

    def key_pressed(self, key: str) -> bool:
        """
        Handle a single key press.

        Args:
            key: Character (or key name) that was pressed

        Returns:
            True if the key was taken as a guess, False if the game is over
        """
        if not self.game.accept_keys:
            return False

        self.game.guess(key)

        if self.game_context.debug_mode:
            hidden = [part.name for part in hidden_parts(self.game.wrong_guesses)]
            logger.debug("Hidden snowman parts: %s", ", ".join(hidden) or "none")
        if self.game.is_over:
            logger.info("Result (%s): %s", "won" if self.game.is_won else "lost", self.result_message())
        return True

    def result_message(self) -> Optional[str]:
        """Get the end-of-game message, or None while the game is running."""
        if not self.game.is_over:
            return None
        return get_result_message(not self.game.is_lost, self.game.wrong_guesses)

    def render(self) -> None:
        """Render the snowman game screen."""
        self.game.check_game_over()

        width, height = self.renderer.surface.get_size()
        self.renderer.draw(build_draw_instructions(self.game, width, height))
