"""Snowman game state - thin wrapper for state management."""

import pygame
from game_context import GameContext
from state_manager import GameState, StateManager
from snowman_game.engine import SnowmanEngine
from snowman_game.renderer import PygameRenderer


class SnowmanState(GameState):
    """
    Snowman game state wrapper for the state machine.

    This is a thin adapter that instantiates the SnowmanEngine and delegates
    all game logic to it. The state's only job is to request renders.
    """

    def __init__(self, game_context: GameContext, state_manager: StateManager):
        """
        Initialize snowman state.

        Args:
            game_context: Shared settings
            state_manager: Reference to StateManager for render requests
        """
        super().__init__(game_context, state_manager)
        self.engine = None

    def enter(self, **kwargs) -> None:
        """
        Called when entering the snowman state.

        Loads the font, starts a new game and requests the first render.

        Args:
            **kwargs: Optional data passed from previous state

        Raises:
            FontLoadError: If the configured font cannot be loaded
        """
        renderer = PygameRenderer(self.state_manager.screen, self.context.font_path)
        self.engine = SnowmanEngine(renderer, self.context)
        self.state_manager.request_render()

    def exit(self) -> None:
        """
        Called when exiting the snowman state.

        Cleans up the SnowmanEngine instance.
        """
        self.engine = None

    def handle_events(self, events: list[pygame.event.Event]) -> None:
        """
        Delegate event handling to the engine and request a render after a guess.

        Args:
            events: List of pygame events
        """
        if self.engine and self.engine.handle_events(events):
            self.state_manager.request_render()

    def render(self, screen: pygame.Surface) -> None:
        """
        Delegate rendering to the engine.

        Args:
            screen: Pygame surface to render to
        """
        if self.engine:
            self.engine.render()
