"""
State management system for the snowman game.

The StateManager coordinates transitions between game states using a state
machine pattern. Each state inherits from GameState and implements the standard
interface for event handling and rendering. Nothing animates, so states are
only drawn when a render was requested.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, TYPE_CHECKING
import pygame

if TYPE_CHECKING:
    from game_context import GameContext

logger = logging.getLogger(__name__)


class GameState(ABC):
    """
    Abstract base class for all game states.

    States represent different screens in the game. Each state handles its
    own events and rendering independently.
    """

    def __init__(self, game_context: 'GameContext', state_manager: 'StateManager'):
        """
        Initialize the game state.

        Args:
            game_context: Shared settings (puzzle word, limits, font, etc.)
            state_manager: Reference to the StateManager for transitions and render requests
        """
        self.context = game_context
        self.state_manager = state_manager

    @abstractmethod
    def handle_events(self, events: list[pygame.event.Event]) -> None:
        """
        Process input events for this state.

        Args:
            events: List of pygame events to process
        """
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """
        Render this state to the screen.

        Args:
            screen: Pygame surface to render to
        """
        pass

    def enter(self, **kwargs) -> None:
        """
        Called when transitioning into this state.

        Override to set up state-specific resources or handle transition data.

        Args:
            **kwargs: Optional data passed from previous state
        """
        pass

    def exit(self) -> None:
        """
        Called when transitioning out of this state.

        Override to clean up state-specific resources.
        """
        pass


class StateManager:
    """
    Manages game states and coordinates transitions between them.

    The StateManager maintains a registry of available states and handles the
    current active state. It coordinates the enter/exit hooks when transitioning
    and delegates event handling and rendering to the current state.
    """

    def __init__(self, screen: pygame.Surface, game_context: 'GameContext', debug_mode: bool = False):
        """
        Initialize the state manager.

        Args:
            screen: Pygame display surface for rendering
            game_context: Shared settings container
            debug_mode: Enable debug logging
        """
        self.screen = screen
        self.context = game_context
        self.states: Dict[str, Optional[GameState]] = {}
        self.current_state: Optional[GameState] = None
        self.current_state_name: Optional[str] = None
        self.render_requested = False

        self.debug_mode = debug_mode
        self.context.debug_mode = debug_mode  # Share debug mode with all states via context

        # Register "quit"
        self.register_state("quit", None)

    def register_state(self, name: str, state: Optional[GameState]) -> None:
        """
        Register a state with the manager.

        Args:
            name: Identifier for this state (e.g., "snowman")
            state: GameState instance to register
        """
        self.states[name] = state

    def change_state(self, name: str, **kwargs) -> None:
        """
        Transition to a different state.

        Calls exit() on the current state and enter() on the new state.
        Unknown names are logged and ignored.

        Args:
            name: Name of the state to transition to
            **kwargs: Optional data to pass to the new state's enter() method
        """
        logger.debug("Switching to %s with kwargs: %s", name, kwargs)
        if name not in self.states:
            logger.error("Invalid state: '%s'", name)
            return

        # Exit current state
        if self.current_state:
            self.current_state.exit()

        # Check for quit
        if name == "quit":
            self.current_state = None
            self.current_state_name = name
            pygame.event.post(pygame.event.Event(pygame.QUIT))
            return

        self.current_state = self.states[name]
        self.current_state_name = name
        self.current_state.enter(**kwargs)

    def request_render(self) -> None:
        """Ask the main loop to draw the current state once."""
        self.render_requested = True

    def handle_events(self, events: list[pygame.event.Event]) -> None:
        """
        Delegate event handling to the current state.

        Args:
            events: List of pygame events
        """
        if self.current_state:
            self.current_state.handle_events(events)

    def render(self, screen: pygame.Surface) -> None:
        """
        Delegate rendering to the current state and clear the render request.

        Args:
            screen: Pygame surface to render to
        """
        self.render_requested = False
        if self.current_state:
            self.current_state.render(screen)
