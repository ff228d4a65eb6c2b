"""
Main entry point for the snowman game.

This module sets up the pygame window, initializes the state manager,
registers the game state, and runs an event-driven main loop. The screen is
only drawn when a state requested it; there is no frame timer.
"""

import logging
import pygame
import argparse
from typing import Optional
from game_context import GameContext
from state_manager import StateManager
from states.snowman_state import SnowmanState
from snowman_game.renderer import create_surface


def run_loop(state_manager: StateManager) -> None:
    """
    Dispatch events to the state manager until the window is closed.

    Args:
        state_manager: State manager with an active state
    """
    running = True
    while running:
        # Draw the screen one time if requested
        if state_manager.render_requested:
            state_manager.render(state_manager.screen)
            pygame.display.flip()

        # Block until something happens, then drain the queue
        events = [pygame.event.wait()] + pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.WINDOWEXPOSED:
                state_manager.request_render()

        state_manager.handle_events(events)


def main(debug_mode: bool = False, font_path: Optional[str] = None):
    """Initialize and run the game."""
    logging.basicConfig(
        level=logging.DEBUG if debug_mode else logging.INFO,
        format='%(asctime)s | %(levelname)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Initialize pygame
    pygame.init()

    try:
        # Create game context (settings shared by all states)
        context = GameContext(font_path=font_path)

        # Set up display
        screen = create_surface(context.width, context.height, context.caption)

        # Create state manager with screen reference
        state_manager = StateManager(screen, context, debug_mode=debug_mode)
        if debug_mode:
            context._debug_print()

        # Register all game states
        state_manager.register_state('snowman', SnowmanState(context, state_manager))

        # Start the game (loads the font, fails before the window is used)
        state_manager.change_state('snowman')

        run_loop(state_manager)
    finally:
        # Clean up
        pygame.quit()


def cli() -> None:
    parser = argparse.ArgumentParser(description="Guess the word before the snowman melts.")
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')
    parser.add_argument('--font', metavar='PATH', default=None, help='TTF/OTF font for text (default: pygame font)')
    args = parser.parse_args()

    if args.debug:
        print("Debug mode enabled. Game will run in debug mode.")
    main(debug_mode=args.debug, font_path=args.font)


if __name__ == "__main__":
    cli()
