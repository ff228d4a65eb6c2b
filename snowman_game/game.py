"""Snowman game state and turn handling."""

import logging
from enum import Enum
from typing import List
from snowman_game.word_status import get_initial_word_status, guess_key

logger = logging.getLogger(__name__)

# Word to guess
PUZZLE_WORD = "Winterwald"

# The snowman is gone after this many wrong guesses
MAX_WRONG_GUESSES = 7


class GamePhase(Enum):
    """States for the game state machine."""
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


class SnowmanGame:
    """
    State of a single snowman game.

    Holds the puzzle word, the current word status, the number of wrong
    guesses and whether keys are still accepted. One instance is one game;
    there is no way to restart it.
    """

    def __init__(self, puzzle_word: str = PUZZLE_WORD, max_wrong_guesses: int = MAX_WRONG_GUESSES):
        """
        Initialize a game.

        Args:
            puzzle_word: Word to guess (letters and spaces)
            max_wrong_guesses: Number of wrong guesses that end the game
        """
        self._puzzle_word = puzzle_word
        self.max_wrong_guesses = max_wrong_guesses
        self.word_status = get_initial_word_status(puzzle_word)
        self.wrong_guesses = 0
        self.accept_keys = True
        self.guessed_keys: List[str] = []

    @property
    def puzzle_word(self) -> str:
        """Word to guess, fixed for the lifetime of the game."""
        return self._puzzle_word

    @property
    def phase(self) -> GamePhase:
        """
        Evaluate the current phase without changing any state.

        A fully revealed word wins even if the wrong guess limit is reached.
        """
        if self.word_status == self._puzzle_word:
            return GamePhase.WON
        if self.wrong_guesses == self.max_wrong_guesses:
            return GamePhase.LOST
        return GamePhase.ACTIVE

    @property
    def is_won(self) -> bool:
        return self.phase == GamePhase.WON

    @property
    def is_lost(self) -> bool:
        return self.phase == GamePhase.LOST

    @property
    def is_over(self) -> bool:
        return self.phase != GamePhase.ACTIVE

    @property
    def remaining_guesses(self) -> int:
        return self.max_wrong_guesses - self.wrong_guesses

    def guess(self, key: str) -> bool:
        """
        Apply a guessed key.

        A guess that reveals no new position counts as wrong. That includes
        guessing a letter that is already revealed.

        Args:
            key: Key that the player pressed

        Returns:
            True if the guess revealed at least one position, False if it was
            wrong or the game no longer accepts keys
        """
        # If game is over, do not accept keys
        if not self.accept_keys:
            return False

        self.guessed_keys.append(key)
        new_word_status = guess_key(key, self._puzzle_word, self.word_status)
        revealed = new_word_status != self.word_status
        if not revealed:
            self.wrong_guesses += 1
        self.word_status = new_word_status

        logger.debug(
            "Guess %r %s: status=%r wrong=%d/%d remaining=%d",
            key, "hit" if revealed else "missed",
            self.word_status, self.wrong_guesses, self.max_wrong_guesses, self.remaining_guesses
        )

        self.check_game_over()
        return revealed

    def check_game_over(self) -> GamePhase:
        """
        Check if the game is won or lost and stop accepting keys if so.

        Returns:
            The current game phase
        """
        phase = self.phase
        if phase != GamePhase.ACTIVE and self.accept_keys:
            self.accept_keys = False
            logger.info("Game %s after %d wrong guesses", phase.value, self.wrong_guesses)
        return phase

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"SnowmanGame({self.word_status!r}, wrong: {self.wrong_guesses}/{self.max_wrong_guesses})"
