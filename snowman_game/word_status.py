"""Word status helpers for the snowman guessing game."""

# Glyph shown for a letter that has not been guessed yet
PLACEHOLDER = "_"


def get_initial_word_status(puzzle_word: str) -> str:
    """
    Get the initial word status with placeholders based on the puzzle word.

    Args:
        puzzle_word: Word to guess

    Returns:
        String with the same length as puzzle_word. Every letter is replaced
        by a placeholder, every space is kept (e.g. "___ ___" for "ice age").
    """
    word_status = ""
    for char in puzzle_word:
        if char != " ":
            word_status += PLACEHOLDER
        else:
            word_status += " "

    return word_status


def guess_key(key: str, puzzle_word: str, word_status: str) -> str:
    """
    Handle a guess from the player.

    Args:
        key: Key that the player guessed
        puzzle_word: Word to guess
        word_status: Current word status

    Returns:
        New word status. Every position where the puzzle word matches the key
        (ignoring case) reveals the puzzle word's character in its original
        case, all other positions are taken from word_status.
    """
    lower_key = key.lower()

    new_word_status = ""
    for index, char in enumerate(puzzle_word):
        if char.lower() == lower_key:
            new_word_status += char
        else:
            new_word_status += word_status[index]

    return new_word_status
