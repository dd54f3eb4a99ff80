"""
Grid synthesis: hide a list of words in a square letter grid.

Words are placed in the order given, each with a bounded number of
random attempts. A placement must land entirely in bounds on empty
cells; words that never find room are skipped. Whatever is left empty
afterwards is filled with random letters from the alphabet.
"""

import logging
import random
from typing import List, Optional, Sequence

from .grid import EMPTY, empty_grid, freeze
from .models import DEFAULT_ALPHABET, DIRECTION_VECTORS, Grid, Placement


logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 100


def can_place(scratch: List[List[str]], placement: Placement) -> bool:
    """Check that every cell of the placement is in bounds and still empty."""
    size = len(scratch)
    for row, col in placement.cells():
        if row >= size or col >= size:
            return False
        if scratch[row][col] != EMPTY:
            return False
    return True


def place_word(
    scratch: List[List[str]],
    word: str,
    rng: random.Random,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Optional[Placement]:
    """
    Try to write ``word`` into the scratch grid.

    Each attempt picks a uniformly random start cell and direction.
    Returns the placement used, or None if every attempt failed.
    """
    size = len(scratch)
    if size == 0 or not word:
        return None

    directions = list(DIRECTION_VECTORS)
    for _ in range(max_attempts):
        placement = Placement(
            word=word,
            row=rng.randrange(size),
            col=rng.randrange(size),
            direction=rng.choice(directions),
        )
        if can_place(scratch, placement):
            for (row, col), letter in zip(placement.cells(), word):
                scratch[row][col] = letter
            return placement

    return None


def fill_empty(scratch: List[List[str]], alphabet: str, rng: random.Random) -> None:
    """Fill every empty cell with a random letter from the alphabet."""
    if not alphabet:
        raise ValueError("Alphabet must contain at least one letter")

    for row in scratch:
        for c, letter in enumerate(row):
            if letter == EMPTY:
                row[c] = rng.choice(alphabet)


def synthesize(
    size: int,
    target_words: Sequence[str],
    alphabet: str = DEFAULT_ALPHABET,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Grid:
    """
    Build a size x size grid containing as many of ``target_words`` as fit.

    Earlier words get first pick of the cells. No record of which words
    were placed is returned; search the grid to find out.
    """
    rng = rng or random.Random()
    scratch = empty_grid(size)

    placed = 0
    for word in target_words:
        word = word.upper()
        if place_word(scratch, word, rng, max_attempts) is None:
            logger.debug("Could not place %r in a %dx%d grid", word, size, size)
        else:
            placed += 1

    fill_empty(scratch, alphabet, rng)
    logger.debug("Synthesized %dx%d grid with %d/%d target words", size, size, placed, len(target_words))

    return freeze(scratch)
