"""Letter pools for the alphabet game."""

import random
import string
from typing import Final

from playrules.progression.levels import alphabet_level_config

ALPHABET: Final[tuple[str, ...]] = tuple(string.ascii_uppercase)

# Tile colors cycle through this palette in order
LETTER_COLORS: Final[tuple[str, ...]] = (
    "#FF80AB",
    "#64FFDA",
    "#FFF176",
    "#81D4FA",
    "#B388FF",
    "#FFAB91",
    "#35D461",
    "#F9E104",
    "#A855F7",
)

_default_rng = random.Random()


def letters_for_level(level: float) -> tuple[str, ...]:
    """Letters visible at a level, in alphabetical order."""
    return ALPHABET[: alphabet_level_config(level).letter_count]


def letter_pool(level: float, rng: random.Random | None = None) -> list[str]:
    """The level's letters in a shuffled order."""
    letters = list(letters_for_level(level))
    (rng or _default_rng).shuffle(letters)
    return letters


def letter_color(index: int) -> str:
    """Color of the tile at ``index``."""
    return LETTER_COLORS[index % len(LETTER_COLORS)]
