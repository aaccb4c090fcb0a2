"""Level content generators.

Each game kind maps a level in ``[1, MAX_GAME_LEVEL]`` to the shape of the
round it should serve, plus the two gates every game shares: the accuracy
bar and the speed target used for stars. Every generator is total over the
clamped domain and non-decreasing in difficulty as the level rises.
"""

import math
from dataclasses import dataclass
from typing import Final

from playrules.exceptions import UnknownGameError
from playrules.shared.schemas.base import GameKey, LevelBand, MathOperation
from playrules.shared.utils.logging import get_logger
from playrules.shared.utils.math_utils import round_half_up

logger = get_logger(__name__)

MAX_GAME_LEVEL: Final[int] = 20

# Last level of each band (inclusive)
EASY_BAND_MAX: Final[int] = 7
MEDIUM_BAND_MAX: Final[int] = 14

# Level at which each math operation unlocks; operations are never removed
MATH_OPERATION_UNLOCKS: Final[list[tuple[int, MathOperation]]] = [
    (1, MathOperation.ADD),
    (6, MathOperation.SUBTRACT),
    (15, MathOperation.MULTIPLY),
    (18, MathOperation.MODULO),
]

ALPHABET_SIZE: Final[int] = 26
MAX_ANIMAL_PAIRS: Final[int] = 10
MIN_ANIMAL_LIVES: Final[int] = 3
MIN_ANIMAL_DURATION_SECONDS: Final[int] = 46

# Accuracy bar per band, per game
MIN_ACCURACY: Final[dict[GameKey, dict[LevelBand, float]]] = {
    GameKey.MATH: {LevelBand.EASY: 0.62, LevelBand.MEDIUM: 0.70, LevelBand.HARD: 0.78},
    GameKey.ALPHABET: {LevelBand.EASY: 0.70, LevelBand.MEDIUM: 0.78, LevelBand.HARD: 0.84},
    GameKey.ANIMALS: {LevelBand.EASY: 0.58, LevelBand.MEDIUM: 0.68, LevelBand.HARD: 0.76},
}


def clamp_level(level: float) -> int:
    """Round a requested level and clamp it into ``[1, MAX_GAME_LEVEL]``.

    Never raises: NaN falls back to level 1, infinities saturate.
    """
    if isinstance(level, int):
        safe = max(1, min(MAX_GAME_LEVEL, level))
    elif math.isnan(level):
        safe = 1
    elif math.isinf(level):
        safe = MAX_GAME_LEVEL if level > 0 else 1
    else:
        safe = max(1, min(MAX_GAME_LEVEL, round_half_up(level)))
    if safe != level:
        logger.debug("level_clamped", requested=level, clamped=safe)
    return safe


def level_band(level: float) -> LevelBand:
    """Band of a level: 1-7 easy, 8-14 medium, 15-20 hard."""
    safe = clamp_level(level)
    if safe <= EASY_BAND_MAX:
        return LevelBand.EASY
    if safe <= MEDIUM_BAND_MAX:
        return LevelBand.MEDIUM
    return LevelBand.HARD


@dataclass(frozen=True)
class MathLevelConfig:
    """Operand ranges and operations for a math round."""

    level: int
    band: LevelBand
    operations: tuple[MathOperation, ...]
    min_operand: int
    max_operand: int
    question_count: int
    min_accuracy: float
    speed_target_ms: int


@dataclass(frozen=True)
class AlphabetLevelConfig:
    """Visible letter set for an alphabet round."""

    level: int
    band: LevelBand
    letter_count: int
    min_accuracy: float
    speed_target_ms: int


@dataclass(frozen=True)
class AnimalLevelConfig:
    """Board, budget and point values for an animal memory round."""

    level: int
    band: LevelBand
    label: str
    pairs: int
    columns: int
    lives: int
    duration_seconds: int
    pair_points: int
    streak_bonus: int
    completion_bonus: int
    min_accuracy: float
    speed_target_ms: int


LevelConfig = MathLevelConfig | AlphabetLevelConfig | AnimalLevelConfig


def math_level_config(level: float) -> MathLevelConfig:
    """Content gating for a math round."""
    safe = clamp_level(level)
    band = level_band(safe)

    operations = tuple(op for unlock_at, op in MATH_OPERATION_UNLOCKS if safe >= unlock_at)

    # Operand ceiling grows faster in each band
    if band is LevelBand.EASY:
        max_operand = 6 + safe
    elif band is LevelBand.MEDIUM:
        max_operand = 12 + (safe - EASY_BAND_MAX) * 2
    else:
        max_operand = 26 + (safe - MEDIUM_BAND_MAX) * 3

    if safe <= 5:
        question_count = 8
    elif safe <= 12:
        question_count = 10
    else:
        question_count = 12

    return MathLevelConfig(
        level=safe,
        band=band,
        operations=operations,
        min_operand=2 if safe >= 10 else 1,
        max_operand=max_operand,
        question_count=question_count,
        min_accuracy=MIN_ACCURACY[GameKey.MATH][band],
        speed_target_ms=max(2800, 7800 - safe * 220),
    )


def alphabet_level_config(level: float) -> AlphabetLevelConfig:
    """Content gating for an alphabet round; the full alphabet shows from level 19."""
    safe = clamp_level(level)
    band = level_band(safe)
    return AlphabetLevelConfig(
        level=safe,
        band=band,
        letter_count=min(ALPHABET_SIZE, 7 + safe),
        min_accuracy=MIN_ACCURACY[GameKey.ALPHABET][band],
        # Whole-round target, not per letter
        speed_target_ms=max(30_000, 94_000 - safe * 2_300),
    )


def animal_level_config(level: float) -> AnimalLevelConfig:
    """Content gating for an animal memory round."""
    safe = clamp_level(level)
    band = level_band(safe)
    pairs = min(MAX_ANIMAL_PAIRS, 4 + (safe - 1) // 3)
    duration_seconds = max(MIN_ANIMAL_DURATION_SECONDS, 95 - (safe - 1) * 2)
    return AnimalLevelConfig(
        level=safe,
        band=band,
        label=f"L{safe}",
        pairs=pairs,
        columns=4 if pairs >= 6 else 3,
        lives=max(MIN_ANIMAL_LIVES, 7 - (safe - 1) // 4),
        duration_seconds=duration_seconds,
        pair_points=13 + safe,
        streak_bonus=3 + safe // 4,
        completion_bonus=34 + safe * 6,
        min_accuracy=MIN_ACCURACY[GameKey.ANIMALS][band],
        speed_target_ms=math.floor(duration_seconds * 700),
    )


_GENERATORS = {
    GameKey.MATH: math_level_config,
    GameKey.ALPHABET: alphabet_level_config,
    GameKey.ANIMALS: animal_level_config,
}


def game_key(game: GameKey | str) -> GameKey:
    """Parse a game key. Anything outside the enum is a caller bug."""
    try:
        return GameKey(game)
    except ValueError:
        raise UnknownGameError(game) from None


def level_config(game: GameKey | str, level: float) -> LevelConfig:
    """Content gating for any game kind."""
    return _GENERATORS[game_key(game)](level)
