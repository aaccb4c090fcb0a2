"""Score calculation engine. Stateless and deterministic, one answer at a time.

Turns one correctly answered unit (a math answer, a matched animal pair, a
finished round bonus) plus its timing and streak signals into an integer
score. No I/O, no state.
"""

from dataclasses import dataclass
from typing import Any, Final

from playrules.exceptions import UnknownDifficultyError
from playrules.shared.schemas.base import DifficultyLevel
from playrules.shared.utils.math_utils import round_half_up

# Score multiplier per difficulty
DIFFICULTY_MULTIPLIER: Final[dict[DifficultyLevel, float]] = {
    DifficultyLevel.EASY: 1.0,
    DifficultyLevel.MEDIUM: 1.25,
    DifficultyLevel.HARD: 1.5,
}

# A correct answer is never worth less than this
MIN_SCORE: Final[int] = 1


@dataclass(frozen=True)
class SpeedBonusConfig:
    """Response-time tiers for the speed bonus, supplied per game and level."""

    fast_ms: float
    medium_ms: float
    fast_bonus: int
    medium_bonus: int
    slow_bonus: int = 0


@dataclass(frozen=True)
class ComboBonusConfig:
    """Streak length where the combo bonus starts, and its cap."""

    start_at: int
    max_bonus: int


@dataclass(frozen=True)
class RoundScoreInput:
    """Inputs of the score formula for one correctly answered unit."""

    base_points: int
    difficulty: DifficultyLevel | str
    speed_bonus: int = 0
    combo_bonus: int = 0


def difficulty_multiplier(difficulty: DifficultyLevel | str) -> float:
    """Multiplier for a difficulty. Anything outside the enum is a caller bug."""
    try:
        key = DifficultyLevel(difficulty)
    except ValueError:
        raise UnknownDifficultyError(difficulty) from None
    return DIFFICULTY_MULTIPLIER[key]


def speed_bonus(response_ms: float, config: SpeedBonusConfig) -> int:
    """Bonus for answering quickly. Tier boundaries count as the faster tier."""
    if response_ms <= config.fast_ms:
        return config.fast_bonus
    if response_ms <= config.medium_ms:
        return config.medium_bonus
    return config.slow_bonus


def combo_bonus(streak: int, config: ComboBonusConfig) -> int:
    """Bonus for a run of correct answers.

    Zero below ``start_at``; one at ``start_at``; grows by one per further
    correct answer until it reaches ``max_bonus``.
    """
    if streak < config.start_at:
        return 0
    return min(streak - config.start_at + 1, config.max_bonus)


def final_score(params: RoundScoreInput | None = None, **kwargs: Any) -> int:
    """Apply the score formula.

    ``round((base + speed + combo) * multiplier)``, but never below one point.
    Takes either a ``RoundScoreInput`` or its fields as keyword arguments.
    """
    if params is None:
        params = RoundScoreInput(**kwargs)
    elif kwargs:
        raise TypeError("final_score() takes a RoundScoreInput or keyword fields, not both")
    multiplier = difficulty_multiplier(params.difficulty)
    raw = (params.base_points + params.speed_bonus + params.combo_bonus) * multiplier
    return max(MIN_SCORE, round_half_up(raw))


def to_accuracy(correct: int, wrong: int) -> float:
    """Share of correct attempts; 0.0 when nothing was attempted."""
    total = correct + wrong
    if total <= 0:
        return 0.0
    return correct / total
