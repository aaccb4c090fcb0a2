"""Per-game scoring profiles.

A profile bundles the base points and bonus tiers one kind of scoring event
uses, so game screens only report timing and streak.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from playrules.scoring.calculator import (
    ComboBonusConfig,
    RoundScoreInput,
    SpeedBonusConfig,
    combo_bonus,
    final_score,
    speed_bonus,
)
from playrules.shared.schemas.base import DifficultyLevel

if TYPE_CHECKING:
    from playrules.progression.levels import AnimalLevelConfig


@dataclass(frozen=True)
class ScoringProfile:
    """Base points plus optional speed and combo tiers for one event kind."""

    name: str
    base_points: int
    speed: SpeedBonusConfig | None = None
    combo: ComboBonusConfig | None = None


MATH_ANSWER: Final[ScoringProfile] = ScoringProfile(name="math_answer", base_points=10)

ANIMAL_PAIR_SPEED: Final[SpeedBonusConfig] = SpeedBonusConfig(
    fast_ms=1600,
    medium_ms=3000,
    fast_bonus=4,
    medium_bonus=2,
    slow_bonus=0,
)

# Completion speed tiers scale with the round's time budget
COMPLETION_FAST_MS_PER_SECOND: Final[int] = 400
COMPLETION_MEDIUM_MS_PER_SECOND: Final[int] = 750
COMPLETION_COMBO: Final[ComboBonusConfig] = ComboBonusConfig(start_at=3, max_bonus=6)


def animal_pair_profile(config: AnimalLevelConfig) -> ScoringProfile:
    """Profile for one matched pair at the given animal level."""
    return ScoringProfile(
        name="animal_pair",
        base_points=config.pair_points,
        speed=ANIMAL_PAIR_SPEED,
        combo=ComboBonusConfig(start_at=2, max_bonus=config.streak_bonus),
    )


def animal_completion_profile(config: AnimalLevelConfig) -> ScoringProfile:
    """Profile for the bonus paid when every pair on the board is matched.

    Its speed input is the elapsed round time and its streak input is the
    best streak of the round.
    """
    return ScoringProfile(
        name="animal_completion",
        base_points=config.completion_bonus,
        speed=SpeedBonusConfig(
            fast_ms=config.duration_seconds * COMPLETION_FAST_MS_PER_SECOND,
            medium_ms=config.duration_seconds * COMPLETION_MEDIUM_MS_PER_SECOND,
            fast_bonus=10,
            medium_bonus=5,
            slow_bonus=0,
        ),
        combo=COMPLETION_COMBO,
    )


def score_answer(
    profile: ScoringProfile,
    response_ms: float,
    streak: int,
    difficulty: DifficultyLevel | str,
) -> int:
    """Score one correctly answered unit under a profile."""
    return final_score(
        RoundScoreInput(
            base_points=profile.base_points,
            difficulty=difficulty,
            speed_bonus=speed_bonus(response_ms, profile.speed) if profile.speed else 0,
            combo_bonus=combo_bonus(streak, profile.combo) if profile.combo else 0,
        )
    )
