"""Scoring: per-answer score formula, bonuses and accuracy."""

from playrules.scoring.calculator import (
    DIFFICULTY_MULTIPLIER,
    ComboBonusConfig,
    RoundScoreInput,
    SpeedBonusConfig,
    combo_bonus,
    difficulty_multiplier,
    final_score,
    speed_bonus,
    to_accuracy,
)
from playrules.scoring.profiles import (
    MATH_ANSWER,
    ScoringProfile,
    animal_completion_profile,
    animal_pair_profile,
    score_answer,
)

__all__ = [
    "DIFFICULTY_MULTIPLIER",
    "MATH_ANSWER",
    "ComboBonusConfig",
    "RoundScoreInput",
    "ScoringProfile",
    "SpeedBonusConfig",
    "animal_completion_profile",
    "animal_pair_profile",
    "combo_bonus",
    "difficulty_multiplier",
    "final_score",
    "score_answer",
    "speed_bonus",
    "to_accuracy",
]
