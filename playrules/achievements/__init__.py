"""Achievements: fixed badge table evaluated against lifetime stats."""

from playrules.achievements.definitions import ACHIEVEMENTS, AchievementDefinition
from playrules.achievements.evaluator import achievement_by_id, newly_unlocked, unlocked_ids
from playrules.achievements.schemas import (
    AchievementProgressSnapshot,
    GameStats,
    PerGameStats,
)

__all__ = [
    "ACHIEVEMENTS",
    "AchievementDefinition",
    "AchievementProgressSnapshot",
    "GameStats",
    "PerGameStats",
    "achievement_by_id",
    "newly_unlocked",
    "unlocked_ids",
]
