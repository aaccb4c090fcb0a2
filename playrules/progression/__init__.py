"""Progression: level content gating, stars, unlock ladder, milestones, streaks."""

from playrules.progression.ladder import (
    STARS_PER_LEVEL,
    required_stars,
    unlock_progress_ratio,
    unlocked_level,
)
from playrules.progression.levels import (
    MAX_GAME_LEVEL,
    AlphabetLevelConfig,
    AnimalLevelConfig,
    LevelConfig,
    MathLevelConfig,
    alphabet_level_config,
    animal_level_config,
    clamp_level,
    game_key,
    level_band,
    level_config,
    math_level_config,
)
from playrules.progression.milestones import (
    MILESTONE_LEVELS,
    PROGRESSION_THEMES,
    MilestoneTheme,
    is_milestone_level,
    milestone_sticker,
    milestones_reached,
    theme_for_milestone_count,
)
from playrules.progression.schemas import DailyGoal, DailyStreak
from playrules.progression.stars import (
    StarBreakdown,
    StarCalculationInput,
    StarCalculationResult,
    calculate_stars,
)
from playrules.progression.streaks import (
    add_daily_stars,
    advance_streak,
    date_key,
    days_between,
    is_consecutive_day,
)

__all__ = [
    "MAX_GAME_LEVEL",
    "MILESTONE_LEVELS",
    "PROGRESSION_THEMES",
    "STARS_PER_LEVEL",
    "AlphabetLevelConfig",
    "AnimalLevelConfig",
    "DailyGoal",
    "DailyStreak",
    "LevelConfig",
    "MathLevelConfig",
    "MilestoneTheme",
    "StarBreakdown",
    "StarCalculationInput",
    "StarCalculationResult",
    "add_daily_stars",
    "advance_streak",
    "alphabet_level_config",
    "animal_level_config",
    "calculate_stars",
    "clamp_level",
    "date_key",
    "game_key",
    "days_between",
    "is_consecutive_day",
    "is_milestone_level",
    "level_band",
    "level_config",
    "math_level_config",
    "milestone_sticker",
    "milestones_reached",
    "required_stars",
    "theme_for_milestone_count",
    "unlock_progress_ratio",
    "unlocked_level",
]
