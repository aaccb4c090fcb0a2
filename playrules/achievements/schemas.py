"""Pydantic v2 schemas for the lifetime stats achievements are judged on."""

from pydantic import Field

from playrules.shared.schemas.base import FrozenSchema


class GameStats(FrozenSchema):
    """Lifetime bests for one game."""

    games_played: int = Field(default=0, ge=0)
    best_score: int = Field(default=0, ge=0)
    best_accuracy: float = Field(default=0.0, ge=0.0, le=1.0)
    best_streak: int = Field(default=0, ge=0)


class PerGameStats(FrozenSchema):
    """Lifetime bests for every game kind."""

    math: GameStats = Field(default_factory=GameStats)
    alphabet: GameStats = Field(default_factory=GameStats)
    animals: GameStats = Field(default_factory=GameStats)


class AchievementProgressSnapshot(FrozenSchema):
    """Everything a badge predicate may look at, supplied whole by the caller."""

    total_score: int = Field(default=0, ge=0)
    games_played: int = Field(default=0, ge=0)
    game_stats: PerGameStats = Field(default_factory=PerGameStats)
