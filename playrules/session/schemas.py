"""Pydantic v2 schemas for round recording.

``ProgressState`` is the caller's persisted record, passed in whole and
returned as a new value; the engine never keeps a copy.
"""

from typing import Any

from pydantic import Field, field_validator

from playrules.achievements.schemas import (
    AchievementProgressSnapshot,
    GameStats,
    PerGameStats,
)
from playrules.progression.levels import clamp_level, game_key
from playrules.progression.schemas import DailyGoal, DailyStreak
from playrules.progression.stars import StarBreakdown
from playrules.shared.schemas.base import BaseSchema, FrozenSchema, GameKey, RoundOutcome


def _clamped(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return clamp_level(value)
    return value


class GameProgress(FrozenSchema):
    """Per-game progress the caller persists."""

    current_level: int = 1
    unlocked_level: int = 1
    total_stars: int = Field(default=0, ge=0)
    games_played: int = Field(default=0, ge=0)
    best_score: int = Field(default=0, ge=0)
    best_accuracy: float = Field(default=0.0, ge=0.0, le=1.0)
    best_streak: int = Field(default=0, ge=0)

    @field_validator("current_level", "unlocked_level", mode="before")
    @classmethod
    def clamp_levels(cls, value: Any) -> Any:
        return _clamped(value)

    def stats(self) -> GameStats:
        return GameStats(
            games_played=self.games_played,
            best_score=self.best_score,
            best_accuracy=self.best_accuracy,
            best_streak=self.best_streak,
        )


class PerGameProgress(FrozenSchema):
    """Progress for every game kind."""

    math: GameProgress = Field(default_factory=GameProgress)
    alphabet: GameProgress = Field(default_factory=GameProgress)
    animals: GameProgress = Field(default_factory=GameProgress)

    def for_game(self, game: GameKey | str) -> GameProgress:
        return getattr(self, game_key(game).value)


class ProgressState(FrozenSchema):
    """Everything the caller persists for one child."""

    games: PerGameProgress = Field(default_factory=PerGameProgress)
    total_score: int = Field(default=0, ge=0)
    games_played: int = Field(default=0, ge=0)
    streak: DailyStreak = Field(default_factory=DailyStreak)
    daily_goal: DailyGoal = Field(default_factory=DailyGoal)
    unlocked_achievements: tuple[str, ...] = ()

    def achievement_snapshot(self) -> AchievementProgressSnapshot:
        """Lifetime stats in the shape badge predicates expect."""
        return AchievementProgressSnapshot(
            total_score=self.total_score,
            games_played=self.games_played,
            game_stats=PerGameStats(
                math=self.games.math.stats(),
                alphabet=self.games.alphabet.stats(),
                animals=self.games.animals.stats(),
            ),
        )


class RoundTelemetry(FrozenSchema):
    """What a game screen reports when a round ends."""

    game: GameKey
    level: int = 1
    score: int = Field(default=0, ge=0)
    accuracy: float = Field(ge=0.0, le=1.0)
    time_ms: float | None = None
    streak: int = Field(default=0, ge=0)
    hints_used: bool = False
    outcome: RoundOutcome

    @field_validator("level", mode="before")
    @classmethod
    def clamp_requested_level(cls, value: Any) -> Any:
        return _clamped(value)


class MilestoneReached(BaseSchema):
    """Celebration info when a round unlocks a milestone level."""

    level: int
    sticker: str
    theme_id: str
    theme_name: str
    icon: str


class RecoveryInfo(BaseSchema):
    """Consolation details for a round that was not completed."""

    effort_star_awarded: bool = False
    suggested_level: int | None = None


class RoundSummary(BaseSchema):
    """Result of recording one round, ready for the result popup."""

    game: GameKey
    outcome: RoundOutcome
    score: int
    accuracy: float
    time_ms: float | None
    level: int
    stars_earned: int
    breakdown: StarBreakdown
    total_stars_for_game: int
    unlocked_level: int
    next_level: int | None
    level_unlock_progress: float
    level_up: bool
    daily_goal: DailyGoal
    streak: DailyStreak
    milestone: MilestoneReached | None = None
    new_achievements: list[str] = Field(default_factory=list)
    recovery: RecoveryInfo = Field(default_factory=RecoveryInfo)
