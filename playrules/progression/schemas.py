"""Pydantic v2 schemas for the caller-owned daily progress records."""

from pydantic import Field, computed_field

from playrules.shared.schemas.base import FrozenSchema

DEFAULT_DAILY_STAR_GOAL = 6


class DailyStreak(FrozenSchema):
    """Consecutive days played."""

    current: int = Field(default=0, ge=0)
    best: int = Field(default=0, ge=0)
    last_played_key: str | None = None
    shield_available: bool = True


class DailyGoal(FrozenSchema):
    """Stars earned today against the daily target."""

    date_key: str | None = None
    earned_stars: int = Field(default=0, ge=0)
    target_stars: int = Field(default=DEFAULT_DAILY_STAR_GOAL, ge=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def completed(self) -> bool:
        return self.earned_stars >= self.target_stars
