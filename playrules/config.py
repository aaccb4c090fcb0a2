"""Configuration for the rules engine.

Only caller policy lives here. The rules themselves (multipliers, star
thresholds, level curves) are fixed constants in their modules.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class EngineSettings(BaseSettings):
    """Rules engine settings."""

    # Daily goal
    daily_star_goal: int = 6

    # Reward policy for rounds that were lost or quit
    award_effort_star: bool = True

    # One missed day is forgiven while a shield is available
    streak_shield_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    class Config:
        env_file = ".env"
        env_prefix = "PLAYRULES_"


@lru_cache
def get_settings() -> EngineSettings:
    """Get cached engine settings instance."""
    return EngineSettings()
