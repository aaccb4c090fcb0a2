"""Session: applies a finished round to the caller's progress record."""

from playrules.session.recorder import record_round, set_current_level
from playrules.session.schemas import (
    GameProgress,
    MilestoneReached,
    PerGameProgress,
    ProgressState,
    RecoveryInfo,
    RoundSummary,
    RoundTelemetry,
)

__all__ = [
    "GameProgress",
    "MilestoneReached",
    "PerGameProgress",
    "ProgressState",
    "RecoveryInfo",
    "RoundSummary",
    "RoundTelemetry",
    "record_round",
    "set_current_level",
]
