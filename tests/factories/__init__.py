"""Test data factories for the Play Rules Engine.

Builders return fully valid schema instances with zeroed stats; pass
keyword overrides for the fields a test cares about.
"""

from tests.factories.progress_factory import (
    make_game_progress,
    make_game_stats,
    make_progress_state,
    make_snapshot,
    make_telemetry,
)

__all__ = [
    "make_game_progress",
    "make_game_stats",
    "make_progress_state",
    "make_snapshot",
    "make_telemetry",
]
