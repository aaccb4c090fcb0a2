"""Factory functions for progress, snapshot and telemetry test data."""

from typing import Any

from playrules.achievements.schemas import (
    AchievementProgressSnapshot,
    GameStats,
    PerGameStats,
)
from playrules.session.schemas import (
    GameProgress,
    PerGameProgress,
    ProgressState,
    RoundTelemetry,
)


def make_game_stats(
    games_played: int = 0,
    best_score: int = 0,
    best_accuracy: float = 0.0,
    best_streak: int = 0,
) -> GameStats:
    return GameStats(
        games_played=games_played,
        best_score=best_score,
        best_accuracy=best_accuracy,
        best_streak=best_streak,
    )


def make_snapshot(
    math: GameStats | None = None,
    alphabet: GameStats | None = None,
    animals: GameStats | None = None,
    total_score: int = 0,
    games_played: int = 0,
) -> AchievementProgressSnapshot:
    return AchievementProgressSnapshot(
        total_score=total_score,
        games_played=games_played,
        game_stats=PerGameStats(
            math=math or make_game_stats(),
            alphabet=alphabet or make_game_stats(),
            animals=animals or make_game_stats(),
        ),
    )


def make_game_progress(**overrides: Any) -> GameProgress:
    return GameProgress(**overrides)


def make_progress_state(
    math: GameProgress | None = None,
    alphabet: GameProgress | None = None,
    animals: GameProgress | None = None,
    **overrides: Any,
) -> ProgressState:
    return ProgressState(
        games=PerGameProgress(
            math=math or GameProgress(),
            alphabet=alphabet or GameProgress(),
            animals=animals or GameProgress(),
        ),
        **overrides,
    )


def make_telemetry(
    game: str = "math",
    level: int = 1,
    score: int = 80,
    accuracy: float = 0.9,
    time_ms: float | None = 3_000,
    streak: int = 4,
    hints_used: bool = False,
    outcome: str = "won",
) -> RoundTelemetry:
    return RoundTelemetry(
        game=game,
        level=level,
        score=score,
        accuracy=accuracy,
        time_ms=time_ms,
        streak=streak,
        hints_used=hints_used,
        outcome=outcome,
    )
