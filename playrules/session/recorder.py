"""Round recording.

``record_round`` is the one place the three rules modules meet: it scores a
finished round in stars, moves the unlock ladder, updates the daily goal and
streak, and re-checks badges. It is a pure reducer over the caller's
``ProgressState``; persisting the returned state is the caller's job, as is
making sure rounds for one child are recorded one at a time.
"""

from datetime import date, datetime

from playrules.achievements.evaluator import newly_unlocked
from playrules.config import EngineSettings, get_settings
from playrules.progression.ladder import unlock_progress_ratio, unlocked_level
from playrules.progression.levels import clamp_level, game_key, level_config
from playrules.progression.milestones import (
    MILESTONE_LEVELS,
    milestone_sticker,
    milestones_reached,
    theme_for_milestone_count,
)
from playrules.progression.stars import StarCalculationInput, calculate_stars
from playrules.progression.streaks import add_daily_stars, advance_streak, date_key
from playrules.session.schemas import (
    GameProgress,
    MilestoneReached,
    ProgressState,
    RecoveryInfo,
    RoundSummary,
    RoundTelemetry,
)
from playrules.shared.schemas.base import GameKey, RoundOutcome
from playrules.shared.utils.logging import get_logger

logger = get_logger(__name__)


def _milestone_crossed(previous_unlocked: int, new_unlocked: int) -> MilestoneReached | None:
    """Highest milestone level newly unlocked, if any."""
    crossed = [m for m in MILESTONE_LEVELS if previous_unlocked < m <= new_unlocked]
    if not crossed:
        return None
    level = crossed[-1]
    theme = theme_for_milestone_count(milestones_reached(new_unlocked))
    return MilestoneReached(
        level=level,
        sticker=milestone_sticker(level),
        theme_id=theme.id,
        theme_name=theme.name,
        icon=theme.icon,
    )


def record_round(
    state: ProgressState,
    telemetry: RoundTelemetry,
    now: datetime | date | int | float | str | None = None,
    settings: EngineSettings | None = None,
) -> tuple[ProgressState, RoundSummary]:
    """Apply one finished round to a child's progress.

    Args:
        state: Progress as last persisted by the caller
        telemetry: What the game screen reported
        now: When the round ended; drives the daily goal and streak
        settings: Engine settings; the cached settings when omitted

    Returns:
        ``(new_state, summary)``. ``state`` itself is left untouched.
    """
    settings = settings or get_settings()
    game = game_key(telemetry.game)
    config = level_config(game, telemetry.level)
    completed = telemetry.outcome == RoundOutcome.WON

    stars = calculate_stars(
        StarCalculationInput(
            accuracy=telemetry.accuracy,
            time_ms=telemetry.time_ms,
            hints_used=telemetry.hints_used,
            completed=completed,
            min_accuracy=config.min_accuracy,
            speed_target_ms=config.speed_target_ms,
            award_effort_star=settings.award_effort_star,
        )
    )

    progress = state.games.for_game(game)
    total_stars = progress.total_stars + stars.stars_earned
    # Unlocks are permanent even if the stored total was edited down
    new_unlocked = max(progress.unlocked_level, unlocked_level(total_stars))
    level_up = new_unlocked > progress.unlocked_level

    new_progress = GameProgress(
        current_level=config.level,
        unlocked_level=new_unlocked,
        total_stars=total_stars,
        games_played=progress.games_played + 1,
        best_score=max(progress.best_score, telemetry.score),
        best_accuracy=max(progress.best_accuracy, telemetry.accuracy),
        best_streak=max(progress.best_streak, telemetry.streak),
    )

    today = date_key(now)
    daily_goal = add_daily_stars(
        state.daily_goal,
        today,
        stars.stars_earned,
        target_stars=settings.daily_star_goal,
    )
    streak = advance_streak(state.streak, today, shield_enabled=settings.streak_shield_enabled)

    new_state = state.model_copy(
        update={
            "games": state.games.model_copy(update={game.value: new_progress}),
            "total_score": state.total_score + telemetry.score,
            "games_played": state.games_played + 1,
            "streak": streak,
            "daily_goal": daily_goal,
        }
    )
    new_badges = newly_unlocked(new_state.achievement_snapshot(), state.unlocked_achievements)
    if new_badges:
        new_state = new_state.model_copy(
            update={"unlocked_achievements": (*state.unlocked_achievements, *new_badges)}
        )

    suggested_level = None
    if not completed and telemetry.accuracy < config.min_accuracy and config.level > 1:
        suggested_level = config.level - 1

    summary = RoundSummary(
        game=game,
        outcome=telemetry.outcome,
        score=telemetry.score,
        accuracy=telemetry.accuracy,
        time_ms=telemetry.time_ms,
        level=config.level,
        stars_earned=stars.stars_earned,
        breakdown=stars.breakdown,
        total_stars_for_game=total_stars,
        unlocked_level=new_unlocked,
        next_level=config.level + 1 if config.level < new_unlocked else None,
        level_unlock_progress=unlock_progress_ratio(total_stars, new_unlocked),
        level_up=level_up,
        daily_goal=daily_goal,
        streak=streak,
        milestone=_milestone_crossed(progress.unlocked_level, new_unlocked) if level_up else None,
        new_achievements=new_badges,
        recovery=RecoveryInfo(
            effort_star_awarded=stars.breakdown.effort_star,
            suggested_level=suggested_level,
        ),
    )

    logger.info(
        "round_recorded",
        game=game.value,
        level=config.level,
        outcome=summary.outcome,
        stars=stars.stars_earned,
        total_stars=total_stars,
        unlocked_level=new_unlocked,
        level_up=level_up,
        new_achievements=new_badges,
    )
    return new_state, summary


def set_current_level(state: ProgressState, game: GameKey | str, level: float) -> ProgressState:
    """Select the level to play next; locked levels fall back to the highest unlocked one."""
    key = game_key(game)
    progress = state.games.for_game(key)
    selected = min(clamp_level(level), progress.unlocked_level)
    if selected == progress.current_level:
        return state
    return state.model_copy(
        update={
            "games": state.games.model_copy(
                update={key.value: progress.model_copy(update={"current_level": selected})}
            )
        }
    )
