"""Daily streak and daily goal date arithmetic.

Days are local calendar days keyed as ``YYYY-MM-DD``. Two keys are
consecutive when their calendar dates are exactly one day apart; elapsed
hours play no part, so 23:59 followed by 00:01 is a new day and a DST
shift never breaks a streak.
"""

from datetime import date, datetime
from typing import Final

from playrules.progression.schemas import DailyGoal, DailyStreak
from playrules.shared.utils.datetime_utils import to_local_date
from playrules.shared.utils.logging import get_logger

logger = get_logger(__name__)

# A new shield is granted every time the streak reaches a multiple of this
SHIELD_RECHARGE_DAYS: Final[int] = 7
# A gap of this many days (one missed day) can be bridged by a shield
SHIELD_BRIDGE_DAYS: Final[int] = 2


def date_key(timestamp: datetime | date | int | float | str | None = None) -> str:
    """Local calendar date of a timestamp as ``YYYY-MM-DD`` (now when omitted).

    Numeric timestamps are POSIX epoch seconds. Divide a JavaScript-style
    millisecond timestamp by 1000 before passing it in.
    """
    return to_local_date(timestamp).isoformat()


def days_between(previous_key: str, current_key: str) -> int | None:
    """Whole calendar days from ``previous_key`` to ``current_key``.

    Returns None when either key is not a ``YYYY-MM-DD`` date.
    """
    try:
        previous = date.fromisoformat(previous_key)
        current = date.fromisoformat(current_key)
    except (TypeError, ValueError):
        logger.debug("invalid_date_key", previous_key=previous_key, current_key=current_key)
        return None
    return (current - previous).days


def is_consecutive_day(previous_key: str, current_key: str) -> bool:
    """True only when ``current_key`` is the calendar day after ``previous_key``."""
    return days_between(previous_key, current_key) == 1


def advance_streak(
    streak: DailyStreak,
    today_key: str,
    shield_enabled: bool = True,
) -> DailyStreak:
    """Streak after playing on ``today_key``.

    - first play ever: 1
    - same day again: unchanged
    - next day: +1
    - one missed day and a shield available: +1, shield used
    - anything else: back to 1
    """
    if streak.last_played_key is None:
        current = 1
        shield_available = streak.shield_available
    else:
        gap = days_between(streak.last_played_key, today_key)
        if gap is not None and gap <= 0:
            # Same day, or the device clock moved backwards
            return streak
        shield_available = streak.shield_available
        if gap == 1:
            current = streak.current + 1
        elif shield_enabled and shield_available and gap == SHIELD_BRIDGE_DAYS:
            current = streak.current + 1
            shield_available = False
            logger.debug("streak_shield_used", streak=current, date_key=today_key)
        else:
            current = 1

    if current % SHIELD_RECHARGE_DAYS == 0:
        shield_available = True

    return DailyStreak(
        current=current,
        best=max(streak.best, current),
        last_played_key=today_key,
        shield_available=shield_available,
    )


def add_daily_stars(
    goal: DailyGoal,
    today_key: str,
    stars: int,
    target_stars: int | None = None,
) -> DailyGoal:
    """Daily goal after earning ``stars`` on ``today_key``; a new day starts from zero."""
    earned = goal.earned_stars if goal.date_key == today_key else 0
    return DailyGoal(
        date_key=today_key,
        earned_stars=earned + max(0, stars),
        target_stars=target_stars if target_stars is not None else goal.target_stars,
    )
