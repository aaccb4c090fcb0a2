"""Datetime utilities for local-calendar day handling.

Daily goals and streaks are judged on the device's local calendar, so
everything here normalises to a local ``date`` rather than UTC.
"""

from datetime import date, datetime


def local_now() -> datetime:
    """Return the current local time with timezone info.

    Returns:
        Timezone-aware datetime in the system's local timezone

    Example:
        >>> from playrules.shared.utils.datetime_utils import local_now
        >>> local_now().tzinfo is not None
        True
    """
    return datetime.now().astimezone()


def to_local_date(value: datetime | date | int | float | str | None = None) -> date:
    """Convert a timestamp-like value to a local calendar date.

    Args:
        value: One of
            - ``datetime``: aware values are converted to local time, naive
              values are taken as already local
            - ``date``: returned unchanged
            - ``int``/``float``: POSIX epoch seconds, not milliseconds
            - ``str``: ISO-8601 date or datetime; a trailing ``Z`` means UTC
            - ``None``: now

    Returns:
        The local calendar date

    Raises:
        ValueError: If a string is not valid ISO-8601, or a number is far
            outside the epoch-seconds range (e.g. a millisecond timestamp)
    """
    if value is None:
        return local_now().date()
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value).date()
    if isinstance(value, str):
        if value.endswith(("Z", "z")):
            value = value[:-1] + "+00:00"
        return to_local_date(datetime.fromisoformat(value))
    raise TypeError(f"Unsupported timestamp type: {type(value).__name__}")


__all__ = [
    "local_now",
    "to_local_date",
]
