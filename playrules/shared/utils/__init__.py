"""Shared utilities: structured logging, local-calendar dates and rounding."""

from playrules.shared.utils.datetime_utils import local_now, to_local_date
from playrules.shared.utils.logging import configure_logging, get_logger
from playrules.shared.utils.math_utils import clamp, round_half_up

__all__ = [
    "clamp",
    "configure_logging",
    "get_logger",
    "local_now",
    "round_half_up",
    "to_local_date",
]
