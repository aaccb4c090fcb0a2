"""Level-unlock ladder.

Stars are cumulative per game. Level 1 is always open and each further
level costs ``STARS_PER_LEVEL`` more stars than the one before it. The
caller owns and persists the star total; this module only does the math.
"""

import math
from typing import Final

from playrules.progression.levels import MAX_GAME_LEVEL, clamp_level
from playrules.shared.utils.math_utils import clamp, round_half_up

STARS_PER_LEVEL: Final[int] = 2


def required_stars(level: float) -> int:
    """Cumulative stars needed to unlock a level. Level 1: 0, level 20: 38."""
    safe = clamp_level(level)
    if safe <= 1:
        return 0
    return (safe - 1) * STARS_PER_LEVEL


def unlocked_level(total_stars: float) -> int:
    """Highest level whose threshold ``total_stars`` meets."""
    if isinstance(total_stars, int):
        safe_stars = max(0, total_stars)
    elif math.isnan(total_stars):
        return 1
    elif math.isfinite(total_stars):
        safe_stars = max(0, round_half_up(total_stars))
    else:
        safe_stars = total_stars
    unlocked = 1
    for level in range(2, MAX_GAME_LEVEL + 1):
        if safe_stars >= required_stars(level):
            unlocked = level
        else:
            break
    return unlocked


def unlock_progress_ratio(current_stars: float, level: float) -> float:
    """How far ``current_stars`` is from the level's threshold to the next one.

    Always in ``[0, 1]``. At the top level the next threshold is taken as
    one star above the current one.
    """
    safe = clamp_level(level)
    previous_req = required_stars(safe)
    if safe >= MAX_GAME_LEVEL:
        next_req = previous_req + 1
    else:
        next_req = required_stars(safe + 1)
    span = max(1, next_req - previous_req)
    delta = clamp(current_stars - previous_req, 0, span)
    return delta / span
