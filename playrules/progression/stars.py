"""Per-round star rating.

Three independent criteria, one star each: accuracy at or above the level's
bar, a recorded time within the level's speed target, and no hints.

Reward policy:
    * A completed round earns at least one star even when every criterion
      fails. Finishing is success on its own.
    * An incomplete round (lost or quit) earns exactly one effort star, but
      only when the caller asks for it; otherwise zero. Its breakdown
      credits none of the three criteria.
"""

import math
from dataclasses import dataclass
from typing import Final

from playrules.shared.utils.math_utils import clamp

MAX_STARS: Final[int] = 3
MIN_STARS_FOR_COMPLETION: Final[int] = 1
EFFORT_STARS: Final[int] = 1


@dataclass(frozen=True)
class StarCalculationInput:
    """Round telemetry plus the level's gates."""

    accuracy: float
    time_ms: float | None
    hints_used: bool
    completed: bool
    min_accuracy: float
    speed_target_ms: float
    award_effort_star: bool = False


@dataclass(frozen=True)
class StarBreakdown:
    """Which criteria a round satisfied."""

    accuracy_star: bool
    speed_star: bool
    no_hint_star: bool
    effort_star: bool


@dataclass(frozen=True)
class StarCalculationResult:
    """Stars earned for one round, with the reasons."""

    stars_earned: int
    breakdown: StarBreakdown


def _earns_speed_star(time_ms: float | None, speed_target_ms: float) -> bool:
    # Missing, non-finite or zero timings never earn the speed star
    if time_ms is None or not math.isfinite(time_ms) or time_ms <= 0:
        return False
    return time_ms <= speed_target_ms


def calculate_stars(params: StarCalculationInput) -> StarCalculationResult:
    """Rate one round from 0 to 3 stars."""
    completed = params.completed
    accuracy_star = completed and params.accuracy >= params.min_accuracy
    speed_star = completed and _earns_speed_star(params.time_ms, params.speed_target_ms)
    no_hint_star = completed and not params.hints_used
    effort_star = not completed and params.award_effort_star

    stars = 0
    if completed:
        stars = int(accuracy_star) + int(speed_star) + int(no_hint_star)
        stars = max(stars, MIN_STARS_FOR_COMPLETION)
    elif effort_star:
        stars = EFFORT_STARS

    return StarCalculationResult(
        stars_earned=int(clamp(stars, 0, MAX_STARS)),
        breakdown=StarBreakdown(
            accuracy_star=accuracy_star,
            speed_star=speed_star,
            no_hint_star=no_hint_star,
            effort_star=effort_star,
        ),
    )
