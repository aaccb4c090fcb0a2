"""Badge definitions.

Badges are permanent and unlocked purely from lifetime stats. Each entry is
data plus a predicate; adding a badge means adding a row here.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from playrules.achievements.schemas import AchievementProgressSnapshot

ABC_MASTER_MIN_SCORE: Final[int] = 220
MATH_ROCKET_MIN_STREAK: Final[int] = 8
MATH_ROCKET_MIN_SCORE: Final[int] = 160
ANIMAL_MEMORY_PRO_MIN_SCORE: Final[int] = 120


@dataclass(frozen=True)
class AchievementDefinition:
    """A badge that can be unlocked."""

    id: str
    title: str
    emoji: str
    description: str
    is_unlocked: Callable[[AchievementProgressSnapshot], bool]


# Display order
ACHIEVEMENTS: Final[tuple[AchievementDefinition, ...]] = (
    AchievementDefinition(
        id="abc_master",
        title="ABC Master",
        emoji="🔤",
        description=f"Reach a best Alphabet score of {ABC_MASTER_MIN_SCORE}.",
        is_unlocked=lambda p: p.game_stats.alphabet.best_score >= ABC_MASTER_MIN_SCORE,
    ),
    AchievementDefinition(
        id="math_rocket",
        title="Math Rocket",
        emoji="🚀",
        description=(
            f"Get a Math streak of {MATH_ROCKET_MIN_STREAK} "
            f"or best Math score of {MATH_ROCKET_MIN_SCORE}."
        ),
        is_unlocked=lambda p: (
            p.game_stats.math.best_streak >= MATH_ROCKET_MIN_STREAK
            or p.game_stats.math.best_score >= MATH_ROCKET_MIN_SCORE
        ),
    ),
    AchievementDefinition(
        id="animal_memory_pro",
        title="Animal Memory Pro",
        emoji="🐾",
        description=f"Reach a best Animal score of {ANIMAL_MEMORY_PRO_MIN_SCORE}.",
        is_unlocked=lambda p: p.game_stats.animals.best_score >= ANIMAL_MEMORY_PRO_MIN_SCORE,
    ),
)
