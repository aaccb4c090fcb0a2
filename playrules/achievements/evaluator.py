"""Achievement evaluation.

Re-evaluates every badge against the snapshot on each call. Nothing is
cached; the snapshot is small and owned by the caller.
"""

from collections.abc import Iterable

from playrules.achievements.definitions import ACHIEVEMENTS, AchievementDefinition
from playrules.achievements.schemas import AchievementProgressSnapshot


def unlocked_ids(snapshot: AchievementProgressSnapshot) -> list[str]:
    """Ids of every badge the snapshot satisfies, in declaration order."""
    return [achievement.id for achievement in ACHIEVEMENTS if achievement.is_unlocked(snapshot)]


def achievement_by_id(achievement_id: str) -> AchievementDefinition | None:
    """Badge definition for an id, or None when there is no such badge."""
    return next((a for a in ACHIEVEMENTS if a.id == achievement_id), None)


def newly_unlocked(
    snapshot: AchievementProgressSnapshot,
    already_unlocked: Iterable[str],
) -> list[str]:
    """Badges the snapshot satisfies that the caller has not recorded yet."""
    known = set(already_unlocked)
    return [achievement_id for achievement_id in unlocked_ids(snapshot) if achievement_id not in known]
