"""Milestone levels, stickers and celebration themes.

Levels 5, 10, 15 and 20 are milestones. Each milestone reached moves the
home screen to the next theme in a fixed list of five.
"""

from dataclasses import dataclass
from typing import Final

from playrules.progression.levels import clamp_level

MILESTONE_LEVELS: Final[tuple[int, ...]] = (5, 10, 15, 20)

# (minimum level, sticker), rarest first
MILESTONE_STICKERS: Final[list[tuple[int, str]]] = [
    (20, "👑"),
    (15, "🦄"),
    (10, "🚀"),
    (5, "🌈"),
]
DEFAULT_STICKER: Final[str] = "⭐"


@dataclass(frozen=True)
class MilestoneTheme:
    """A celebratory visual theme. Colors are opaque to the engine."""

    id: str
    name: str
    icon: str
    sky_gradient: tuple[str, str, str]
    grass_gradient: tuple[str, str, str]
    accent: str


PROGRESSION_THEMES: Final[tuple[MilestoneTheme, ...]] = (
    MilestoneTheme(
        id="sunny-meadow",
        name="Sunny Meadow",
        icon="🌼",
        sky_gradient=("#87CEEB", "#B0E0E6", "#98D8C8"),
        grass_gradient=("#7CB342", "#558B2F", "#33691E"),
        accent="#FF6B9D",
    ),
    MilestoneTheme(
        id="candy-sunset",
        name="Candy Sunset",
        icon="🍭",
        sky_gradient=("#FFB3BA", "#FFD3B6", "#FFF1A8"),
        grass_gradient=("#89D37F", "#55B96B", "#2F8F52"),
        accent="#FF7F7F",
    ),
    MilestoneTheme(
        id="rainbow-lagoon",
        name="Rainbow Lagoon",
        icon="🌈",
        sky_gradient=("#7CD6FF", "#8EE7CC", "#B8F6A4"),
        grass_gradient=("#56C3E8", "#2F9CC6", "#1D6E9D"),
        accent="#2DD4BF",
    ),
    MilestoneTheme(
        id="starlight-garden",
        name="Starlight Garden",
        icon="🌟",
        sky_gradient=("#A8C3FF", "#CBB8FF", "#FFD4F6"),
        grass_gradient=("#8BCF6A", "#63B54D", "#3E8F34"),
        accent="#A855F7",
    ),
    MilestoneTheme(
        id="rocket-nebula",
        name="Rocket Nebula",
        icon="🚀",
        sky_gradient=("#6FB4FF", "#7DA0FF", "#B197FC"),
        grass_gradient=("#67C46A", "#4BAF52", "#2E8E3C"),
        accent="#3B9EFF",
    ),
)


def is_milestone_level(level: float) -> bool:
    """Whether the (clamped) level is a milestone."""
    return clamp_level(level) in MILESTONE_LEVELS


def milestone_sticker(level: float) -> str:
    """Sticker for the highest milestone at or below the level."""
    safe = clamp_level(level)
    for min_level, sticker in MILESTONE_STICKERS:
        if safe >= min_level:
            return sticker
    return DEFAULT_STICKER


def milestones_reached(level: float) -> int:
    """Number of milestone levels at or below the level."""
    safe = clamp_level(level)
    return sum(1 for milestone in MILESTONE_LEVELS if milestone <= safe)


def theme_for_milestone_count(milestone_count: int) -> MilestoneTheme:
    """Theme for a milestone count. Saturates at the last theme, never wraps."""
    index = max(0, min(len(PROGRESSION_THEMES) - 1, milestone_count))
    return PROGRESSION_THEMES[index]
