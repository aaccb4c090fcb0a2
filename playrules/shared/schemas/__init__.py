"""Shared schemas module.

Contains the base schema and the closed enums every rules module shares.
"""

from playrules.shared.schemas.base import (
    BaseSchema,
    DifficultyLevel,
    FrozenSchema,
    GameKey,
    LevelBand,
    MathOperation,
    RoundOutcome,
)

__all__ = [
    "BaseSchema",
    "DifficultyLevel",
    "FrozenSchema",
    "GameKey",
    "LevelBand",
    "MathOperation",
    "RoundOutcome",
]
