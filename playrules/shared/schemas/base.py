"""Base schemas and common types used across the engine."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


# ===========================================
# ENUMS
# ===========================================


class GameKey(str, Enum):
    """Game kinds served by the engine."""

    MATH = "math"
    ALPHABET = "alphabet"
    ANIMALS = "animals"


class DifficultyLevel(str, Enum):
    """Scoring difficulty; selects the score multiplier."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class LevelBand(str, Enum):
    """Difficulty band a level falls into (1-7, 8-14, 15-20)."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class MathOperation(str, Enum):
    """Arithmetic operations a math round can ask about."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    MODULO = "modulo"


class RoundOutcome(str, Enum):
    """How a round ended."""

    WON = "won"
    LOST = "lost"
    QUIT = "quit"


# ===========================================
# BASE MODELS
# ===========================================


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
    )


class FrozenSchema(BaseSchema):
    """Immutable schema for snapshots handed between caller and engine."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
        frozen=True,
    )
