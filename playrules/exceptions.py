"""Custom exceptions for the rules engine.

Only closed-enum contract violations raise. Out-of-range levels, empty
attempt counts and missing timings are ordinary inputs and never do.
"""


class PlayRulesError(Exception):
    """Base exception for rules engine errors."""

    def __init__(self, message: str, error_type: str = "play_rules_error"):
        self.message = message
        self.error_type = error_type
        super().__init__(message)


class UnknownDifficultyError(PlayRulesError):
    """Raised when a difficulty outside easy/medium/hard is supplied."""

    def __init__(self, difficulty: object):
        super().__init__(
            f"Unknown difficulty '{difficulty}'",
            "unknown_difficulty",
        )
        self.difficulty = difficulty


class UnknownGameError(PlayRulesError):
    """Raised when a game key outside math/alphabet/animals is supplied."""

    def __init__(self, game: object):
        super().__init__(
            f"Unknown game '{game}'",
            "unknown_game",
        )
        self.game = game
