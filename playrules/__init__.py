"""Play rules engine for a multi-game kids' learning app.

Deterministic, side-effect-free rules that turn play telemetry into scores,
stars, level unlocks, round content and badges. The embedding app owns all
state and persistence; every function here takes what it needs and returns
a fresh result.

Modules:
    - scoring: Per-answer score formula, speed and combo bonuses, accuracy
    - progression: Level content gating, star ratings, unlock ladder,
      milestone themes, daily streak and daily goal arithmetic
    - achievements: Badge table evaluated against lifetime stats
    - content: Math questions, alphabet letter pools, memory decks
    - session: Applies a finished round to the caller's progress record
    - config: Caller policy settings (daily goal, effort star, streak shield)
"""

APP_VERSION = "1.0.0"
APP_TITLE = "Play Rules Engine"

__version__ = APP_VERSION
__all__ = ["APP_VERSION", "APP_TITLE"]
