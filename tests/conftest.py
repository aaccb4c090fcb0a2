"""Global pytest fixtures for the Play Rules Engine.

This module provides shared fixtures for testing including:
- Engine settings with test-friendly defaults
- Seeded random sources for content generators
- Fixed local timestamps for daily goal and streak tests
"""

import random
from collections.abc import Generator
from datetime import datetime

import pytest
import structlog

from playrules.config import EngineSettings, get_settings


# ===========================================
# SETTINGS FIXTURES
# ===========================================


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make sure environment tweaks in one test never leak into another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> EngineSettings:
    """Default engine settings, independent of any .env file."""
    return EngineSettings(_env_file=None)


@pytest.fixture
def stingy_settings() -> EngineSettings:
    """Settings for a caller that gives no effort stars and no streak shield."""
    return EngineSettings(
        _env_file=None,
        award_effort_star=False,
        streak_shield_enabled=False,
    )


# ===========================================
# RANDOMNESS FIXTURES
# ===========================================


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so generated content is reproducible."""
    return random.Random(1234)


# ===========================================
# TIME FIXTURES
# ===========================================


@pytest.fixture
def monday() -> datetime:
    """A naive local timestamp, mid-afternoon."""
    return datetime(2025, 3, 3, 15, 30)


@pytest.fixture
def tuesday() -> datetime:
    return datetime(2025, 3, 4, 9, 0)


# ===========================================
# LOGGING FIXTURES
# ===========================================


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo any structlog configuration or bound context a test leaves behind."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
