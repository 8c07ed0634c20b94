"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the resistance engine test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from resistance_engine.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "RESISTANCE_ENGINE_DEBUG": "true",
        "RESISTANCE_ENGINE_LOG_LEVEL": "DEBUG",
        "RESISTANCE_ENGINE_GAME_MAX_LEVEL": "45",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def sample_resistance_bases() -> dict[str, int]:
    """Provide a resistance spread covering every level.

    Returns:
        Dictionary of damage type to base level.
    """
    return {
        "physical": 0,
        "fire": 1,
        "ice": -1,
        "electric": 2,
        "wind": 0,
        "earth": 3,
        "light": 0,
        "dark": 1,
    }


@pytest.fixture
def sample_resistances(sample_resistance_bases: dict[str, int]) -> Any:
    """Create a validated ResistanceSet from the sample bases."""
    from resistance_engine.models.resistance import ResistanceSet

    return ResistanceSet.from_bases(sample_resistance_bases)


@pytest.fixture
def sample_actor(sample_resistance_bases: dict[str, int]) -> Any:
    """Create a sample daemon actor with the sample resistances."""
    from resistance_engine.models.actor import create_actor
    from resistance_engine.models.enums import ActorType

    return create_actor(
        "Jack Frost",
        actor_type=ActorType.DAEMON,
        level=12,
        resistances=sample_resistance_bases,
    )
