"""Configuration management for the resistance engine.

This module provides centralized configuration using pydantic-settings,
supporting environment variables and .env files. The resistance core never
reads these settings itself: the host resolves them once and passes the
relevant values (such as the level cap) into the entities it builds.

Example:
    >>> from resistance_engine.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.game.max_level
    30

Environment Variables:
    RESISTANCE_ENGINE_DEBUG: Enable debug mode
    RESISTANCE_ENGINE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    RESISTANCE_ENGINE_LOG_JSON: Emit JSON log lines
    RESISTANCE_ENGINE_GAME_MAX_LEVEL: Character level cap (30-60, step 5)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resistance_engine.core.exceptions import ConfigurationError


DEFAULT_MAX_LEVEL = 30
MIN_LEVEL_CAP = 30
MAX_LEVEL_CAP = 60
LEVEL_CAP_STEP = 5


class GameSettings(BaseSettings):
    """Configuration for game rules.

    Attributes:
        max_level: Highest level a character may reach.
    """

    model_config = SettingsConfigDict(
        env_prefix="RESISTANCE_ENGINE_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_level: int = Field(
        default=DEFAULT_MAX_LEVEL,
        ge=MIN_LEVEL_CAP,
        le=MAX_LEVEL_CAP,
        description="Character level cap",
    )

    @model_validator(mode="after")
    def validate_max_level_step(self) -> "GameSettings":
        """Ensure the level cap sits on a 5-level step.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If max_level is not a multiple of 5.
        """
        if self.max_level % LEVEL_CAP_STEP:
            raise ConfigurationError(
                f"max_level ({self.max_level}) must be a multiple of {LEVEL_CAP_STEP}",
                config_key="max_level",
            )
        return self


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        log_json: Emit logs as JSON lines.
        game: Game rule settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="RESISTANCE_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Resistance Engine",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )

    game: GameSettings = Field(default_factory=GameSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode.

        Returns:
            True if not in debug mode.
        """
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "DEFAULT_MAX_LEVEL",
    "GameSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
