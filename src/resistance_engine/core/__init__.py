"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        ResistanceEngineError: Base exception for all engine errors.
        RangeError: A single value outside its declared domain.
        ValidationError: Record or joint validation failure.
        EffectError: Unresolvable active effect change.
        ConfigurationError: Configuration-related errors.

    Configuration:
        Settings: Main application settings class.
        GameSettings: Game rule settings (level cap).
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
        resistance_context: Bind actor or damage type for a block.
"""

from __future__ import annotations

from resistance_engine.core.config import (
    DEFAULT_MAX_LEVEL,
    GameSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from resistance_engine.core.exceptions import (
    ConfigurationError,
    EffectError,
    RangeError,
    ResistanceEngineError,
    ValidationError,
)
from resistance_engine.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    resistance_context,
)


__all__ = [
    # Exceptions
    "ResistanceEngineError",
    "RangeError",
    "ValidationError",
    "EffectError",
    "ConfigurationError",
    # Configuration
    "DEFAULT_MAX_LEVEL",
    "Settings",
    "GameSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "resistance_context",
]
