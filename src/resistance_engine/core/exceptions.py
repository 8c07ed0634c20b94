"""Custom exception hierarchy for the resistance engine.

All exceptions inherit from ResistanceEngineError, enabling unified error
handling at the host boundary while preserving field-level context.

None of these classes derive from ``ValueError``. Pydantic only wraps
``ValueError`` and ``AssertionError`` raised inside validators, so these
errors reach the caller unchanged when a model rejects its input.

Example:
    >>> from resistance_engine.core.exceptions import RangeError
    >>> raise RangeError("Resistance out of range", field_name="base", invalid_value=5)
"""

from __future__ import annotations

from typing import Any


class ResistanceEngineError(Exception):
    """Base exception for all resistance engine errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception.

        Returns:
            String representation suitable for debugging.
        """
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Resistance Domain Exceptions
# =============================================================================


class RangeError(ResistanceEngineError):
    """Raised when a single value lies outside its declared domain.

    Typical causes are a resistance base outside [-1, 3], a level above
    the actor's level cap, or a forced resistance level that cannot be
    clamped (NaN, a non-integral float, a non-number).
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        minimum: int | None = None,
        maximum: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize range error with bound context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field holding the rejected value.
            invalid_value: The rejected value.
            minimum: Lowest accepted value.
            maximum: Highest accepted value.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        if minimum is not None:
            combined_details["minimum"] = minimum
        if maximum is not None:
            combined_details["maximum"] = maximum
        self.field_name = field_name
        self.invalid_value = invalid_value
        super().__init__(message, details=combined_details)


class EffectError(ResistanceEngineError):
    """Raised when an active effect change cannot be interpreted.

    This typically occurs when a change key does not address a known
    damage type.
    """

    def __init__(
        self,
        message: str,
        *,
        effect_name: str | None = None,
        change_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize effect error with effect context.

        Args:
            message: Human-readable error description.
            effect_name: Name of the effect carrying the change.
            change_key: The change key that could not be resolved.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if effect_name:
            combined_details["effect_name"] = effect_name
        if change_key:
            combined_details["change_key"] = change_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(ResistanceEngineError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(ResistanceEngineError):
    """Raised when record or joint validation fails.

    Single-field failures carry ``field_name`` and ``invalid_value``.
    Joint failures over a whole resistance set additionally carry
    ``invalid_fields``, a mapping of every offending field path to its value.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        invalid_fields: dict[str, Any] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            invalid_fields: Every offending field path and its value.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        if invalid_fields:
            combined_details["invalid_fields"] = invalid_fields
        self.field_name = field_name
        self.invalid_value = invalid_value
        self.invalid_fields = dict(invalid_fields or {})
        super().__init__(message, details=combined_details)


__all__ = [
    "ResistanceEngineError",
    "RangeError",
    "EffectError",
    "ConfigurationError",
    "ValidationError",
]
