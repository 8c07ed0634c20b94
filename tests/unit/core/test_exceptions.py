"""Tests for the exception hierarchy."""

from __future__ import annotations

from resistance_engine.core.exceptions import (
    ConfigurationError,
    EffectError,
    RangeError,
    ResistanceEngineError,
    ValidationError,
)


class TestResistanceEngineError:
    """Tests for the base ResistanceEngineError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = ResistanceEngineError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = ResistanceEngineError("Test error", details={"key": "value", "count": 42})
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(ResistanceEngineError("Test", details={"x": 1}))
        assert "ResistanceEngineError" in repr_str
        assert "x" in repr_str


class TestRangeError:
    """Tests for RangeError."""

    def test_bounds_in_details(self) -> None:
        exc = RangeError("Too high", field_name="base", invalid_value=5, minimum=-1, maximum=3)
        assert exc.details == {"field_name": "base", "invalid_value": 5, "minimum": -1, "maximum": 3}
        assert exc.field_name == "base"
        assert exc.invalid_value == 5

    def test_zero_value_is_kept(self) -> None:
        """A falsy value such as 0 is still reported."""
        exc = RangeError("Bad", invalid_value=0)
        assert exc.details["invalid_value"] == 0

    def test_not_a_value_error(self) -> None:
        """Pydantic must not wrap engine errors raised in validators."""
        assert not issubclass(RangeError, ValueError)
        assert not issubclass(ValidationError, ValueError)


class TestValidationError:
    """Tests for ValidationError."""

    def test_field_context(self) -> None:
        exc = ValidationError("Invalid", field_name="fire.base", invalid_value=10)
        assert exc.details["field_name"] == "fire.base"
        assert exc.details["invalid_value"] == 10
        assert exc.invalid_fields == {}

    def test_joint_context(self) -> None:
        exc = ValidationError(
            "Invalid resistance combination",
            field_name="resistances",
            invalid_fields={"fire.base": 10, "ice.base": -5},
        )
        assert exc.invalid_fields == {"fire.base": 10, "ice.base": -5}
        assert "fire.base" in str(exc)


class TestOtherExceptions:
    """Tests for effect and configuration errors."""

    def test_effect_error(self) -> None:
        exc = EffectError("Unknown type", effect_name="Fire Wall", change_key="resistances.x.method")
        assert exc.details == {"effect_name": "Fire Wall", "change_key": "resistances.x.method"}

    def test_configuration_error(self) -> None:
        exc = ConfigurationError("Invalid config", config_key="max_level")
        assert exc.details["config_key"] == "max_level"

    def test_inheritance(self) -> None:
        """Test exception inheritance chain."""
        for exc_type in (RangeError, ValidationError, EffectError, ConfigurationError):
            assert issubclass(exc_type, ResistanceEngineError)
