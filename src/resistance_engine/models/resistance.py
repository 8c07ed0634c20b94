"""Resistance state resolution and the eight-type resistance set.

A ResistanceState holds one persisted base level plus four transient
override flags raised by active effects. Resolution to a current level
follows a fixed priority, highest first:

    drain → 3, nullify → 2, resist + weak → 0, resist → 1, weak → -1, base

A ResistanceSet owns one ResistanceState per damage type and is the joint
validation boundary: a set with any out-of-range member is rejected as a
whole.

Example:
    >>> fire = ResistanceState(base=1)
    >>> fire.activate_nullify()
    >>> fire.get_current(), fire.get_multiplier()
    (2, 0)
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from numbers import Real
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationInfo,
    field_validator,
)

from resistance_engine.core.exceptions import RangeError, ValidationError
from resistance_engine.models.enums import DamageType, ResistanceLevel


MIN_RESISTANCE = ResistanceLevel.WEAK.value
MAX_RESISTANCE = ResistanceLevel.DRAIN.value

DAMAGE_MULTIPLIERS: dict[int, float] = {
    ResistanceLevel.WEAK: 2,
    ResistanceLevel.NORMAL: 1,
    ResistanceLevel.RESIST: 0.5,
    ResistanceLevel.NULLIFY: 0,
    ResistanceLevel.DRAIN: -1,
}


# =============================================================================
# Validators
# =============================================================================


def is_valid_base(value: Any) -> bool:
    """Check whether a value is an integer resistance level in [-1, 3]."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and MIN_RESISTANCE <= value <= MAX_RESISTANCE
    )


def check_base(value: Any, field_name: str = "base") -> int:
    """Validate a resistance base value.

    Args:
        value: The candidate base value.
        field_name: Field path reported on failure.

    Returns:
        The value as a plain int.

    Raises:
        ValidationError: If the value is not an integer.
        RangeError: If the value is outside [-1, 3].
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"Resistance {field_name} must be an integer, got {type(value).__name__}",
            field_name=field_name,
            invalid_value=value,
        )
    if not MIN_RESISTANCE <= value <= MAX_RESISTANCE:
        raise RangeError(
            f"Resistance {field_name} value {value} must be between "
            f"{MIN_RESISTANCE} and {MAX_RESISTANCE}",
            field_name=field_name,
            invalid_value=value,
            minimum=MIN_RESISTANCE,
            maximum=MAX_RESISTANCE,
        )
    return int(value)


def clamp_level(value: Any) -> int:
    """Clamp a numeric value into the resistance range.

    Infinities clamp to the nearest bound. NaN, non-integral floats and
    non-numbers have no meaningful level.

    Raises:
        RangeError: If the value cannot be clamped to a level.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise RangeError(
            f"Cannot resolve a resistance level from {value!r}",
            field_name="current",
            invalid_value=value,
        )
    if math.isnan(value) or (not math.isinf(value) and value != math.floor(value)):
        raise RangeError(
            f"Cannot resolve a resistance level from {value!r}",
            field_name="current",
            invalid_value=value,
        )
    return int(max(MIN_RESISTANCE, min(MAX_RESISTANCE, value)))


# =============================================================================
# Resistance State
# =============================================================================


@dataclass(frozen=True)
class OverrideFlags:
    """Transient overrides raised by active effects.

    Attributes:
        weak: Forces the weak level.
        resist: Forces the resist level (cancels with weak).
        nullify: Forces the nullify level.
        drain: Forces the drain level.
    """

    weak: bool = False
    resist: bool = False
    nullify: bool = False
    drain: bool = False

    @property
    def any_active(self) -> bool:
        return self.weak or self.resist or self.nullify or self.drain


# set_current() raises exactly one flag per level; normal raises none unless
# the base is off normal, then the cancelling resist + weak pair
_FLAGS_BY_LEVEL: dict[int, OverrideFlags] = {
    ResistanceLevel.WEAK: OverrideFlags(weak=True),
    ResistanceLevel.NORMAL: OverrideFlags(),
    ResistanceLevel.RESIST: OverrideFlags(resist=True),
    ResistanceLevel.NULLIFY: OverrideFlags(nullify=True),
    ResistanceLevel.DRAIN: OverrideFlags(drain=True),
}
_FORCED_NORMAL = OverrideFlags(weak=True, resist=True)


class ResistanceSnapshot(BaseModel):
    """Derived view of one resistance, valid only for the pass that built it."""

    model_config = ConfigDict(frozen=True)

    base: int = Field(description="Persisted base level")
    effective_value: int = Field(description="Resolved current level")
    is_modified: bool = Field(description="Whether overrides moved the level off base")
    multiplier: float = Field(description="Damage multiplier for the resolved level")


class ResistanceState(BaseModel):
    """One damage type's resistance.

    Only ``base`` is a schema field and only ``base`` is serialized. The
    override flags live in a private attribute and are reset by the owner
    on every data-preparation pass.

    Query and mutation are separate surfaces: ``is_weak()`` reads,
    ``activate_weak()`` (alias ``wk()``) writes.

    Attributes:
        base: Base resistance level, -1 (weak) to 3 (drain).
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    base: int = Field(default=0, description="Base resistance level (-1 to 3)")

    _overrides: OverrideFlags = PrivateAttr(default_factory=OverrideFlags)

    @field_validator("base", mode="before")
    @classmethod
    def validate_base_value(cls, value: Any) -> int:
        """Reject non-integers and values outside [-1, 3]."""
        return check_base(value)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    @property
    def overrides(self) -> OverrideFlags:
        """Currently active override flags."""
        return self._overrides

    def set_base(self, value: int) -> None:
        """Assign a new base level, leaving overrides untouched.

        Raises:
            RangeError: If value is outside [-1, 3].
        """
        self.base = value

    def get_current(self) -> int:
        """Resolve the current level from overrides, falling back to base."""
        flags = self._overrides
        if flags.drain:
            return ResistanceLevel.DRAIN.value
        if flags.nullify:
            return ResistanceLevel.NULLIFY.value
        if flags.resist and flags.weak:
            return ResistanceLevel.NORMAL.value
        if flags.resist:
            return ResistanceLevel.RESIST.value
        if flags.weak:
            return ResistanceLevel.WEAK.value
        return self.base

    def set_current(self, value: float) -> None:
        """Force the resolved level without naming an override.

        The value is clamped into [-1, 3], every override is cleared and
        the single flag matching the clamped level is raised. Normal (0)
        raises no flag when the base is already normal. On any other base
        it raises resist and weak together, which cancel to normal, so
        ``get_current()`` always equals the clamped value.

        Args:
            value: Desired level; any integer, or an integral float.

        Raises:
            RangeError: If the value cannot be clamped to a level.
        """
        level = clamp_level(value)
        if level == ResistanceLevel.NORMAL and self.base != ResistanceLevel.NORMAL:
            self._overrides = _FORCED_NORMAL
        else:
            self._overrides = _FLAGS_BY_LEVEL[level]

    def get_multiplier(self) -> float:
        """Damage multiplier for the resolved level (1 for unknown levels)."""
        return DAMAGE_MULTIPLIERS.get(self.get_current(), 1)

    def is_modified(self) -> bool:
        return self.get_current() != self.base

    def derive(self) -> ResistanceSnapshot:
        """Build a fresh derived snapshot of this resistance."""
        current = self.get_current()
        return ResistanceSnapshot(
            base=self.base,
            effective_value=current,
            is_modified=current != self.base,
            multiplier=DAMAGE_MULTIPLIERS.get(current, 1),
        )

    def validate_base(self) -> None:
        """Validate the stored base value.

        Assignment is already validated, so this only fails for records
        built without validation (``model_construct``).

        Raises:
            ValidationError: If base is outside [-1, 3].
        """
        if not is_valid_base(self.base):
            raise ValidationError(
                f"Resistance base value {self.base!r} must be between "
                f"{MIN_RESISTANCE} and {MAX_RESISTANCE}",
                field_name="base",
                invalid_value=self.base,
            )

    # -------------------------------------------------------------------------
    # Level predicates
    # -------------------------------------------------------------------------

    def is_weak(self) -> bool:
        return self._overrides.weak or self.base == ResistanceLevel.WEAK

    def is_resist(self) -> bool:
        return self._overrides.resist or self.base == ResistanceLevel.RESIST

    def is_nullify(self) -> bool:
        return self._overrides.nullify or self.base == ResistanceLevel.NULLIFY

    def is_drain(self) -> bool:
        return self._overrides.drain or self.base == ResistanceLevel.DRAIN

    # -------------------------------------------------------------------------
    # Override mutators
    # -------------------------------------------------------------------------

    def activate_weak(self) -> None:
        self._overrides = replace(self._overrides, weak=True)

    def activate_resist(self) -> None:
        self._overrides = replace(self._overrides, resist=True)

    def activate_nullify(self) -> None:
        self._overrides = replace(self._overrides, nullify=True)

    def activate_drain(self) -> None:
        self._overrides = replace(self._overrides, drain=True)

    def deactivate_weak(self) -> None:
        self._overrides = replace(self._overrides, weak=False)

    def deactivate_resist(self) -> None:
        self._overrides = replace(self._overrides, resist=False)

    def deactivate_nullify(self) -> None:
        self._overrides = replace(self._overrides, nullify=False)

    def deactivate_drain(self) -> None:
        self._overrides = replace(self._overrides, drain=False)

    def clear_overrides(self) -> None:
        self._overrides = OverrideFlags()

    def downgrade(self) -> None:
        """Raise the weak override."""
        self.activate_weak()

    def upgrade(self) -> None:
        """Raise the resist override."""
        self.activate_resist()

    # Short aliases used by effect definitions
    wk = activate_weak
    rs = activate_resist
    nu = activate_nullify
    dr = activate_drain


# =============================================================================
# Resistance Set
# =============================================================================


_MEMBER_NAMES = tuple(damage_type.value for damage_type in DamageType)


class ResistanceSet(BaseModel):
    """The eight elemental resistances of one character.

    Members may be given as ResistanceState instances (copied, so a state
    is never shared between sets), ``{"base": n}`` records, or bare
    integers. Omitted types default to normal.

    Example:
        >>> resistances = ResistanceSet.from_bases({"fire": 1, "ice": -1})
        >>> resistances.fire.get_multiplier()
        0.5
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    RESISTANCE_TYPES: ClassVar[tuple[DamageType, ...]] = tuple(DamageType)

    physical: ResistanceState = Field(default_factory=ResistanceState)
    fire: ResistanceState = Field(default_factory=ResistanceState)
    ice: ResistanceState = Field(default_factory=ResistanceState)
    electric: ResistanceState = Field(default_factory=ResistanceState)
    wind: ResistanceState = Field(default_factory=ResistanceState)
    earth: ResistanceState = Field(default_factory=ResistanceState)
    light: ResistanceState = Field(default_factory=ResistanceState)
    dark: ResistanceState = Field(default_factory=ResistanceState)

    @field_validator(*_MEMBER_NAMES, mode="before")
    @classmethod
    def coerce_member(cls, value: Any, info: ValidationInfo) -> ResistanceState:
        """Accept a state, a ``{"base": n}`` record, or a bare integer."""
        field_path = f"{info.field_name}.base"
        if isinstance(value, ResistanceState):
            check_base(value.base, field_path)
            return value.model_copy(deep=True)
        if isinstance(value, Mapping):
            extra_keys = sorted(str(key) for key in value if key != "base")
            if extra_keys:
                raise ValidationError(
                    f"Unexpected keys in {info.field_name} resistance record",
                    field_name=info.field_name,
                    invalid_value=extra_keys,
                )
            return ResistanceState(base=check_base(value.get("base", 0), field_path))
        return ResistanceState(base=check_base(value, field_path))

    @classmethod
    def from_bases(cls, initial: Mapping[str, Any] | None = None) -> ResistanceSet:
        """Build a set from a mapping of damage type to base level.

        Every member is checked before the set is accepted; out-of-range
        bases are reported together in one joint ValidationError.

        Args:
            initial: Damage type name (or DamageType) to base level.

        Returns:
            A fully validated ResistanceSet.

        Raises:
            ValidationError: On unknown damage types, non-integer bases, or
                any base outside [-1, 3].
        """
        initial = dict(initial or {})
        unknown = sorted(str(key) for key in initial if key not in _MEMBER_NAMES)
        if unknown:
            raise ValidationError(
                f"Unknown damage types: {', '.join(unknown)}",
                field_name="resistances",
                invalid_value=unknown,
            )

        members: dict[str, ResistanceState] = {}
        for damage_type in cls.RESISTANCE_TYPES:
            value = initial.get(damage_type.value, 0)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(
                    f"Resistance {damage_type}.base must be an integer, "
                    f"got {type(value).__name__}",
                    field_name=f"{damage_type}.base",
                    invalid_value=value,
                )
            members[damage_type.value] = ResistanceState.model_construct(base=int(value))

        resistances = cls.model_construct(**members)
        resistances.validate_joint()
        return resistances

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def items(self) -> Iterator[tuple[DamageType, ResistanceState]]:
        """Iterate (damage type, state) pairs in sheet order."""
        for damage_type in self.RESISTANCE_TYPES:
            yield damage_type, getattr(self, damage_type.value)

    def get(self, damage_type: DamageType | str) -> ResistanceState | None:
        """Look up a member by damage type, or None if the type is unknown."""
        if damage_type not in _MEMBER_NAMES:
            return None
        return getattr(self, str(damage_type))

    def __getitem__(self, damage_type: DamageType | str) -> ResistanceState:
        state = self.get(damage_type)
        if state is None:
            raise KeyError(damage_type)
        return state

    # -------------------------------------------------------------------------
    # Joint operations
    # -------------------------------------------------------------------------

    def validate_joint(self) -> None:
        """Validate every member's base together.

        All offending members are collected before failing, so a single
        error names every bad field.

        Raises:
            ValidationError: If any base is outside [-1, 3].
        """
        invalid_fields = {
            f"{damage_type}.base": state.base
            for damage_type, state in self.items()
            if not is_valid_base(state.base)
        }
        if invalid_fields:
            raise ValidationError(
                "Invalid resistance combination detected: "
                + ", ".join(sorted(invalid_fields)),
                field_name="resistances",
                invalid_fields=invalid_fields,
            )

    def derive_all(self) -> dict[DamageType, ResistanceSnapshot]:
        """Recompute the derived snapshot of every member.

        Snapshots are not cached; derive again after any override change.
        """
        return {damage_type: state.derive() for damage_type, state in self.items()}

    def clear_overrides(self) -> None:
        for _, state in self.items():
            state.clear_overrides()


__all__ = [
    "DAMAGE_MULTIPLIERS",
    "MAX_RESISTANCE",
    "MIN_RESISTANCE",
    "OverrideFlags",
    "ResistanceSet",
    "ResistanceSnapshot",
    "ResistanceState",
    "check_base",
    "clamp_level",
    "is_valid_base",
]
