"""Active effects that change resistances by method.

An active effect carries changes keyed ``resistances.<type>.method`` whose
value names a method: ``upgrade``/``downgrade`` step one level from base,
``weak``/``wk``, ``resist``/``rs``, ``nullify``/``nu`` and ``drain``/``dr``
force a level, and a numeric string forces that level clamped into
[-1, 3]. Any other method forces the base level. Each change is written
through ``ResistanceState.set_current``, so later changes replace earlier
ones.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any, Self
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from resistance_engine.core.exceptions import EffectError
from resistance_engine.core.logging import get_logger
from resistance_engine.models.enums import DamageType, ResistanceLevel, ResistanceMethod
from resistance_engine.models.resistance import (
    MAX_RESISTANCE,
    MIN_RESISTANCE,
    ResistanceSet,
    ResistanceState,
)


logger = get_logger(__name__)


RESISTANCE_KEY_PREFIX = "resistances."
METHOD_KEY_SUFFIX = ".method"

_NAMED_LEVELS: dict[str, int] = {
    ResistanceMethod.WEAK: ResistanceLevel.WEAK.value,
    ResistanceMethod.WK: ResistanceLevel.WEAK.value,
    ResistanceMethod.RESIST: ResistanceLevel.RESIST.value,
    ResistanceMethod.RS: ResistanceLevel.RESIST.value,
    ResistanceMethod.NULLIFY: ResistanceLevel.NULLIFY.value,
    ResistanceMethod.NU: ResistanceLevel.NULLIFY.value,
    ResistanceMethod.DRAIN: ResistanceLevel.DRAIN.value,
    ResistanceMethod.DR: ResistanceLevel.DRAIN.value,
}


def method_key(damage_type: DamageType | str) -> str:
    """Build the change key addressing a damage type's method."""
    return f"{RESISTANCE_KEY_PREFIX}{damage_type}{METHOD_KEY_SUFFIX}"


def parse_change_key(key: str) -> DamageType | None:
    """Extract the damage type from a resistance method key.

    Args:
        key: Change key, e.g. ``resistances.fire.method``.

    Returns:
        The addressed damage type, or None if the key is not a
        resistance method key.

    Raises:
        EffectError: If the key is a method key for an unknown damage type.
    """
    if not (key.startswith(RESISTANCE_KEY_PREFIX) and key.endswith(METHOD_KEY_SUFFIX)):
        return None
    name = key[len(RESISTANCE_KEY_PREFIX):-len(METHOD_KEY_SUFFIX)]
    try:
        return DamageType(name)
    except ValueError as exc:
        raise EffectError(
            f"Unknown damage type '{name}' in resistance change",
            change_key=key,
        ) from exc


def resolve_method(state: ResistanceState, method: str | int) -> int | None:
    """Resolve an effect method to the level it forces.

    Args:
        state: The resistance the method applies to.
        method: Method name, short alias, or numeric level.

    Returns:
        The forced level, or None if the method is not recognised.
    """
    text = str(method).strip().lower()

    if text == ResistanceMethod.UPGRADE:
        return min(state.base + 1, MAX_RESISTANCE)
    if text == ResistanceMethod.DOWNGRADE:
        return max(state.base - 1, MIN_RESISTANCE)
    if text in _NAMED_LEVELS:
        return _NAMED_LEVELS[text]

    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number) or (not math.isinf(number) and number != math.floor(number)):
        return None
    return int(max(MIN_RESISTANCE, min(MAX_RESISTANCE, number)))


class ResistanceChange(BaseModel):
    """One change carried by an active effect."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    key: str = Field(description="Target path, e.g. 'resistances.fire.method'")
    value: str = Field(description="Method name, alias, or numeric level")

    @field_validator("key")
    @classmethod
    def validate_key(cls, value: str) -> str:
        """Reject method keys that address an unknown damage type."""
        parse_change_key(value)
        return value

    @field_validator("value", mode="before")
    @classmethod
    def stringify_value(cls, value: Any) -> Any:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def damage_type(self) -> DamageType | None:
        return parse_change_key(self.key)


class ActiveEffect(BaseModel):
    """A temporary effect applied to an actor by a skill, item, or condition.

    Only resistance method changes are interpreted here; other changes are
    carried for the host and ignored.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    uid: UUID = Field(default_factory=uuid4, description="Unique effect ID")
    name: str = Field(description="Effect name (e.g., 'Fire Wall')")
    source: str = Field(default="", description="What applied this (skill, item, condition)")
    disabled: bool = Field(default=False, description="Disabled effects are skipped")
    changes: list[ResistanceChange] = Field(default_factory=list)

    @classmethod
    def for_resistance(
        cls,
        name: str,
        damage_type: DamageType | str,
        method: ResistanceMethod | str | int,
        **kwargs: Any,
    ) -> Self:
        """Create an effect with a single resistance method change."""
        change = ResistanceChange(key=method_key(damage_type), value=str(method))
        return cls(name=name, changes=[change], **kwargs)


def apply_effects(resistances: ResistanceSet, effects: Iterable[ActiveEffect]) -> int:
    """Apply every enabled effect's resistance method changes.

    Args:
        resistances: The set whose members receive the changes.
        effects: Effects in application order.

    Returns:
        Number of changes applied.
    """
    applied = 0
    for effect in effects:
        if effect.disabled:
            continue
        for change in effect.changes:
            damage_type = change.damage_type
            if damage_type is None:
                continue

            state = resistances[damage_type]
            level = resolve_method(state, change.value)
            if level is None:
                # unknown methods force the base level, dropping earlier overrides
                logger.warning(
                    "Unknown resistance method, forcing base level",
                    effect=effect.name,
                    key=change.key,
                    method=change.value,
                    base=state.base,
                )
                level = state.base

            state.set_current(level)
            applied += 1
            logger.debug(
                "Resistance method applied",
                effect=effect.name,
                damage_type=damage_type.value,
                method=change.value,
                resistance_level=level,
            )
    return applied


__all__ = [
    "ActiveEffect",
    "ResistanceChange",
    "apply_effects",
    "method_key",
    "parse_change_key",
    "resolve_method",
]
