"""Pydantic models for resistances, active effects, and their owning actor.

Modules:
    enums: Damage types, resistance levels, effect methods, actor types.
    resistance: ResistanceState resolution and the eight-type ResistanceSet.
    effects: Active effects that change resistances by method.
    actor: ActorEntity, which runs the data-preparation pass.
"""

from __future__ import annotations

from resistance_engine.models.actor import ActorEntity, create_actor
from resistance_engine.models.effects import (
    ActiveEffect,
    ResistanceChange,
    apply_effects,
    method_key,
    parse_change_key,
    resolve_method,
)
from resistance_engine.models.enums import (
    ActorType,
    DamageType,
    ResistanceLevel,
    ResistanceMethod,
)
from resistance_engine.models.resistance import (
    DAMAGE_MULTIPLIERS,
    MAX_RESISTANCE,
    MIN_RESISTANCE,
    OverrideFlags,
    ResistanceSet,
    ResistanceSnapshot,
    ResistanceState,
    check_base,
    clamp_level,
)


__all__ = [
    # Enums
    "ActorType",
    "DamageType",
    "ResistanceLevel",
    "ResistanceMethod",
    # Resistances
    "DAMAGE_MULTIPLIERS",
    "MAX_RESISTANCE",
    "MIN_RESISTANCE",
    "OverrideFlags",
    "ResistanceSet",
    "ResistanceSnapshot",
    "ResistanceState",
    "check_base",
    "clamp_level",
    # Effects
    "ActiveEffect",
    "ResistanceChange",
    "apply_effects",
    "method_key",
    "parse_change_key",
    "resolve_method",
    # Actor
    "ActorEntity",
    "create_actor",
]
