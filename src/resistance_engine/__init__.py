"""Resistance Engine - elemental resistance resolution for tabletop actors.

Each damage type carries a persisted base level (weak, normal, resist,
nullify, drain) that active effects can temporarily override. The engine
resolves the current level, validates the eight resistances of an actor
together, and scales incoming damage for combat.

Example:
    >>> from resistance_engine import ActiveEffect, create_actor, apply_resistance
    >>>
    >>> jack = create_actor("Jack Frost", resistances={"ice": 3, "fire": -1})
    >>> jack.add_effect(ActiveEffect.for_resistance("Fire Wall", "fire", "resist"))
    >>> snapshots = jack.prepare_data()
    >>> apply_resistance(10, jack.resistances, "fire").damage
    5

Modules:
    core: Configuration, logging, and base exceptions.
    models: Resistance state, resistance set, active effects, actors.
    engine: Damage resolution.
"""

from __future__ import annotations

# Core
from resistance_engine.core.config import Settings, get_settings
from resistance_engine.core.exceptions import (
    RangeError,
    ResistanceEngineError,
    ValidationError,
)
from resistance_engine.core.logging import configure_logging, get_logger

# Models
from resistance_engine.models import (
    ActiveEffect,
    ActorEntity,
    ActorType,
    DamageType,
    ResistanceLevel,
    ResistanceMethod,
    ResistanceSet,
    ResistanceSnapshot,
    ResistanceState,
    create_actor,
)

# Engine
from resistance_engine.engine import ResistanceResult, apply_resistance, resolve_damage


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "ResistanceEngineError",
    "RangeError",
    "ValidationError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "ActiveEffect",
    "ActorEntity",
    "ActorType",
    "DamageType",
    "ResistanceLevel",
    "ResistanceMethod",
    "ResistanceSet",
    "ResistanceSnapshot",
    "ResistanceState",
    "create_actor",
    # Engine
    "ResistanceResult",
    "apply_resistance",
    "resolve_damage",
]
