"""Actor entity owning a resistance set and its active effects.

The actor runs the data-preparation pass: overrides are transient, so each
pass clears them, re-applies the enabled effects, validates the set jointly
and returns freshly derived snapshots for combat resolution.

The level cap is passed in explicitly (``max_level``); the actor never
reads application settings.

Example:
    >>> pixie = create_actor("Pixie", actor_type=ActorType.DAEMON, resistances={"electric": 1})
    >>> pixie.effects.append(ActiveEffect.for_resistance("Tarunda", "fire", "wk"))
    >>> pixie.prepare_data()[DamageType.FIRE].effective_value
    -1
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from resistance_engine.core.config import DEFAULT_MAX_LEVEL
from resistance_engine.core.exceptions import RangeError
from resistance_engine.core.logging import get_logger, resistance_context
from resistance_engine.models.effects import ActiveEffect, apply_effects
from resistance_engine.models.enums import ActorType, DamageType
from resistance_engine.models.resistance import ResistanceSet, ResistanceSnapshot


logger = get_logger(__name__)


class ActorEntity(BaseModel):
    """A summoner or daemon with eight elemental resistances.

    Attributes:
        uid: Unique actor ID.
        name: Display name.
        actor_type: Summoner or daemon.
        level: Current character level.
        max_level: Level cap supplied by the host at construction.
        resistances: The actor's resistance set.
        effects: Active effects in application order.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
    )

    uid: UUID = Field(default_factory=uuid4, description="Unique actor ID")
    name: str = Field(min_length=1, description="Display name")
    actor_type: ActorType = Field(default=ActorType.SUMMONER)
    max_level: int = Field(default=DEFAULT_MAX_LEVEL, ge=1, description="Level cap")
    level: int = Field(default=1, ge=1, description="Character level")
    resistances: ResistanceSet = Field(default_factory=ResistanceSet)
    effects: list[ActiveEffect] = Field(default_factory=list)

    @field_validator("level")
    @classmethod
    def validate_level_cap(cls, value: int, info: ValidationInfo) -> int:
        """Ensure level does not exceed the cap.

        Runs before assignment, so a rejected level is never stored.

        Raises:
            RangeError: If level is above max_level.
        """
        max_level = info.data.get("max_level")
        if max_level is not None and value > max_level:
            raise RangeError(
                f"Level {value} exceeds the level cap of {max_level}",
                field_name="level",
                invalid_value=value,
                minimum=1,
                maximum=max_level,
            )
        return value

    @field_validator("max_level")
    @classmethod
    def validate_cap_above_level(cls, value: int, info: ValidationInfo) -> int:
        """Reject lowering the cap below the current level."""
        level = info.data.get("level")
        if level is not None and level > value:
            raise RangeError(
                f"Level cap {value} is below the current level {level}",
                field_name="max_level",
                invalid_value=value,
                minimum=level,
            )
        return value

    def level_up(self, levels: int = 1) -> int:
        """Advance the actor's level.

        Args:
            levels: Number of levels to gain.

        Returns:
            The new level.

        Raises:
            RangeError: If the new level would exceed max_level.
        """
        new_level = self.level + levels
        if not 1 <= new_level <= self.max_level:
            raise RangeError(
                f"Level {new_level} is outside 1-{self.max_level}",
                field_name="level",
                invalid_value=new_level,
                minimum=1,
                maximum=self.max_level,
            )
        self.level = new_level
        return new_level

    def add_effect(self, effect: ActiveEffect) -> None:
        self.effects.append(effect)
        logger.info("Effect added", actor=self.name, effect=effect.name)

    def remove_effect(self, effect_uid: UUID) -> bool:
        """Remove an effect by ID. Returns whether it was present."""
        for index, effect in enumerate(self.effects):
            if effect.uid == effect_uid:
                del self.effects[index]
                logger.info("Effect removed", actor=self.name, effect=effect.name)
                return True
        return False

    def prepare_data(self) -> dict[DamageType, ResistanceSnapshot]:
        """Run the data-preparation pass over the resistance set.

        Returns:
            Fresh derived snapshots keyed by damage type.

        Raises:
            ValidationError: If any resistance base is out of range.
        """
        with resistance_context(actor=self.name, actor_id=self.uid):
            self.resistances.clear_overrides()
            applied = apply_effects(self.resistances, self.effects)
            self.resistances.validate_joint()
            snapshots = self.resistances.derive_all()
            logger.debug(
                "Resistances prepared",
                changes_applied=applied,
                modified=[dt for dt, snap in snapshots.items() if snap.is_modified],
            )
        return snapshots


def create_actor(
    name: str,
    *,
    actor_type: ActorType = ActorType.SUMMONER,
    level: int = 1,
    resistances: ResistanceSet | Mapping[str, Any] | None = None,
    effects: list[ActiveEffect] | None = None,
    max_level: int = DEFAULT_MAX_LEVEL,
) -> ActorEntity:
    """Create an actor with validated resistances.

    Args:
        name: Display name.
        actor_type: Summoner or daemon.
        level: Starting level.
        resistances: A ResistanceSet, or a mapping of damage type to base level.
        effects: Initial active effects.
        max_level: Level cap, normally ``get_settings().game.max_level``.

    Returns:
        The new actor.
    """
    if resistances is None:
        resistance_set = ResistanceSet()
    elif isinstance(resistances, ResistanceSet):
        resistance_set = resistances
    else:
        resistance_set = ResistanceSet.from_bases(resistances)

    return ActorEntity(
        name=name,
        actor_type=actor_type,
        level=level,
        max_level=max_level,
        resistances=resistance_set,
        effects=list(effects or []),
    )


__all__ = [
    "ActorEntity",
    "create_actor",
]
