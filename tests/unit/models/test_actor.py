"""Tests for the ActorEntity data-preparation pass."""

from __future__ import annotations

import pytest

from resistance_engine.core.exceptions import RangeError, ValidationError
from resistance_engine.models import (
    ActiveEffect,
    ActorEntity,
    ActorType,
    DamageType,
    ResistanceSet,
    ResistanceState,
    create_actor,
)


class TestCreateActor:
    """Tests for the create_actor factory."""

    def test_defaults(self) -> None:
        actor = create_actor("Nahobino")
        assert actor.actor_type == ActorType.SUMMONER
        assert actor.level == 1
        assert actor.max_level == 30
        assert actor.resistances.fire.base == 0
        assert actor.effects == []

    def test_from_mapping(self, sample_actor: ActorEntity) -> None:
        assert sample_actor.actor_type == ActorType.DAEMON
        assert sample_actor.resistances.earth.base == 3
        assert sample_actor.resistances.ice.base == -1

    def test_from_resistance_set(self) -> None:
        resistances = ResistanceSet.from_bases({"light": 2})
        actor = create_actor("Angel", resistances=resistances)
        assert actor.resistances.light.base == 2

    def test_invalid_mapping_rejected_as_a_whole(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            create_actor("Broken", resistances={"fire": 9, "ice": -3})
        assert set(exc_info.value.invalid_fields) == {"fire.base", "ice.base"}

    def test_load_from_record(self) -> None:
        """A persisted actor record round-trips through model_validate."""
        actor = ActorEntity.model_validate(
            {
                "name": "Pixie",
                "actor_type": "daemon",
                "level": 3,
                "resistances": {"electric": {"base": 1}, "dark": {"base": -1}},
            }
        )
        assert actor.resistances.electric.base == 1
        dumped = actor.model_dump(mode="json")
        assert dumped["resistances"]["dark"] == {"base": -1}


class TestLevelCap:
    """Tests for the explicit level cap."""

    def test_level_above_cap_rejected(self) -> None:
        with pytest.raises(RangeError) as exc_info:
            create_actor("Overleveled", level=31)
        assert exc_info.value.field_name == "level"

    def test_raised_cap_allows_higher_level(self) -> None:
        actor = create_actor("Veteran", level=55, max_level=60)
        assert actor.level == 55

    def test_level_up(self) -> None:
        actor = create_actor("Rookie", level=29)
        assert actor.level_up() == 30
        with pytest.raises(RangeError):
            actor.level_up()
        assert actor.level == 30

    def test_rejected_level_assignment_is_not_stored(self) -> None:
        actor = create_actor("Rookie", level=10)
        with pytest.raises(RangeError):
            actor.level = 99
        assert actor.level == 10

    def test_rejected_cap_assignment_is_not_stored(self) -> None:
        actor = create_actor("Rookie", level=10, max_level=35)
        with pytest.raises(RangeError) as exc_info:
            actor.max_level = 5
        assert exc_info.value.field_name == "max_level"
        assert actor.max_level == 35
        assert actor.level == 10

    def test_cap_can_be_raised_by_assignment(self) -> None:
        actor = create_actor("Rookie", level=30)
        actor.max_level = 40
        actor.level = 40
        assert actor.level == 40


class TestEffects:
    """Tests for effect bookkeeping."""

    def test_add_and_remove(self) -> None:
        actor = create_actor("Pixie")
        effect = ActiveEffect.for_resistance("Zionga Guard", "electric", "nu")
        actor.add_effect(effect)
        assert actor.effects == [effect]
        assert actor.remove_effect(effect.uid) is True
        assert actor.remove_effect(effect.uid) is False
        assert actor.effects == []


class TestPrepareData:
    """Tests for the data-preparation pass."""

    def test_no_effects(self, sample_actor: ActorEntity) -> None:
        snapshots = sample_actor.prepare_data()
        assert snapshots[DamageType.FIRE].effective_value == 1
        assert not any(snap.is_modified for snap in snapshots.values())

    def test_applies_effects(self, sample_actor: ActorEntity) -> None:
        sample_actor.add_effect(ActiveEffect.for_resistance("Fire Wall", "fire", "nullify"))
        snapshots = sample_actor.prepare_data()
        assert snapshots[DamageType.FIRE].effective_value == 2
        assert snapshots[DamageType.FIRE].is_modified is True

    def test_overrides_reset_each_pass(self, sample_actor: ActorEntity) -> None:
        """Overrides set outside an effect do not survive the next pass."""
        sample_actor.resistances.ice.activate_drain()
        snapshots = sample_actor.prepare_data()
        assert snapshots[DamageType.ICE].effective_value == -1

    def test_removed_effect_stops_applying(self, sample_actor: ActorEntity) -> None:
        effect = ActiveEffect.for_resistance("Ice Guard", "ice", "rs")
        sample_actor.add_effect(effect)
        assert sample_actor.prepare_data()[DamageType.ICE].effective_value == 1

        sample_actor.remove_effect(effect.uid)
        assert sample_actor.prepare_data()[DamageType.ICE].effective_value == -1

    def test_invalid_base_fails_pass(self) -> None:
        members = {dt.value: ResistanceState.model_construct(base=0) for dt in DamageType}
        members["wind"] = ResistanceState.model_construct(base=8)
        actor = create_actor("Corrupt", resistances=ResistanceSet.model_construct(**members))

        with pytest.raises(ValidationError) as exc_info:
            actor.prepare_data()
        assert exc_info.value.invalid_fields == {"wind.base": 8}
