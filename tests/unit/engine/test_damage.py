"""Tests for damage resolution against resistances."""

from __future__ import annotations

import pytest

from resistance_engine.core.exceptions import RangeError
from resistance_engine.engine.damage import ResistanceResult, apply_resistance, resolve_damage
from resistance_engine.models import DamageType, ResistanceLevel, ResistanceSet


class TestResolveDamage:
    """Tests for level-based damage scaling."""

    @pytest.mark.parametrize(
        "level,damage,multiplier",
        [
            (-1, 20, 2),
            (0, 10, 1),
            (1, 5, 0.5),
            (2, 0, 0),
            (3, 10, -1),
        ],
    )
    def test_normal_hits(self, level: int, damage: int, multiplier: float) -> None:
        result = resolve_damage(10, level)
        assert result.damage == damage
        assert result.multiplier == multiplier
        assert result.value == level

    @pytest.mark.parametrize(
        "level,damage,multiplier",
        [
            (-1, 40, 4),
            (0, 20, 2),
            (1, 10, 1),
            (2, 0, 0),
            (3, 20, -2),
        ],
    )
    def test_critical_hits(self, level: int, damage: int, multiplier: float) -> None:
        result = resolve_damage(10, level, is_critical=True)
        assert result.damage == damage
        assert result.multiplier == multiplier

    def test_resist_floors(self) -> None:
        assert resolve_damage(7, ResistanceLevel.RESIST).damage == 3

    def test_drain_heals(self) -> None:
        result = resolve_damage(9, ResistanceLevel.DRAIN)
        assert result.is_healing is True
        assert result.damage == 9
        assert result.level is ResistanceLevel.DRAIN

    def test_only_drain_heals(self) -> None:
        assert not resolve_damage(9, ResistanceLevel.WEAK).is_healing

    @pytest.mark.parametrize("is_critical", [False, True])
    def test_unknown_level_is_unscaled(self, is_critical: bool) -> None:
        """An unknown level passes damage through, critical or not."""
        result = resolve_damage(8, 6, is_critical=is_critical)
        assert result == ResistanceResult(
            damage=8,
            is_healing=False,
            value=0,
            level=ResistanceLevel.NORMAL,
            multiplier=1,
        )

    def test_negative_damage_rejected(self) -> None:
        with pytest.raises(RangeError):
            resolve_damage(-1, 0)


class TestApplyResistance:
    """Tests for applying a target's resistance set."""

    def test_uses_resolved_level(self) -> None:
        resistances = ResistanceSet.from_bases({"fire": -1})
        resistances.fire.activate_resist()
        result = apply_resistance(10, resistances, DamageType.FIRE)
        assert result.level is ResistanceLevel.RESIST
        assert result.damage == 5

    def test_base_level(self, sample_resistances: ResistanceSet) -> None:
        assert apply_resistance(10, sample_resistances, "ice").damage == 20
        assert apply_resistance(10, sample_resistances, "electric").damage == 0

    def test_missing_set_ignores_critical(self) -> None:
        """Without resistance data the hit is neither scaled nor doubled."""
        result = apply_resistance(6, None, "dark", is_critical=True)
        assert result.level is ResistanceLevel.NORMAL
        assert result.damage == 6
        assert result.multiplier == 1

    def test_unknown_damage_type_ignores_critical(self, sample_resistances: ResistanceSet) -> None:
        result = apply_resistance(6, sample_resistances, "poison", is_critical=True)
        assert result.level is ResistanceLevel.NORMAL
        assert result.damage == 6
