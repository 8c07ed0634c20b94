"""Damage resolution against elemental resistances.

Incoming damage is scaled by the target's resolved resistance level.
Critical hits double the normal-hit multiplier, except that nullify
still absorbs everything:

    level      normal   critical
    weak        x2        x4
    normal      x1        x2
    resist      x0.5      x1
    nullify     x0        x0
    drain       heal x1   heal x2

Fractional damage is floored. Drain reports a positive heal amount with
``is_healing`` set and a negative multiplier.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from resistance_engine.core.exceptions import RangeError
from resistance_engine.core.logging import get_logger, resistance_context
from resistance_engine.models.enums import DamageType, ResistanceLevel
from resistance_engine.models.resistance import ResistanceSet


logger = get_logger(__name__)


# level -> (normal multiplier, critical multiplier)
_RESISTANCE_RULES: dict[ResistanceLevel, tuple[float, float]] = {
    ResistanceLevel.WEAK: (2, 4),
    ResistanceLevel.NORMAL: (1, 2),
    ResistanceLevel.RESIST: (0.5, 1),
    ResistanceLevel.NULLIFY: (0, 0),
    ResistanceLevel.DRAIN: (-1, -2),
}


@dataclass(frozen=True)
class ResistanceResult:
    """Outcome of applying a resistance to incoming damage.

    Attributes:
        damage: Final amount; a heal amount when is_healing is set.
        is_healing: Whether the target drains the damage.
        value: Resolved resistance level used.
        level: The same level as a ResistanceLevel.
        multiplier: Multiplier applied (negative for drain).
    """

    damage: int
    is_healing: bool
    value: int
    level: ResistanceLevel
    multiplier: float


def _unresisted(base_damage: int) -> ResistanceResult:
    return ResistanceResult(
        damage=base_damage,
        is_healing=False,
        value=ResistanceLevel.NORMAL.value,
        level=ResistanceLevel.NORMAL,
        multiplier=1,
    )


def resolve_damage(
    base_damage: int,
    resistance_value: int,
    *,
    is_critical: bool = False,
) -> ResistanceResult:
    """Scale damage by a resistance level.

    Unknown levels pass the damage through unscaled, even on a critical hit.

    Args:
        base_damage: Damage before resistance, at least 0.
        resistance_value: Resolved resistance level.
        is_critical: Whether the hit is critical.

    Returns:
        The resistance result.

    Raises:
        RangeError: If base_damage is negative.
    """
    if base_damage < 0:
        raise RangeError(
            f"Base damage must be non-negative, got {base_damage}",
            field_name="base_damage",
            invalid_value=base_damage,
            minimum=0,
        )

    try:
        level = ResistanceLevel(resistance_value)
    except ValueError:
        return _unresisted(base_damage)

    normal, critical = _RESISTANCE_RULES[level]
    multiplier = critical if is_critical else normal

    return ResistanceResult(
        damage=math.floor(base_damage * abs(multiplier)),
        is_healing=level is ResistanceLevel.DRAIN,
        value=level.value,
        level=level,
        multiplier=multiplier,
    )


def apply_resistance(
    base_damage: int,
    resistances: ResistanceSet | None,
    damage_type: DamageType | str,
    *,
    is_critical: bool = False,
) -> ResistanceResult:
    """Apply a target's resistance for one damage type.

    Resistances must already be prepared for this pass
    (``ActorEntity.prepare_data``) so that active effects are reflected.

    Args:
        base_damage: Damage before resistance.
        resistances: The target's resistance set. Without one, or for an
            unknown damage type, the damage is returned unscaled and the
            critical flag is ignored.
        damage_type: Incoming damage type.
        is_critical: Whether the hit is critical.

    Returns:
        The resistance result.
    """
    state = resistances.get(damage_type) if resistances is not None else None
    if state is None:
        # no resistance data: damage passes through unscaled, crit included
        result = resolve_damage(base_damage, ResistanceLevel.NORMAL)
    else:
        result = resolve_damage(base_damage, state.get_current(), is_critical=is_critical)
    with resistance_context(damage_type=damage_type):
        logger.debug(
            "Resistance applied",
            base_damage=base_damage,
            resistance=result.level.label,
            multiplier=result.multiplier,
            damage=result.damage,
            is_critical=is_critical,
        )
    return result


__all__ = [
    "ResistanceResult",
    "apply_resistance",
    "resolve_damage",
]
