"""Enumeration types for the resistance engine.

This module defines the damage types a character can resist, the five
resistance levels, the method strings active effects use to change a
resistance, and the kinds of actor that own resistances.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class DamageType(StrEnum):
    """The eight elemental damage types, in sheet order."""

    PHYSICAL = "physical"
    FIRE = "fire"
    ICE = "ice"
    ELECTRIC = "electric"
    WIND = "wind"
    EARTH = "earth"
    LIGHT = "light"
    DARK = "dark"


class ResistanceLevel(IntEnum):
    """Ordinal resistance levels.

    Levels:
        WEAK: Takes double damage.
        NORMAL: Takes normal damage.
        RESIST: Takes half damage.
        NULLIFY: Takes no damage.
        DRAIN: Heals instead of taking damage.
    """

    WEAK = -1
    NORMAL = 0
    RESIST = 1
    NULLIFY = 2
    DRAIN = 3

    @property
    def label(self) -> str:
        """Get the lowercase name of this level.

        Returns:
            Level name (e.g., 'nullify').
        """
        return self.name.lower()


class ResistanceMethod(StrEnum):
    """Method strings an active effect may apply to a resistance.

    Named levels have a two-letter short form. ``upgrade`` and
    ``downgrade`` step one level away from the base value.
    """

    UPGRADE = "upgrade"
    DOWNGRADE = "downgrade"
    WEAK = "weak"
    WK = "wk"
    RESIST = "resist"
    RS = "rs"
    NULLIFY = "nullify"
    NU = "nu"
    DRAIN = "drain"
    DR = "dr"


class ActorType(StrEnum):
    """Kinds of actor that carry a resistance set."""

    SUMMONER = "summoner"
    DAEMON = "daemon"
