"""Combat resolution against prepared resistances."""

from __future__ import annotations

from resistance_engine.engine.damage import (
    ResistanceResult,
    apply_resistance,
    resolve_damage,
)


__all__ = [
    "ResistanceResult",
    "apply_resistance",
    "resolve_damage",
]
