"""Utility functions and constants for the starship combat core."""

from .constants import (
    DAMAGE_FLOOR,
    DEMO_ATTACK_ROUND_LIMIT,
    MIN_CREW,
    REPAIR_QUARTILES,
    STARBASE_MAX_DEFENCE,
    STARBASE_MAX_HEALTH,
    STARSHIP_MAX_ATTACK,
    STARSHIP_MAX_CREW,
    STARSHIP_MAX_DEFENCE,
    STARSHIP_MAX_HEALTH,
)
from .ids import EntityIdAllocator

__all__ = [
    "DAMAGE_FLOOR",
    "DEMO_ATTACK_ROUND_LIMIT",
    "MIN_CREW",
    "REPAIR_QUARTILES",
    "STARBASE_MAX_DEFENCE",
    "STARBASE_MAX_HEALTH",
    "STARSHIP_MAX_ATTACK",
    "STARSHIP_MAX_CREW",
    "STARSHIP_MAX_DEFENCE",
    "STARSHIP_MAX_HEALTH",
    "EntityIdAllocator",
]
