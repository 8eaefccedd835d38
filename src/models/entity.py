"""Base entity model shared by starships and starbases.

An entity has health, a defence baseline, a position and an optional fleet.
Damage resolution lives here:

- incoming damage is reduced by the current defence strength
- at least DAMAGE_FLOOR always gets through
- applied damage never exceeds the remaining health
- health reaching 0 destroys the entity for good
"""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Optional

from ..utils.constants import DAMAGE_FLOOR
from .sector import Sector

if TYPE_CHECKING:
    from .fleet import Fleet

logger = logging.getLogger(__name__)


class Entity:
    """Common state and damage handling for all game entities.

    Variants provide get_defence_strength(). The fleet back-reference is a
    weak reference: fleets own their entity lists, entities only look their
    fleet up.
    """

    variant_name = "Entity"

    def __init__(
        self,
        entity_id: int,
        max_health: float,
        max_defence_strength: float,
        sector: Sector,
    ):
        """Initialize entity at full health with no fleet.

        Args:
            entity_id: Unique id from the game's EntityIdAllocator
            max_health: Maximum total health
            max_defence_strength: Maximum resistance to damage
            sector: Starting position
        """
        if entity_id < 0:
            raise ValueError(f"Invalid entity_id: {entity_id} (must be >= 0)")
        if not isinstance(sector, Sector):
            raise TypeError(f"sector must be a Sector, got {type(sector).__name__}")

        self.id = entity_id
        self.max_health = max_health
        self.max_defence_strength = max_defence_strength

        self._health = max_health
        self._sector = sector
        self._destroyed = False
        self._fleet_ref: Optional[weakref.ReferenceType[Fleet]] = None

    def get_defence_strength(self) -> float:
        """Calculate the current defence strength.

        Returns:
            Defence strength derived from the entity's current state
        """
        raise NotImplementedError

    def get_health(self) -> float:
        return self._health

    def get_sector(self) -> Sector:
        return self._sector

    def is_destroyed(self) -> bool:
        return self._destroyed

    def get_fleet(self) -> Optional[Fleet]:
        """Return the owning fleet, or None if unassigned."""
        if self._fleet_ref is None:
            return None
        return self._fleet_ref()

    def assign_fleet(self, fleet: Fleet) -> bool:
        """Attach this entity to a fleet.

        An entity belongs to at most one fleet. Assigning the fleet it
        already belongs to is accepted without change.

        Args:
            fleet: Fleet taking ownership of this entity

        Returns:
            True if the entity now belongs to fleet, False if it already
            belongs to another one
        """
        if fleet is None:
            raise TypeError("fleet cannot be None")

        current = self.get_fleet()
        if current is fleet:
            return True
        if current is not None:
            logger.debug("Cannot assign %s to %s; already in %s", self, fleet, current)
            return False

        self._fleet_ref = weakref.ref(fleet)
        logger.debug("Assigned %s to %s", self, fleet)
        return True

    def calculate_applied_damage(self, damage: float) -> float:
        """Work out how much of an incoming hit would reach the hull.

        Args:
            damage: Raw incoming damage

        Returns:
            max(DAMAGE_FLOOR, damage - defence), clamped to [0, health]
        """
        reduced = max(DAMAGE_FLOOR, damage - self.get_defence_strength())
        return min(max(reduced, 0.0), self._health)

    def take_damage(self, damage: float) -> float:
        """Apply an incoming hit.

        Args:
            damage: Raw incoming damage

        Returns:
            Damage actually subtracted from health (0.0 if already destroyed)
        """
        if self._destroyed:
            logger.debug("%s is already destroyed; ignoring %.2f damage", self, damage)
            return 0.0

        applied = self.calculate_applied_damage(damage)
        self.set_health(self._health - applied)
        logger.debug(
            "%s took %.2f damage (%.2f incoming), health %.2f", self, applied, damage, self._health
        )
        return applied

    def set_health(self, new_health: float) -> None:
        """Set health, clamped to [0, max_health].

        Reaching 0 destroys the entity. Destroyed entities ignore further
        changes.

        Args:
            new_health: Requested health value
        """
        if self._destroyed:
            logger.debug("%s is destroyed; health stays at 0", self)
            return

        self._health = min(max(0.0, new_health), self.max_health)
        if self._health == 0:
            self._destroyed = True
            logger.info("%s has been destroyed", self)

    def fleet_label(self) -> str:
        fleet = self.get_fleet()
        return str(fleet) if fleet is not None else "Unassigned"

    def __str__(self) -> str:
        return f"{self.fleet_label()} {self.variant_name} #{self.id}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id}, health={self._health:.2f}, "
            f"sector={self._sector!r}, destroyed={self._destroyed})"
        )


def same_fleet(first: Entity, second: Entity) -> bool:
    """Check whether two entities belong to the same fleet.

    Fleets are compared by identity. An entity without a fleet never
    matches, not even another unassigned entity.
    """
    fleet = first.get_fleet()
    return fleet is not None and fleet is second.get_fleet()
