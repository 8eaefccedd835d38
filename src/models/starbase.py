"""Starbase entity: a stationary base that starships dock to."""

from __future__ import annotations

import logging

from ..utils.constants import STARBASE_MAX_DEFENCE, STARBASE_MAX_HEALTH
from .entity import Entity, same_fleet
from .sector import Sector
from .starship import Starship

logger = logging.getLogger(__name__)


class Starbase(Entity):
    """A stationary base holding a list of docked starships.

    The base decides whether a ship may dock or undock and keeps the list;
    the ship keeps its own docked flag. Docked ships that are still intact
    add to the base's defence.
    """

    variant_name = "Starbase"

    def __init__(self, entity_id: int, sector: Sector):
        """Initialize starbase at full health with nothing docked.

        Args:
            entity_id: Unique id from the game's EntityIdAllocator
            sector: Position of the base
        """
        super().__init__(entity_id, STARBASE_MAX_HEALTH, STARBASE_MAX_DEFENCE, sector)
        self._docked_starships: list[Starship] = []

    def get_docked_starships(self) -> tuple[Starship, ...]:
        """Return a read-only view of the docked starships."""
        return tuple(self._docked_starships)

    def _active_docked_starships(self) -> list[Starship]:
        return [s for s in self._docked_starships if not s.is_destroyed()]

    def get_docked_ships_strength(self) -> float:
        """Sum the defence strength of docked, non-destroyed starships."""
        return sum(s.get_defence_strength() for s in self._active_docked_starships())

    def get_active_docked_count(self) -> int:
        """Count docked starships that are not destroyed."""
        return len(self._active_docked_starships())

    def get_defence_strength(self) -> float:
        """Calculate defence from own health plus docked ships.

        Both docked-ship terms skip destroyed ships.

        Returns:
            max_defence * (health / max_health)
            + docked_total * (docked_count / max_defence)
        """
        docked_total = self.get_docked_ships_strength()
        docked_count = self.get_active_docked_count()

        base_strength = self.max_defence_strength * (self._health / self.max_health)
        defence_strength = base_strength + docked_total * (docked_count / self.max_defence_strength)
        logger.debug("Defence strength of %s is %.2f", self, defence_strength)
        return defence_strength

    def dock_starship(self, starship: Starship) -> bool:
        """Accept a starship into the docked list.

        Only the list changes; the ship sets its own docked flag once this
        returns True.

        Args:
            starship: Starship asking to dock

        Returns:
            True if the starship was added
        """
        if starship is None:
            raise TypeError("starship cannot be None")

        if self._destroyed:
            logger.debug("%s has been destroyed; cannot dock starships", self)
            return False

        if not same_fleet(starship, self):
            logger.debug("Cannot dock %s to %s; not in same fleet", starship, self)
            return False

        if starship.is_destroyed():
            logger.debug("%s is destroyed; cannot dock to %s", starship, self)
            return False

        if starship.is_docked() or starship in self._docked_starships:
            logger.debug("%s is already docked; cannot dock to %s", starship, self)
            return False

        self._docked_starships.append(starship)
        logger.info("Docked %s to %s", starship, self)
        return True

    def undock_starship(self, starship: Starship) -> bool:
        """Release a starship from the docked list.

        Args:
            starship: Starship asking to undock

        Returns:
            True if the starship was removed
        """
        if starship is None:
            raise TypeError("starship cannot be None")

        if self._destroyed:
            logger.debug("%s has been destroyed; cannot undock starships", self)
            return False

        if not same_fleet(starship, self):
            logger.debug("Cannot undock %s from %s; not in same fleet", starship, self)
            return False

        if not (starship.is_docked() and starship in self._docked_starships):
            logger.debug("%s is not docked to %s; cannot undock", starship, self)
            return False

        self._docked_starships.remove(starship)
        logger.info("Undocked %s from %s", starship, self)
        return True
