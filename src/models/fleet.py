"""Fleet model grouping a player's starbases and starships."""

from __future__ import annotations

import logging
from typing import Optional

from .entity import Entity
from .player import Player
from .sector import Sector
from .starbase import Starbase
from .starship import Starship

logger = logging.getLogger(__name__)


class Fleet:
    """A player's starbases and starships.

    The fleet keeps ordered lists of its entities and gives each entity a
    back-reference to itself. Entities are never removed; a destroyed
    entity stays in the fleet with its destroyed flag set.
    """

    def __init__(self, player: Player):
        """Initialize an empty fleet.

        Args:
            player: Player who owns this fleet
        """
        if not isinstance(player, Player):
            raise TypeError(f"player must be a Player, got {type(player).__name__}")

        self.player = player
        self._starbases: list[Starbase] = []
        self._starships: list[Starship] = []

    def get_starbases(self) -> tuple[Starbase, ...]:
        return tuple(self._starbases)

    def get_starships(self) -> tuple[Starship, ...]:
        return tuple(self._starships)

    def get_entities(self) -> list[Entity]:
        """All entities, starbases first."""
        return [*self._starbases, *self._starships]

    def add_entities(self, *entities: Entity) -> int:
        """Add entities to this fleet, sorted into starbases and starships.

        Entities that already belong to another fleet are skipped.

        Args:
            *entities: Starbases and/or starships

        Returns:
            Number of entities added

        Raises:
            TypeError: If any argument is not a Starbase or Starship
        """
        for entity in entities:
            if not isinstance(entity, (Starbase, Starship)):
                raise TypeError(f"Cannot add {type(entity).__name__} to a fleet")

        added = 0
        for entity in entities:
            target = self._starbases if isinstance(entity, Starbase) else self._starships
            if entity in target:
                logger.debug("%s is already in %s", entity, self)
                continue
            if not entity.assign_fleet(self):
                logger.debug("Skipping %s; it belongs to another fleet", entity)
                continue
            target.append(entity)
            added += 1
            logger.debug("Added %s to %s", entity, self)

        return added

    def move_all_entities(self, sector: Sector) -> int:
        """Order every starship to a sector. Starbases are stationary.

        Args:
            sector: Destination sector

        Returns:
            Number of starships that moved
        """
        moved = sum(1 for starship in self._starships if starship.move_to_sector(sector))
        logger.info("%s moved %d of %d starships to %s", self, moved, len(self._starships), sector)
        return moved

    def attack_with_all(self, target: Entity) -> int:
        """Order every starship to attack a target.

        Args:
            target: Entity to attack

        Returns:
            Number of attacks delivered
        """
        delivered = 0
        for starship in self._starships:
            if starship.attack(target):
                delivered += 1
        logger.info("%s delivered %d attacks on %s", self, delivered, target)
        return delivered

    def dock_starships_to(self, starbase: Starbase, *starships: Starship) -> int:
        """Dock the given starships to a starbase.

        Args:
            starbase: Starbase to dock to
            *starships: Starships to dock

        Returns:
            Number of starships docked
        """
        return sum(1 for starship in starships if starship.dock_to_starbase(starbase))

    def get_starbase_at(self, index: int) -> Optional[Starbase]:
        """Return the starbase at index, or None if out of range."""
        if 0 <= index < len(self._starbases):
            return self._starbases[index]
        logger.debug("%s has no starbase at index %d", self, index)
        return None

    def get_starship_at(self, index: int) -> Optional[Starship]:
        """Return the starship at index, or None if out of range."""
        if 0 <= index < len(self._starships):
            return self._starships[index]
        logger.debug("%s has no starship at index %d", self, index)
        return None

    def is_defeated(self) -> bool:
        """Check whether the fleet has entities and all of them are destroyed."""
        entities = self.get_entities()
        return bool(entities) and all(e.is_destroyed() for e in entities)

    def __str__(self) -> str:
        return f"Fleet {self.player.player_no}"

    def __repr__(self) -> str:
        return (
            f"Fleet(player={self.player!r}, starbases={len(self._starbases)}, "
            f"starships={len(self._starships)})"
        )
