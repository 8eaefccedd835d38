"""Starship entity: crew, movement, docking, repair and attacks.

Starship state machine:
- undocked: may move and attack
- docked: movement and attacks are refused; repair() advances one tick
- docked + repairing: movement or attack attempts run a repair tick instead
- destroyed: terminal, every action is a no-op
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..utils.constants import (
    MIN_CREW,
    REPAIR_QUARTILES,
    STARSHIP_MAX_ATTACK,
    STARSHIP_MAX_CREW,
    STARSHIP_MAX_DEFENCE,
    STARSHIP_MAX_HEALTH,
)
from .entity import Entity, same_fleet
from .sector import Sector

if TYPE_CHECKING:
    from .starbase import Starbase

logger = logging.getLogger(__name__)


class Starship(Entity):
    """A crewed warship.

    Defence blends hull and crew condition; attack scales with hull health.
    Docking is two-phase: the starbase accepts or rejects, and only on
    acceptance does the ship mark itself docked.
    """

    variant_name = "Starship"

    max_attack_strength = STARSHIP_MAX_ATTACK
    max_crew = STARSHIP_MAX_CREW

    def __init__(self, entity_id: int, sector: Sector):
        """Initialize starship at full health and crew, undocked.

        Args:
            entity_id: Unique id from the game's EntityIdAllocator
            sector: Starting position
        """
        super().__init__(entity_id, STARSHIP_MAX_HEALTH, STARSHIP_MAX_DEFENCE, sector)
        self._crew = self.max_crew
        self._docked = False
        self._repairing = False

    def get_crew(self) -> int:
        return self._crew

    def is_docked(self) -> bool:
        return self._docked

    def is_repairing(self) -> bool:
        return self._repairing

    def get_defence_strength(self) -> float:
        """Calculate defence from the combined health and crew ratio.

        Returns:
            max_defence * (health + crew) / (max_health + max_crew)
        """
        return self.max_defence_strength * (
            (self._health + self._crew) / (self.max_health + self.max_crew)
        )

    def get_attack_strength(self) -> float:
        """Calculate attack strength, scaled by remaining hull health."""
        return self.max_attack_strength * (self._health / self.max_health)

    def move_to_sector(self, new_sector: Sector) -> bool:
        """Move to another sector.

        Docked ships stay put. If the ship is also repairing, the attempt
        runs a repair tick instead.

        Args:
            new_sector: Destination sector

        Returns:
            True if the ship moved
        """
        if not isinstance(new_sector, Sector):
            raise TypeError(f"new_sector must be a Sector, got {type(new_sector).__name__}")

        if self._destroyed:
            logger.debug("%s is destroyed; cannot move", self)
            return False

        if self._docked:
            if self._repairing:
                logger.debug("%s is repairing; continuing repair instead of moving", self)
                self.repair()
            else:
                logger.debug("%s is docked; cannot move to %s", self, new_sector)
            return False

        old_sector = self._sector
        self._sector = new_sector
        logger.info("Moved %s from %s to %s", self, old_sector, new_sector)
        return True

    def dock_to_starbase(self, starbase: Starbase) -> bool:
        """Dock to a starbase.

        Args:
            starbase: Starbase to dock to

        Returns:
            True if the starbase accepted the ship
        """
        if starbase is None:
            raise TypeError("starbase cannot be None")

        if self._destroyed:
            logger.debug("%s is destroyed; cannot dock", self)
            return False

        if not starbase.dock_starship(self):
            return False

        self._docked = True
        return True

    def undock_from_starbase(self, starbase: Starbase) -> bool:
        """Undock from a starbase. Leaving the starbase ends any repair.

        Args:
            starbase: Starbase to undock from

        Returns:
            True if the starbase released the ship
        """
        if starbase is None:
            raise TypeError("starbase cannot be None")

        if self._destroyed:
            logger.debug("%s is destroyed; cannot undock", self)
            return False

        if not starbase.undock_starship(self):
            return False

        self._docked = False
        self._repairing = False
        return True

    def repair(self) -> bool:
        """Run one repair tick.

        Health advances to the next quartile of max health. The tick that
        reaches full health ends the repair.

        Returns:
            True if a repair tick ran
        """
        if self._destroyed:
            logger.debug("%s is destroyed; cannot repair", self)
            return False

        if not self._docked:
            logger.debug("%s is not docked; cannot repair", self)
            return False

        if self._health < self.max_health:
            self._repairing = True

        for fraction in REPAIR_QUARTILES[:-1]:
            step = self.max_health * fraction
            if self._health < step:
                self.set_health(step)
                logger.info("%s repaired to %.2f", self, self._health)
                return True

        self.set_health(self.max_health)
        self._repairing = False
        logger.info("%s fully repaired", self)
        return True

    def attack(self, target: Entity) -> bool:
        """Attack another entity.

        The target must be in the same sector and not in this ship's fleet.

        Args:
            target: Entity to attack

        Returns:
            True if the attack was delivered
        """
        if target is None:
            raise TypeError("target cannot be None")

        if self._destroyed:
            logger.debug("%s is destroyed; cannot attack", self)
            return False

        if self._docked:
            if self._repairing:
                logger.debug("%s is repairing; continuing repair instead of attacking", self)
                self.repair()
            else:
                logger.debug("%s is docked; cannot attack %s", self, target)
            return False

        if target.is_destroyed():
            logger.debug("%s is already destroyed; %s holds fire", target, self)
            return False

        if target.get_sector() != self._sector:
            logger.debug("%s is not in sector %s; %s cannot attack", target, self._sector, self)
            return False

        if same_fleet(self, target):
            logger.debug("%s and %s are in the same fleet; friendly fire refused", self, target)
            return False

        attack_strength = self.get_attack_strength()
        logger.info("%s attacks %s with strength %.2f", self, target, attack_strength)
        target.take_damage(attack_strength)
        return True

    def take_damage(self, damage: float) -> float:
        """Apply an incoming hit, then lose crew in proportion to it.

        Crew loss uses the applied damage, worked out from the defence and
        health before the hit.

        Args:
            damage: Raw incoming damage

        Returns:
            Damage actually subtracted from health
        """
        if self._destroyed:
            logger.debug("%s is already destroyed; ignoring %.2f damage", self, damage)
            return 0.0

        applied = self.calculate_applied_damage(damage)
        crew_lost = self.calculate_crew_lost(applied)

        super().take_damage(damage)
        self.set_crew(self._crew - crew_lost)
        if crew_lost:
            logger.debug("%s lost %d crew, %d remaining", self, crew_lost, self._crew)
        return applied

    def calculate_crew_lost(self, damage: float) -> int:
        """Crew lost to a hit: applied damage as a share of max health.

        Args:
            damage: Applied damage

        Returns:
            round(damage / max_health * crew), rounding half to even
        """
        return round(damage / self.max_health * self._crew)

    def set_crew(self, new_crew: int) -> None:
        """Set the crew count, never below MIN_CREW."""
        self._crew = max(MIN_CREW, new_crew)
