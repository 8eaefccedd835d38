"""Pydantic status reports for fleets and entities.

Reports are read-only snapshots the driver can print or dump to JSON.
Building a report never changes game state.
"""

from typing import Literal

from pydantic import BaseModel, Field

from ..models.entity import Entity
from ..models.fleet import Fleet
from ..models.starbase import Starbase
from ..models.starship import Starship


class EntityReport(BaseModel):
    """Snapshot of a single entity."""

    id: int
    label: str  # e.g. "Fleet 1 Starship #3"
    variant: Literal["Starship", "Starbase"]
    fleet: str | None  # e.g. "Fleet 1", None if unassigned
    x: int
    y: int
    health: float
    max_health: float
    defence_strength: float
    destroyed: bool
    # Starship only
    attack_strength: float | None = None
    crew: int | None = None
    docked: bool | None = None
    repairing: bool | None = None
    # Starbase only
    docked_starship_ids: list[int] = Field(default_factory=list)


class FleetReport(BaseModel):
    """Snapshot of a fleet and everything in it."""

    player_no: int
    label: str
    starbases: list[EntityReport] = Field(default_factory=list)
    starships: list[EntityReport] = Field(default_factory=list)
    defeated: bool = False


def build_entity_report(entity: Entity) -> EntityReport:
    """Snapshot an entity.

    Args:
        entity: Starship or Starbase to report on

    Returns:
        EntityReport with the entity's current figures
    """
    fleet = entity.get_fleet()
    sector = entity.get_sector()
    report = EntityReport(
        id=entity.id,
        label=str(entity),
        variant=entity.variant_name,
        fleet=str(fleet) if fleet is not None else None,
        x=sector.x,
        y=sector.y,
        health=entity.get_health(),
        max_health=entity.max_health,
        defence_strength=entity.get_defence_strength(),
        destroyed=entity.is_destroyed(),
    )

    if isinstance(entity, Starship):
        report.attack_strength = entity.get_attack_strength()
        report.crew = entity.get_crew()
        report.docked = entity.is_docked()
        report.repairing = entity.is_repairing()
    elif isinstance(entity, Starbase):
        report.docked_starship_ids = [s.id for s in entity.get_docked_starships()]

    return report


def build_fleet_report(fleet: Fleet) -> FleetReport:
    """Snapshot a fleet and all of its entities."""
    return FleetReport(
        player_no=fleet.player.player_no,
        label=str(fleet),
        starbases=[build_entity_report(b) for b in fleet.get_starbases()],
        starships=[build_entity_report(s) for s in fleet.get_starships()],
        defeated=fleet.is_defeated(),
    )
