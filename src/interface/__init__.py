"""Read-only reporting and text output."""

from .renderer import FleetRenderer
from .reports import EntityReport, FleetReport, build_entity_report, build_fleet_report

__all__ = [
    "EntityReport",
    "FleetReport",
    "FleetRenderer",
    "build_entity_report",
    "build_fleet_report",
]
