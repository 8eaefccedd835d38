"""Sector data model for grid positions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Sector:
    """A location on the map grid.

    Sectors are plain coordinate values: two sectors with the same x and y
    are the same place.
    """

    x: int  # Column
    y: int  # Row

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
