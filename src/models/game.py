"""Game state container and entity construction."""

from dataclasses import dataclass, field
from typing import Optional

from ..utils.ids import EntityIdAllocator
from .fleet import Fleet
from .player import Player
from .sector import Sector
from .starbase import Starbase
from .starship import Starship


def new_sector(x: int, y: int) -> Sector:
    """Create a sector at (x, y)."""
    return Sector(x, y)


def new_player(player_no: int) -> Player:
    """Create a player identity."""
    return Player(player_no)


@dataclass
class Game:
    """Top-level context for a battle.

    The Game owns the entity id allocator and the fleet registry. Entities
    built through it get unique, increasing ids; fleets built through it are
    kept alive here, which the entities' weak fleet references rely on.
    """

    turn: int = 0  # Current turn number
    players: dict[int, Player] = field(default_factory=dict)  # player_no -> Player
    fleets: list[Fleet] = field(default_factory=list)  # Registered fleets
    id_allocator: EntityIdAllocator = field(default_factory=EntityIdAllocator)

    def __post_init__(self):
        """Validate game data after initialization."""
        if self.turn < 0:
            raise ValueError(f"Invalid turn: {self.turn} (must be >= 0)")

    def new_sector(self, x: int, y: int) -> Sector:
        return new_sector(x, y)

    def new_player(self, player_no: int) -> Player:
        """Create and register a player, or return the registered one."""
        if player_no not in self.players:
            self.players[player_no] = new_player(player_no)
        return self.players[player_no]

    def new_fleet(self, player: Player) -> Fleet:
        """Create and register a fleet for a player.

        Args:
            player: Owner of the fleet

        Returns:
            The new fleet
        """
        self.players.setdefault(player.player_no, player)
        fleet = Fleet(player)
        self.fleets.append(fleet)
        return fleet

    def new_starship(self, sector: Sector) -> Starship:
        return Starship(self.id_allocator.next_id(), sector)

    def new_starbase(self, sector: Sector) -> Starbase:
        return Starbase(self.id_allocator.next_id(), sector)

    def get_fleet_for(self, player: Player) -> Optional[Fleet]:
        """Return the first registered fleet owned by player, or None."""
        for fleet in self.fleets:
            if fleet.player == player:
                return fleet
        return None

    def advance_turn(self) -> int:
        """Move to the next turn and return its number."""
        self.turn += 1
        return self.turn
