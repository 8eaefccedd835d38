"""Scripted demo battle between two fleets.

The battle runs in fixed phases, one per turn:
1. Setup: two fleets, each with a starbase and three starships
2. Advance: fleet 1 moves all starships into fleet 2's sector
3. Docking: fleet 2 docks its first two starships
4. Skirmish: fleet 1's lead ship attacks fleet 2's third ship twice
5. Repair: the damaged ship docks and starts repairing
6. Siege: fleet 1 attacks fleet 2's starbase until it is destroyed

Each phase is an independent method, so tests can run them one at a time.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..models.entity import Entity
from ..models.fleet import Fleet
from ..models.game import Game
from ..models.sector import Sector
from ..utils.constants import DEMO_ATTACK_ROUND_LIMIT

logger = logging.getLogger(__name__)


@dataclass
class ScenarioStep:
    """Record of one completed phase.

    Attributes:
        turn: Turn the phase ran in
        name: Short phase name
        description: What happened
    """

    turn: int
    name: str
    description: str


@dataclass
class SiegeResult:
    """Outcome of repeated fleet attacks on a single target.

    Attributes:
        target: Label of the target
        rounds: Rounds of attacks ordered
        attacks_delivered: Individual attacks that landed
        destroyed: Whether the target ended destroyed
    """

    target: str
    rounds: int
    attacks_delivered: int
    destroyed: bool


def run_siege(
    fleet: Fleet, target: Entity, max_rounds: int = DEMO_ATTACK_ROUND_LIMIT
) -> SiegeResult:
    """Attack a target with a whole fleet until it is destroyed.

    Stops early when a round delivers no attacks, since nothing will change
    on later rounds either.

    Args:
        fleet: Attacking fleet
        target: Entity under attack
        max_rounds: Upper bound on rounds

    Returns:
        SiegeResult describing the outcome
    """
    if max_rounds < 0:
        raise ValueError(f"Invalid max_rounds: {max_rounds} (must be >= 0)")

    rounds = 0
    delivered = 0
    while not target.is_destroyed() and rounds < max_rounds:
        rounds += 1
        landed = fleet.attack_with_all(target)
        delivered += landed
        if landed == 0:
            logger.info("%s could not attack %s; ending siege", fleet, target)
            break

    return SiegeResult(
        target=str(target),
        rounds=rounds,
        attacks_delivered=delivered,
        destroyed=target.is_destroyed(),
    )


class DemoBattle:
    """Runs the scripted battle on a Game."""

    def __init__(
        self, game: Optional[Game] = None, max_siege_rounds: int = DEMO_ATTACK_ROUND_LIMIT
    ):
        """Initialize the battle.

        Args:
            game: Game to populate (a fresh one if omitted)
            max_siege_rounds: Upper bound on siege rounds
        """
        self.game = game if game is not None else Game()
        self.max_siege_rounds = max_siege_rounds
        self.home_sector: Sector = self.game.new_sector(1, 1)
        self.enemy_sector: Sector = self.game.new_sector(2, 2)
        self.fleet1: Optional[Fleet] = None
        self.fleet2: Optional[Fleet] = None
        self.siege_result: Optional[SiegeResult] = None

    def _record(self, name: str, description: str) -> ScenarioStep:
        step = ScenarioStep(turn=self.game.turn, name=name, description=description)
        logger.info("Turn %d [%s] %s", step.turn, name, description)
        self.game.advance_turn()
        return step

    def execute_setup(self) -> ScenarioStep:
        """Create both fleets with one starbase and three starships each."""
        self.fleet1 = self._build_fleet(1, self.home_sector)
        self.fleet2 = self._build_fleet(2, self.enemy_sector)
        return self._record("setup", "Created fleets 1 and 2")

    def _build_fleet(self, player_no: int, sector: Sector) -> Fleet:
        fleet = self.game.new_fleet(self.game.new_player(player_no))
        fleet.add_entities(
            self.game.new_starbase(sector),
            self.game.new_starship(sector),
            self.game.new_starship(sector),
            self.game.new_starship(sector),
        )
        return fleet

    def execute_advance(self) -> ScenarioStep:
        """Move fleet 1's starships into fleet 2's sector."""
        moved = self.fleet1.move_all_entities(self.enemy_sector)
        return self._record(
            "advance", f"{self.fleet1} moved {moved} starships to {self.enemy_sector}"
        )

    def execute_docking(self) -> ScenarioStep:
        """Dock fleet 2's first two starships to its starbase."""
        docked = 0
        starbase = self.fleet2.get_starbase_at(0)
        if starbase is not None:
            candidates = (self.fleet2.get_starship_at(0), self.fleet2.get_starship_at(1))
            ships = [s for s in candidates if s is not None]
            docked = self.fleet2.dock_starships_to(starbase, *ships)
        return self._record("docking", f"{self.fleet2} docked {docked} starships")

    def execute_skirmish(self) -> ScenarioStep:
        """Fleet 1's lead ship attacks fleet 2's undocked ship twice."""
        hits = 0
        attacker = self.fleet1.get_starship_at(0)
        enemy = self.fleet2.get_starship_at(2)
        if attacker is not None and enemy is not None:
            hits = sum(1 for _ in range(2) if attacker.attack(enemy))
        return self._record("skirmish", f"{hits} hits landed on {enemy}")

    def execute_repair(self) -> ScenarioStep:
        """Dock the damaged ship and run one repair tick."""
        starship = self.fleet2.get_starship_at(2)
        starbase = self.fleet2.get_starbase_at(0)
        repaired = False
        if starship is not None and starbase is not None:
            starship.dock_to_starbase(starbase)
            repaired = starship.repair()
        outcome = "started repairs" if repaired else "could not repair"
        return self._record("repair", f"{starship} {outcome}")

    def execute_siege(self) -> ScenarioStep:
        """Attack fleet 2's starbase with all of fleet 1 until it falls."""
        starbase = self.fleet2.get_starbase_at(0)
        if starbase is None:
            return self._record("siege", f"{self.fleet2} has no starbase")

        self.siege_result = run_siege(self.fleet1, starbase, self.max_siege_rounds)
        outcome = "destroyed" if self.siege_result.destroyed else "still standing"
        return self._record(
            "siege",
            f"{starbase} {outcome} after {self.siege_result.rounds} rounds "
            f"({self.siege_result.attacks_delivered} attacks)",
        )

    def phases(self):
        """Phase methods in execution order."""
        return [
            self.execute_setup,
            self.execute_advance,
            self.execute_docking,
            self.execute_skirmish,
            self.execute_repair,
            self.execute_siege,
        ]

    def run(self) -> list[ScenarioStep]:
        """Run every phase in order."""
        return [phase() for phase in self.phases()]
