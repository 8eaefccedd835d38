#!/usr/bin/env python3
"""Starship combat demo - Main entry point.

Runs a scripted battle between two fleets and prints the state of both
fleets after every phase.
"""

import argparse
import logging
import sys

from src.engine.scenario import DemoBattle, ScenarioStep
from src.interface.renderer import FleetRenderer
from src.interface.reports import FleetReport, build_fleet_report
from src.models.game import Game
from src.utils.constants import DEMO_ATTACK_ROUND_LIMIT


class DemoOrchestrator:
    """Runs the battle phase by phase and prints the results."""

    def __init__(
        self, game: Game, max_siege_rounds: int = DEMO_ATTACK_ROUND_LIMIT, as_json: bool = False
    ):
        """Initialize demo orchestrator.

        Args:
            game: Game to run the battle in
            max_siege_rounds: Upper bound on siege rounds
            as_json: If True, print fleet reports as JSON instead of text
        """
        self.game = game
        self.battle = DemoBattle(game, max_siege_rounds=max_siege_rounds)
        self.renderer = FleetRenderer()
        self.as_json = as_json
        self.steps: list[ScenarioStep] = []

    def run(self) -> Game:
        """Run every phase, printing fleet state after each."""
        print("\n" + "=" * 60)
        print("Starship Combat Demo")
        print("=" * 60)

        for phase in self.battle.phases():
            step = phase()
            self.steps.append(step)
            self._show_step(step)

        return self.game

    def _reports(self) -> list[FleetReport]:
        return [build_fleet_report(fleet) for fleet in self.game.fleets]

    def _show_step(self, step: ScenarioStep) -> None:
        """Print a phase summary followed by fleet state."""
        print(f"\n--- Turn {step.turn}: {step.name} ---")
        print(step.description)
        print()
        reports = self._reports()
        if self.as_json:
            for report in reports:
                print(report.model_dump_json(indent=2))
        else:
            print(self.renderer.render_all(reports))


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Starship Combat - scripted two-fleet battle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                      # Run the demo battle
  %(prog)s --debug              # Show every rejected action and damage roll
  %(prog)s --rounds 10          # Stop the siege after 10 rounds
  %(prog)s --json               # Print fleet reports as JSON
        """,
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=DEMO_ATTACK_ROUND_LIMIT,
        help=f"Maximum siege rounds (default: {DEMO_ATTACK_ROUND_LIMIT})",
    )
    parser.add_argument("--json", action="store_true", help="Print fleet reports as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.rounds < 0:
        parser.error("--rounds must be >= 0")

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    orchestrator = DemoOrchestrator(Game(), max_siege_rounds=args.rounds, as_json=args.json)
    orchestrator.run()

    result = orchestrator.battle.siege_result
    if result is not None and result.destroyed:
        print(f"\n{result.target} destroyed after {result.rounds} rounds.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
