"""Tests for fleet reports and text rendering."""

import json

import pytest

from src.interface import FleetRenderer, build_entity_report, build_fleet_report
from src.models import Fleet, Game, Player, Sector, Starship


@pytest.fixture
def game():
    return Game()


@pytest.fixture
def fleet(game):
    fleet = game.new_fleet(game.new_player(1))
    sector = Sector(1, 1)
    fleet.add_entities(game.new_starbase(sector), game.new_starship(sector), game.new_starship(sector))
    return fleet


def test_starship_report(fleet):
    """Starship reports carry crew, attack and docking state."""
    ship = fleet.get_starship_at(0)
    ship.take_damage(30)
    report = build_entity_report(ship)

    assert report.id == ship.id
    assert report.variant == "Starship"
    assert report.label == str(ship)
    assert report.fleet == "Fleet 1"
    assert (report.x, report.y) == (1, 1)
    assert report.health == pytest.approx(80.0)
    assert report.crew == 8
    assert report.attack_strength == pytest.approx(24.0)
    assert report.docked is False
    assert report.repairing is False
    assert report.docked_starship_ids == []


def test_starbase_report(fleet):
    """Starbase reports list docked ship ids."""
    base = fleet.get_starbase_at(0)
    ship = fleet.get_starship_at(1)
    ship.dock_to_starbase(base)
    report = build_entity_report(base)

    assert report.variant == "Starbase"
    assert report.docked_starship_ids == [ship.id]
    assert report.crew is None
    assert report.attack_strength is None


def test_unassigned_entity_report():
    """Unassigned entities report no fleet."""
    report = build_entity_report(Starship(5, Sector(0, 0)))
    assert report.fleet is None
    assert report.label == "Unassigned Starship #5"


def test_report_does_not_change_state(fleet):
    """Building a report leaves the fleet untouched."""
    ship = fleet.get_starship_at(0)
    before = (ship.get_health(), ship.get_crew(), ship.get_sector())
    build_fleet_report(fleet)
    assert (ship.get_health(), ship.get_crew(), ship.get_sector()) == before


def test_fleet_report(fleet):
    """Fleet reports group entities by variant."""
    report = build_fleet_report(fleet)
    assert report.player_no == 1
    assert report.label == "Fleet 1"
    assert len(report.starbases) == 1
    assert len(report.starships) == 2
    assert report.defeated is False


def test_fleet_report_json(fleet):
    """Reports serialize to JSON."""
    data = json.loads(build_fleet_report(fleet).model_dump_json())
    assert data["player_no"] == 1
    assert data["starships"][0]["variant"] == "Starship"


class TestFleetRenderer:
    """Test text rendering."""

    def test_render_fleet(self, fleet):
        """Each entity gets a row under the fleet header."""
        text = FleetRenderer().render(build_fleet_report(fleet))
        lines = text.split("\n")

        assert lines[0] == "Fleet 1"
        assert len(lines) == 4
        assert lines[1].strip().startswith("Starbase #")
        assert "HP 500.0/500.0" in lines[1]
        assert "crew 10" in lines[2]

    def test_render_docked_and_destroyed(self, fleet):
        """Docked, repairing and destroyed markers show up."""
        base = fleet.get_starbase_at(0)
        docked, wreck = fleet.get_starships()
        docked.set_health(40)
        docked.dock_to_starbase(base)
        docked.repair()
        wreck.set_health(0)

        text = FleetRenderer().render(build_fleet_report(fleet))
        assert f"docked: {docked.id}" in text
        assert "[repairing]" in text
        assert "DESTROYED" in text

    def test_render_defeated(self, fleet):
        """Defeated fleets are marked in the header."""
        for entity in fleet.get_entities():
            entity.set_health(0)
        text = FleetRenderer().render(build_fleet_report(fleet))
        assert text.split("\n")[0] == "Fleet 1  (defeated)"

    def test_render_empty(self):
        """Empty fleets say so."""
        text = FleetRenderer().render(build_fleet_report(Fleet(Player(3))))
        assert text == "Fleet 3\n  (no entities)"

    def test_render_all(self, game, fleet):
        """Several fleets are separated by a blank line."""
        other = game.new_fleet(game.new_player(2))
        reports = [build_fleet_report(f) for f in (fleet, other)]
        text = FleetRenderer().render_all(reports)
        assert "\n\nFleet 2" in text
