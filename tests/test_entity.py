"""Tests for the shared entity damage rules."""

import pytest

from src.models import Entity, Fleet, Player, Sector, Starbase, Starship, same_fleet
from src.utils import DAMAGE_FLOOR


class UnarmoredEntity(Entity):
    """Entity with no defence, for testing the damage floor in isolation."""

    variant_name = "Target"

    def __init__(self, entity_id, sector, max_health=50.0):
        super().__init__(entity_id, max_health, 0.0, sector)

    def get_defence_strength(self):
        return 0.0


@pytest.fixture
def sector():
    return Sector(0, 0)


@pytest.fixture
def starbase(sector):
    return Starbase(1, sector)


def test_construction_validates_id(sector):
    """Negative ids are rejected."""
    with pytest.raises(ValueError, match="Invalid entity_id"):
        Starship(-1, sector)


def test_construction_requires_sector():
    """A missing sector is a contract violation."""
    with pytest.raises(TypeError):
        Starbase(1, None)


def test_new_entity_state(starbase, sector):
    """Entities start at full health with no fleet."""
    assert starbase.get_health() == 500.0
    assert starbase.get_sector() == sector
    assert starbase.get_fleet() is None
    assert not starbase.is_destroyed()


def test_base_defence_is_abstract(sector):
    """The bare Entity has no defence formula."""
    entity = Entity(1, 10.0, 1.0, sector)
    with pytest.raises(NotImplementedError):
        entity.get_defence_strength()


def test_damage_reduced_by_defence(starbase):
    """Defence is subtracted from incoming damage."""
    # Full-health starbase has defence 20
    applied = starbase.take_damage(100)
    assert applied == pytest.approx(80.0)
    assert starbase.get_health() == pytest.approx(420.0)


def test_damage_floor_against_heavy_defence(starbase):
    """At least DAMAGE_FLOOR gets through when defence exceeds damage."""
    applied = starbase.take_damage(10)
    assert applied == DAMAGE_FLOOR
    assert starbase.get_health() == pytest.approx(495.0)


def test_damage_floor_without_defence(sector):
    """Small hits are raised to the floor even with no defence."""
    target = UnarmoredEntity(1, sector)
    assert target.take_damage(1) == DAMAGE_FLOOR
    assert target.get_health() == pytest.approx(45.0)


def test_damage_capped_at_remaining_health(starbase):
    """Overkill never pushes health below zero."""
    applied = starbase.take_damage(10_000)
    assert applied == pytest.approx(500.0)
    assert starbase.get_health() == 0.0
    assert starbase.is_destroyed()


def test_set_health_clamps(starbase):
    """set_health keeps health within [0, max_health]."""
    starbase.set_health(900)
    assert starbase.get_health() == 500.0

    starbase.set_health(-20)
    assert starbase.get_health() == 0.0
    assert starbase.is_destroyed()


def test_no_resurrection(starbase):
    """Once destroyed, health stays at 0."""
    starbase.set_health(0)
    starbase.set_health(300)
    assert starbase.get_health() == 0.0
    assert starbase.is_destroyed()


def test_damage_after_destruction_is_noop(starbase):
    """Destroyed entities ignore further damage."""
    starbase.set_health(0)
    assert starbase.take_damage(50) == 0.0
    assert starbase.get_health() == 0.0


def test_health_bounds_hold_over_many_hits(sector):
    """Health stays in range and destruction happens exactly at zero."""
    ship = Starship(1, sector)
    for damage in [0, 3, 12.5, 40, 7, 100, 1, 60]:
        ship.take_damage(damage)
        assert 0.0 <= ship.get_health() <= ship.max_health
        assert ship.is_destroyed() == (ship.get_health() == 0.0)
    assert ship.is_destroyed()


class TestFleetAssignment:
    """Test fleet back-references."""

    def test_assign_fleet(self, starbase):
        """Assigning a fleet sets the back-reference."""
        fleet = Fleet(Player(1))
        assert starbase.assign_fleet(fleet)
        assert starbase.get_fleet() is fleet

    def test_reassign_same_fleet(self, starbase):
        """Assigning the current fleet again is accepted."""
        fleet = Fleet(Player(1))
        starbase.assign_fleet(fleet)
        assert starbase.assign_fleet(fleet)

    def test_cannot_switch_fleet(self, starbase):
        """An entity belongs to at most one fleet."""
        first = Fleet(Player(1))
        second = Fleet(Player(2))
        starbase.assign_fleet(first)
        assert not starbase.assign_fleet(second)
        assert starbase.get_fleet() is first

    def test_assign_none(self, starbase):
        """None is not a fleet."""
        with pytest.raises(TypeError):
            starbase.assign_fleet(None)

    def test_fleet_reference_is_weak(self, starbase):
        """The entity does not keep its fleet alive."""
        fleet = Fleet(Player(1))
        starbase.assign_fleet(fleet)
        del fleet
        assert starbase.get_fleet() is None


class TestSameFleet:
    """Test fleet identity comparison."""

    def test_same_fleet_by_identity(self, sector):
        """Entities in one fleet match."""
        fleet = Fleet(Player(1))
        ship = Starship(1, sector)
        base = Starbase(2, sector)
        ship.assign_fleet(fleet)
        base.assign_fleet(fleet)
        assert same_fleet(ship, base)

    def test_equal_players_different_fleets(self, sector):
        """Two fleets of the same player are still different fleets."""
        first = Fleet(Player(1))
        second = Fleet(Player(1))
        ship = Starship(1, sector)
        base = Starbase(2, sector)
        ship.assign_fleet(first)
        base.assign_fleet(second)
        assert not same_fleet(ship, base)

    def test_unassigned_never_match(self, sector):
        """Entities without a fleet never count as the same fleet."""
        assert not same_fleet(Starship(1, sector), Starbase(2, sector))


def test_display_labels(sector):
    """String form combines fleet tag, variant and id."""
    fleet = Fleet(Player(3))
    ship = Starship(7, sector)
    assert str(ship) == "Unassigned Starship #7"

    ship.assign_fleet(fleet)
    assert str(ship) == "Fleet 3 Starship #7"
    assert "Starship(id=7" in repr(ship)
