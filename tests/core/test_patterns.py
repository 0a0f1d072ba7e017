"""Tests for seed patterns."""

import pytest
from sparselife.core.cell import Location
from sparselife.core.patterns import BUILTIN_PATTERNS, Pattern, get_pattern, list_patterns
from sparselife.core.rules import RuleSet
from sparselife.core.world import World


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test locations are stored as a frozenset of Locations."""
        pattern = Pattern("Test", [(0, 0), (1, 1), (1, 1)], "A test pattern")
        assert pattern.name == "Test"
        assert pattern.description == "A test pattern"
        assert pattern.locations == frozenset({(0, 0), (1, 1)})
        assert all(isinstance(location, Location) for location in pattern.locations)
        assert pattern.population == 2

    def test_from_rows(self):
        """Test parsing plaintext rows, x across and y down."""
        pattern = Pattern.from_rows("Glider", [".O.", "..*", "OOO"])
        assert pattern.locations == frozenset({(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)})

    def test_from_rows_rejects_unknown_marks(self):
        """Test characters other than alive/dead marks are rejected."""
        with pytest.raises(ValueError):
            Pattern.from_rows("Bad", ["O#O"])

    def test_shifted(self):
        """Test translation leaves the original untouched."""
        pattern = Pattern("Test", [(0, 0), (2, 1)])
        moved = pattern.shifted(-3, 4)
        assert moved.locations == frozenset({(-3, 4), (-1, 5)})
        assert pattern.locations == frozenset({(0, 0), (2, 1)})

    def test_normalized(self):
        """Test normalizing moves the bounding box to the origin."""
        pattern = Pattern("Test", [(5, 7), (6, 7), (5, 9)])
        assert pattern.normalized().locations == frozenset({(0, 0), (1, 0), (0, 2)})

    def test_normalized_empty(self):
        """Test an empty pattern normalizes to itself."""
        pattern = Pattern("Empty", [])
        assert pattern.normalized() is pattern

    def test_same_shape(self):
        """Test comparison up to translation."""
        glider = get_pattern("Glider")
        assert glider.same_shape(glider.shifted(10, -20))
        assert not glider.same_shape(get_pattern("R-pentomino"))

    def test_place(self):
        """Test placing revives cells and keeps other living cells."""
        world = World.from_locations([(10, 10)])
        Pattern("Line", [(0, 0), (1, 0), (2, 0)]).place(world, offset=(-1, 4))
        assert world.living_locations() == [(-1, 4), (0, 4), (1, 4), (10, 10)]

    def test_to_world(self):
        """Test seeding a new world."""
        highlife = RuleSet.from_rulestring("B36/S23")
        world = Pattern("Dot", [(0, 0)]).to_world(offset=(2, 3), rules=highlife)
        assert world.living_locations() == [(2, 3)]
        assert world.rules == highlife

    def test_from_world(self):
        """Test capturing the living cells of a world."""
        world = World.from_locations([(1, 1), (0, 0)])
        world.get((4, 4))
        pattern = Pattern.from_world(world, "Captured")
        assert pattern.locations == frozenset({(0, 0), (1, 1)})


class TestBuiltinPatterns:
    """Test the built-in pattern table."""

    def test_lookup(self):
        """Test lookup by name."""
        for name in ["Block", "Blinker", "Glider", "R-pentomino"]:
            assert name in list_patterns()
            assert get_pattern(name) is BUILTIN_PATTERNS[name]
        assert get_pattern("Nonexistent") is None

    def test_still_lifes_are_stable(self):
        """Test built-in still lifes do not change."""
        for name in ["Block", "Beehive", "Loaf"]:
            pattern = get_pattern(name)
            world = pattern.to_world()
            assert world.step() == 0, name
            assert Pattern.from_world(world, name).locations == pattern.locations

    def test_oscillators_have_period_two(self):
        """Test built-in period-2 oscillators return after two turns."""
        for name in ["Blinker", "Toad", "Beacon"]:
            pattern = get_pattern(name)
            world = pattern.to_world(offset=(3, 3))

            world.step()
            assert Pattern.from_world(world, name).locations != pattern.shifted(3, 3).locations, name
            world.step()
            assert Pattern.from_world(world, name).locations == pattern.shifted(3, 3).locations, name

    def test_spaceships_keep_shape(self):
        """Test spaceships return to their shape after their period."""
        for name in ["Glider", "Lightweight Spaceship"]:
            pattern = get_pattern(name)
            world = pattern.to_world()

            for _ in range(4):
                world.step()

            moved = Pattern.from_world(world, name)
            assert moved.same_shape(pattern), name
            assert moved.locations != pattern.locations, name
