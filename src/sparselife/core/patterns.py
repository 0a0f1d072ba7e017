"""Named seed patterns for sparse worlds."""

import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence

from .cell import Location, LocationLike
from .rules import RuleSet
from .world import World

logger = logging.getLogger(__name__)

ALIVE_MARKS = "O*"
DEAD_MARK = "."


class Pattern:
    """A named, immutable set of living locations."""

    def __init__(self, name: str, locations: Iterable[LocationLike], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            locations: Coordinates of the living cells
            description: Optional description
        """
        self.name = name
        self.locations: FrozenSet[Location] = frozenset(Location(*location) for location in locations)
        self.description = description

    @classmethod
    def from_rows(cls, name: str, rows: Sequence[str], description: str = "") -> "Pattern":
        """Build a pattern from plaintext rows.

        Row index is the y coordinate and column index the x coordinate.
        'O' or '*' marks a living cell, '.' a dead one.

        Args:
            name: Pattern name
            rows: One string per row
            description: Optional description

        Returns:
            New Pattern instance

        Raises:
            ValueError: If a row contains any other character
        """
        locations = []
        for y, row in enumerate(rows):
            for x, mark in enumerate(row):
                if mark in ALIVE_MARKS:
                    locations.append((x, y))
                elif mark != DEAD_MARK:
                    raise ValueError(f"Unexpected character {mark!r} at ({x}, {y}) in pattern {name!r}")
        return cls(name, locations, description)

    @classmethod
    def from_world(cls, world: World, name: str, description: str = "") -> "Pattern":
        """Capture the living cells of a world."""
        return cls(name, world.living_locations(), description)

    @property
    def population(self) -> int:
        """Number of living cells in the pattern."""
        return len(self.locations)

    def shifted(self, dx: int, dy: int) -> "Pattern":
        """Return a copy moved by (dx, dy)."""
        return Pattern(self.name, ((x + dx, y + dy) for x, y in self.locations), self.description)

    def normalized(self) -> "Pattern":
        """Return a copy whose bounding box starts at (0, 0)."""
        bounds = self.to_world().get_bounding_box()
        if bounds is None:
            return self
        return self.shifted(-bounds[0], -bounds[1])

    def same_shape(self, other: "Pattern") -> bool:
        """Whether two patterns are equal up to translation."""
        return self.normalized().locations == other.normalized().locations

    def place(self, world: World, offset: LocationLike = (0, 0)) -> None:
        """Bring this pattern's cells to life in an existing world.

        Cells already alive elsewhere in the world are left untouched.
        """
        ox, oy = offset
        for x, y in self.locations:
            world.get((x + ox, y + oy)).revive()
        logger.debug("Placed pattern %r at (%d, %d)", self.name, ox, oy)

    def to_world(self, offset: LocationLike = (0, 0), rules: Optional[RuleSet] = None) -> World:
        """Create a new world seeded with this pattern.

        Args:
            offset: Translation applied to every location
            rules: Optional rule set for the new world

        Returns:
            New World instance
        """
        ox, oy = offset
        return World.from_locations(self.shifted(ox, oy).locations, rules=rules)

    def __repr__(self) -> str:
        return f"Pattern(name={self.name!r}, population={self.population})"


BUILTIN_PATTERNS: Dict[str, Pattern] = {
    pattern.name: pattern
    for pattern in [
        Pattern.from_rows("Block", ["OO", "OO"], "Still life"),
        Pattern.from_rows("Beehive", [".OO.", "O..O", ".OO."], "Still life"),
        Pattern.from_rows("Loaf", [".OO.", "O..O", ".O.O", "..O."], "Still life"),
        Pattern.from_rows("Blinker", ["OOO"], "Period-2 oscillator"),
        Pattern.from_rows("Toad", [".OOO", "OOO."], "Period-2 oscillator"),
        Pattern.from_rows("Beacon", ["OO..", "OO..", "..OO", "..OO"], "Period-2 oscillator"),
        Pattern.from_rows("Glider", [".O.", "..O", "OOO"], "Period-4 diagonal spaceship"),
        Pattern.from_rows(
            "Lightweight Spaceship",
            [".O..O", "O....", "O...O", "OOOO."],
            "Period-4 orthogonal spaceship",
        ),
        Pattern.from_rows("R-pentomino", [".OO", "OO.", ".O."], "Methuselah"),
        Pattern.from_rows("Diehard", ["......O.", "OO......", ".O...OOO"], "Dies out after 130 generations"),
    ]
}


def get_pattern(name: str) -> Optional[Pattern]:
    """Look up a built-in pattern by name, or None if there is none."""
    return BUILTIN_PATTERNS.get(name)


def list_patterns() -> List[str]:
    """Names of all built-in patterns."""
    return list(BUILTIN_PATTERNS)
