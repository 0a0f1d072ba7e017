"""Sparse world of cells keyed by coordinate."""

import logging
from typing import Dict, Iterable, List, MutableMapping, Optional, Tuple

import numpy as np

from .cell import Cell, Location, LocationLike
from .rules import CONWAY, RuleSet

logger = logging.getLogger(__name__)

# Fixed direction -> (dx, dy) offsets, in neighbor enumeration order
NEIGHBOR_OFFSETS: Dict[str, Tuple[int, int]] = {
    "left": (-1, 0),
    "upleft": (-1, 1),
    "up": (0, 1),
    "upright": (1, 1),
    "right": (1, 0),
    "downright": (1, -1),
    "down": (0, -1),
    "downleft": (-1, -1),
}


class World:
    """Sparse collection of every cell discovered so far.

    Cells are created lazily: asking for a coordinate that has never been
    seen inserts a dead cell there. The map only ever grows.
    """

    def __init__(
        self,
        cells: Optional[MutableMapping[Location, Cell]] = None,
        rules: Optional[RuleSet] = None,
    ) -> None:
        """Initialize a world.

        Args:
            cells: Existing location -> cell mapping, used as-is (not copied)
            rules: Birth/survival rules applied by update_alive and step
        """
        self.cells = cells if cells is not None else {}
        self.rules = rules or CONWAY
        self._generation = 0
        logger.debug("Created world with %d cells, rules %s", len(self.cells), self.rules)

    @classmethod
    def from_locations(cls, locations: Iterable[LocationLike], rules: Optional[RuleSet] = None) -> "World":
        """Create a world with the given locations alive.

        Args:
            locations: Coordinates of living cells
            rules: Optional rule set

        Returns:
            New World instance
        """
        world = cls(rules=rules)
        for location in locations:
            world.get(location).revive()
        return world

    @classmethod
    def from_array(
        cls,
        data: np.ndarray,
        offset: LocationLike = (0, 0),
        rules: Optional[RuleSet] = None,
    ) -> "World":
        """Create a world from a 2D array indexed ``[x, y]``.

        Args:
            data: Array where any non-zero entry is a living cell
            offset: Coordinate of element ``[0, 0]``
            rules: Optional rule set

        Returns:
            New World instance

        Raises:
            ValueError: If data is not two-dimensional
        """
        arr = np.asarray(data)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {arr.shape}")

        ox, oy = offset
        xs, ys = np.nonzero(arr)
        return cls.from_locations(((int(x) + ox, int(y) + oy) for x, y in zip(xs, ys)), rules=rules)

    @property
    def generation(self) -> int:
        """Number of turns advanced with step()."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return sum(1 for cell in self.cells.values() if cell.is_alive())

    def get(self, location: LocationLike) -> Cell:
        """Get the cell at a location, creating a dead one if none exists.

        Args:
            location: Coordinate to look up

        Returns:
            The single Cell instance for that coordinate
        """
        key = Location(*location)
        cell = self.cells.get(key)
        if cell is None:
            cell = Cell(key)
            self.cells[key] = cell
        return cell

    def get_neighbors(self, location: LocationLike) -> Dict[str, Cell]:
        """Get the 8 surrounding cells keyed by direction.

        Missing neighbors are created dead, so this can grow the world by
        up to 8 cells.
        """
        x, y = location
        return {
            direction: self.get((x + dx, y + dy))
            for direction, (dx, dy) in NEIGHBOR_OFFSETS.items()
        }

    def count_living_neighbors(self, location: LocationLike) -> int:
        """Count neighbors of a location that are alive now."""
        return sum(1 for cell in self.get_neighbors(location).values() if cell.is_alive())

    def update_cell_status(self) -> None:
        """Snapshot the aliveness of every known cell as its last-turn state."""
        for cell in self.cells.values():
            cell.update_alive_last_turn()

    def update_alive(self, cell: Cell) -> None:
        """Apply the rules to one cell using its neighbors' current aliveness.

        Args:
            cell: Cell to evaluate; it is killed or revived in place
        """
        self._apply_rules(cell, self.count_living_neighbors(cell.location))

    def step(self) -> int:
        """Advance the world by one turn.

        Live cells and their neighbors are evaluated against the previous-turn
        state of their own neighbors, so visiting order does not matter. Only
        the neighborhoods of live cells are added to the map.

        Returns:
            Number of cells whose aliveness changed
        """
        # Any cell that could change this turn is alive or borders a live cell
        candidates = set()
        for location in self.living_locations():
            candidates.add(self.get(location))
            candidates.update(self.get_neighbors(location).values())

        self.update_cell_status()

        changed = 0
        for cell in candidates:
            if self._apply_rules(cell, self._count_alive_last_turn(cell.location)):
                changed += 1

        self._generation += 1
        logger.debug(
            "Generation %d: population %d, %d cells changed", self._generation, self.population, changed
        )
        return changed

    def _count_alive_last_turn(self, location: Location) -> int:
        """Count neighbors alive in the last snapshot, without creating cells."""
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS.values():
            neighbor = self.cells.get(Location(location.x + dx, location.y + dy))
            if neighbor is not None and neighbor.was_alive_last_turn():
                count += 1
        return count

    def _apply_rules(self, cell: Cell, living_neighbors: int) -> bool:
        """Kill or revive a cell; return True if its state changed."""
        alive = cell.is_alive()
        next_alive = self.rules.next_state(alive, living_neighbors)
        if alive and not next_alive:
            cell.kill()
        elif not alive and next_alive:
            cell.revive()
        return alive != next_alive

    def living_locations(self) -> List[Location]:
        """Get sorted locations of all living cells."""
        return sorted(cell.location for cell in self.cells.values() if cell.is_alive())

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        living = self.living_locations()
        if not living:
            return None

        xs = [location.x for location in living]
        ys = [location.y for location in living]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_array(self, bounds: Optional[Tuple[int, int, int, int]] = None) -> np.ndarray:
        """Convert a region of the world to an int8 array indexed ``[x, y]``.

        Args:
            bounds: (min_x, min_y, max_x, max_y) region, inclusive; defaults
                to the bounding box of living cells

        Returns:
            Array with 1 for living cells and 0 otherwise (empty if the world
            has no living cells and no bounds are given)
        """
        if bounds is None:
            bounds = self.get_bounding_box()
            if bounds is None:
                return np.zeros((0, 0), dtype=np.int8)

        min_x, min_y, max_x, max_y = bounds
        arr = np.zeros((max_x - min_x + 1, max_y - min_y + 1), dtype=np.int8)
        for cell in self.cells.values():
            location = cell.location
            if cell.is_alive() and min_x <= location.x <= max_x and min_y <= location.y <= max_y:
                arr[location.x - min_x, location.y - min_y] = 1
        return arr

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, location: object) -> bool:
        """Whether a cell already exists at a location (without creating it)."""
        try:
            key = Location(*location)
        except TypeError:
            return False
        return key in self.cells
