"""Cell data structure for sparse cellular automata."""

from typing import NamedTuple, Tuple, Union


class Location(NamedTuple):
    """Integer (x, y) coordinate of a cell."""

    x: int
    y: int


LocationLike = Union[Location, Tuple[int, int]]


class Cell:
    """A single grid position that knows its current and previous aliveness."""

    def __init__(self, location: LocationLike = (0, 0), alive: bool = False) -> None:
        """Initialize a new cell.

        Args:
            location: Coordinate of the cell
            alive: Whether the cell starts alive

        The previous-turn flag always starts out False.
        """
        self._location = Location(*location)
        self._alive = bool(alive)
        self._alive_last_turn = False

    @property
    def location(self) -> Location:
        """Coordinate of this cell."""
        return self._location

    def is_alive(self) -> bool:
        """Whether the cell is alive now."""
        return self._alive

    def was_alive_last_turn(self) -> bool:
        """Whether the cell was alive when the last snapshot was taken."""
        return self._alive_last_turn

    def kill(self) -> None:
        """Mark the cell dead; a no-op if it already is."""
        self._alive = False

    def revive(self) -> None:
        """Mark the cell alive; a no-op if it already is."""
        self._alive = True

    def update_alive_last_turn(self) -> None:
        """Snapshot current aliveness as the previous-turn state."""
        self._alive_last_turn = self._alive

    def __repr__(self) -> str:
        return (
            f"Cell(location=({self._location.x}, {self._location.y}), "
            f"alive={self._alive}, alive_last_turn={self._alive_last_turn})"
        )
