"""Birth/survival rule sets for life-like cellular automata."""

import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable

_RULESTRING_PART = re.compile(r"^([BS])(\d*)$", re.IGNORECASE)


def _as_counts(counts: Iterable[int], label: str) -> FrozenSet[int]:
    result = frozenset(int(c) for c in counts)
    invalid = sorted(c for c in result if not 0 <= c <= 8)
    if invalid:
        raise ValueError(f"{label} neighbor counts must be between 0 and 8, got {invalid}")
    return result


@dataclass(frozen=True)
class RuleSet:
    """Neighbor counts that decide birth and survival.

    A dead cell is revived when its living-neighbor count is in ``birth``;
    a live cell stays alive only while its count is in ``survival``.
    """

    birth: FrozenSet[int] = frozenset({3})
    survival: FrozenSet[int] = frozenset({2, 3})

    def __post_init__(self) -> None:
        # frozen dataclass, so bypass __setattr__ to normalise the sets
        object.__setattr__(self, "birth", _as_counts(self.birth, "Birth"))
        object.__setattr__(self, "survival", _as_counts(self.survival, "Survival"))

    @classmethod
    def from_rulestring(cls, rulestring: str) -> "RuleSet":
        """Parse a rule in ``B3/S23`` notation.

        Args:
            rulestring: Birth and survival parts separated by '/', in either order

        Returns:
            New RuleSet instance

        Raises:
            ValueError: If the string is not valid B/S notation
        """
        parts = rulestring.strip().split("/")
        if len(parts) != 2:
            raise ValueError(f"Invalid rulestring {rulestring!r}: expected 'B.../S...'")

        counts = {}
        for part in parts:
            match = _RULESTRING_PART.match(part.strip())
            if match is None:
                raise ValueError(f"Invalid rulestring {rulestring!r}: bad part {part!r}")
            key = match.group(1).upper()
            if key in counts:
                raise ValueError(f"Invalid rulestring {rulestring!r}: duplicate {key} part")
            counts[key] = [int(digit) for digit in match.group(2)]

        return cls(birth=counts["B"], survival=counts["S"])

    def next_state(self, alive: bool, living_neighbors: int) -> bool:
        """Decide whether a cell is alive next.

        Args:
            alive: Current cell state
            living_neighbors: Number of living neighbors (0-8)

        Returns:
            Next cell state
        """
        if alive:
            return living_neighbors in self.survival
        return living_neighbors in self.birth

    def __str__(self) -> str:
        birth = "".join(str(c) for c in sorted(self.birth))
        survival = "".join(str(c) for c in sorted(self.survival))
        return f"B{birth}/S{survival}"


CONWAY = RuleSet()
