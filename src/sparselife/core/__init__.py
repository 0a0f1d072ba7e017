"""Core sparse cellular automata logic."""

from .cell import Cell, Location
from .rules import CONWAY, RuleSet
from .world import NEIGHBOR_OFFSETS, World
from .patterns import BUILTIN_PATTERNS, Pattern, get_pattern, list_patterns

__all__ = [
    "Cell",
    "Location",
    "RuleSet",
    "CONWAY",
    "World",
    "NEIGHBOR_OFFSETS",
    "Pattern",
    "BUILTIN_PATTERNS",
    "get_pattern",
    "list_patterns",
]
