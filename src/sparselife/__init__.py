"""Sparse, unbounded Conway's Game of Life built from lazily created cells."""

__version__ = "0.1.0"

from .core.cell import Cell, Location
from .core.rules import CONWAY, RuleSet
from .core.world import World
from .core.patterns import Pattern, get_pattern, list_patterns

__all__ = ["Cell", "Location", "RuleSet", "CONWAY", "World", "Pattern", "get_pattern", "list_patterns"]
