"""Core data models for the maze solver."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Position:
    """An occupiable cell in the maze.

    NOTE: column 0, row 0 is the upper-left corner; rows grow downward and
    columns grow rightward.
    """

    col: int
    row: int

    def __add__(self, other: 'Position') -> 'Position':
        """Translate this position by an offset."""
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.col + other.col, self.row + other.row)

    def manhattan_distance(self, other: 'Position') -> int:
        """Number of 4-connected steps between two cells, ignoring walls."""
        return abs(self.col - other.col) + abs(self.row - other.row)

    def __str__(self) -> str:
        return f"({self.col}, {self.row})"


# Action symbol -> (col, row) offset
ACTIONS: Mapping[str, Position] = MappingProxyType({
    "U": Position(0, -1),
    "D": Position(0, 1),
    "L": Position(-1, 0),
    "R": Position(1, 0),
})

# Cell symbols
WALL = "X"
OPEN = "."
DIFFICULT = "M"
INITIAL = "I"
KEY = "K"
GOAL = "G"

CELL_SYMBOLS = frozenset({WALL, OPEN, DIFFICULT, INITIAL, KEY, GOAL})

# Entry cost per enterable cell kind
DEFAULT_COSTS: Mapping[str, int] = MappingProxyType({
    "open": 1,
    "difficult": 3,
})

# Type aliases for clarity
Action = str  # One of the keys of ACTIONS
