"""
Core type definitions for the keypad relay chain.

Symbols are single characters shared by both panel kinds:
- numeric panel: "0".."9" and the activate button "A"
- directional panel: "^", "v", "<", ">" and the activate button "A"

The gap cell of a panel layout is written as ".".
"""

from dataclasses import dataclass
from typing import Dict, Tuple

# Single-character button label
Symbol = str

# Activate button (present on both panel kinds)
ACTIVATE: Symbol = "A"

# Layout marker for the forbidden cell
GAP: Symbol = "."

# Primitive moves
UP: Symbol = "^"
DOWN: Symbol = "v"
LEFT: Symbol = "<"
RIGHT: Symbol = ">"

# (drow, dcol) per primitive move, rows grow downwards
MOVE_DELTAS: Dict[Symbol, Tuple[int, int]] = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}

# Ordered list of presses ending in ACTIVATE (one leg when minimal)
MoveSequence = Tuple[Symbol, ...]

# Per-node cache key: (start symbol, end symbol)
CacheKey = Tuple[Symbol, Symbol]


# Grid position (row, col)
@dataclass(frozen=True, order=True)
class GridPos:
    """Panel cell coordinates in row-major order."""
    row: int
    col: int

    def __iter__(self):
        """Allow tuple unpacking: r, c = pos"""
        return iter((self.row, self.col))

    def step(self, move: Symbol) -> "GridPos":
        """Neighbouring position after one primitive move."""
        dr, dc = MOVE_DELTAS[move]
        return GridPos(self.row + dr, self.col + dc)
