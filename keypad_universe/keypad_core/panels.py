"""
Panel geometry for the numeric and directional keypads.

Layouts (row 0 at the top, "." marks the gap):

    numeric          directional
    7 8 9            . ^ A
    4 5 6            < v >
    1 2 3
    . 0 A

Provides:
- Panel: symbol → GridPos lookup, gap position, bounds
- NUMERIC_PANEL / DIRECTIONAL_PANEL: the two static instances

Every arm starts resting on its own activate button, and no arm is ever
allowed to rest over the gap.
"""

from typing import Dict, Iterable, Optional, Tuple

import numpy as np

from .types import ACTIVATE, GAP, GridPos, Symbol


NUMERIC_ROWS: Tuple[str, ...] = ("789", "456", "123", ".0A")
DIRECTIONAL_ROWS: Tuple[str, ...] = (".^A", "<v>")


class Panel:
    """
    Fixed grid of buttons with exactly one forbidden gap cell.

    The layout is parsed once into a numpy character grid; all lookups are
    served from a plain dict built at construction and never mutated.

    Args:
        name: Human-readable panel name ("numeric", "directional")
        rows: One string per row, one character per cell, GAP for the gap

    Raises:
        AssertionError: If rows are ragged, the gap count is not exactly one,
            a symbol is duplicated, or ACTIVATE is missing
    """

    def __init__(self, name: str, rows: Iterable[str]):
        rows = tuple(rows)
        assert rows and len({len(r) for r in rows}) == 1, \
            f"Panel '{name}' needs non-empty rows of equal width, got {rows}"

        grid = np.array([list(r) for r in rows])

        gaps = np.argwhere(grid == GAP)
        assert len(gaps) == 1, f"Panel '{name}' must have exactly one gap, found {len(gaps)}"

        positions: Dict[Symbol, GridPos] = {}
        for (r, c), value in np.ndenumerate(grid):
            symbol = str(value)
            if symbol == GAP:
                continue
            assert symbol not in positions, f"Panel '{name}' repeats symbol '{symbol}'"
            positions[symbol] = GridPos(int(r), int(c))

        assert ACTIVATE in positions, f"Panel '{name}' has no '{ACTIVATE}' button"

        self.name = name
        self.rows = rows
        self.shape: Tuple[int, int] = (int(grid.shape[0]), int(grid.shape[1]))
        self._grid = grid
        self._positions = positions
        self._gap = GridPos(int(gaps[0][0]), int(gaps[0][1]))

    def __repr__(self) -> str:
        return f"Panel({self.name!r}, {list(self.rows)!r})"

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._positions

    @property
    def alphabet(self) -> Tuple[Symbol, ...]:
        """Panel symbols in row-major order."""
        return tuple(sorted(self._positions, key=lambda s: self._positions[s]))

    def position_of(self, symbol: Symbol) -> GridPos:
        """
        Grid position of a button.

        Raises:
            ValueError: If symbol is not a button of this panel
        """
        try:
            return self._positions[symbol]
        except KeyError:
            raise ValueError(
                f"Symbol {symbol!r} is not on the {self.name} panel "
                f"(alphabet: {''.join(self.alphabet)})"
            ) from None

    def gap_position(self) -> GridPos:
        return self._gap

    def in_bounds(self, pos: GridPos) -> bool:
        rows, cols = self.shape
        return 0 <= pos.row < rows and 0 <= pos.col < cols

    def symbol_at(self, pos: GridPos) -> Optional[Symbol]:
        """Button under pos, or None for the gap and out-of-bounds cells."""
        if not self.in_bounds(pos) or pos == self._gap:
            return None
        return str(self._grid[pos.row, pos.col])

    def validate_sequence(self, symbols: Iterable[Symbol]) -> Tuple[Symbol, ...]:
        """
        Check every symbol belongs to this panel.

        Returns:
            The symbols as a tuple

        Raises:
            ValueError: On the first malformed symbol
        """
        checked = tuple(symbols)
        for index, symbol in enumerate(checked):
            if symbol not in self._positions:
                raise ValueError(
                    f"Malformed symbol {symbol!r} at index {index} for the {self.name} panel"
                )
        return checked


NUMERIC_PANEL = Panel("numeric", NUMERIC_ROWS)
DIRECTIONAL_PANEL = Panel("directional", DIRECTIONAL_ROWS)
