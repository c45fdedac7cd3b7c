"""
Manhattan-optimal move enumeration on a panel.

For a (start, end) button pair every minimal route uses exactly |drow|
vertical and |dcol| horizontal moves; the enumerator produces every distinct
ordering of that multiset which keeps the arm off the gap, each followed by a
single ACTIVATE press.

No ordering is preferred over another here. Which route is cheapest depends
on the controller driving this panel and is decided by the chain.
"""

from itertools import permutations
from typing import List, Sequence, Tuple

from .panels import Panel
from .types import ACTIVATE, DOWN, LEFT, RIGHT, UP, GridPos, MoveSequence, Symbol


def required_moves(start: GridPos, end: GridPos) -> Tuple[Symbol, ...]:
    """
    Multiset of primitive moves between two positions (vertical first).

    Examples:
        >>> required_moves(GridPos(0, 2), GridPos(1, 0))
        ('v', '<', '<')
    """
    drow = end.row - start.row
    dcol = end.col - start.col

    vertical = (DOWN if drow > 0 else UP,) * abs(drow)
    horizontal = (RIGHT if dcol > 0 else LEFT,) * abs(dcol)
    return vertical + horizontal


def visits_gap(panel: Panel, start: GridPos, moves: Sequence[Symbol]) -> bool:
    """True if walking moves from start ever puts the arm over the gap."""
    gap = panel.gap_position()
    pos = start
    for move in moves:
        pos = pos.step(move)
        if pos == gap:
            return True
    return False


def manhattan(panel: Panel, start: Symbol, end: Symbol) -> int:
    a = panel.position_of(start)
    b = panel.position_of(end)
    return abs(a.row - b.row) + abs(a.col - b.col)


def enumerate_moves(panel: Panel, start: Symbol, end: Symbol) -> List[MoveSequence]:
    """
    All minimal move sequences from start to end, each ending in ACTIVATE.

    Args:
        panel: Panel the arm moves over
        start: Button the arm currently rests on
        end: Button to press

    Returns:
        Distinct sequences in sorted order. start == end yields only
        (ACTIVATE,), a repeated press with no movement.

    Raises:
        ValueError: If start or end is not a button of panel
        AssertionError: If start or end resolves to the gap

    Examples:
        >>> enumerate_moves(DIRECTIONAL_PANEL, "A", "<")
        [('<', 'v', '<', 'A'), ('v', '<', '<', 'A')]
    """
    start_pos = panel.position_of(start)
    end_pos = panel.position_of(end)

    gap = panel.gap_position()
    assert start_pos != gap and end_pos != gap, \
        f"Gap cell {gap} cannot be a start or end on the {panel.name} panel"

    if start_pos == end_pos:
        return [(ACTIVATE,)]

    moves = required_moves(start_pos, end_pos)

    candidates = set()
    for ordering in set(permutations(moves)):
        if visits_gap(panel, start_pos, ordering):
            continue
        candidates.add(ordering + (ACTIVATE,))

    # Manhattan routes always exist: the gap sits in a corner.
    assert candidates, f"No route from {start!r} to {end!r} on the {panel.name} panel"

    return sorted(candidates)
