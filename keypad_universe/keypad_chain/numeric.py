"""
Numeric panel driver.

The numeric panel sits above the top controller of the chain and is never
wrapped by another layer. For each target button it tries every minimal
route on the numeric panel and asks the top controller what typing that
route costs in human presses.
"""

from typing import Dict, Iterable, Optional, Tuple

from keypad_core.moves import enumerate_moves
from keypad_core.panels import NUMERIC_PANEL, Panel
from keypad_core.types import ACTIVATE, CacheKey, MoveSequence, Symbol

from .controller import ControllerChain


class NumericPanelDriver:
    """
    Top-level consumer of a ControllerChain.

    Every numeric route is priced from the top node resting on ACTIVATE,
    whatever its live cursor is: routes end with ACTIVATE, so that is where
    the arm sits between presses. Cached costs therefore never depend on
    chain.advance() calls made elsewhere.

    Args:
        chain: Controller chain operating the numeric arm
        panel: Target panel (the numeric panel)
    """

    def __init__(self, chain: ControllerChain, panel: Panel = NUMERIC_PANEL):
        self.chain = chain
        self.panel = panel
        self.cursor: Symbol = ACTIVATE
        self.cache: Dict[CacheKey, Tuple[int, MoveSequence]] = {}

    def __repr__(self) -> str:
        return f"NumericPanelDriver(depth={self.chain.depth}, cursor={self.cursor!r})"

    def _best(self, start: Symbol, end: Symbol) -> Tuple[int, MoveSequence]:
        key = (start, end)
        if key in self.cache:
            return self.cache[key]

        top = self.chain.top_level
        best: Optional[Tuple[int, MoveSequence]] = None
        for candidate in enumerate_moves(self.panel, start, end):
            if top is None:
                cost = len(candidate)
            else:
                cost = self.chain.walk(top, candidate, start=ACTIVATE).cost
            if best is None or cost < best[0]:
                best = (cost, candidate)

        self.cache[key] = best
        return best

    def press(self, symbol: Symbol) -> int:
        """Move the numeric arm to symbol and press it; returns human presses."""
        cost, _ = self._best(self.cursor, symbol)
        self.cursor = symbol
        return cost

    def minimal_presses(self, target: Iterable[Symbol]) -> int:
        """
        Fewest human presses that make the numeric panel type target.

        Starts from the current cursor and leaves it on the last symbol;
        call reset() before an independent target.

        Raises:
            ValueError: If target holds a symbol outside the numeric panel
        """
        symbols = self.panel.validate_sequence(target)
        return sum(self.press(symbol) for symbol in symbols)

    def reset(self) -> None:
        self.cursor = ACTIVATE

    def materialize(self, target: Iterable[Symbol], limit: Optional[int] = None) -> str:
        """
        One concrete optimal human press sequence for target.

        Does not move the cursor.

        Args:
            target: Numeric panel symbols to type
            limit: Refuse to build sequences longer than this

        Raises:
            ValueError: On malformed symbols, or if the optimal length exceeds limit
        """
        symbols = self.panel.validate_sequence(target)

        steps = []
        state = self.cursor
        for symbol in symbols:
            steps.append(self._best(state, symbol))
            state = symbol

        total = sum(cost for cost, _ in steps)
        if limit is not None and total > limit:
            raise ValueError(f"Optimal sequence has {total} presses, above limit {limit}")

        top = self.chain.top_level
        presses = []
        for _, choice in steps:
            if top is None:
                presses.extend(choice)
            else:
                presses.extend(self.chain.materialize_walk(top, choice, start=ACTIVATE))
        return "".join(presses)


def build_driver(depth: int) -> NumericPanelDriver:
    """Fresh chain of the given depth wrapped in a numeric driver."""
    return NumericPanelDriver(ControllerChain(depth))
