"""
Directional controller chain with compressed memoization.

A chain of depth N holds N directional controller nodes indexed 0..N-1:

    human → node 0 → node 1 → ... → node N-1 → (numeric panel driver)

Node i is operated by node i-1 (its parent, by index); node 0 is operated
directly by the human, so a sequence pressed there costs its own length.

Key principles:
1. Each node caches, per (start, end) button pair, the cheapest way to move
   its arm from start to end and press end, as a CompressedPath of human legs
2. A candidate route at level i costs what level i-1 needs to type it; every
   route ends with ACTIVATE, so the parent's arm is back on ACTIVATE after
   each one and its cost depends only on the route itself
3. Each (start, end) pair is resolved at most once per node instance, which
   keeps depth 25 tractable
4. Probing is read-only with respect to cursors; only advance() moves one

Which of several equally cheap candidates wins is irrelevant downstream: only
the cost of a cache entry is ever consumed by the level above.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from keypad_core.compressed import CompressedPath
from keypad_core.moves import enumerate_moves
from keypad_core.panels import DIRECTIONAL_PANEL, Panel
from keypad_core.types import ACTIVATE, CacheKey, MoveSequence, Symbol


# =============================================================================
# Types
# =============================================================================


@dataclass
class CacheEntry:
    """
    Resolved transition at one node.

    choice: winning route on this node's panel (ending in ACTIVATE)
    path: human legs needed to type choice through the nodes below
    """
    choice: MoveSequence
    path: CompressedPath


@dataclass
class ControllerNode:
    """One directional controller: arm cursor plus its private cache."""
    level: int
    cursor: Symbol = ACTIVATE
    cache: Dict[CacheKey, CacheEntry] = field(default_factory=dict)
    hits: int = 0
    misses: int = 0

    def reset(self) -> None:
        """Put the arm back on ACTIVATE; the cache stays valid."""
        self.cursor = ACTIVATE


@dataclass
class ChainReceipt:
    """
    Cache statistics per level (index 0 = human-operated node).

    misses counts resolved (start, end) pairs, so misses[i] == cache_sizes[i]
    for a chain that was never cleared.
    """
    depth: int
    cache_sizes: List[int]
    hits: List[int]
    misses: List[int]


# =============================================================================
# Chain
# =============================================================================


class ControllerChain:
    """
    Owned, index-linked chain of directional controller nodes.

    Args:
        depth: Number of directional controllers between the human and the
            numeric panel driver (0 means the human drives it directly)
        panel: Panel every node's arm moves over

    Raises:
        ValueError: If depth is not a non-negative integer
    """

    def __init__(self, depth: int, panel: Panel = DIRECTIONAL_PANEL):
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
            raise ValueError(f"Chain depth must be a non-negative integer, got {depth!r}")

        self.panel = panel
        self.nodes: List[ControllerNode] = [ControllerNode(level) for level in range(depth)]

    def __repr__(self) -> str:
        return f"ControllerChain(depth={self.depth})"

    @property
    def depth(self) -> int:
        return len(self.nodes)

    @property
    def top_level(self) -> Optional[int]:
        """Index of the node the numeric driver talks to (None at depth 0)."""
        return self.depth - 1 if self.nodes else None

    def _node(self, level: int) -> ControllerNode:
        assert 0 <= level < self.depth, f"Level {level} outside chain of depth {self.depth}"
        return self.nodes[level]

    # -------------------------------------------------------------------------
    # Cost engine
    # -------------------------------------------------------------------------

    def cost_of_transition(self, level: int, start: Symbol, end: Symbol) -> CompressedPath:
        """
        Cheapest human legs to move node `level` from start to end and press end.

        Algorithm:
            1. start == end → {(A,): 1}: press again, no movement
            2. Cached → return it
            3. Enumerate minimal routes on this node's panel
            4. Level 0: a route costs its own length
               Level > 0: a route costs the walk of that route on level - 1
            5. Keep the cheapest (first in enumeration order on ties), cache it

        Args:
            level: Node index (0 = human-operated)
            start: Button the node's arm rests on
            end: Button to press

        Returns:
            Cached CompressedPath (shared, do not mutate)

        Raises:
            ValueError: If start or end is not on the directional panel
        """
        return self._resolve(level, start, end).path

    def _resolve(self, level: int, start: Symbol, end: Symbol) -> CacheEntry:
        node = self._node(level)
        key = (start, end)

        entry = node.cache.get(key)
        if entry is not None:
            node.hits += 1
            return entry

        node.misses += 1

        if start == end:
            self.panel.position_of(start)
            entry = CacheEntry(choice=(ACTIVATE,), path=CompressedPath.single_press())
        else:
            for candidate in enumerate_moves(self.panel, start, end):
                if level == 0:
                    path = CompressedPath.from_leg(candidate)
                else:
                    path = self.walk(level - 1, candidate, start=ACTIVATE)

                if entry is None or path.cost < entry.path.cost:
                    entry = CacheEntry(choice=candidate, path=path)

        node.cache[key] = entry
        return entry

    def walk(
        self, level: int, sequence: Iterable[Symbol], start: Optional[Symbol] = None
    ) -> CompressedPath:
        """
        Legs needed for node `level` to press every symbol of sequence.

        Starts from start (default: the node's cursor) and chains through the
        sequence without moving the cursor. The result is a fresh path owned
        by the caller.
        """
        node = self._node(level)
        sequence = tuple(sequence)
        assert sequence and sequence[-1] == ACTIVATE, \
            f"Walked sequence {''.join(sequence)!r} must leave the arm on {ACTIVATE!r}"

        total = CompressedPath()
        state = node.cursor if start is None else start
        for symbol in sequence:
            total.absorb(self.cost_of_transition(level, state, symbol))
            state = symbol
        return total

    # -------------------------------------------------------------------------
    # Top-level driving
    # -------------------------------------------------------------------------

    def advance(self, symbol: Symbol) -> int:
        """
        Press symbol with the top node and leave its arm there.

        Returns:
            Human presses spent

        Raises:
            ValueError: If the chain has no node, or symbol is not directional
        """
        level = self.top_level
        if level is None:
            raise ValueError("A depth-0 chain has no controller to advance")

        node = self.nodes[level]
        cost = self.cost_of_transition(level, node.cursor, symbol).cost
        node.cursor = symbol
        return cost

    def press_sequence(self, sequence: Iterable[Symbol]) -> int:
        """Advance through a whole directional target; returns total human presses."""
        symbols = self.panel.validate_sequence(sequence)
        return sum(self.advance(symbol) for symbol in symbols)

    def reset(self) -> None:
        for node in self.nodes:
            node.reset()

    # -------------------------------------------------------------------------
    # Concrete sequences
    # -------------------------------------------------------------------------

    def materialize_walk(
        self, level: int, sequence: Iterable[Symbol], start: Optional[Symbol] = None
    ) -> List[Symbol]:
        """
        One concrete human press sequence realizing walk(level, sequence).

        Expands the cached choice of every transition down to level 0. The
        length equals walk(level, sequence).cost and grows quickly with level.
        """
        node = self._node(level)
        presses: List[Symbol] = []
        state = node.cursor if start is None else start
        for symbol in sequence:
            choice = self._resolve(level, state, symbol).choice
            if level == 0:
                presses.extend(choice)
            else:
                presses.extend(self.materialize_walk(level - 1, choice, start=ACTIVATE))
            state = symbol
        return presses

    def receipt(self) -> ChainReceipt:
        return ChainReceipt(
            depth=self.depth,
            cache_sizes=[len(node.cache) for node in self.nodes],
            hits=[node.hits for node in self.nodes],
            misses=[node.misses for node in self.nodes],
        )
