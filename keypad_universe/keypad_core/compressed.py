"""
Compressed press paths.

A concrete optimal press sequence for a deep chain grows multiplicatively
with depth. Its cost however only depends on which minimal legs it is made
of and how often each one recurs, so a path is stored as a multiset

    {leg: count}     with   cost = Σ len(leg) · count

where every leg is one symbol-to-symbol transition ending in ACTIVATE.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .types import ACTIVATE, MoveSequence, Symbol


def check_leg(leg: Sequence[Symbol]) -> None:
    """
    Assert the leg shape: non-empty, exactly one ACTIVATE, in last position.

    Raises:
        AssertionError: If the leg is malformed
    """
    assert len(leg) > 0, "Empty leg"
    assert leg[-1] == ACTIVATE, f"Leg {''.join(leg)!r} must end with {ACTIVATE!r}"
    assert ACTIVATE not in leg[:-1], \
        f"Leg {''.join(leg)!r} has {ACTIVATE!r} before its final press"


@dataclass
class CompressedPath:
    """
    Multiset of legs with occurrence counts.

    Instances held in a controller cache are shared; callers combine them
    with absorb() on a fresh path rather than mutating a cached one.
    """
    legs: Counter = field(default_factory=Counter)

    @classmethod
    def from_leg(cls, leg: Sequence[Symbol], count: int = 1) -> "CompressedPath":
        check_leg(leg)
        return cls(Counter({tuple(leg): count}))

    @classmethod
    def single_press(cls) -> "CompressedPath":
        """Path of one repeated press: {(A,): 1}, cost 1."""
        return cls.from_leg((ACTIVATE,))

    @property
    def cost(self) -> int:
        return sum(len(leg) * count for leg, count in self.legs.items())

    @property
    def num_legs(self) -> int:
        """Number of leg occurrences (each one is a single press at the level above)."""
        return sum(self.legs.values())

    def absorb(self, other: "CompressedPath") -> "CompressedPath":
        """Add other's counts into self (in place) and return self."""
        self.legs.update(other.legs)
        return self

    def legs_sorted(self) -> List[Tuple[MoveSequence, int]]:
        """Entries by descending count, then leg order (stable for receipts)."""
        return sorted(self.legs.items(), key=lambda item: (-item[1], item[0]))

    def __repr__(self) -> str:
        body = ", ".join(f"{''.join(leg)}×{count}" for leg, count in self.legs_sorted())
        return f"CompressedPath(cost={self.cost}, {{{body}}})"
