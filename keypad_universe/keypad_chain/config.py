"""
Run configuration for the cost aggregator.

The reference scenario scores every code at chain depth 2 and depth 25.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

DEFAULT_DEPTHS: Tuple[int, ...] = (2, 25)


@dataclass(frozen=True)
class ChainConfig:
    """
    Chain depths to aggregate over, one independent chain each.

    Raises:
        ValueError: If depths is empty or holds a negative / non-integer value
    """
    depths: Tuple[int, ...] = DEFAULT_DEPTHS

    def __post_init__(self):
        if not self.depths:
            raise ValueError("ChainConfig needs at least one depth")
        for depth in self.depths:
            if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
                raise ValueError(f"Invalid chain depth {depth!r}; must be an integer >= 0")

    @classmethod
    def from_args(cls, depths: Iterable[int]) -> "ChainConfig":
        return cls(depths=tuple(depths))
