"""
keypad_core: Leaf primitives for the keypad relay chain.

Provides:
- types: Symbol, GridPos, MoveSequence and the move constants
- panels: numeric and directional panel geometry
- moves: Manhattan-optimal, gap-avoiding move enumeration
- compressed: CompressedPath (leg multiset with counts)
- replay: simulate presses through panels
"""

__all__ = [
    "compressed",
    "moves",
    "panels",
    "replay",
    "types",
]
