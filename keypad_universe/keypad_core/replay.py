"""
Replay concrete presses through panels.

Used to check a materialized press sequence: replaying the human's presses
through every directional panel of the chain and finally through the
numeric panel must reproduce the target code.
"""

from typing import Iterable

from .panels import DIRECTIONAL_PANEL, NUMERIC_PANEL, Panel
from .types import ACTIVATE, MOVE_DELTAS, Symbol


def replay_presses(panel: Panel, presses: Iterable[Symbol], start: Symbol = ACTIVATE) -> str:
    """
    Simulate an arm over panel driven by directional presses.

    Args:
        panel: Panel the arm hovers over
        presses: Directional presses ("^", "v", "<", ">", "A")
        start: Button the arm rests on initially

    Returns:
        The buttons of panel pressed, in order

    Raises:
        ValueError: If a press is not directional, or the arm leaves the
            panel or stops over the gap
    """
    pos = panel.position_of(start)
    pressed = []

    for index, press in enumerate(presses):
        if press == ACTIVATE:
            pressed.append(panel.symbol_at(pos))
            continue
        if press not in MOVE_DELTAS:
            raise ValueError(f"Malformed press {press!r} at index {index}")

        pos = pos.step(press)
        if panel.symbol_at(pos) is None:
            raise ValueError(
                f"Arm over the {panel.name} panel left the buttons at press {index} ({pos})"
            )

    return "".join(pressed)


def replay_chain(presses: Iterable[Symbol], depth: int) -> str:
    """Replay through depth directional panels, then the numeric panel."""
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")

    current = "".join(presses)
    for _ in range(depth):
        current = replay_presses(DIRECTIONAL_PANEL, current)
    return replay_presses(NUMERIC_PANEL, current)
