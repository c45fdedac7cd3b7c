"""
Cost aggregation over a batch of numeric codes.

Score of one code = minimal human presses × numeric weight, where the weight
is the decimal value of the code's digit characters ("029A" → 29).

A code without digits has no weight. That is the only recoverable
condition: the batch then yields None rather than a partial total. Symbols
outside the numeric panel stay fatal (ValueError).
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .config import ChainConfig
from .controller import ChainReceipt
from .numeric import NumericPanelDriver, build_driver

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


@dataclass
class LineResult:
    code: str
    presses: int
    weight: int
    score: int


@dataclass
class AggregateReceipt:
    """Per-depth run summary (total is None when a code had no weight)."""
    depth: int
    total: Optional[int]
    lines: List[LineResult] = field(default_factory=list)
    chain: Optional[ChainReceipt] = None
    failed_code: Optional[str] = None


def numeric_weight(code: str) -> Optional[int]:
    """
    Decimal value of the digit characters of code.

    Examples:
        >>> numeric_weight("029A")
        29
        >>> numeric_weight("A") is None
        True
    """
    digits = "".join(ch for ch in code if ch in DIGITS)
    if not digits:
        return None
    return int(digits)


def line_score(driver: NumericPanelDriver, code: str) -> Optional[int]:
    """
    presses × weight for one code, resetting the driver afterwards.

    Returns:
        The score, or None if code has no numeric weight

    Raises:
        ValueError: If code holds a symbol outside the numeric panel
    """
    result = _score_line(driver, code)
    return None if result is None else result.score


def _score_line(driver: NumericPanelDriver, code: str) -> Optional[LineResult]:
    driver.panel.validate_sequence(code)

    weight = numeric_weight(code)
    if weight is None:
        return None

    presses = driver.minimal_presses(code)
    driver.reset()
    return LineResult(code=code, presses=presses, weight=weight, score=presses * weight)


def aggregate_with_receipt(codes: Iterable[str], depth: int) -> AggregateReceipt:
    """
    Sum of line scores at one chain depth, on a freshly built chain.

    Stops at the first code without a weight and reports it in the receipt
    (total None).
    """
    driver = build_driver(depth)
    receipt = AggregateReceipt(depth=depth, total=None)

    total = 0
    for code in codes:
        result = _score_line(driver, code)
        if result is None:
            logger.warning(f"Code {code!r} has no numeric weight; depth {depth} total dropped")
            receipt.failed_code = code
            receipt.chain = driver.chain.receipt()
            return receipt

        logger.debug(f"depth={depth} code={code} presses={result.presses} score={result.score}")
        receipt.lines.append(result)
        total += result.score

    receipt.total = total
    receipt.chain = driver.chain.receipt()
    return receipt


def aggregate_cost(codes: Iterable[str], depth: int) -> Optional[int]:
    return aggregate_with_receipt(codes, depth).total


def solve(codes: Iterable[str], config: ChainConfig = ChainConfig()) -> Optional[Tuple[int, ...]]:
    """
    One aggregate per configured depth (default depths 2 and 25).

    Each depth gets its own chain; caches are never shared across depths.

    Returns:
        Totals in config.depths order, or None if any code has no weight
    """
    codes = list(codes)
    totals = []
    for depth in config.depths:
        total = aggregate_cost(codes, depth)
        if total is None:
            return None
        totals.append(total)
    return tuple(totals)
