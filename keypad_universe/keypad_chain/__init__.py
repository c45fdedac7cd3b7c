"""
Controller chain and cost aggregation.

Modules:
- controller.py: ControllerChain / ControllerNode with per-node memoization
- numeric.py: NumericPanelDriver on top of the chain
- aggregate.py: code weights, per-depth totals
- config.py: ChainConfig (depths to run)
"""

from .aggregate import aggregate_cost, aggregate_with_receipt, line_score, numeric_weight, solve
from .config import ChainConfig
from .controller import ChainReceipt, ControllerChain, ControllerNode
from .numeric import NumericPanelDriver, build_driver

__all__ = [
    "ChainConfig",
    "ChainReceipt",
    "ControllerChain",
    "ControllerNode",
    "NumericPanelDriver",
    "aggregate_cost",
    "aggregate_with_receipt",
    "build_driver",
    "line_score",
    "numeric_weight",
    "solve",
]
