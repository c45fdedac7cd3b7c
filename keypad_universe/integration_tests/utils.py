"""
Utility functions for keypad chain integration runs.

Provides:
- Code loading from plain-text input files
- Receipt generation and saving
- Logging setup
"""

import json
import logging
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from keypad_chain.aggregate import AggregateReceipt


def load_codes(path: Path) -> List[str]:
    """
    Load numeric codes, one per line.

    Surrounding whitespace is stripped and blank lines are skipped; the codes
    themselves are not validated here.

    Raises:
        FileNotFoundError: If the input file doesn't exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    with open(path, "r") as f:
        return [line.strip() for line in f if line.strip()]


def setup_logger(
    name: str,
    log_file: Path,
    verbose: bool = False,
    library_loggers: Tuple[str, ...] = ("keypad_chain",),
) -> logging.Logger:
    """
    Setup the run logger and route the chain library's own records to it.

    The file always receives DEBUG records (per-code scores from
    keypad_chain.aggregate included); the console shows INFO, or DEBUG with
    verbose. Records carry their logger name so library lines stand apart
    from run lines.

    Args:
        name: Run logger name
        log_file: Path to log file (truncated)
        verbose: Echo DEBUG records on the console
        library_loggers: Package loggers sharing the run's handlers

    Returns:
        Configured run logger
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    for logger_name in (name,) + tuple(library_loggers):
        target = logging.getLogger(logger_name)
        target.setLevel(logging.DEBUG)
        # Re-running in one process must not duplicate output
        target.handlers = [file_handler, console_handler]
        target.propagate = False

    return logging.getLogger(name)


def build_receipt(
    source: str,
    aggregates: List[AggregateReceipt],
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a receipt dictionary for one run.

    Args:
        source: Input file name
        aggregates: One AggregateReceipt per configured depth
        error: Error message if the run failed

    Returns:
        Receipt dictionary (status "PASS" when every depth produced a total)
    """
    passed = error is None and all(a.total is not None for a in aggregates)
    receipt = {
        "source": source,
        "timestamp": datetime.now().isoformat(),
        "status": "PASS" if passed else "FAIL",
        "depths": [asdict(a) for a in aggregates],
    }

    if error is not None:
        receipt["error"] = error

    return receipt


def save_receipt(receipt: Dict[str, Any], output_file: Path) -> None:
    """Save receipt to a JSON file, creating parent directories."""
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, "w") as f:
        json.dump(receipt, f, indent=2)
