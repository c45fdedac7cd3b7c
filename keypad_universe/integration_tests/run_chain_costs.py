#!/usr/bin/env python3
"""
Chain cost run: score every code of an input file at each configured depth.

For each depth a fresh controller chain is built, every code is scored as
minimal presses × numeric weight, and the sum is reported together with the
chain's cache statistics.

Usage:
    python run_chain_costs.py --input codes.txt
    python run_chain_costs.py --input codes.txt --depths 2 25 --receipt out.json
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from keypad_chain.aggregate import aggregate_with_receipt
from keypad_chain.config import DEFAULT_DEPTHS, ChainConfig

from utils import build_receipt, load_codes, save_receipt, setup_logger


def main() -> int:
    parser = argparse.ArgumentParser(description="Keypad chain cost run")
    parser.add_argument("--input", type=Path, required=True, help="File with one code per line")
    parser.add_argument("--depths", type=int, nargs="+", default=list(DEFAULT_DEPTHS),
                        help="Chain depths to aggregate over")
    parser.add_argument("--receipt", type=Path, default=None, help="Where to write the JSON receipt")
    parser.add_argument("--verbose", action="store_true", help="Show per-code debug records on the console")
    args = parser.parse_args()

    log_dir = Path(__file__).parent / "logs"
    logger = setup_logger("chain_costs", log_dir / "chain_costs.log", verbose=args.verbose)

    try:
        config = ChainConfig.from_args(args.depths)
    except ValueError as e:
        parser.error(str(e))

    codes = load_codes(args.input)

    logger.info("=" * 80)
    logger.info("Keypad chain cost run")
    logger.info(f"Input: {args.input} ({len(codes)} codes)")
    logger.info(f"Depths: {list(config.depths)}")
    logger.info("=" * 80)

    aggregates = []
    error = None
    for depth in config.depths:
        try:
            aggregate = aggregate_with_receipt(codes, depth)
        except ValueError as e:
            logger.error(f"Depth {depth}: {e}")
            error = str(e)
            break

        aggregates.append(aggregate)
        for line in aggregate.lines:
            logger.info(f"  depth {depth}: {line.code} -> {line.presses} presses × {line.weight} = {line.score}")

        if aggregate.total is None:
            logger.error(f"Depth {depth}: code {aggregate.failed_code!r} has no numeric weight")
        else:
            logger.info(f"Depth {depth}: total = {aggregate.total}")
        logger.info(f"Depth {depth}: cache sizes per level = {aggregate.chain.cache_sizes}")

    receipt = build_receipt(args.input.name, aggregates, error=error)
    receipt_file = args.receipt or Path(__file__).parent / "receipts" / f"{args.input.stem}.json"
    save_receipt(receipt, receipt_file)

    logger.info("=" * 80)
    logger.info(f"Status: {receipt['status']}. Receipt saved to: {receipt_file}")
    logger.info("=" * 80)

    return 0 if receipt["status"] == "PASS" else 1


if __name__ == "__main__":
    sys.exit(main())
