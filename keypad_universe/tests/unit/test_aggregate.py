"""
Unit tests for keypad_chain/aggregate.py and keypad_chain/config.py.

Acceptance criteria:
- weight = decimal value of the digit characters
- score = presses × weight, summed per depth on a fresh chain
- A code without digits drops the whole total (None), never a partial sum
- Malformed symbols raise
"""

import logging

import pytest

from keypad_chain.aggregate import (
    aggregate_cost,
    aggregate_with_receipt,
    line_score,
    numeric_weight,
    solve,
)
from keypad_chain.config import DEFAULT_DEPTHS, ChainConfig
from keypad_chain.controller import ControllerChain
from keypad_chain.numeric import NumericPanelDriver, build_driver
from keypad_core.panels import Panel
from keypad_core.types import ACTIVATE


REFERENCE_CODES = ["029A", "980A", "179A", "456A", "379A"]


class TestNumericWeight:

    @pytest.mark.parametrize(
        "code, expected",
        [("029A", 29), ("980A", 980), ("000A", 0), ("7A", 7), ("A", None), ("", None)],
    )
    def test_weight(self, code, expected):
        assert numeric_weight(code) == expected


class TestLineScore:

    def test_029A(self):
        assert line_score(build_driver(2), "029A") == 68 * 29

    def test_resets_driver(self):
        driver = build_driver(2)
        line_score(driver, "179A")
        assert driver.cursor == ACTIVATE

    def test_lines_independent(self):
        """Scoring in sequence equals scoring each on its own driver."""
        shared = build_driver(2)
        in_sequence = [line_score(shared, code) for code in REFERENCE_CODES]
        separately = [line_score(build_driver(2), code) for code in REFERENCE_CODES]
        assert in_sequence == separately

    def test_no_weight(self):
        assert line_score(build_driver(2), "A") is None

    def test_malformed(self):
        with pytest.raises(ValueError, match="Malformed"):
            line_score(build_driver(2), "02xA")


class TestAggregate:

    def test_depth_two_total(self):
        assert aggregate_cost(REFERENCE_CODES, 2) == 126384

    def test_empty_batch(self):
        assert aggregate_cost([], 2) == 0

    def test_missing_weight_drops_total(self):
        assert aggregate_cost(["029A", "A", "980A"], 2) is None

    def test_missing_weight_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="keypad_chain.aggregate"):
            aggregate_cost(["A"], 2)
        assert "no numeric weight" in caplog.text

    def test_receipt(self):
        receipt = aggregate_with_receipt(REFERENCE_CODES, 2)
        assert receipt.total == 126384
        assert receipt.failed_code is None
        assert [line.code for line in receipt.lines] == REFERENCE_CODES
        assert [line.presses for line in receipt.lines] == [68, 60, 68, 64, 64]
        assert receipt.chain.depth == 2
        assert sum(line.score for line in receipt.lines) == receipt.total

    def test_receipt_failure(self):
        receipt = aggregate_with_receipt(["029A", "A"], 2)
        assert receipt.total is None
        assert receipt.failed_code == "A"
        assert len(receipt.lines) == 1

    def test_accepts_generator(self):
        assert aggregate_cost((code for code in REFERENCE_CODES), 2) == 126384


class TestSolve:

    def test_single_depth(self):
        assert solve(REFERENCE_CODES, ChainConfig(depths=(2,))) == (126384,)

    def test_order_follows_config(self):
        a, b = solve(REFERENCE_CODES, ChainConfig(depths=(3, 2)))
        assert b == 126384
        assert a > b

    def test_generator_consumed_once(self):
        totals = solve((code for code in REFERENCE_CODES), ChainConfig(depths=(2, 2)))
        assert totals == (126384, 126384)

    def test_none_on_missing_weight(self):
        assert solve(["029A", "A"], ChainConfig(depths=(0, 2))) is None


class TestChainConfig:

    def test_defaults(self):
        assert ChainConfig().depths == DEFAULT_DEPTHS == (2, 25)

    def test_from_args(self):
        assert ChainConfig.from_args([2, 25]) == ChainConfig()

    @pytest.mark.parametrize("depths", [(), (-1,), (2, "3"), (1.5,)])
    def test_invalid(self, depths):
        with pytest.raises(ValueError):
            ChainConfig(depths=depths)

    def test_frozen(self):
        config = ChainConfig()
        with pytest.raises(Exception):
            config.depths = (1,)


class TestDriverPanel:
    """Codes are checked against the driver's own panel."""

    def test_custom_panel_alphabet(self):
        panel = Panel("mini", ("1B", ".A"))
        driver = NumericPanelDriver(ControllerChain(1), panel=panel)
        expected = NumericPanelDriver(ControllerChain(1), panel=panel).minimal_presses("1BA")
        assert line_score(driver, "1BA") == expected * 1

    def test_custom_panel_rejects_numeric_digits(self):
        panel = Panel("mini", ("1B", ".A"))
        driver = NumericPanelDriver(ControllerChain(1), panel=panel)
        with pytest.raises(ValueError, match="mini"):
            line_score(driver, "29A")
