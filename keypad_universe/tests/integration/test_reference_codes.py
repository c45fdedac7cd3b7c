"""
End-to-end runs on the reference batch of five codes.

Depth 2: 126384. Depth 25: 154115708116294.
Also exercises the integration runner helpers (load, receipt, save).
"""

import json
import logging
import sys
from pathlib import Path

import pytest

from keypad_chain import ChainConfig, aggregate_with_receipt, build_driver, solve
from keypad_core.replay import replay_chain

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "integration_tests"))

from utils import build_receipt, load_codes, save_receipt, setup_logger  # noqa: E402


REFERENCE_CODES = ["029A", "980A", "179A", "456A", "379A"]


class TestReferenceBatch:

    def test_both_depths(self):
        assert solve(REFERENCE_CODES) == (126384, 154115708116294)

    def test_depth_25_exceeds_depth_2_per_code(self):
        shallow = build_driver(2)
        deep = build_driver(25)
        for code in REFERENCE_CODES:
            assert deep.minimal_presses(code) > shallow.minimal_presses(code)
            shallow.reset()
            deep.reset()

    def test_depth_25_caches_stay_small(self):
        receipt = aggregate_with_receipt(REFERENCE_CODES, 25)
        assert receipt.chain.depth == 25
        assert max(receipt.chain.cache_sizes) <= 25

    @pytest.mark.parametrize("code", REFERENCE_CODES)
    def test_materialized_presses_replay(self, code):
        driver = build_driver(2)
        presses = driver.materialize(code)
        assert replay_chain(presses, 2) == code


class TestRunnerHelpers:

    def test_load_codes(self, tmp_path):
        source = tmp_path / "codes.txt"
        source.write_text("029A\n\n  980A  \n179A\n")
        assert load_codes(source) == ["029A", "980A", "179A"]

    def test_load_codes_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_codes(tmp_path / "missing.txt")

    def test_receipt_roundtrip(self, tmp_path):
        aggregates = [aggregate_with_receipt(REFERENCE_CODES, depth) for depth in ChainConfig().depths]
        receipt = build_receipt("codes.txt", aggregates)
        assert receipt["status"] == "PASS"

        out = tmp_path / "receipts" / "codes.json"
        save_receipt(receipt, out)
        saved = json.loads(out.read_text())

        assert [d["total"] for d in saved["depths"]] == [126384, 154115708116294]
        assert saved["depths"][0]["chain"]["depth"] == 2

    def test_receipt_failure_status(self):
        receipt = build_receipt("codes.txt", [aggregate_with_receipt(["A"], 2)])
        assert receipt["status"] == "FAIL"


class TestRunLogger:

    def _close(self, *names):
        for name in names:
            for handler in logging.getLogger(name).handlers:
                handler.close()
            logging.getLogger(name).handlers = []
            logging.getLogger(name).setLevel(logging.NOTSET)
            logging.getLogger(name).propagate = True

    def test_library_records_reach_run_log(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        setup_logger("run_test", log_file)
        try:
            aggregate_with_receipt(["029A"], 2)
        finally:
            self._close("run_test", "keypad_chain")

        text = log_file.read_text()
        assert "DEBUG keypad_chain.aggregate: depth=2 code=029A presses=68" in text

    @pytest.mark.parametrize("verbose, level", [(False, logging.INFO), (True, logging.DEBUG)])
    def test_console_level_follows_verbose(self, tmp_path, verbose, level):
        logger = setup_logger("run_test", tmp_path / "run.log", verbose=verbose)
        try:
            console = [h for h in logger.handlers if not isinstance(h, logging.FileHandler)]
            assert [h.level for h in console] == [level]
            assert logging.getLogger("keypad_chain").handlers == logger.handlers
        finally:
            self._close("run_test", "keypad_chain")

    def test_repeated_setup_does_not_duplicate(self, tmp_path):
        setup_logger("run_test", tmp_path / "run.log")
        logger = setup_logger("run_test", tmp_path / "run.log")
        try:
            assert len(logger.handlers) == 2
        finally:
            self._close("run_test", "keypad_chain")
