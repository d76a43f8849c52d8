#!/usr/bin/env python3
"""
Tests for the solve.py command-line flow.

The Hydra entry point is a thin wrapper around ``run``; these tests compose
the same configuration from configs/default.yaml and call ``run`` directly.

Run with pytest, or directly:
    python test_cli.py
"""

import sys
import tempfile
from pathlib import Path

import pytest
from omegaconf import OmegaConf

from solve import run

CONFIG_PATH = Path(__file__).parent / "configs" / "default.yaml"

SAT_CNF = """\
c satisfiable
p cnf 3 3
1 -3 0
2 3 -1 0
-2 0
"""

UNSAT_CNF = """\
p cnf 1 2
1 0
-1 0
"""


def make_config(tmp: str, text: str, **overrides):
    cnf_path = Path(tmp) / "problem.cnf"
    cnf_path.write_text(text)
    cfg = OmegaConf.load(CONFIG_PATH)
    cfg.input = cnf_path.name
    for key, value in overrides.items():
        OmegaConf.update(cfg, key, value)
    return cfg


def test_run_writes_report():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = make_config(tmp, SAT_CNF, output="out/BoolAssignment.txt")
        assert run(cfg, tmp) == "SAT"
        report = (Path(tmp) / "out" / "BoolAssignment.txt").read_text()

    assert report == (
        "File: problem.cnf\n"
        "Case:1 : TRUE\n"
        "Case:2 : FALSE\n"
        "Case:3 : TRUE\n"
    )


def test_run_unsat_writes_nothing():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = make_config(tmp, UNSAT_CNF)
        assert run(cfg, tmp) == "UNSAT"
        assert not (Path(tmp) / "BoolAssignment.txt").exists()


def test_run_skips_report_when_disabled():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = make_config(tmp, SAT_CNF, write_output=False)
        assert run(cfg, tmp) == "SAT"
        assert not (Path(tmp) / "BoolAssignment.txt").exists()


def test_run_with_trace_enabled():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = make_config(tmp, SAT_CNF, **{"solver.record_trace": True, "write_output": False})
        assert run(cfg, tmp) == "SAT"


def test_run_timeout_interrupts_search():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = make_config(tmp, SAT_CNF, timeout=0)
        assert run(cfg, tmp) == "UNKNOWN"
        assert not (Path(tmp) / "BoolAssignment.txt").exists()


def test_run_max_steps_interrupts_search():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = make_config(tmp, SAT_CNF, **{"solver.max_steps": 1})
        assert run(cfg, tmp) == "UNKNOWN"


def test_run_requires_input():
    cfg = OmegaConf.load(CONFIG_PATH)
    with pytest.raises(ValueError):
        run(cfg, ".")


def main():
    """Run all tests."""
    print("=" * 50)
    print("Command-Line Tests")
    print("=" * 50)

    tests = [obj for name, obj in sorted(globals().items()) if name.startswith("test_") and callable(obj)]
    failed = 0
    for test in tests:
        try:
            test()
            print(f"  {test.__name__}: PASS")
        except (Exception, pytest.fail.Exception) as e:
            failed += 1
            print(f"  {test.__name__}: FAIL {e}")

    print("=" * 50)
    print("ALL TESTS PASSED" if not failed else f"{failed} TESTS FAILED")
    return 0 if not failed else 1


if __name__ == "__main__":
    sys.exit(main())
