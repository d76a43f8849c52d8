#!/usr/bin/env python3
"""
Tests for CNF parsing, assignment reports, configuration and batch collection.

Run with pytest, or directly:
    python test_io.py
"""

import json
import sys
import tempfile
from pathlib import Path

import pytest
from omegaconf import OmegaConf
from omegaconf.errors import ValidationError

from dpll_sat import (
    CNFParseError,
    Clause,
    Environment,
    SolverConfig,
    check_assignment,
    collect_results,
    fmt_assignment_report,
    fmt_assignments,
    fmt_clause,
    load_cnf,
    load_config,
    neg,
    parse_cnf,
    pos,
    save_results,
    solve,
    write_assignment_report,
)

EXAMPLE_CNF = """\
c An example CNF
c
p cnf 3 3
1 -3 0
2 3 -1 0
-2 0
"""


def test_parse_cnf():
    formula = parse_cnf(EXAMPLE_CNF)
    assert len(formula) == 3
    assert formula.clauses[0].literals == (pos("1"), neg("3"))
    assert formula.clauses[1].literals == (pos("2"), pos("3"), neg("1"))
    assert formula.clauses[2].literals == (neg("2"),)
    assert formula.variables() == ["1", "3", "2"]


def test_parse_cnf_skips_blank_and_terminator_lines():
    text = "p cnf 2 1\n\n1 2 0\n%\n0\n"
    formula = parse_cnf(text)
    assert len(formula) == 1
    assert formula.clauses[0] == Clause.of(pos("1"), pos("2"))


def test_parse_cnf_without_trailing_zero():
    formula = parse_cnf("1 -2\n2")
    assert len(formula) == 2
    assert formula.clauses[0].literals == (pos("1"), neg("2"))


def test_parse_cnf_merges_duplicate_literals():
    formula = parse_cnf("1 1 -1 0")
    assert formula.clauses[0].size() == 2


def test_parse_cnf_rejects_bad_token():
    with pytest.raises(CNFParseError) as excinfo:
        parse_cnf("p cnf 2 2\n1 2 0\n1 x 0\n")
    assert excinfo.value.line_number == 3
    assert "'x'" in str(excinfo.value)


def test_load_cnf_and_solve():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "example.cnf"
        path.write_text(EXAMPLE_CNF)
        formula = load_cnf(path)

    result = solve(formula)
    assert result.satisfiable
    assert check_assignment(formula, result.environment)
    assert result.environment.lookup("2") is False


def test_fmt_clause_and_assignments():
    assert fmt_clause(Clause.of(pos("1"), neg("2"))) == "( + x 1 - x 2 )"
    assert fmt_clause(Clause(), "c 0") == "( ) : c 0"
    env = Environment({"10": True, "2": False})
    assert fmt_assignments(env) == "x 2 = False , x 10 = True"
    assert fmt_assignments(Environment()) == ""


def test_assignment_report_format():
    env = Environment({"10": True, "2": False, "b": True, "a": False})
    report = fmt_assignment_report("sat3Large1.cnf", env)
    assert report == (
        "File: sat3Large1.cnf\n"
        "Case:2 : FALSE\n"
        "Case:10 : TRUE\n"
        "Case:a : FALSE\n"
        "Case:b : TRUE\n"
    )


def test_assignment_report_with_non_ascii_digit_names():
    env = Environment({"²": True, "1": False, "10": True})
    report = fmt_assignment_report("f.cnf", env)
    assert report == (
        "File: f.cnf\n"
        "Case:1 : FALSE\n"
        "Case:10 : TRUE\n"
        "Case:² : TRUE\n"
    )


def test_write_assignment_report_overwrites():
    with tempfile.TemporaryDirectory() as tmp:
        out = Path(tmp) / "nested" / "BoolAssignment.txt"
        write_assignment_report(out, "first.cnf", Environment({"1": True}))
        write_assignment_report(out, "second.cnf", Environment({"1": False}))
        assert out.read_text() == "File: second.cnf\nCase:1 : FALSE\n"


def test_load_config_defaults():
    config = load_config()
    assert isinstance(config, SolverConfig)
    assert config == SolverConfig()


def test_load_config_overrides():
    config = load_config({"record_trace": True, "max_steps": 10})
    assert config.record_trace
    assert config.max_steps == 10
    assert config.complete_assignment

    config = load_config(OmegaConf.create({"default_value": True}))
    assert config.default_value


def test_load_config_from_yaml():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "solver.yaml"
        path.write_text("complete_assignment: false\nmax_steps: 3\n")
        config = load_config(str(path))
    assert not config.complete_assignment
    assert config.max_steps == 3


def test_load_config_rejects_bad_values():
    with pytest.raises(ValidationError):
        load_config({"max_steps": "many"})


def test_collect_and_save_results():
    data = collect_results(3, 6, count=20, verify=True, use_pysat_verification=False, seed=3)
    assert len(data["records"]) == 20
    assert data["n_sat"] + data["n_unsat"] == 20
    assert data["verification_failures"] == 0
    assert not data["pysat_checked"]

    with tempfile.TemporaryDirectory() as tmp:
        out_file = save_results(data, tmp, prefix="small_")
        assert out_file.name == "small_results.json"
        with open(out_file) as f:
            saved = json.load(f)
    assert saved["n_sat"] == data["n_sat"]


def main():
    """Run all tests."""
    print("=" * 50)
    print("Input/Output Tests")
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
