#!/usr/bin/env python3
"""
Benchmark the DPLL solver on random 3-SAT formulas.

Every satisfying assignment is checked against its formula; verdicts are
cross-checked with PySAT when it is installed and search traces are replayed
unless --no-verify is given.

Usage:
    python benchmark.py              # Full benchmark
    python benchmark.py --test       # Quick test with 100 formulas
"""

import argparse
import logging
from pathlib import Path

from dpll_sat import (
    SolverConfig,
    collect_results,
    generate_random_formula,
    save_results,
    solve,
    verify_solver_trace,
)


def main():
    parser = argparse.ArgumentParser(description="Benchmark the DPLL solver on random formulas")
    parser.add_argument(
        "--test",
        action="store_true",
        help="Quick test mode with 100 small formulas"
    )
    parser.add_argument(
        "--output",
        type=str,
        default="output",
        help="Output directory (default: output)"
    )
    parser.add_argument(
        "--count",
        type=int,
        default=1000,
        help="Formulas per variable range"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for formula generation"
    )
    parser.add_argument(
        "--no-verify",
        action="store_true",
        help="Skip trace verification"
    )
    parser.add_argument(
        "--no-pysat",
        action="store_true",
        help="Skip PySAT verification"
    )

    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    if args.test:
        print("=== TEST MODE ===")
        run_test(verify=not args.no_verify)
        return

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    for label, var_min, var_max in (("small", 5, 15), ("large", 16, 25)):
        print(f"=== SOLVING {label.upper()} FORMULAS ({var_min}-{var_max} variables) ===")
        data = collect_results(
            var_min=var_min,
            var_max=var_max,
            count=args.count,
            verify=not args.no_verify,
            use_pysat_verification=not args.no_pysat,
            seed=args.seed
        )

        records = data["records"]
        total_ms = sum(r["time_ms"] for r in records)
        print(f"\nSolved {len(records)} formulas: {data['n_sat']} SAT, {data['n_unsat']} UNSAT")
        print(f"Total time: {total_ms:.1f} ms, mean {total_ms / max(len(records), 1):.3f} ms")
        print(f"Mean decisions: {sum(r['decisions'] for r in records) / max(len(records), 1):.1f}")

        save_results(data, output_dir, prefix=f"{label}_")

    print(f"\n=== BENCHMARK COMPLETE ===")
    print(f"Output directory: {output_dir}")


def run_test(verify: bool = True):
    """Run a quick test with a few formulas."""
    print("Testing solver with 100 random formulas...")

    sat_count = 0
    verify_count = 0
    config = SolverConfig(record_trace=verify)

    for i in range(100):
        n_vars = 5 + (i % 10)  # 5-14 variables
        formula = generate_random_formula(n_vars)

        result = solve(formula, config)
        if result.satisfiable:
            sat_count += 1

        if verify:
            if verify_solver_trace(result):
                verify_count += 1
            else:
                print(f"  Formula {i}: Verification FAILED")

    print(f"\nSolver: {sat_count}/100 formulas satisfiable")
    if verify:
        print(f"Verification: {verify_count}/100 traces valid")

    print("\n=== EXAMPLE TRACE ===")
    formula = generate_random_formula(5)
    result = solve(formula, SolverConfig(record_trace=True))
    for line in result.trace[:10]:
        print(f"  {line}")
    if len(result.trace) > 10:
        print(f"  ... ({len(result.trace) - 10} more lines)")


if __name__ == "__main__":
    main()
