"""
Batch solving and result collection over random formulas.
"""

import json
import logging
import random
import time
from pathlib import Path
from typing import Dict, List, Optional

from tqdm import tqdm

from .config import SolverConfig
from .formula import Formula, generate_random_formula
from .solver import solve
from .verifier import check_assignment, verify_solver_trace

logger = logging.getLogger(__name__)


def _pysat_satisfiable(formula: Formula) -> bool:
    from pysat.solvers import Glucose3

    int_clauses, _ = formula.to_int_clauses()
    g = Glucose3()
    try:
        for clause in int_clauses:
            g.add_clause(clause)
        return g.solve()
    finally:
        g.delete()


def collect_results(
    var_min: int,
    var_max: int,
    count: int,
    verify: bool = True,
    use_pysat_verification: bool = True,
    seed: Optional[int] = None
) -> Dict:
    """
    Solve random formulas and collect per-formula statistics.

    Args:
        var_min: Minimum number of variables.
        var_max: Maximum number of variables.
        count: Number of formulas to solve.
        verify: Whether to record and replay search traces.
        use_pysat_verification: Whether to cross-check verdicts against PySAT.
        seed: Seed for formula generation.

    Returns:
        Dictionary with per-formula records and summary counters.

    Raises:
        AssertionError: If a returned assignment does not satisfy its formula,
            or the verdict disagrees with PySAT.
    """
    rng = random.Random(seed)
    config = SolverConfig(record_trace=verify)

    pysat_available = False
    if use_pysat_verification:
        try:
            import pysat.solvers  # noqa: F401
            pysat_available = True
        except ImportError:
            logger.warning("PySAT not available, skipping external verification")

    records: List[Dict] = []
    verification_failures = 0
    n_sat = 0

    for _ in tqdm(range(count), desc="Solving formulas"):
        n_vars = rng.randint(var_min, var_max)
        formula = generate_random_formula(n_vars, rng=rng)

        start = time.time()
        result = solve(formula, config)
        elapsed = time.time() - start

        if result.satisfiable:
            n_sat += 1
            assert check_assignment(formula, result.environment), "Invalid solution"

        if pysat_available:
            assert _pysat_satisfiable(formula) == result.satisfiable, "Result mismatch with PySAT"

        if verify and not verify_solver_trace(result):
            verification_failures += 1
            logger.warning("Trace verification failed (total: %d)", verification_failures)

        records.append({
            "n_vars": n_vars,
            "n_clauses": len(formula),
            "satisfiable": result.satisfiable,
            "time_ms": elapsed * 1000.0,
            "decisions": result.stats.decisions,
            "propagations": result.stats.propagations,
            "conflicts": result.stats.conflicts,
            "backtracks": result.stats.backtracks,
            "max_depth": result.stats.max_depth,
        })

    if verify:
        logger.info("Verification complete. Total failures: %d", verification_failures)

    return {
        "records": records,
        "n_sat": n_sat,
        "n_unsat": count - n_sat,
        "verification_failures": verification_failures,
        "pysat_checked": pysat_available,
    }


def save_results(data: Dict, output_dir: str, prefix: str = "") -> Path:
    """
    Save collected results to ``<output_dir>/<prefix>results.json``.

    Args:
        data: Dictionary from collect_results().
        output_dir: Output directory path.
        prefix: Prefix for the filename.

    Returns:
        Path of the written file.
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    out_file = output_path / f"{prefix}results.json"
    with open(out_file, 'w') as f:
        json.dump(data, f, indent=2)

    logger.info("Saved %d records to %s", len(data["records"]), out_file)
    return out_file
