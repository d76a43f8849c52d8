"""
Solve a CNF file and write the satisfying assignment.

Usage:
    python solve.py input=benchmarks/sat3Large1.cnf
    python solve.py input=problem.cnf output=out/assignment.txt timeout=30
    python solve.py input=problem.cnf solver.record_trace=true logging.level=DEBUG
"""

import logging
import time
from pathlib import Path

import hydra
from omegaconf import DictConfig

from dpll_sat import (
    SearchInterrupted,
    load_cnf,
    load_config,
    solve,
    verify_solver_trace,
    write_assignment_report,
)

logger = logging.getLogger(__name__)


def resolve_path(path: str, orig_cwd: str) -> str:
    """Resolve a potentially relative path against the original working directory."""
    p = Path(path)
    if not p.is_absolute():
        p = Path(orig_cwd) / p
    return str(p)


def run(cfg: DictConfig, orig_cwd: str) -> str:
    """
    Parse, solve and report one CNF file.

    Args:
        cfg: Composed configuration (see configs/default.yaml).
        orig_cwd: Directory that relative paths are resolved against.

    Returns:
        "SAT", "UNSAT" or "UNKNOWN" when the search was interrupted.
    """
    input_path = cfg.get("input", None)
    if input_path is None:
        raise ValueError("Must specify input path: python solve.py input=path/to/file.cnf")
    input_path = resolve_path(input_path, orig_cwd)

    solver_config = load_config(cfg.solver)

    print("Parsing file and creating Formula instance...")
    formula = load_cnf(input_path)

    should_stop = None
    if cfg.timeout is not None:
        deadline = time.time() + float(cfg.timeout)
        should_stop = lambda: time.time() >= deadline  # noqa: E731

    print("SAT solver starts!!!")
    started = time.time()
    try:
        result = solve(formula, solver_config, should_stop=should_stop)
    except SearchInterrupted as e:
        logger.error("%s", e)
        print("Unknown (search interrupted)")
        return "UNKNOWN"
    elapsed = time.time() - started
    print(f"Time taken: {elapsed * 1000.0:.3f} ms")

    stats = result.stats
    logger.info("Decisions: %d, propagations: %d, conflicts: %d, backtracks: %d, max depth: %d",
                stats.decisions, stats.propagations, stats.conflicts,
                stats.backtracks, stats.max_depth)

    if solver_config.record_trace:
        for line in result.trace:
            logger.debug("%s", line)
        if not verify_solver_trace(result):
            logger.warning("Search trace does not match the result")

    if not result.satisfiable:
        print("Unsatisfiable")
        return "UNSAT"

    print("Satisfiable")
    if cfg.write_output:
        print("Writing File...")
        output_path = resolve_path(cfg.output, orig_cwd)
        write_assignment_report(output_path, Path(input_path).name, result.environment)
        print(f"File written: {output_path}")
    return "SAT"


@hydra.main(version_base=None, config_path="configs", config_name="default")
def main(cfg: DictConfig):
    # Ensure logging shows on console (Hydra can redirect it)
    logging.basicConfig(level=cfg.logging.level, format="%(levelname)s: %(message)s", force=True)
    run(cfg, hydra.utils.get_original_cwd())


if __name__ == "__main__":
    main()
