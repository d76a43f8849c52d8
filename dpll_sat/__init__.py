"""
DPLL SAT Solver Package

This package provides a baseline DPLL solver for CNF formulas over named
variables, together with a CNF reader, assignment reports, search-trace
verification and batch benchmarking over random formulas.
"""

from .literal import Literal, Variable, pos, neg
from .clause import Clause
from .formula import Formula, generate_random_formula
from .environment import Environment
from .solver import DPLLSolver, SolveResult, SearchStats, solve, smallest_clause, substitute
from .call_stack import CallStack, SearchFrame, BranchKind
from .config import SolverConfig, load_config
from .parser import parse_cnf, load_cnf
from .format import (
    fmt_var, fmt_lit, fmt_clause, fmt_clause_list, fmt_assignments,
    fmt_assignment_report, write_assignment_report
)
from .verifier import (
    TraceVerifier, verify_solver_trace, check_assignment,
    evaluate_clause, brute_force_satisfiable
)
from .collector import collect_results, save_results
from .errors import VariableRebindError, CNFParseError, SearchInterrupted, SearchStackError

__all__ = [
    # Core types
    'Literal',
    'Variable',
    'pos',
    'neg',
    'Clause',
    'Formula',
    'Environment',

    # Solver
    'DPLLSolver',
    'SolveResult',
    'SearchStats',
    'solve',
    'smallest_clause',
    'substitute',
    'CallStack',
    'SearchFrame',
    'BranchKind',

    # Configuration
    'SolverConfig',
    'load_config',

    # Formula generation and input
    'generate_random_formula',
    'parse_cnf',
    'load_cnf',

    # Formatting
    'fmt_var',
    'fmt_lit',
    'fmt_clause',
    'fmt_clause_list',
    'fmt_assignments',
    'fmt_assignment_report',
    'write_assignment_report',

    # Verification
    'TraceVerifier',
    'verify_solver_trace',
    'check_assignment',
    'evaluate_clause',
    'brute_force_satisfiable',

    # Batch collection
    'collect_results',
    'save_results',

    # Errors
    'VariableRebindError',
    'CNFParseError',
    'SearchInterrupted',
    'SearchStackError',
]
