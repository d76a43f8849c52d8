"""
Independent checks for solver results.

Assignments are checked by evaluating the input formula directly, verdicts
by brute-force enumeration, and search traces by replaying their ASSIGN lines
to reconstruct the path the solver ended on.
"""

import itertools
import re
from typing import Dict, Optional, Tuple

from .clause import Clause
from .environment import Environment
from .formula import Formula
from .literal import Variable

ASSIGN_PATTERN = re.compile(r'ASSIGN \[ x (.+?) = (True|False) \] AT (\d+)')

# Upper bound for exhaustive enumeration.
MAX_BRUTE_FORCE_VARS = 20


def evaluate_clause(clause: Clause, env: Environment) -> Optional[bool]:
    """
    Evaluate a clause under a (possibly partial) environment.

    Returns:
        True if some literal is true, False if every literal is bound and
        false, None if the value is still open.
    """
    undecided = False
    for lit in clause:
        value = env.lookup(lit.variable)
        if value is None:
            undecided = True
        elif lit.satisfied_by(value):
            return True
    return None if undecided else False


def check_assignment(formula: Formula, env: Environment) -> bool:
    """Whether every clause of ``formula`` evaluates to True under ``env``."""
    return all(evaluate_clause(clause, env) is True for clause in formula.clauses)


def brute_force_satisfiable(formula: Formula) -> Optional[Environment]:
    """
    Search all assignments for one satisfying ``formula``.

    Returns:
        The first satisfying Environment in enumeration order, or None.

    Raises:
        ValueError: If the formula has more than MAX_BRUTE_FORCE_VARS variables.
    """
    variables = formula.variables()
    if len(variables) > MAX_BRUTE_FORCE_VARS:
        raise ValueError(f"Too many variables for brute force: {len(variables)}")

    for values in itertools.product((False, True), repeat=len(variables)):
        env = Environment(dict(zip(variables, values)))
        if check_assignment(formula, env):
            return env
    return None


class TraceVerifier:
    """
    Replays a search trace and compares it with the search result.

    Each ASSIGN at depth d discards every replayed assignment at depth d or
    deeper, then records its own. After a SAT line the replayed path must equal
    the environment found by the search.
    """

    def __init__(self, trace):
        self.trace = list(trace)

    def replay(self) -> Tuple[Dict[Variable, bool], Optional[str]]:
        """
        Reconstruct the final path.

        Returns:
            Tuple of (assignments, outcome) where outcome is "SAT", "UNSAT" or
            None if the trace has no final line.
        """
        path: Dict[int, Tuple[Variable, bool]] = {}
        outcome = None

        for line in self.trace:
            match = ASSIGN_PATTERN.match(line)
            if match:
                var = match.group(1)
                value = match.group(2) == 'True'
                depth = int(match.group(3))
                path = {d: binding for d, binding in path.items() if d < depth}
                path[depth] = (var, value)
            elif line in ("SAT", "UNSAT"):
                outcome = line

        assignments = dict(binding for _, binding in sorted(path.items()))
        return assignments, outcome

    def verify(self, search_environment: Optional[Environment]) -> bool:
        """Whether the replayed trace matches ``search_environment`` (None for UNSAT)."""
        assignments, outcome = self.replay()
        if search_environment is None:
            return outcome == "UNSAT"
        if outcome != "SAT":
            return False
        return assignments == dict(search_environment.as_dict())


def verify_solver_trace(result) -> bool:
    """
    Verify the trace carried by a SolveResult.

    Args:
        result: SolveResult from a solve with ``record_trace`` enabled.

    Returns:
        True if the trace is consistent with the result, False otherwise.
    """
    verifier = TraceVerifier(result.trace)
    return verifier.verify(result.search_environment)
