"""
DPLL SAT solver with optional search traces.

The solver combines unit propagation with two-way branching and chronological
backtracking. Recursion is replaced by an explicit CallStack; the order in
which search states are visited is the depth-first order of the recursive
procedure:

- if no clauses remain, the current environment is a solution
- an empty clause means the current path fails
- a unit clause forces its literal, without branching
- otherwise the chosen literal's variable is tried True, then False

When tracing is enabled, each event is recorded as one line:
- ASSIGN [ x v = True ] AT d BY kind   for every assignment at depth d
- CONFLICT AT d                        for a path ending in an empty clause
- BACKTRACK TO d                       before the False branch of a decision at depth d
- SAT / UNSAT                          once, at the end
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from .call_stack import BranchKind, CallStack, SearchFrame
from .clause import Clause
from .config import SolverConfig
from .environment import Environment
from .errors import SearchInterrupted
from .format import fmt_assignments, fmt_clause_list, fmt_var
from .formula import Formula
from .literal import Literal, neg, pos

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters collected during one search."""
    steps: int = 0
    decisions: int = 0
    propagations: int = 0
    conflicts: int = 0
    backtracks: int = 0
    max_depth: int = 0


@dataclass
class SolveResult:
    """
    Outcome of a solve.

    ``environment`` is None exactly when the formula is unsatisfiable. A
    satisfiable formula without variables yields an empty Environment.
    """
    environment: Optional[Environment]
    stats: SearchStats = field(default_factory=SearchStats)
    trace: List[str] = field(default_factory=list)
    search_environment: Optional[Environment] = None

    @property
    def satisfiable(self) -> bool:
        return self.environment is not None

    def __bool__(self) -> bool:
        return self.satisfiable


def smallest_clause(clauses: Tuple[Clause, ...]) -> Optional[Clause]:
    """
    Find the first clause of minimum size.

    Args:
        clauses: A non-empty clause collection.

    Returns:
        The first minimum-size clause, or None as soon as an empty clause is seen.
    """
    smallest = clauses[0]
    for clause in clauses:
        if clause.is_empty():
            return None
        if clause.size() < smallest.size():
            smallest = clause
    return smallest


def substitute(clauses: Iterable[Clause], literal: Literal) -> Tuple[Clause, ...]:
    """Reduce every clause by a literal set to true, dropping satisfied clauses."""
    reduced = []
    for clause in clauses:
        new_clause = clause.reduce(literal)
        if new_clause is not None:
            reduced.append(new_clause)
    return tuple(reduced)


class DPLLSolver:
    """
    DPLL SAT solver that can record a search trace.

    Every pending branch is a SearchFrame holding the parent's clauses and
    environment plus the literal to make true. The literal is applied when the
    frame is popped, so the False branch of a decision costs nothing until the
    True branch has failed.
    """

    def __init__(
        self,
        formula: Formula,
        config: Optional[SolverConfig] = None,
        should_stop: Optional[Callable[[], bool]] = None
    ):
        self.formula = formula
        self.config = config or SolverConfig()
        self.should_stop = should_stop

        self.stats = SearchStats()
        self.trace: List[str] = []

    def solve(self) -> SolveResult:
        """
        Solve the formula from an empty environment.

        Returns:
            A SolveResult; its environment binds every variable of the formula
            when ``complete_assignment`` is set.

        Raises:
            SearchInterrupted: If the stop check fires.
        """
        found = self.search(self.formula.clauses, Environment())

        if found is None:
            logger.debug("UNSAT after %d steps (%d decisions, %d conflicts)",
                         self.stats.steps, self.stats.decisions, self.stats.conflicts)
            return SolveResult(None, self.stats, self.trace)

        env = found
        if self.config.complete_assignment:
            env = self._complete(found)
        logger.debug("SAT after %d steps (%d decisions, %d propagations, depth %d)",
                     self.stats.steps, self.stats.decisions,
                     self.stats.propagations, self.stats.max_depth)
        return SolveResult(env, self.stats, self.trace, search_environment=found)

    def search(self, clauses: Iterable[Clause], env: Environment) -> Optional[Environment]:
        """
        Extend ``env`` to an environment satisfying ``clauses``.

        Args:
            clauses: Clauses already reduced by every binding in ``env``.
            env: Partial assignment to start from.

        Returns:
            A satisfying extension of ``env``, or None if there is none.
        """
        stack = CallStack()
        stack.push(SearchFrame(tuple(clauses), env))

        while not stack.is_empty():
            frame = stack.pop()
            self._check_stop()
            self.stats.steps += 1

            clauses, env = self._enter(frame)
            depth = frame.depth
            self.stats.max_depth = max(self.stats.max_depth, depth)

            if not clauses:
                self._record("SAT")
                return env

            smallest = smallest_clause(clauses)
            if smallest is None:
                self.stats.conflicts += 1
                self._record(f"CONFLICT AT {depth}")
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Conflict at depth %d under [ %s ] with clauses [ %s ]",
                                 depth, fmt_assignments(env), fmt_clause_list(clauses))
                continue

            lit = smallest.choose_literal()

            if smallest.is_unit():
                stack.push(SearchFrame(clauses, env, lit, BranchKind.UNIT, depth + 1))
            else:
                self.stats.decisions += 1
                var = lit.variable
                stack.push(SearchFrame(clauses, env, neg(var), BranchKind.FLIP, depth + 1))
                stack.push(SearchFrame(clauses, env, pos(var), BranchKind.DECIDE, depth + 1))

        self._record("UNSAT")
        return None

    def _enter(self, frame: SearchFrame) -> Tuple[Tuple[Clause, ...], Environment]:
        """Apply the frame's literal to its parent state."""
        if frame.literal is None:
            return frame.clauses, frame.env

        lit = frame.literal
        if frame.kind is BranchKind.UNIT:
            self.stats.propagations += 1
        elif frame.kind is BranchKind.FLIP:
            self.stats.backtracks += 1
            self._record(f"BACKTRACK TO {frame.depth - 1}")

        env = frame.env.satisfy(lit)
        self._record(
            f"ASSIGN [ {fmt_var(lit.variable)} = {lit.positive} ] "
            f"AT {frame.depth} BY {frame.kind.value}"
        )
        return substitute(frame.clauses, lit), env

    def _check_stop(self) -> None:
        max_steps = self.config.max_steps
        if max_steps is not None and self.stats.steps >= max_steps:
            raise SearchInterrupted(self.stats.steps, "max_steps reached")
        if self.should_stop is not None and self.should_stop():
            raise SearchInterrupted(self.stats.steps, "stop requested")

    def _complete(self, env: Environment) -> Environment:
        """Bind every formula variable the search left unset to the default value."""
        bindings = dict(env.as_dict())
        for var in self.formula.variables():
            if var not in bindings:
                bindings[var] = self.config.default_value
        return Environment(bindings)

    def _record(self, line: str) -> None:
        if self.config.record_trace:
            self.trace.append(line)


def solve(
    formula: Formula,
    config: Optional[SolverConfig] = None,
    should_stop: Optional[Callable[[], bool]] = None
) -> SolveResult:
    """
    Decide satisfiability of ``formula``.

    Args:
        formula: Formula to solve.
        config: Solver options; defaults to SolverConfig().
        should_stop: Checked once per search step; returning True interrupts.

    Returns:
        SolveResult with a satisfying environment, or with None if unsatisfiable.
    """
    return DPLLSolver(formula, config, should_stop).solve()
