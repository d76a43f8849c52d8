"""
CNF formulas and random formula generation.
"""

import random
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .clause import Clause
from .literal import Literal, Variable


# Empirically determined clause counts for balanced (phase transition) 3-SAT
BALANCED_CLAUSE_COUNTS = {
    3: 19, 4: 24, 5: 28, 6: 33, 7: 37, 8: 41, 9: 45, 10: 50,
    11: 54, 12: 58, 13: 63, 14: 67, 15: 71, 16: 76, 17: 79,
    18: 83, 19: 87, 20: 92
}


class Formula:
    """
    An ordered conjunction of clauses.

    Order carries no meaning for satisfiability but is kept so that clause
    selection during search is deterministic.
    """

    def __init__(self, clauses: Iterable[Clause] = ()):
        self._clauses: Tuple[Clause, ...] = tuple(clauses)

    @property
    def clauses(self) -> Tuple[Clause, ...]:
        return self._clauses

    def add_clause(self, clause: Clause) -> "Formula":
        """Return a new formula with ``clause`` appended."""
        return Formula(self._clauses + (clause,))

    def variables(self) -> List[Variable]:
        """Variables in order of first appearance."""
        seen: Dict[Variable, None] = {}
        for clause in self._clauses:
            for lit in clause:
                seen.setdefault(lit.variable, None)
        return list(seen)

    @classmethod
    def from_int_clauses(cls, clauses: Iterable[Sequence[int]]) -> "Formula":
        """
        Build a formula from DIMACS-style integer clauses.

        Args:
            clauses: Each clause is a sequence of non-zero integers; ``n`` is the
                positive literal of variable ``"n"`` and ``-n`` its negation.

        Returns:
            The corresponding Formula.
        """
        return cls(
            Clause(Literal(str(abs(value)), value > 0) for value in int_clause)
            for int_clause in clauses
        )

    def to_int_clauses(self) -> Tuple[List[List[int]], Dict[Variable, int]]:
        """
        Export as integer clauses.

        Returns:
            Tuple of (clauses, var2index) where variables are numbered from 1
            in order of first appearance.
        """
        var2index = {var: i + 1 for i, var in enumerate(self.variables())}
        int_clauses = [
            [var2index[lit.variable] if lit.positive else -var2index[lit.variable] for lit in clause]
            for clause in self._clauses
        ]
        return int_clauses, var2index

    def __len__(self) -> int:
        return len(self._clauses)

    def __iter__(self):
        return iter(self._clauses)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Formula):
            return NotImplemented
        return self._clauses == other._clauses

    def __repr__(self) -> str:
        return f"Formula({len(self._clauses)} clauses)"


def generate_random_formula(
    n_vars: int,
    clause_length: int = 3,
    variance: float = 0.1,
    n_clauses: Optional[int] = None,
    rng: Optional[random.Random] = None
) -> Formula:
    """
    Generate a random k-SAT formula near the phase transition.

    Args:
        n_vars: Number of variables (named "1" .. str(n_vars)).
        clause_length: Number of literals per clause (default 3 for 3-SAT).
        variance: Relative standard deviation in clause count (e.g., 0.1 = +/-10%).
        n_clauses: Fixed number of clauses. If None, uses phase transition estimate.
        rng: Random generator to draw from. Defaults to the module-level one.

    Returns:
        The generated Formula.
    """
    rng = rng or random
    if clause_length > n_vars:
        raise ValueError(f"clause_length {clause_length} exceeds n_vars {n_vars}")

    if n_clauses is None:
        base = BALANCED_CLAUSE_COUNTS.get(n_vars, int(n_vars * 4.26))
        delta = int(base * variance)
        n_clauses = rng.randint(base - delta, base + delta)

    var_range = range(1, n_vars + 1)

    clauses = []
    for _ in range(n_clauses):
        clause_vars = rng.sample(list(var_range), clause_length)
        clause = [var if rng.random() < 0.5 else -var for var in clause_vars]
        clauses.append(clause)

    return Formula.from_int_clauses(clauses)
