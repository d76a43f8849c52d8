"""
Clauses: disjunctions of distinct literals.

Clauses are immutable. Every operation that changes the literal set returns a
new clause. Literals keep their insertion order so that ``choose_literal`` is
repeatable across runs.
"""

from typing import Iterable, Iterator, Optional, Tuple

from .literal import Literal


class Clause:
    """
    A set of literals, one disjunctive constraint.

    A clause may hold both polarities of the same variable; such clauses are
    kept as they are. The empty clause is a contradiction and a clause with a
    single literal is a unit clause.
    """

    def __init__(self, literals: Iterable[Literal] = ()):
        ordered = []
        seen = set()
        for lit in literals:
            if lit not in seen:
                seen.add(lit)
                ordered.append(lit)
        self._literals: Tuple[Literal, ...] = tuple(ordered)
        self._members = frozenset(seen)

    @classmethod
    def of(cls, *literals: Literal) -> "Clause":
        return cls(literals)

    @property
    def literals(self) -> Tuple[Literal, ...]:
        return self._literals

    def add(self, literal: Literal) -> "Clause":
        """
        Return a clause with ``literal`` inserted.

        Args:
            literal: Literal to insert.

        Returns:
            A new clause, or this clause if the literal is already present.
        """
        if literal in self._members:
            return self
        return Clause(self._literals + (literal,))

    def size(self) -> int:
        return len(self._literals)

    def is_empty(self) -> bool:
        return not self._literals

    def is_unit(self) -> bool:
        return len(self._literals) == 1

    def choose_literal(self) -> Literal:
        """
        Pick the literal to branch on.

        Returns:
            The earliest-inserted literal.

        Raises:
            ValueError: If the clause is empty.
        """
        if not self._literals:
            raise ValueError("Cannot choose a literal from the empty clause")
        return self._literals[0]

    def reduce(self, literal: Literal) -> Optional["Clause"]:
        """
        Simplify the clause given that ``literal`` is true.

        Args:
            literal: A literal known to be true.

        Returns:
            None if the clause contains ``literal`` (it is satisfied and can be
            dropped), the clause without the negated literal if it contains
            that, or this clause unchanged otherwise.
        """
        if literal in self._members:
            return None
        negated = literal.negate()
        if negated in self._members:
            return Clause(lit for lit in self._literals if lit != negated)
        return self

    def __len__(self) -> int:
        return len(self._literals)

    def __iter__(self) -> Iterator[Literal]:
        return iter(self._literals)

    def __contains__(self, literal: object) -> bool:
        return literal in self._members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clause):
            return NotImplemented
        return self._members == other._members

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        return f"Clause({', '.join(str(lit) for lit in self._literals)})"
