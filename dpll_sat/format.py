"""
Formatting utilities for search traces and assignment reports.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .clause import Clause
from .environment import Environment
from .literal import Literal, Variable


def fmt_var(var: Variable) -> str:
    """Format variable: '5' -> 'x 5'"""
    return f"x {var}"


def fmt_lit(lit: Literal) -> str:
    """Format literal: ~5 -> '- x 5', 5 -> '+ x 5'"""
    sign = '+' if lit.positive else '-'
    return f"{sign} {fmt_var(lit.variable)}"


def fmt_clause(clause: Clause, clause_id: Optional[str] = None) -> str:
    """
    Format clause: [1, ~2, 3] -> '( + x 1 - x 2 + x 3 )'
    With ID: '( + x 1 - x 2 + x 3 ) : c 0'
    """
    lits = ' '.join(fmt_lit(lit) for lit in clause)
    result = f"( {lits} )" if lits else "( )"
    if clause_id is not None:
        result += f" : {clause_id}"
    return result


def fmt_clause_list(clauses: Iterable[Clause]) -> str:
    """Format list of clauses separated by commas."""
    return ' , '.join(fmt_clause(clause) for clause in clauses)


def var_sort_key(var: Variable) -> Tuple[int, int, str]:
    """Order ASCII-digit names numerically, ahead of all other names."""
    if var.isascii() and var.isdigit():
        return (0, int(var), var)
    return (1, 0, var)


def _sorted_items(env: Environment) -> List[Tuple[Variable, bool]]:
    return sorted(env.items(), key=lambda item: var_sort_key(item[0]))


def fmt_assignments(env: Environment) -> str:
    """Format assignments: {1: True, 2: False} -> 'x 1 = True , x 2 = False'"""
    if not len(env):
        return ''
    parts = [f"{fmt_var(var)} = {value}" for var, value in _sorted_items(env)]
    return ' , '.join(parts)


def fmt_assignment_report(filename: str, env: Environment) -> str:
    """
    Render a satisfying assignment as a report.

    The first line names the solved file; each following line is
    ``Case:<var> : <TRUE|FALSE>``.
    """
    lines = [f"File: {filename}"]
    for var, value in _sorted_items(env):
        lines.append(f"Case:{var} : {'TRUE' if value else 'FALSE'}")
    return '\n'.join(lines) + '\n'


def write_assignment_report(path: Union[str, Path], filename: str, env: Environment) -> Path:
    """Write the report for ``env`` to ``path``, replacing any existing file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(fmt_assignment_report(filename, env))
    return path
