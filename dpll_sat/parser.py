"""
CNF reader.

Reads the line-oriented DIMACS-style format: comment lines start with ``c``,
the problem line with ``p``, and every other non-blank line is one clause of
whitespace-separated signed integers. ``n`` names the positive literal of
variable ``"n"`` and ``-n`` its negation; ``0`` tokens are ignored.

A line holding no literal at all (only ``0`` tokens) adds no clause, so the
``%`` / ``0`` trailer of SATLIB files parses. Reading such a line as an empty
clause would make every such file unsatisfiable.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

from .clause import Clause
from .errors import CNFParseError
from .formula import Formula
from .literal import Literal

logger = logging.getLogger(__name__)

# First tokens of lines that carry no clause. "%" ends SATLIB benchmark files.
SKIP_PREFIXES = {"c", "p", "%"}


def parse_clause_line(line: str, line_number: int = -1) -> Clause:
    """
    Parse one clause line.

    Args:
        line: Whitespace-separated signed integers.
        line_number: Position in the input, used for error messages.

    Returns:
        The clause; empty if the line held only ``0`` tokens.

    Raises:
        CNFParseError: If a token is not an integer.
    """
    clause = Clause()
    for token in line.split():
        try:
            value = int(token)
        except ValueError:
            raise CNFParseError(line, line_number, f"{repr(token)} is not an integer literal") from None
        if value == 0:
            continue
        clause = clause.add(Literal(str(abs(value)), value > 0))
    return clause


def parse_lines(lines: Iterable[str]) -> Formula:
    clauses = []
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens or tokens[0] in SKIP_PREFIXES:
            continue
        clause = parse_clause_line(line, line_number)
        if clause.is_empty():
            skipped += 1
            continue
        clauses.append(clause)
    if skipped:
        logger.debug("Skipped %d lines without literals", skipped)
    return Formula(clauses)


def parse_cnf(text: str) -> Formula:
    """Parse CNF text into a Formula."""
    return parse_lines(text.splitlines())


def load_cnf(path: Union[str, Path]) -> Formula:
    """
    Read a CNF file.

    Args:
        path: Path to the CNF file.

    Returns:
        The parsed Formula.

    Raises:
        CNFParseError: If a clause line is malformed.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        formula = parse_lines(f)
    logger.info("Parsed %s: %d clauses over %d variables",
                path.name, len(formula), len(formula.variables()))
    return formula
