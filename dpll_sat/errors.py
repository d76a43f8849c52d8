"""
Custom exceptions for the DPLL solver.
"""

from typing import Optional


class VariableRebindError(Exception):
    """Raised when an environment is asked to bind a variable that is already bound."""

    def __init__(self, variable: str, old: bool, new: bool):
        self.variable = variable
        self.old = old
        self.new = new
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Variable {repr(self.variable)} is already bound:\n"
        msg += f"  Bound to:     {self.old}\n"
        msg += f"  Rebinding to: {self.new}"
        return msg


class CNFParseError(Exception):
    """Raised when a CNF line cannot be turned into a clause."""

    def __init__(self, line: str, line_number: int = -1, reason: str = ""):
        self.line = line
        self.line_number = line_number
        self.reason = reason
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Malformed CNF line {self.line_number}: {repr(self.line)}"
        if self.reason:
            msg += f"\n  Reason: {self.reason}"
        return msg


class SearchInterrupted(Exception):
    """Raised when the cooperative stop check fires during search."""

    def __init__(self, steps: int, reason: Optional[str] = None):
        self.steps = steps
        self.reason = reason
        msg = f"Search interrupted after {steps} steps"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class SearchStackError(Exception):
    """Raised when search stack operations fail."""

    def __init__(self, message: str):
        super().__init__(message)
