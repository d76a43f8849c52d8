"""
Persistent variable environments.

An Environment maps variables to truth values. It is never modified in place:
binding a variable returns a new Environment, so sibling search branches each
keep their own view.
"""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from .errors import VariableRebindError
from .literal import Literal, Variable


class Environment:
    """
    Immutable mapping from Variable to bool.

    Unset variables are simply absent. Extension copies the underlying dict,
    which keeps every earlier Environment valid and unchanged.
    """

    def __init__(self, bindings: Optional[Mapping[Variable, bool]] = None):
        self._bindings: Dict[Variable, bool] = dict(bindings) if bindings else {}

    def put(self, variable: Variable, value: bool) -> "Environment":
        """
        Return a new Environment with ``variable`` bound to ``value``.

        Args:
            variable: An unbound variable.
            value: Truth value to bind.

        Raises:
            VariableRebindError: If the variable is already bound.
        """
        if variable in self._bindings:
            raise VariableRebindError(variable, self._bindings[variable], value)
        extended = Environment()
        extended._bindings = dict(self._bindings)
        extended._bindings[variable] = bool(value)
        return extended

    def put_true(self, variable: Variable) -> "Environment":
        return self.put(variable, True)

    def put_false(self, variable: Variable) -> "Environment":
        return self.put(variable, False)

    def satisfy(self, literal: Literal) -> "Environment":
        """Bind the literal's variable so that the literal is true."""
        return self.put(literal.variable, literal.positive)

    def lookup(self, variable: Variable) -> Optional[bool]:
        """Bound value of ``variable``, or None if it is unset."""
        return self._bindings.get(variable)

    def items(self) -> Iterator[Tuple[Variable, bool]]:
        return iter(self._bindings.items())

    def as_dict(self) -> Mapping[Variable, bool]:
        """Read-only view of the bindings."""
        return MappingProxyType(self._bindings)

    def __contains__(self, variable: object) -> bool:
        return variable in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self._bindings == other._bindings

    def __repr__(self) -> str:
        inner = ", ".join(f"{var}->{'TRUE' if val else 'FALSE'}" for var, val in self._bindings.items())
        return f"Environment:[{inner}]"
