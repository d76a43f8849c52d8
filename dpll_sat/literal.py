"""
Literals over named boolean variables.

A variable is identified by its name (a plain string). A literal pairs a
variable with a polarity; the polarity is an explicit boolean field rather
than a separate positive/negative class.
"""

from dataclasses import dataclass

Variable = str


@dataclass(frozen=True)
class Literal:
    """
    A variable together with a polarity.

    Attributes:
        variable: Name of the underlying variable.
        positive: True for the variable itself, False for its negation.
    """
    variable: Variable
    positive: bool = True

    @classmethod
    def make(cls, variable: Variable, positive: bool = True) -> "Literal":
        return cls(variable, positive)

    def negate(self) -> "Literal":
        """Return the literal with the opposite polarity over the same variable."""
        return Literal(self.variable, not self.positive)

    def satisfied_by(self, value: bool) -> bool:
        """Whether binding the variable to ``value`` makes this literal true."""
        return value == self.positive

    def __invert__(self) -> "Literal":
        return self.negate()

    def __str__(self) -> str:
        return self.variable if self.positive else f"~{self.variable}"


def pos(variable: Variable) -> Literal:
    """Positive literal for ``variable``."""
    return Literal(variable, True)


def neg(variable: Variable) -> Literal:
    """Negative literal for ``variable``."""
    return Literal(variable, False)
