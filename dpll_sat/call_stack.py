"""
Explicit call stack for the depth-first search.

The solver keeps pending search states here instead of on the interpreter's
call stack, so formulas with more variables than the recursion limit can be
solved.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .clause import Clause
from .environment import Environment
from .errors import SearchStackError
from .literal import Literal


class BranchKind(Enum):
    """How a frame was entered from its parent."""
    ROOT = "root"
    UNIT = "unit"
    DECIDE = "decide"
    FLIP = "flip"


@dataclass
class SearchFrame:
    """
    A pending search state: the parent's state plus one literal to make true.

    Attributes:
        clauses: The parent's remaining clauses, reduced by every assignment in env.
        env: The parent's assignment.
        literal: Literal made true on entering this frame (None for the root).
        kind: Whether the literal was forced, a first decision or the flipped one.
        depth: Number of assignments along the path.
    """
    clauses: Tuple[Clause, ...]
    env: Environment
    literal: Optional[Literal] = None
    kind: BranchKind = BranchKind.ROOT
    depth: int = 0


class CallStack:
    """LIFO stack of SearchFrame records."""

    def __init__(self):
        self.frames: List[SearchFrame] = []

    def push(self, frame: SearchFrame) -> None:
        self.frames.append(frame)

    def pop(self) -> SearchFrame:
        """
        Pop the top frame from the call stack.

        Returns:
            The popped SearchFrame.

        Raises:
            SearchStackError: If the stack is empty.
        """
        if not self.frames:
            raise SearchStackError("Cannot pop from empty call stack")
        return self.frames.pop()

    def depth(self) -> int:
        return len(self.frames)

    def is_empty(self) -> bool:
        return len(self.frames) == 0

    def __repr__(self) -> str:
        if not self.frames:
            return "CallStack(empty)"
        path = " -> ".join(str(f.literal) for f in self.frames if f.literal is not None)
        return f"CallStack({len(self.frames)} frames: {path})"
