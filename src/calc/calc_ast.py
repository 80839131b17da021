"""Calculator expression tree.

Every node is an immutable dataclass that owns its children exclusively, so a
parsed expression is always a strict tree.  Nodes evaluate themselves; there is
no separate evaluation pass.

Each node also records how many source tokens it spans.  The width is fixed
when the node is built, from the already-built children, so reading it never
walks the tree.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

from calc.calc_token import CalcOperator


@dataclass(frozen=True)
class CalcASTNode(ABC):
    """Abstract base class for all calculator expression tree nodes."""
    _width: int = field(init=False, repr=False, compare=False)

    @abstractmethod
    def evaluate(self) -> float:
        """Evaluate this subtree to a floating point value."""

    def consumed_tokens(self) -> int:
        """Return the number of source tokens this subtree spans."""
        return self._width

    def _set_width(self, width: int) -> None:
        object.__setattr__(self, "_width", width)


@dataclass(frozen=True)
class CalcASTNumber(CalcASTNode):
    """Number literal leaf."""
    value: float

    def __post_init__(self) -> None:
        self._set_width(1)

    def evaluate(self) -> float:
        return self.value


@dataclass(frozen=True)
class CalcASTNegation(CalcASTNode):
    """Unary minus applied to an operand."""
    operand: CalcASTNode

    def __post_init__(self) -> None:
        self._set_width(self.operand.consumed_tokens() + 1)

    def evaluate(self) -> float:
        return -self.operand.evaluate()


@dataclass(frozen=True)
class CalcASTParenthesized(CalcASTNode):
    """Parenthesized group; spans its inner expression plus both parentheses."""
    inner: CalcASTNode

    def __post_init__(self) -> None:
        self._set_width(self.inner.consumed_tokens() + 2)

    def evaluate(self) -> float:
        return self.inner.evaluate()


@dataclass(frozen=True)
class CalcASTBinaryOp(CalcASTNode):
    """Binary operation: add, subtract, multiply or divide."""
    operator: CalcOperator
    left: CalcASTNode
    right: CalcASTNode

    def __post_init__(self) -> None:
        self._set_width(self.left.consumed_tokens() + self.right.consumed_tokens() + 1)

    def evaluate(self) -> float:
        """
        Evaluate the operation.

        Left-associative chains such as 1 + 2 + 3 + ... grow down the left side
        of the tree, so the left spine is walked iteratively and only right
        operands recurse.
        """
        spine: List[CalcASTBinaryOp] = []
        node: CalcASTNode = self
        while isinstance(node, CalcASTBinaryOp):
            spine.append(node)
            node = node.left

        result = node.evaluate()
        for operation in reversed(spine):
            result = operation.operator.apply(result, operation.right.evaluate())

        return result
