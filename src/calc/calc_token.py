"""Token types, operators and priorities for calculator expressions."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
import math
from typing import Callable, Dict, Optional

from calc.calc_error import CalcInternalError


class CalcTokenType(Enum):
    """Token types for calculator expressions."""
    NUMBER = "NUMBER"
    LPAREN = "("
    RPAREN = ")"
    MULTIPLY = "*"
    DIVIDE = "/"
    PLUS = "+"
    MINUS = "-"


class CalcPriority(IntEnum):
    """Binding strength of binary operators, lowest first."""
    LOWEST = 0  # expression root
    ADDITIVE = 1  # "+", "-"
    MULTIPLICATIVE = 2  # "*", "/"


def _ieee_divide(left: float, right: float) -> float:
    """Divide with IEEE-754 semantics instead of raising ZeroDivisionError."""
    if right != 0.0:
        return left / right

    if left == 0.0 or math.isnan(left):
        return math.nan

    return math.copysign(math.inf, left) * math.copysign(1.0, right)


class CalcOperator(Enum):
    """Binary operators, each carrying its symbol and priority."""
    ADD = ("+", CalcPriority.ADDITIVE)
    SUBTRACT = ("-", CalcPriority.ADDITIVE)
    MULTIPLY = ("*", CalcPriority.MULTIPLICATIVE)
    DIVIDE = ("/", CalcPriority.MULTIPLICATIVE)

    def __init__(self, symbol: str, priority: CalcPriority) -> None:
        self.symbol = symbol
        self.priority = priority

    def apply(self, left: float, right: float) -> float:
        """Combine two operand values."""
        return _OPERATOR_IMPLEMENTATIONS[self](left, right)


_OPERATOR_IMPLEMENTATIONS: Dict[CalcOperator, Callable[[float, float], float]] = {
    CalcOperator.ADD: lambda left, right: left + right,
    CalcOperator.SUBTRACT: lambda left, right: left - right,
    CalcOperator.MULTIPLY: lambda left, right: left * right,
    CalcOperator.DIVIDE: _ieee_divide,
}


# Token types that can appear between two operands
BINARY_OPERATORS: Dict[CalcTokenType, CalcOperator] = {
    CalcTokenType.PLUS: CalcOperator.ADD,
    CalcTokenType.MINUS: CalcOperator.SUBTRACT,
    CalcTokenType.MULTIPLY: CalcOperator.MULTIPLY,
    CalcTokenType.DIVIDE: CalcOperator.DIVIDE,
}


@dataclass(frozen=True)
class CalcToken:
    """Represents a single token in a calculator expression."""
    type: CalcTokenType
    position: int
    number: Optional[float] = field(default=None, repr=False)

    @property
    def value(self) -> float:
        """Numeric value of a NUMBER token."""
        if self.type != CalcTokenType.NUMBER or self.number is None:
            raise CalcInternalError(f"Token {self.type.name} at position {self.position} has no numeric value")

        return self.number

    def __repr__(self) -> str:
        if self.type == CalcTokenType.NUMBER:
            return f"CalcToken({self.type.name}, {self.number!r}, pos={self.position})"

        return f"CalcToken({self.type.name}, pos={self.position})"
