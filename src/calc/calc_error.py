"""Exception classes for calculator expressions with positioned context."""

from enum import Enum
from typing import Optional


class CalcErrorKind(Enum):
    """Classification of user-facing calculator errors."""
    EMPTY_INPUT = "Empty input"
    INVALID_NUMBER = "Invalid number"
    UNEXPECTED_SYMBOL = "Unexpected symbol"
    UNEXPECTED_TOKEN = "Unexpected token"
    ORPHAN_MINUS = "Orphan minus"
    UNCLOSED_PARENTHESIS = "Unclosed parenthesis"
    EMPTY_PARENTHESES = "Empty parentheses"
    NESTING_TOO_DEEP = "Nesting too deep"


class CalcError(Exception):
    """Base exception for calculator errors, always tied to a source position."""

    def __init__(
        self,
        kind: CalcErrorKind,
        position: int,
        message: Optional[str] = None,
        received: Optional[str] = None,
        expected: Optional[str] = None,
        suggestion: Optional[str] = None
    ):
        """
        Initialize positioned error.

        Args:
            kind: Error classification
            position: Zero-based character offset where the problem was detected
            message: Core error description (defaults to the kind's description)
            received: What was actually found
            expected: What was expected
            suggestion: Suggestion for fixing the error
        """
        self.kind = kind
        self.position = position
        self.message = message if message is not None else kind.value
        self.received = received
        self.expected = expected
        self.suggestion = suggestion

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}", f"Position: {self.position}"]

        if self.received:
            parts.append(f"Received: {self.received}")
        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        return "\n".join(parts)


class CalcTokenError(CalcError):
    """Tokenization errors: bad characters and malformed number literals."""


class CalcParseError(CalcError):
    """Parsing errors: tokens that do not form a valid expression."""


class CalcInternalError(RuntimeError):
    """
    Broken internal invariant in the tokenizer, tree or parser.

    Not a CalcError: it signals a bug, never a problem with the input.
    """

    def __init__(self, message: str):
        super().__init__(f"Broken parser: {message}")
