"""Tokenizer for calculator expressions with positioned error messages."""

import math
import sys
from typing import List

from calc.calc_error import CalcErrorKind, CalcTokenError
from calc.calc_token import CalcToken, CalcTokenType


class CalcTokenizer:
    """Tokenizes calculator expressions into positioned tokens."""

    # Single-character tokens
    SYMBOLS = {
        '(': CalcTokenType.LPAREN,
        ')': CalcTokenType.RPAREN,
        '+': CalcTokenType.PLUS,
        '-': CalcTokenType.MINUS,
        '*': CalcTokenType.MULTIPLY,
        '/': CalcTokenType.DIVIDE,
    }

    NUMBER_CHARS = frozenset("0123456789.")

    def tokenize(self, expression: str) -> List[CalcToken]:
        """
        Tokenize a calculator expression.

        Args:
            expression: The expression string to tokenize

        Returns:
            List of tokens in source order (empty for empty input)

        Raises:
            CalcTokenError: If an unknown character or a malformed number is found
        """
        tokens: List[CalcToken] = []
        number_start = -1

        for i, char in enumerate(expression):
            if char in self.NUMBER_CHARS:
                if number_start < 0:
                    number_start = i

                continue

            # Any other character ends a pending number literal
            if number_start >= 0:
                tokens.append(self._read_number(expression[number_start:i], number_start))
                number_start = -1

            if char == ' ':
                continue

            token_type = self.SYMBOLS.get(char)
            if token_type is None:
                raise CalcTokenError(
                    CalcErrorKind.UNEXPECTED_SYMBOL,
                    position=i,
                    received=f"Character: {char!r} (code {ord(char)})",
                    expected="Digit, '.', space, '(', ')', '+', '-', '*' or '/'"
                )

            tokens.append(CalcToken(token_type, i))

        if number_start >= 0:
            tokens.append(self._read_number(expression[number_start:], number_start))

        return tokens

    def _read_number(self, literal: str, start: int) -> CalcToken:
        """
        Convert a buffered run of digits and dots into a NUMBER token.

        Only normal finite values are accepted. Zero, subnormals and values that
        overflow to infinity are all rejected.
        """
        try:
            value = float(literal)

        except ValueError as e:
            raise CalcTokenError(
                CalcErrorKind.INVALID_NUMBER,
                position=start,
                received=f"Number literal: {literal}",
                expected="Digits with at most one decimal point",
                suggestion="Check for repeated decimal points"
            ) from e

        if not self._is_normal(value):
            raise CalcTokenError(
                CalcErrorKind.INVALID_NUMBER,
                position=start,
                received=f"Number literal: {literal}",
                expected="A non-zero, finite number",
                suggestion="Number literals must be non-zero and within floating point range"
            )

        return CalcToken(CalcTokenType.NUMBER, start, value)

    @staticmethod
    def _is_normal(value: float) -> bool:
        """Check the value is not zero, subnormal, infinite or NaN."""
        return math.isfinite(value) and abs(value) >= sys.float_info.min
