"""Precedence-climbing parser for calculator expressions."""

from typing import List, Tuple

from calc.calc_ast import (
    CalcASTNode, CalcASTNumber, CalcASTNegation, CalcASTParenthesized, CalcASTBinaryOp
)
from calc.calc_error import CalcErrorKind, CalcInternalError, CalcParseError
from calc.calc_token import BINARY_OPERATORS, CalcOperator, CalcPriority, CalcToken, CalcTokenType


class CalcParser:
    """
    Parses tokens into a calculator expression tree.

    Every parse method works on a half-open token range [start, end) and
    returns the node it built together with the index of the first token it
    did not consume.
    """

    def __init__(self, tokens: List[CalcToken], expression: str = "", max_depth: int = 200):
        """
        Initialize parser with tokens and original expression.

        Args:
            tokens: List of tokens to parse
            expression: Original expression string for error context
            max_depth: Maximum nesting of parentheses, unary minus and precedence levels
        """
        self.tokens = tokens
        self.expression = expression
        self.max_depth = max_depth
        self.depth = 0

    def parse(self) -> CalcASTNode:
        """
        Parse all tokens into a single expression tree.

        Returns:
            Root node of the expression tree

        Raises:
            CalcParseError: If the tokens do not form exactly one valid expression
        """
        if not self.tokens:
            raise CalcParseError(
                CalcErrorKind.EMPTY_INPUT,
                position=0,
                expected="Arithmetic expression",
                suggestion="Provide an expression such as 2 * (3 + 4)"
            )

        self.depth = 0
        try:
            node, _next_index = self._parse_range(0, len(self.tokens), CalcPriority.LOWEST)

        except RecursionError as e:
            # max_depth set above what the interpreter's own stack allows
            raise CalcParseError(
                CalcErrorKind.NESTING_TOO_DEEP,
                position=0,
                message="Nesting too deep: exceeds the interpreter recursion limit",
                suggestion="Simplify the expression or lower max_depth"
            ) from e

        return node

    def _parse_range(self, start: int, end: int, parent_priority: CalcPriority) -> Tuple[CalcASTNode, int]:
        """
        Parse operands joined by operators that bind tighter than parent_priority.

        Stops at the first operator whose priority is not above parent_priority,
        leaving it for the caller.  Using "not above" rather than "below" is what
        makes operators of equal priority left-associative.
        """
        self._enter(start)

        result, index = self._parse_operand(start, end)

        while index < end:
            operator = self._parse_operator(self.tokens[index])
            if operator.priority <= parent_priority:
                break

            if index + 1 == end:
                raise CalcParseError(
                    CalcErrorKind.UNEXPECTED_TOKEN,
                    position=self.tokens[index].position,
                    message="Unexpected token: operand needed after operator",
                    received=f"Operator: {operator.symbol}",
                    expected="Number, '(' or '-' after the operator"
                )

            right, index = self._parse_range(index + 1, end, operator.priority)
            result = CalcASTBinaryOp(operator, result, right)

        self.depth -= 1
        return result, index

    def _parse_operator(self, token: CalcToken) -> CalcOperator:
        """Classify a token that must be a binary operator."""
        operator = BINARY_OPERATORS.get(token.type)
        if operator is None:
            raise CalcParseError(
                CalcErrorKind.UNEXPECTED_TOKEN,
                position=token.position,
                message="Unexpected token: operator needed",
                received=f"Token: {token.type.value}",
                expected="One of '+', '-', '*' or '/'"
            )

        return operator

    def _parse_operand(self, start: int, end: int) -> Tuple[CalcASTNode, int]:
        """Parse a number, a parenthesized group, or a negated operand."""
        token = self.tokens[start]

        if token.type == CalcTokenType.LPAREN:
            return self._parse_parentheses(start, end)

        if token.type == CalcTokenType.MINUS:
            if start + 1 == end:
                raise CalcParseError(
                    CalcErrorKind.ORPHAN_MINUS,
                    position=token.position,
                    expected="Operand after unary minus"
                )

            self._enter(start)
            operand, index = self._parse_operand(start + 1, end)
            self.depth -= 1
            return CalcASTNegation(operand), index

        if token.type == CalcTokenType.NUMBER:
            return CalcASTNumber(token.value), start + 1

        raise CalcParseError(
            CalcErrorKind.UNEXPECTED_TOKEN,
            position=token.position,
            received=f"Token: {token.type.value}",
            expected="Number, '(' or '-'"
        )

    def _parse_parentheses(self, start: int, end: int) -> Tuple[CalcASTNode, int]:
        """Parse a parenthesized group starting at an opening parenthesis."""
        open_position = self.tokens[start].position

        close_index = self._find_closing_parenthesis(start + 1, end)
        if close_index < 0:
            raise CalcParseError(
                CalcErrorKind.UNCLOSED_PARENTHESIS,
                position=open_position,
                received=f"Group: {self._get_context_snippet(open_position)}",
                expected="Matching ')'",
                suggestion="Add a closing parenthesis"
            )

        if close_index == start + 1:
            raise CalcParseError(
                CalcErrorKind.EMPTY_PARENTHESES,
                position=open_position,
                expected="Expression between '(' and ')'"
            )

        inner, index = self._parse_range(start + 1, close_index, CalcPriority.LOWEST)
        if index != close_index:
            raise CalcInternalError(f"Group at position {open_position} stopped before its closing parenthesis")

        return CalcASTParenthesized(inner), close_index + 1

    def _find_closing_parenthesis(self, start: int, end: int) -> int:
        """Return the index of the ')' matching an already-consumed '(', or -1."""
        depth = 0
        for i in range(start, end):
            token_type = self.tokens[i].type
            if token_type == CalcTokenType.LPAREN:
                depth += 1

            elif token_type == CalcTokenType.RPAREN:
                if depth == 0:
                    return i

                depth -= 1

        return -1

    def _get_context_snippet(self, position: int, length: int = 30) -> str:
        """Get a snippet of the expression starting at position, with ellipsis if truncated."""
        end = min(position + length, len(self.expression))
        snippet = self.expression[position:end]
        if end < len(self.expression):
            snippet += "..."

        return snippet

    def _enter(self, start: int) -> None:
        """Track one more level of nesting, failing past max_depth."""
        self.depth += 1
        if self.depth > self.max_depth:
            raise CalcParseError(
                CalcErrorKind.NESTING_TOO_DEEP,
                position=self.tokens[start].position,
                message=f"Nesting too deep: more than {self.max_depth} levels",
                suggestion="Simplify the expression or raise max_depth"
            )
