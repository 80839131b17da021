"""Main calculator class."""

import logging
from typing import List

from calc.calc_ast import CalcASTNode
from calc.calc_error import CalcError, CalcErrorKind, CalcParseError
from calc.calc_parser import CalcParser
from calc.calc_token import CalcToken
from calc.calc_tokenizer import CalcTokenizer


class Calculator:
    """
    Arithmetic expression calculator.

    Supports numbers, the binary operators +, -, * and /, unary minus and
    parentheses, with the usual precedence and left-associativity.  Every
    syntax problem is reported as a CalcError carrying the character offset
    where it was detected.

    A Calculator holds only its configuration, so one instance can evaluate
    any number of expressions.
    """

    def __init__(self, max_depth: int = 200):
        """
        Initialize calculator.

        Args:
            max_depth: Maximum nesting of parentheses, unary minus and precedence levels

        Raises:
            ValueError: If max_depth is less than 1
        """
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")

        self.max_depth = max_depth
        self._logger = logging.getLogger("Calculator")

    def tokenize(self, expression: str) -> List[CalcToken]:
        """
        Split an expression into tokens.

        Raises:
            CalcTokenError: If the expression contains an unknown symbol or a bad number
        """
        return CalcTokenizer().tokenize(expression)

    def parse(self, expression: str) -> CalcASTNode:
        """
        Tokenize and parse an expression into an expression tree.

        Raises:
            CalcTokenError: If tokenization fails
            CalcParseError: If parsing fails
        """
        tokens = self.tokenize(expression)
        self._logger.debug("Tokenized %d characters into %d tokens", len(expression), len(tokens))

        parser = CalcParser(tokens, expression, max_depth=self.max_depth)
        return parser.parse()

    def evaluate(self, expression: str) -> float:
        """
        Evaluate an arithmetic expression.

        Args:
            expression: Expression text, without a trailing newline

        Returns:
            The value of the expression.  Division by zero yields inf or nan.

        Raises:
            CalcTokenError: If tokenization fails
            CalcParseError: If parsing fails
        """
        try:
            tree = self.parse(expression)
            result = self._evaluate_tree(tree)

        except CalcError as e:
            self._logger.debug("Rejected expression %r at position %d: %s", expression, e.position, e.message)
            raise

        self._logger.debug("Evaluated %r to %r", expression, result)
        return result

    def _evaluate_tree(self, tree: CalcASTNode) -> float:
        """Evaluate a parsed tree, reporting stack exhaustion as a nesting error."""
        try:
            return tree.evaluate()

        except RecursionError as e:
            raise CalcParseError(
                CalcErrorKind.NESTING_TOO_DEEP,
                position=0,
                message="Nesting too deep: exceeds the interpreter recursion limit",
                suggestion="Simplify the expression or lower max_depth"
            ) from e


def evaluate_formula(text: str) -> float:
    """
    Evaluate an arithmetic expression with the default configuration.

    Raises:
        CalcError: With the offset and message of the first problem found
    """
    return Calculator().evaluate(text)
