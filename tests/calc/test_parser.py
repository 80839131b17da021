"""Tests for the precedence-climbing parser and the expression tree it builds."""

import sys

import pytest

from calc import (
    CalcASTBinaryOp, CalcASTNegation, CalcASTNumber, CalcASTParenthesized, CalcErrorKind,
    CalcOperator, CalcParseError, CalcParser, CalcTokenizer
)


def parse(expression: str, max_depth: int = 200):
    """Tokenize and parse an expression."""
    tokens = CalcTokenizer().tokenize(expression)
    return CalcParser(tokens, expression, max_depth=max_depth).parse()


class TestParser:
    """Test tree construction."""

    def test_number_leaf(self):
        """Test that a single number parses to a leaf."""
        assert parse("5") == CalcASTNumber(5.0)

    def test_precedence_shape(self):
        """Test that multiplication is grouped below addition."""
        assert parse("2 + 3 * 4") == CalcASTBinaryOp(
            CalcOperator.ADD,
            CalcASTNumber(2.0),
            CalcASTBinaryOp(CalcOperator.MULTIPLY, CalcASTNumber(3.0), CalcASTNumber(4.0))
        )

    def test_left_associative_shape(self):
        """Test that equal priority operators nest to the left."""
        assert parse("7 - 3 - 2") == CalcASTBinaryOp(
            CalcOperator.SUBTRACT,
            CalcASTBinaryOp(CalcOperator.SUBTRACT, CalcASTNumber(7.0), CalcASTNumber(3.0)),
            CalcASTNumber(2.0)
        )

    def test_mixed_priority_chain_shape(self):
        """Test a chain that steps down from multiplicative to additive priority."""
        assert parse("1 * 2 + 3 * 4 - 5") == CalcASTBinaryOp(
            CalcOperator.SUBTRACT,
            CalcASTBinaryOp(
                CalcOperator.ADD,
                CalcASTBinaryOp(CalcOperator.MULTIPLY, CalcASTNumber(1.0), CalcASTNumber(2.0)),
                CalcASTBinaryOp(CalcOperator.MULTIPLY, CalcASTNumber(3.0), CalcASTNumber(4.0))
            ),
            CalcASTNumber(5.0)
        )

    def test_negation_and_parentheses_shape(self):
        """Test that unary minus wraps only the operand that follows it."""
        assert parse("-(1 + 2) / 3") == CalcASTBinaryOp(
            CalcOperator.DIVIDE,
            CalcASTNegation(
                CalcASTParenthesized(
                    CalcASTBinaryOp(CalcOperator.ADD, CalcASTNumber(1.0), CalcASTNumber(2.0))
                )
            ),
            CalcASTNumber(3.0)
        )

    @pytest.mark.parametrize("expression,width", [
        ("5", 1),
        ("-5", 2),
        ("(5)", 3),
        ("(-5)", 4),
        ("1 + 2", 3),
        ("2 * (3 * ((3 + 1) + 1) + 2)", 17),
        ("7 + (((5 * 2) + 5) / (2 + 3) + 1) / 2 - 1", 25),
    ])
    def test_root_consumes_every_token(self, expression, width):
        """Test that the root width equals the number of tokens."""
        tree = parse(expression)

        assert tree.consumed_tokens() == width
        assert width == len(CalcTokenizer().tokenize(expression))

    def test_node_width_invariants(self):
        """Test the width rule of every node variant."""
        number = CalcASTNumber(2.0)
        negation = CalcASTNegation(number)
        group = CalcASTParenthesized(negation)
        binary = CalcASTBinaryOp(CalcOperator.ADD, group, number)

        assert number.consumed_tokens() == 1
        assert negation.consumed_tokens() == number.consumed_tokens() + 1
        assert group.consumed_tokens() == negation.consumed_tokens() + 2
        assert binary.consumed_tokens() == group.consumed_tokens() + number.consumed_tokens() + 1

    def test_long_chain(self):
        """Test that long left-associative chains parse and evaluate."""
        expression = " + ".join(["1"] * 5000)
        tree = parse(expression)

        assert tree.consumed_tokens() == 9999
        assert tree.evaluate() == 5000

    def test_nesting_within_limit(self, helpers):
        """Test deeply nested parentheses below the depth limit."""
        tree = parse(helpers.build_nested_parentheses(150))
        assert tree.evaluate() == 5

    def test_nesting_too_deep(self, helpers):
        """Test that nesting beyond max_depth is a positioned error."""
        with pytest.raises(CalcParseError) as exc_info:
            parse(helpers.build_nested_parentheses(30), max_depth=10)

        assert exc_info.value.kind == CalcErrorKind.NESTING_TOO_DEEP
        assert exc_info.value.position == 10

    def test_negation_chain_too_deep(self):
        """Test that repeated unary minus also counts toward the depth limit."""
        with pytest.raises(CalcParseError) as exc_info:
            parse("-" * 50 + "1", max_depth=20)

        assert exc_info.value.kind == CalcErrorKind.NESTING_TOO_DEEP

    def test_depth_limit_configured_on_calculator(self, calc_custom, helpers):
        """Test that Calculator passes max_depth through to the parser."""
        with pytest.raises(CalcParseError):
            calc_custom(max_depth=5).evaluate(helpers.build_nested_parentheses(10))

        assert calc_custom(max_depth=50).evaluate(helpers.build_nested_parentheses(10)) == 5

    def test_parser_reusable(self):
        """Test that parse can be called more than once on the same parser."""
        tokens = CalcTokenizer().tokenize("(1 + 2) * 3")
        parser = CalcParser(tokens, "(1 + 2) * 3")

        assert parser.parse() == parser.parse()

    def test_recursion_limit_reported_as_nesting_error(self, calc_custom, helpers):
        """Test that a max_depth above the interpreter's stack still gives a positioned error."""
        expression = helpers.build_nested_parentheses(sys.getrecursionlimit() + 100)

        with pytest.raises(CalcParseError) as exc_info:
            calc_custom(max_depth=10 ** 6).evaluate(expression)

        assert exc_info.value.kind == CalcErrorKind.NESTING_TOO_DEEP
        assert exc_info.value.position == 0

    def test_deep_tree_evaluation_reported_as_nesting_error(self, calc):
        """Test that evaluating a tree deeper than the stack allows gives a nesting error."""
        tree = CalcASTNumber(5.0)
        for _ in range(sys.getrecursionlimit() + 100):
            tree = CalcASTParenthesized(tree)

        with pytest.raises(CalcParseError) as exc_info:
            calc._evaluate_tree(tree)  # pylint: disable=protected-access

        assert exc_info.value.kind == CalcErrorKind.NESTING_TOO_DEEP

    @pytest.mark.parametrize("max_depth", [0, -1])
    def test_max_depth_must_be_positive(self, calc_custom, max_depth):
        """Test that a depth limit below 1 is rejected up front."""
        with pytest.raises(ValueError, match="max_depth must be at least 1"):
            calc_custom(max_depth=max_depth)

    def test_width_is_not_part_of_node_identity(self):
        """Test that the cached width stays out of repr and equality."""
        node = CalcASTNegation(CalcASTNumber(1.5))

        assert repr(node) == "CalcASTNegation(operand=CalcASTNumber(value=1.5))"
        assert node == CalcASTNegation(CalcASTNumber(1.5))
        assert hash(node) == hash(CalcASTNegation(CalcASTNumber(1.5)))
        assert node.consumed_tokens() == 2
