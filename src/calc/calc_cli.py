"""Command-line interface for the calculator."""

import argparse
import logging
import sys
from typing import List, Optional

from calc.calc import Calculator
from calc.calc_error import CalcError


def format_result(value: float) -> str:
    """Format a result with 6 significant digits, as in 2.5, 14, 1e+06 or inf."""
    return f"{value:g}"


def positive_int(text: str) -> int:
    """Parse an argparse value that must be an integer of at least 1."""
    try:
        value = int(text)

    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from e

    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")

    return value


def format_error_pointer(expression: str, error: CalcError) -> str:
    """
    Render an error with a caret under the offending character.

    The caret is shifted one column right to account for the opening quote
    around the echoed expression.
    """
    return "\n".join([
        "Invalid input:",
        f'"{expression}"',
        " " * (error.position + 1) + "^",
        error.message,
    ])


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Evaluate an arithmetic expression",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "2 * (3 + 4)"                # Evaluate an argument
  echo "7 - 3 - 2" | %(prog)s           # Evaluate one line from stdin
  %(prog)s --verbose "1 / 3"            # With debug logging on stderr
        """
    )

    parser.add_argument(
        'expression',
        nargs='?',
        help='Expression to evaluate (default: read one line from stdin)'
    )

    parser.add_argument(
        '--max-depth',
        type=positive_int,
        default=200,
        help='Maximum nesting depth (default: 200)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log debug output to stderr'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            stream=sys.stderr
        )

    expression = args.expression
    if expression is None:
        expression = sys.stdin.readline().rstrip("\r\n")

    calculator = Calculator(max_depth=args.max_depth)

    try:
        result = calculator.evaluate(expression)

    except CalcError as e:
        print(format_error_pointer(expression, e), file=sys.stderr)
        return 1

    print(format_result(result))
    return 0
