"""Arithmetic expression calculator with positioned error messages."""

# Main API
from calc.calc import Calculator, evaluate_formula

# Exceptions (for error handling)
from calc.calc_error import CalcError, CalcErrorKind, CalcTokenError, CalcParseError, CalcInternalError

# Expression tree
from calc.calc_ast import (
    CalcASTNode, CalcASTNumber, CalcASTNegation, CalcASTParenthesized, CalcASTBinaryOp
)

# Lower-level components (for advanced usage)
from calc.calc_token import CalcToken, CalcTokenType, CalcOperator, CalcPriority
from calc.calc_tokenizer import CalcTokenizer
from calc.calc_parser import CalcParser


__all__ = [
    # Main API
    "Calculator", "evaluate_formula",

    # Exceptions
    "CalcError", "CalcErrorKind", "CalcTokenError", "CalcParseError", "CalcInternalError",

    # Expression tree
    "CalcASTNode", "CalcASTNumber", "CalcASTNegation", "CalcASTParenthesized", "CalcASTBinaryOp",

    # Lower-level components
    "CalcToken", "CalcTokenType", "CalcOperator", "CalcPriority", "CalcTokenizer", "CalcParser"
]
