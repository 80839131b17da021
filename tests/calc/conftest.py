"""Shared fixtures and utilities for calculator tests."""

import pytest

from calc import Calculator, CalcError


@pytest.fixture
def calc():
    """Create a fresh Calculator instance for each test."""
    return Calculator()


@pytest.fixture
def calc_custom():
    """Factory for Calculator instances with custom configuration."""
    def _create_calc(max_depth: int = 200) -> Calculator:
        return Calculator(max_depth=max_depth)
    return _create_calc


class CalcTestHelpers:
    """Helper utilities for calculator testing."""

    @staticmethod
    def assert_error_at(calc: Calculator, expression: str, position: int) -> CalcError:
        """Assert that evaluating expression fails at the given character offset."""
        with pytest.raises(CalcError) as exc_info:
            calc.evaluate(expression)

        error = exc_info.value
        assert error.position == position, (
            f"Expected error at {position} for {expression!r}, got {error.position}: {error.message}"
        )
        return error

    @staticmethod
    def build_nested_parentheses(depth: int, inner: str = "5") -> str:
        """Build an expression wrapped in depth pairs of parentheses."""
        return "(" * depth + inner + ")" * depth


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return CalcTestHelpers
