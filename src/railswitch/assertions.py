"""
Test assertions for Result values.

Expressive assert helpers that produce clear failure messages.

Usage in tests:
    from railswitch import ResultAssertions

    def test_short_text_is_valueified():
        result = bind_two(min3char, valueify_short)("short text")
        ResultAssertions.assert_success_value(result, {"value": "short text"})

    def test_single_char_is_rejected():
        result = min3char("o")
        ResultAssertions.assert_failure_error(result, "At least 3 characters")
"""

from __future__ import annotations

from typing import Any, TypeVar

from railswitch.result import Result

A = TypeVar("A")
E = TypeVar("E")


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[A, Any], message: str = "") -> A:
        """
        Assert the Result is a Success and return the value.

            value = ResultAssertions.assert_success(result)
        """
        context = f" ({message})" if message else ""
        assert result.is_success(), (
            f"Expected Success but got Failure({result.error()!r}){context}"
        )
        return result.value()

    @staticmethod
    def assert_success_value(result: Result[Any, Any], expected_value: Any) -> None:
        """Assert the Result is a Success carrying `expected_value`."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_failure(result: Result[Any, E], message: str = "") -> E:
        """
        Assert the Result is a Failure and return the error.

            error = ResultAssertions.assert_failure(result)
        """
        context = f" ({message})" if message else ""
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.value()!r}){context}"
        )
        return result.error()

    @staticmethod
    def assert_failure_error(result: Result[Any, Any], expected_error: Any) -> None:
        """Assert the Result is a Failure carrying `expected_error`."""
        error = ResultAssertions.assert_failure(result)
        assert error == expected_error, (
            f"Expected failure error {expected_error!r} but got {error!r}"
        )

    @staticmethod
    def assert_failure_message_contains(result: Result[Any, Any], substring: str) -> None:
        """Assert that the failure's string form contains `substring` (case-insensitive)."""
        error = ResultAssertions.assert_failure(result)
        assert substring.lower() in str(error).lower(), (
            f"Expected failure to contain {substring!r} but error was: {error!r}"
        )
