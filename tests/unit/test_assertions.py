"""Tests for ResultAssertions: the helpers must fail loudly with clear messages."""

from __future__ import annotations

import pytest

from railswitch import ResultAssertions, succeed, will_fail


class TestAssertSuccess:
    def test_returns_value(self) -> None:
        assert ResultAssertions.assert_success(succeed(5)) == 5

    def test_raises_on_failure_with_context(self) -> None:
        with pytest.raises(AssertionError, match=r"Expected Success but got Failure\('bad'\) \(step 2\)"):
            ResultAssertions.assert_success(will_fail("bad"), "step 2")

    def test_success_value_mismatch(self) -> None:
        with pytest.raises(AssertionError, match="Expected success value 6 but got 5"):
            ResultAssertions.assert_success_value(succeed(5), 6)


class TestAssertFailure:
    def test_returns_error(self) -> None:
        assert ResultAssertions.assert_failure(will_fail("bad")) == "bad"

    def test_raises_on_success(self) -> None:
        with pytest.raises(AssertionError, match=r"Expected Failure but got Success\(5\)"):
            ResultAssertions.assert_failure(succeed(5))

    def test_failure_error_mismatch(self) -> None:
        with pytest.raises(AssertionError, match="Expected failure error 'x' but got 'y'"):
            ResultAssertions.assert_failure_error(will_fail("y"), "x")

    def test_message_contains_is_case_insensitive(self) -> None:
        ResultAssertions.assert_failure_message_contains(will_fail("At least 3 characters"), "AT LEAST")

    def test_message_contains_mismatch(self) -> None:
        with pytest.raises(AssertionError, match="Expected failure to contain"):
            ResultAssertions.assert_failure_message_contains(will_fail("short"), "dots")
