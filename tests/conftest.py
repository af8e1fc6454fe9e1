"""
Shared switch functions and fixtures for the railswitch test suite.

The switch functions model a small text-validation domain: each one checks
one rule and returns a Result[str, str] whose error is the human-readable
reason. Every function has an async twin with the same behaviour.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from railswitch import Result, Success, get_settings, succeed, will_fail


def min3char(text: str) -> Result[str, str]:
    if len(text) < 3:
        return will_fail("At least 3 characters")
    return succeed(text)


async def async_min3char(text: str) -> Result[str, str]:
    return min3char(text)


def max20char(text: str) -> Result[str, str]:
    if len(text) > 20:
        return will_fail("Not more than 20 characters")
    return succeed(text)


async def async_max20char(text: str) -> Result[str, str]:
    return max20char(text)


def not_dot(text: str) -> Result[str, str]:
    if "." in text:
        return will_fail("Should not have any dots")
    return succeed(text)


async def async_not_dot(text: str) -> Result[str, str]:
    return not_dot(text)


def valueify_short(value: str) -> Result[dict[str, str], str]:
    if len(value) > 15:
        return will_fail("At least 15 characters")
    return succeed({"value": value})


async def async_valueify_short(value: str) -> Result[dict[str, str], str]:
    return valueify_short(value)


def add_context_to_error(message: str) -> Result[str, str]:
    return will_fail(f"Account 123. London. {message}")


async def async_add_context_to_error(message: str) -> Result[str, str]:
    return add_context_to_error(message)


def recover_to_good(_message: str) -> Success[str, str]:
    return succeed("good")


async def async_recover_to_good(_message: str) -> Success[str, str]:
    return recover_to_good(_message)


def fallback_to_uppercase(text: str) -> Result[str, str]:
    return succeed(text.upper())


async def async_fallback_to_uppercase(text: str) -> Result[str, str]:
    return fallback_to_uppercase(text)


@pytest.fixture(autouse=True)
def _isolated_logging_and_settings() -> Iterator[None]:
    """Reset structlog configuration and cached settings around every test."""
    get_settings.cache_clear()
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()
