"""
Guards: turn exceptions into Failures at the edge of a switch function.

The combinators never catch anything: an exception raised inside a step
propagates to whoever invoked the pipeline. When a step wraps code that
signals problems by raising (int(), json.loads(), a client library), its
author can opt in to translation here instead of writing try/except at
every call site.

Before:
    def parse_age(raw: str) -> Result[int, str]:
        try:
            return succeed(int(raw))
        except ValueError as e:
            return will_fail(str(e))

After:
    parse_age = guard_to_switch(int, catching=(ValueError,))
"""

from __future__ import annotations

from functools import wraps
from typing import Awaitable, Callable, TypeVar

from railswitch.result import Result, succeed, will_fail
from railswitch.switch import resolve

V = TypeVar("V")
A = TypeVar("A")
E = TypeVar("E")

ExceptionTypes = tuple[type[BaseException], ...]


def guard_to_switch(
    fn: Callable[[V], A],
    to_error: Callable[[Exception], E] = str,
    catching: ExceptionTypes = (Exception,),
) -> Callable[[V], Result[A, E]]:
    """
    Lift `fn` into a switch function, converting listed exceptions to Failures.

    Exceptions outside `catching` propagate unchanged.
    """

    @wraps(fn)
    def switch(value: V) -> Result[A, E]:
        try:
            produced = fn(value)
        except catching as e:
            return will_fail(to_error(e))
        return succeed(produced)

    return switch


def guard_to_async_switch(
    fn: Callable[[V], A] | Callable[[V], Awaitable[A]],
    to_error: Callable[[Exception], E] = str,
    catching: ExceptionTypes = (Exception,),
) -> Callable[[V], Awaitable[Result[A, E]]]:
    """Async guard_to_switch; `fn` may be a plain function or a coroutine function."""

    @wraps(fn)
    async def switch(value: V) -> Result[A, E]:
        try:
            produced = await resolve(fn(value))
        except catching as e:
            return will_fail(to_error(e))
        return succeed(produced)

    return switch
