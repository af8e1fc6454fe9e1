"""
Switch functions: the shape every combinator in railswitch operates over.

A switch function takes one input and decides which track the pipeline
continues on: it returns a Result. Two calling conventions exist:

  - direct:   V -> Result[A, E]
  - deferred: V -> Awaitable[Result[A, E]]   (an `async def`)

Every combinator over direct switch functions has a deferred twin with the
same decision rule. The deferred twins call user functions through
resolve(), so a plain function placed in an async chain behaves as if it
had been awaited.
"""

from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Awaitable, Callable, Never, Sequence, TypeVar

from railswitch.errors import CompositionError
from railswitch.result import Result, Success, succeed

T = TypeVar("T")
V = TypeVar("V")
A = TypeVar("A")

type SwitchFunction[V, A, E] = Callable[[V], Result[A, E]]
type AsyncSwitchFunction[V, A, E] = Callable[[V], Awaitable[Result[A, E]]]
type RecoverFunction[E, A] = Callable[[E], Success[A, Any]]
type AsyncRecoverFunction[E, A] = Callable[[E], Awaitable[Success[A, Any]]]


def check_callables(steps: Sequence[Any]) -> None:
    """Raise CompositionError naming the first position that is not callable."""
    for position, step in enumerate(steps, start=1):
        if not callable(step):
            raise CompositionError(
                f"Switch function at position {position} is not callable: {step!r}"
            )


async def resolve(outcome: Awaitable[T] | T) -> T:
    """Await `outcome` if it is awaitable, otherwise return it as-is."""
    if inspect.isawaitable(outcome):
        return await outcome
    return outcome


def transform_to_switch(total_fn: Callable[[V], A]) -> Callable[[V], Result[A, Never]]:
    """
    Lift a function that cannot fail into a switch function.

        double = transform_to_switch(lambda x: x * 2)
        double(3)  # → Success(6)
    """

    @wraps(total_fn)
    def switch(value: V) -> Result[A, Never]:
        return succeed(total_fn(value))

    return switch


def transform_to_async_switch(
    total_fn: Callable[[V], A] | Callable[[V], Awaitable[A]],
) -> Callable[[V], Awaitable[Result[A, Never]]]:
    """
    Lift a function that cannot fail into a deferred switch function.

    `total_fn` may be a plain function or a coroutine function; its outcome
    is awaited before being wrapped.

        fetch_name = transform_to_async_switch(load_display_name)
        await fetch_name(user_id)  # → Success("Alice")
    """

    @wraps(total_fn)
    async def switch(value: V) -> Result[A, Never]:
        return succeed(await resolve(total_fn(value)))

    return switch
