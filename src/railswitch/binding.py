"""
Sequential binders: compose switch functions into a single switch function.

The composed function runs the steps strictly left to right:

    bind_three(min3char, max20char, valueify_short)("short text")

      min3char ──Success──→ max20char ──Success──→ valueify_short ──→ Success({...})
          │                     │                       │
          └──Failure────────────┴───────────────────────┴──→ first Failure, as-is

  1. The first step receives the original input.
  2. A Failure stops the chain at once. That same Failure object is the
     result and no later step is invoked.
  3. A Success hands its value to the next step.
  4. The last step's Result is returned unchanged.

The async binders follow the same rule, awaiting each step before deciding
what to do next. Steps never overlap and there is no timeout: a step that
never resolves stalls its chain.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Sequence, TypeVar

from railswitch.errors import CompositionError, ContractError
from railswitch.result import Failure, Result, Success
from railswitch.switch import check_callables, resolve

V = TypeVar("V")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
E = TypeVar("E")

_MIN_SIMILAR = 2


def _snapshot(switches: Sequence[Any]) -> tuple[Any, ...]:
    steps = tuple(switches)
    if len(steps) < _MIN_SIMILAR:
        raise CompositionError(
            f"At least {_MIN_SIMILAR} switch functions are required, got {len(steps)}"
        )
    check_callables(steps)
    return steps


# ──────────────────────── Direct ────────────────────────


def bind_two(
    f1: Callable[[V], Result[A, E]],
    f2: Callable[[A], Result[B, E]],
) -> Callable[[V], Result[B, E]]:
    """
    Chain two switch functions; f2 runs only when f1 succeeds.

        f = bind_two(min3char, valueify_short)
        f("short text")  # → Success({"value": "short text"})
        f("o")           # → Failure("At least 3 characters")
    """
    check_callables((f1, f2))

    def switch(value: V) -> Result[B, E]:
        outcome = f1(value)
        match outcome:
            case Success(v):
                return f2(v)
            case Failure():
                return outcome
        raise ContractError.non_result(outcome)

    return switch


def bind_three(
    f1: Callable[[V], Result[A, E]],
    f2: Callable[[A], Result[B, E]],
    f3: Callable[[B], Result[C, E]],
) -> Callable[[V], Result[C, E]]:
    """Chain three switch functions, short-circuiting on the first Failure."""
    return bind_two(bind_two(f1, f2), f3)


def bind_similar(
    switches: Sequence[Callable[[A], Result[A, E]]],
) -> Callable[[A], Result[A, E]]:
    """
    Chain any number (at least two) of same-shaped switch functions.

    The sequence is copied when the pipeline is built, so mutating the list
    afterwards does not change the pipeline.

        validate = bind_similar([min3char, max20char, not_dot])
        validate("escape with dot .")  # → Failure("Should not have any dots")
    """
    steps = _snapshot(switches)

    def switch(value: A) -> Result[A, E]:
        outcome: Result[A, E] = Success(value)
        for step in steps:
            outcome = step(value)
            match outcome:
                case Success(v):
                    value = v
                case Failure():
                    return outcome
                case _:
                    raise ContractError.non_result(outcome)
        return outcome

    return switch


# ──────────────────────── Deferred ────────────────────────


def bind_two_async(
    f1: Callable[[V], Awaitable[Result[A, E]]],
    f2: Callable[[A], Awaitable[Result[B, E]]],
) -> Callable[[V], Awaitable[Result[B, E]]]:
    """
    Async bind_two: f2 is scheduled only after f1 has resolved to a Success.

        f = bind_two_async(async_min3char, async_valueify_short)
        await f("short text")  # → Success({"value": "short text"})
    """
    check_callables((f1, f2))

    async def switch(value: V) -> Result[B, E]:
        outcome = await resolve(f1(value))
        match outcome:
            case Success(v):
                return await resolve(f2(v))
            case Failure():
                return outcome
        raise ContractError.non_result(outcome)

    return switch


def bind_three_async(
    f1: Callable[[V], Awaitable[Result[A, E]]],
    f2: Callable[[A], Awaitable[Result[B, E]]],
    f3: Callable[[B], Awaitable[Result[C, E]]],
) -> Callable[[V], Awaitable[Result[C, E]]]:
    """Async bind_three."""
    return bind_two_async(bind_two_async(f1, f2), f3)


def bind_similar_async(
    switches: Sequence[Callable[[A], Awaitable[Result[A, E]]]],
) -> Callable[[A], Awaitable[Result[A, E]]]:
    """Async bind_similar: awaits each step before running the next one."""
    steps = _snapshot(switches)

    async def switch(value: A) -> Result[A, E]:
        outcome: Result[A, E] = Success(value)
        for step in steps:
            outcome = await resolve(step(value))
            match outcome:
                case Success(v):
                    value = v
                case Failure():
                    return outcome
                case _:
                    raise ContractError.non_result(outcome)
        return outcome

    return switch
