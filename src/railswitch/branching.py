"""
Branch combinators: decide what happens on the failure track.

All of them leave a Success untouched (the very same object comes back);
they differ in how they react to a Failure:

  bypass(alt)            Failure(e) → alt(e), returned verbatim. alt may fail again,
                         e.g. to add context to the error.
  recover(alt)           Failure(e) → alt(e), which is always a Success.
  or_fallback(f1, f2)    runs f1(value); on Failure runs f2 on the ORIGINAL value.

bypass and recover take an already-produced Result. or_fallback takes the
input value, since the fallback needs it.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

from railswitch.errors import ContractError, RecoveryContractError
from railswitch.result import Failure, Result, Success
from railswitch.switch import check_callables, resolve

V = TypeVar("V")
A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")
F = TypeVar("F")


def _ensure_recovered(produced: Any) -> Success[Any, Any]:
    if not isinstance(produced, Success):
        raise RecoveryContractError(
            f"Recover function must return a Success, got {produced!r}", produced
        )
    return produced


# ──────────────────────── Direct ────────────────────────


def bypass(
    alt_fn: Callable[[E], Result[B, F]],
) -> Callable[[Result[A, E]], Result[A, E] | Result[B, F]]:
    """
    Route a Failure through `alt_fn`; a Success goes straight through.

        add_context = bypass(lambda reason: will_fail(f"Account 123. London. {reason}"))
        add_context(min3char("o"))  # → Failure("Account 123. London. At least 3 characters")
    """
    check_callables((alt_fn,))

    def branch(result: Result[A, E]) -> Result[A, E] | Result[B, F]:
        match result:
            case Success():
                return result
            case Failure(err):
                return alt_fn(err)
        raise ContractError.non_result(result)

    return branch


def recover(
    alt_fn: Callable[[E], Success[B, Any]],
) -> Callable[[Result[A, E]], Success[A, Any] | Success[B, Any]]:
    """
    Replace a Failure with the Success produced by `alt_fn`.

        recover(lambda _reason: succeed("good"))(min3char("o"))  # → Success("good")
    """
    check_callables((alt_fn,))

    def branch(result: Result[A, E]) -> Success[A, Any] | Success[B, Any]:
        match result:
            case Success():
                return result
            case Failure(err):
                return _ensure_recovered(alt_fn(err))
        raise ContractError.non_result(result)

    return branch


def or_fallback(
    f1: Callable[[V], Result[A, E]],
    fallback_f2: Callable[[V], Result[B, F]],
) -> Callable[[V], Result[A, E] | Result[B, F]]:
    """
    Try `f1`; if it fails, retry the same input with `fallback_f2`.

    The fallback receives the original input, never f1's error.

        or_fallback(min3char, fallback_to_uppercase)("z")  # → Success("Z")
    """
    check_callables((f1, fallback_f2))

    def switch(value: V) -> Result[A, E] | Result[B, F]:
        outcome = f1(value)
        match outcome:
            case Success():
                return outcome
            case Failure():
                return fallback_f2(value)
        raise ContractError.non_result(outcome)

    return switch


# ──────────────────────── Deferred ────────────────────────


def bypass_async(
    alt_fn: Callable[[E], Awaitable[Result[B, F]]],
) -> Callable[[Result[A, E] | Awaitable[Result[A, E]]], Awaitable[Result[A, E] | Result[B, F]]]:
    """
    Async bypass: awaits `alt_fn` before returning its Result.

    Accepts either a Result or an awaitable of one:

        await bypass_async(async_add_context)(async_min3char("o"))
    """
    check_callables((alt_fn,))

    async def branch(result: Result[A, E] | Awaitable[Result[A, E]]) -> Result[A, E] | Result[B, F]:
        resolved = await resolve(result)
        match resolved:
            case Success():
                return resolved
            case Failure(err):
                return await resolve(alt_fn(err))
        raise ContractError.non_result(resolved)

    return branch


def recover_async(
    alt_fn: Callable[[E], Awaitable[Success[B, Any]]],
) -> Callable[[Result[A, E] | Awaitable[Result[A, E]]], Awaitable[Success[A, Any] | Success[B, Any]]]:
    """Async recover."""
    check_callables((alt_fn,))

    async def branch(result: Result[A, E] | Awaitable[Result[A, E]]) -> Success[A, Any] | Success[B, Any]:
        resolved = await resolve(result)
        match resolved:
            case Success():
                return resolved
            case Failure(err):
                return _ensure_recovered(await resolve(alt_fn(err)))
        raise ContractError.non_result(resolved)

    return branch


def or_fallback_async(
    f1: Callable[[V], Awaitable[Result[A, E]]],
    fallback_f2: Callable[[V], Awaitable[Result[B, F]]],
) -> Callable[[V], Awaitable[Result[A, E] | Result[B, F]]]:
    """Async or_fallback: the fallback starts only after f1 has resolved to a Failure."""
    check_callables((f1, fallback_f2))

    async def switch(value: V) -> Result[A, E] | Result[B, F]:
        outcome = await resolve(f1(value))
        match outcome:
            case Success():
                return outcome
            case Failure():
                return await resolve(fallback_f2(value))
        raise ContractError.non_result(outcome)

    return switch
