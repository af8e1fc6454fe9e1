"""
Tracing: structured logging around individual switch functions.

The combinators stay silent. To see what a pipeline does, wrap the steps
you care about before composing them:

    validate = bind_similar([
        traced(min3char),
        traced(max20char),
        traced(not_dot, step="no-dots"),
    ])

Each traced call emits one event:

    switch.step_succeeded   step=..., duration_ms=...  [value=...]
    switch.step_failed      step=..., duration_ms=...  [error=...]
    switch.step_raised      step=..., duration_ms=..., error=..., error_type=...

A traced step returns the exact Result its inner step produced and re-raises
any exception unchanged, so wrapping never changes which track a pipeline
ends on.
"""

from __future__ import annotations

import time
from functools import wraps
from typing import Any, Awaitable, Callable, TypeVar

import structlog

from railswitch.config import RailswitchSettings, get_settings
from railswitch.result import Failure, Result, Success
from railswitch.switch import resolve

V = TypeVar("V")
A = TypeVar("A")
E = TypeVar("E")


def configure_structlog(settings: RailswitchSettings | None = None) -> None:
    """
    Configure structlog from RailswitchSettings.

    console: colored, human-readable output (development).
    json:    one JSON object per line (machine-readable).
    """
    settings = settings or get_settings()

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.log_format == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.numeric_log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _step_name(switch: Callable[..., Any], step: str | None) -> str:
    return step or getattr(switch, "__name__", repr(switch))


def _elapsed_ms(start: float) -> float:
    return round((time.monotonic() - start) * 1000, 3)


def _payloads_enabled(include_payloads: bool | None) -> bool:
    return get_settings().trace_payloads if include_payloads is None else include_payloads


def _log_outcome(step: str, start: float, outcome: Any, include_payloads: bool) -> None:
    log = structlog.get_logger()
    match outcome:
        case Success(v):
            extra = {"value": v} if include_payloads else {}
            log.info("switch.step_succeeded", step=step, duration_ms=_elapsed_ms(start), **extra)
        case Failure(err):
            extra = {"error": err} if include_payloads else {}
            log.warning("switch.step_failed", step=step, duration_ms=_elapsed_ms(start), **extra)


def _log_raised(step: str, start: float, error: Exception) -> None:
    structlog.get_logger().error(
        "switch.step_raised",
        step=step,
        duration_ms=_elapsed_ms(start),
        error=str(error),
        error_type=type(error).__name__,
    )


def traced(
    switch: Callable[[V], Result[A, E]],
    step: str | None = None,
    include_payloads: bool | None = None,
) -> Callable[[V], Result[A, E]]:
    """
    Wrap a switch function so every call logs its outcome.

    `step` defaults to the function's __name__. When `include_payloads` is
    None, RailswitchSettings.trace_payloads is read on every call, so a
    reloaded get_settings() reaches steps that are already wrapped.
    """
    name = _step_name(switch, step)

    @wraps(switch)
    def wrapper(value: V) -> Result[A, E]:
        start = time.monotonic()
        try:
            outcome = switch(value)
        except Exception as e:
            _log_raised(name, start, e)
            raise
        _log_outcome(name, start, outcome, _payloads_enabled(include_payloads))
        return outcome

    return wrapper


def traced_async(
    switch: Callable[[V], Awaitable[Result[A, E]]],
    step: str | None = None,
    include_payloads: bool | None = None,
) -> Callable[[V], Awaitable[Result[A, E]]]:
    """Async traced: the duration covers the whole await of the inner step."""
    name = _step_name(switch, step)

    @wraps(switch)
    async def wrapper(value: V) -> Result[A, E]:
        start = time.monotonic()
        try:
            outcome = await resolve(switch(value))
        except Exception as e:
            _log_raised(name, start, e)
            raise
        _log_outcome(name, start, outcome, _payloads_enabled(include_payloads))
        return outcome

    return wrapper
