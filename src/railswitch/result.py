"""
Result: the two-track value every switch function returns.

A Result[A, E] is either Success(value: A) or Failure(error: E). Nothing
else: the concrete class alone decides which of the two is populated.

    ┌───────────┐   Success    ┌───────────┐   Success    ┌──────────┐
    │ min3char  │──────────────│ max20char │──────────────│ not_dot  │──→ Result[A, E]
    │           │              │           │              │          │
    └─────┬─────┘              └─────┬─────┘              └─────┬────┘
          │ Failure                  │ Failure                  │ Failure
          └──────────────────────────┴──────────────────────────┴──→ Result[A, E]

The error type E is opaque. Nothing in this package inspects, wraps or
copies it: a Failure created by a switch function is the very object the
caller of the pipeline receives.

Python-specific design choices:
  - frozen, slotted dataclasses instead of a tagged record
  - match/case works out of the box: case Success(v) / case Failure(e)
  - covariant type parameters, so Success[int, Never] is a Result[int, str]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, Literal, Never, TypeVar

from railswitch.errors import ContractError, UnwrapError

A = TypeVar("A")
D = TypeVar("D")
E = TypeVar("E")
R = TypeVar("R")
T_co = TypeVar("T_co", covariant=True)
E_co = TypeVar("E_co", covariant=True)


class Result(Generic[T_co, E_co]):
    """
    Railway-oriented Result.

    Two possible states:
      - Success(value): the happy path
      - Failure(error): the error track

    Usage:
        >>> succeed(42).value()
        42

        >>> will_fail("bad input").is_failure()
        True

        >>> match will_fail("At least 3 characters"):
        ...     case Success(text):
        ...         print(text)
        ...     case Failure(reason):
        ...         print(reason)
        At least 3 characters
    """

    __slots__ = ()

    tag: ClassVar[Literal["success", "failure"]]

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a Success."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Result is a Failure."""
        return isinstance(self, Failure)

    def value(self) -> T_co:
        """
        Extract the success value. Raises UnwrapError if called on a Failure.

        Prefer with_default(), .either() or match/case for safe access.
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise UnwrapError(f"Cannot get value from a Failure: {err!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> E_co:
        """
        Extract the failure error. Raises UnwrapError if called on a Success.

        Prefer .either() or match/case for safe access.
        """
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise UnwrapError(f"Cannot get error from a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def either(
        self,
        on_success: Callable[[T_co], R],
        on_failure: Callable[[E_co], R],
    ) -> R:
        """
        Apply one of two functions depending on the state.

            result.either(
                on_success=lambda text: f"Accepted {text}",
                on_failure=lambda reason: f"Rejected: {reason}",
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True)
class Success(Result[T_co, E_co]):
    """The success track: wraps a value of type T."""

    _value: T_co

    tag: ClassVar[Literal["success"]] = "success"

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


@dataclass(frozen=True, slots=True)
class Failure(Result[T_co, E_co]):
    """The failure track: wraps an error of type E."""

    _error: E_co

    tag: ClassVar[Literal["failure"]] = "failure"

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"


# ──────────────────────── Constructors ────────────────────────


def succeed(value: A) -> Success[A, Never]:
    """Create a successful Result wrapping the given value."""
    return Success(value)


def will_fail(error: E) -> Failure[Never, E]:
    """Create a failed Result wrapping the given error."""
    return Failure(error)


fail_with = will_fail


# ──────────────────────── Unwrap ────────────────────────


def with_default(default: D) -> Callable[[Result[A, Any]], A | D]:
    """
    Build an extractor returning the success value, or `default` on failure.

        with_default("anonymous")(succeed("alice"))    # → "alice"
        with_default("anonymous")(will_fail("empty"))  # → "anonymous"
    """

    def extract(result: Result[A, Any]) -> A | D:
        match result:
            case Success(v):
                return v
            case Failure():
                return default
        raise ContractError.non_result(result)

    return extract
