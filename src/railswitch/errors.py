"""
Library exceptions: raised only for misuse of the library itself.

Failures of the caller's domain never become exceptions: they travel as
Failure values. These classes cover the other case, where a Result is
unwrapped on the wrong track, a pipeline is assembled incorrectly, or a
user function breaks the shape it promised.

Each one also subclasses the built-in exception a plain Python caller would
expect (ValueError / TypeError), so existing `except ValueError` blocks
keep working.
"""

from __future__ import annotations


class RailswitchError(Exception):
    """Base exception for all railswitch misuse errors."""


class UnwrapError(RailswitchError, ValueError):
    """Raised when value() is read from a Failure or error() from a Success."""


class CompositionError(RailswitchError, ValueError):
    """Raised when a pipeline is assembled from invalid switch functions."""


class ContractError(RailswitchError, TypeError):
    """Raised when a switch function returns something other than a Result."""

    def __init__(self, message: str, produced: object) -> None:
        super().__init__(message)
        self.produced = produced

    @classmethod
    def non_result(cls, produced: object) -> ContractError:
        return cls(f"Switch function returned a non-Result: {produced!r}", produced)


class RecoveryContractError(ContractError):
    """Raised when a recover function returns something other than a Success."""
