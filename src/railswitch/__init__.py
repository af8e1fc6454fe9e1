"""
railswitch: Railway-Oriented Programming with switch functions.

Compose fallible steps without exceptions: every step returns a Result, and
the binders stop at the first Failure.

    from railswitch import bind_similar, bypass, will_fail, with_default

    validate = bind_similar([min3char, max20char, not_dot])
    add_context = bypass(lambda reason: will_fail(f"Account 123. London. {reason}"))

    with_default("untitled")(add_context(validate("escape with dot .")))
    # → "untitled"
"""

from railswitch.assertions import ResultAssertions
from railswitch.binding import (
    bind_similar,
    bind_similar_async,
    bind_three,
    bind_three_async,
    bind_two,
    bind_two_async,
)
from railswitch.branching import (
    bypass,
    bypass_async,
    or_fallback,
    or_fallback_async,
    recover,
    recover_async,
)
from railswitch.config import RailswitchSettings, get_settings
from railswitch.errors import (
    CompositionError,
    ContractError,
    RailswitchError,
    RecoveryContractError,
    UnwrapError,
)
from railswitch.guards import guard_to_async_switch, guard_to_switch
from railswitch.result import (
    Failure,
    Result,
    Success,
    fail_with,
    succeed,
    will_fail,
    with_default,
)
from railswitch.switch import (
    AsyncRecoverFunction,
    AsyncSwitchFunction,
    RecoverFunction,
    SwitchFunction,
    transform_to_async_switch,
    transform_to_switch,
)
from railswitch.tracing import configure_structlog, traced, traced_async

__all__ = [
    "Result",
    "Success",
    "Failure",
    "succeed",
    "will_fail",
    "fail_with",
    "with_default",
    "SwitchFunction",
    "AsyncSwitchFunction",
    "RecoverFunction",
    "AsyncRecoverFunction",
    "transform_to_switch",
    "transform_to_async_switch",
    "bind_two",
    "bind_three",
    "bind_similar",
    "bind_two_async",
    "bind_three_async",
    "bind_similar_async",
    "bypass",
    "recover",
    "or_fallback",
    "bypass_async",
    "recover_async",
    "or_fallback_async",
    "guard_to_switch",
    "guard_to_async_switch",
    "RailswitchError",
    "UnwrapError",
    "CompositionError",
    "ContractError",
    "RecoveryContractError",
    "RailswitchSettings",
    "get_settings",
    "configure_structlog",
    "traced",
    "traced_async",
    "ResultAssertions",
]

__version__ = "0.1.0"
