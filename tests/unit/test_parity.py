"""
Sync/async parity: every async combinator, given async twins of pure
switch functions, must produce the same Result as its direct counterpart.
"""

from __future__ import annotations

import pytest

from railswitch import (
    bind_similar,
    bind_similar_async,
    bind_three,
    bind_three_async,
    bind_two,
    bind_two_async,
    bypass,
    bypass_async,
    or_fallback,
    or_fallback_async,
    recover,
    recover_async,
    transform_to_async_switch,
    transform_to_switch,
)
from tests.conftest import (
    add_context_to_error,
    async_add_context_to_error,
    async_fallback_to_uppercase,
    async_max20char,
    async_min3char,
    async_not_dot,
    async_recover_to_good,
    async_valueify_short,
    fallback_to_uppercase,
    max20char,
    min3char,
    not_dot,
    recover_to_good,
    valueify_short,
)

TEXTS = ["", "o", "ab", "abc", "short text", "a.b", "sixteen chars!!!", "escape with dot .",
         "way to many characters in this sentence"]


@pytest.mark.asyncio
@pytest.mark.parametrize("text", TEXTS)
async def test_binders_match(text: str) -> None:
    assert await bind_two_async(async_min3char, async_valueify_short)(text) == bind_two(
        min3char, valueify_short
    )(text)
    assert await bind_three_async(async_min3char, async_max20char, async_valueify_short)(
        text
    ) == bind_three(min3char, max20char, valueify_short)(text)
    assert await bind_similar_async([async_min3char, async_max20char, async_not_dot])(
        text
    ) == bind_similar([min3char, max20char, not_dot])(text)


@pytest.mark.asyncio
@pytest.mark.parametrize("text", TEXTS)
async def test_branches_match(text: str) -> None:
    assert await bypass_async(async_add_context_to_error)(
        async_min3char(text)
    ) == bypass(add_context_to_error)(min3char(text))
    assert await recover_async(async_recover_to_good)(
        async_min3char(text)
    ) == recover(recover_to_good)(min3char(text))
    assert await or_fallback_async(async_min3char, async_fallback_to_uppercase)(
        text
    ) == or_fallback(min3char, fallback_to_uppercase)(text)


@pytest.mark.asyncio
@pytest.mark.parametrize("text", TEXTS)
async def test_lifted_steps_match(text: str) -> None:
    assert await transform_to_async_switch(len)(text) == transform_to_switch(len)(text)
