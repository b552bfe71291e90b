"""Assertion helpers for async code under test.

Both wrappers await the operation and turn "did it raise" into exactly one
pytest assertion outcome. The original error is never swallowed: it is either
re-raised inside ``pytest.raises`` or chained onto the failure.
"""

from __future__ import annotations

import inspect
import re
from typing import Any, Callable

import pytest

AsyncOperation = Callable[[], Any]


async def _run(fn: AsyncOperation) -> Any:
    result = fn()
    if inspect.isawaitable(result):
        result = await result
    return result


async def assert_throws_async(
    fn: AsyncOperation,
    expected_message: str | re.Pattern | None = None,
) -> None:
    """Assert that awaiting ``fn()`` raises.

    ``expected_message`` is matched against the error text: a plain string is
    a substring match, a compiled pattern is searched as-is.

    Examples::

        await assert_throws_async(lambda: service.create({}), "title is required")
        await assert_throws_async(service.remove_all, re.compile(r"^Forbidden"))
    """
    error: Exception | None = None
    try:
        await _run(fn)
    except Exception as e:
        error = e

    if isinstance(expected_message, str):
        expected_message = re.escape(expected_message)

    with pytest.raises(Exception, match=expected_message):
        if error is not None:
            raise error


async def assert_not_throws_async(fn: AsyncOperation) -> Any:
    """Assert that awaiting ``fn()`` does not raise. Returns its result."""
    try:
        return await _run(fn)
    except Exception as e:
        raise pytest.fail.Exception(f"expected no error, but got {type(e).__name__}: {e}") from e
