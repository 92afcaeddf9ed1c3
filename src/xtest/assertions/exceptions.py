"""Assertions about whether a callable raises."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from xtest.assertions.base import fail, stringify

T = TypeVar("T")


def _describe(error: BaseException) -> str:
    return f"{type(error).__name__}: {error}"


def assert_ok(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Call ``fn(*args, **kwargs)`` and assert it does not raise.

    Returns whatever ``fn`` returned.
    """
    try:
        return fn(*args, **kwargs)
    except Exception as e:
        fail("function does not raise", _describe(e))


def assert_error(
    fn: Callable[..., Any],
    *args: Any,
    expected: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    **kwargs: Any,
) -> BaseException:
    """Call ``fn(*args, **kwargs)`` and assert it raises.

    Returns the raised exception. With ``expected`` set, an exception of any
    other type propagates unchanged.
    """
    try:
        result = fn(*args, **kwargs)
    except expected as e:
        return e
    fail("function raises", f"result = {stringify(result)}")
