"""Boolean assertions."""

from __future__ import annotations

from typing import TypeVar

from xtest.assertions.base import fail

T = TypeVar("T")


def assert_(cond: T, message: str | None = None) -> T:
    """Assert that ``cond`` is truthy. Returns ``cond``."""
    if not cond:
        fail(None, "Condition is true", message)
    return cond


def assert_not(cond: T, message: str | None = None) -> T:
    """Assert that ``cond`` is falsy. Returns ``cond``."""
    if cond:
        fail(None, "Condition is not true", message)
    return cond
