"""Equality and ordering assertions.

Two-operand assertions return ``(left, right)`` so they can wrap arguments
inline at a call site.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, TypeVar

from xtest.assertions.base import fail, operands

L = TypeVar("L")
R = TypeVar("R")

Equality = Callable[[Any, Any], bool]


def assert_eq(
    left: L, right: R, message: str | None = None, *, eq: Equality = operator.eq
) -> tuple[L, R]:
    """Assert ``eq(left, right)``. ``eq`` defaults to ``==``."""
    if not eq(left, right):
        fail("left == right", operands(left, right), message)
    return left, right


def assert_ne(
    left: L, right: R, message: str | None = None, *, eq: Equality = operator.eq
) -> tuple[L, R]:
    """Assert ``not eq(left, right)``."""
    if eq(left, right):
        fail("left != right", operands(left, right), message)
    return left, right


def assert_lt(left: L, right: R, message: str | None = None) -> tuple[L, R]:
    if not left < right:  # type: ignore[operator]
        fail("left < right", operands(left, right), message)
    return left, right


def assert_gt(left: L, right: R, message: str | None = None) -> tuple[L, R]:
    if not left > right:  # type: ignore[operator]
        fail("left > right", operands(left, right), message)
    return left, right


def assert_le(left: L, right: R, message: str | None = None) -> tuple[L, R]:
    if not left <= right:  # type: ignore[operator]
        fail("left <= right", operands(left, right), message)
    return left, right


def assert_ge(left: L, right: R, message: str | None = None) -> tuple[L, R]:
    if not left >= right:  # type: ignore[operator]
        fail("left >= right", operands(left, right), message)
    return left, right


def assert_approx_eq(
    left: float,
    right: float,
    margin: float = sys.float_info.epsilon,
    message: str | None = None,
) -> tuple[float, float]:
    """Assert that ``left`` and ``right`` differ by at most ``margin``.

    Fails only when the difference exceeds the margin.
    """
    if margin < 0:
        raise ValueError(f"margin must be non-negative, got {margin}")
    difference = abs(left - right)
    if not difference <= margin:
        fail(
            "abs(left - right) <= margin",
            f"{operands(left, right)},\nmargin = {margin},\ndifference = {difference}",
            message,
        )
    return left, right


assert_equal = assert_eq
assert_not_equal = assert_ne
assert_less_than = assert_lt
assert_greater_than = assert_gt
assert_less_equal = assert_le
assert_greater_equal = assert_ge
assert_almost_equal = assert_approx_eq
