"""Shallow and deep structural equality.

Both checks are left-keyed: every key of ``left`` must map to an equal value
in ``right``, and keys only ``right`` has are never looked at. Mappings are
keyed by their keys, sequences by index and sets by element.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from typing import Any, TypeVar

from xtest.assertions.base import fail, operands

L = TypeVar("L")
R = TypeVar("R")

_MISSING = object()


def _entries(value: object) -> Mapping[Any, Any] | None:
    """View a structured value as a key -> value mapping, or None for scalars."""
    if isinstance(value, (str, bytes)):
        return None
    if isinstance(value, Mapping):
        return value
    if isinstance(value, Sequence):
        return dict(enumerate(value))
    if isinstance(value, Set):
        return {item: True for item in value}
    return None


def _lookup(entries: Mapping[Any, Any], key: Any) -> Any:
    # Membership first: indexing would trigger __missing__ (Counter, defaultdict)
    try:
        if key not in entries:
            return _MISSING
        return entries[key]
    except (KeyError, TypeError):
        return _MISSING


def shallow_equal(left: object, right: object) -> bool:
    """True if every key in ``left`` maps to an ``==`` value in ``right``."""
    left_entries, right_entries = _entries(left), _entries(right)
    if left_entries is None or right_entries is None:
        return left == right
    for key, value in left_entries.items():
        other = _lookup(right_entries, key)
        if other is _MISSING or not value == other:
            return False
    return True


def deep_equal(left: object, right: object) -> bool:
    """Recursive :func:`shallow_equal`; scalar leaves compare with ``==``.

    Cyclic structures terminate: a pair of containers already being compared
    higher up the stack is assumed equal.
    """
    return _deep_equal(left, right, set())


def _deep_equal(left: object, right: object, active: set[tuple[int, int]]) -> bool:
    left_entries, right_entries = _entries(left), _entries(right)
    if left_entries is None or right_entries is None:
        if left_entries is not None or right_entries is not None:
            return False
        return left == right

    pair = (id(left), id(right))
    if pair in active:
        return True
    active.add(pair)
    try:
        for key, value in left_entries.items():
            other = _lookup(right_entries, key)
            if other is _MISSING or not _deep_equal(value, other, active):
                return False
        return True
    finally:
        active.discard(pair)


def assert_shallow_eq(left: L, right: R, message: str | None = None) -> tuple[L, R]:
    if not shallow_equal(left, right):
        fail("shallow_equal(left, right)", operands(left, right), message)
    return left, right


def assert_shallow_ne(left: L, right: R, message: str | None = None) -> tuple[L, R]:
    if shallow_equal(left, right):
        fail("not shallow_equal(left, right)", operands(left, right), message)
    return left, right


def assert_deep_eq(left: L, right: R, message: str | None = None) -> tuple[L, R]:
    if not deep_equal(left, right):
        fail("deep_equal(left, right)", operands(left, right), message)
    return left, right


def assert_deep_ne(left: L, right: R, message: str | None = None) -> tuple[L, R]:
    if deep_equal(left, right):
        fail("not deep_equal(left, right)", operands(left, right), message)
    return left, right


assert_shallow_equal = assert_shallow_eq
assert_shallow_not_equal = assert_shallow_ne
assert_deep_equal = assert_deep_eq
assert_deep_not_equal = assert_deep_ne
