"""Assertions on the kind of a value (see :mod:`xtest.kinds`)."""

from __future__ import annotations

from typing import TypeVar

from xtest.assertions.base import fail, stringify
from xtest.kinds import Kind, classify, is_integer, to_kind

T = TypeVar("T")


def _assert_kind(value: T, kind: Kind, message: str | None) -> T:
    actual = classify(value)
    if actual is not kind:
        fail(f"kind(value) == {kind.value}", f"kind(value) = {actual.value}", message)
    return value


def assert_type(value: T, kind: Kind | str, message: str | None = None) -> T:
    """Assert that ``value`` is of ``kind``."""
    expected = to_kind(kind)
    actual = classify(value)
    if actual is not expected:
        fail(
            f"kind(value) == {expected.value}",
            f"value = {stringify(value)}\nkind = {actual.value}",
            message,
        )
    return value


def assert_not_type(value: T, kind: Kind | str, message: str | None = None) -> T:
    """Assert that ``value`` is not of ``kind``."""
    unexpected = to_kind(kind)
    if classify(value) is unexpected:
        fail(
            f"kind(value) != {unexpected.value}",
            f"value = {stringify(value)}\nkind = {unexpected.value}",
            message,
        )
    return value


def assert_none(value: T, message: str | None = None) -> T:
    if value is not None:
        fail("value is None", f"kind(value) = {classify(value).value}", message)
    return value


def assert_number(value: T, message: str | None = None) -> T:
    return _assert_kind(value, Kind.NUMBER, message)


def assert_integer(value: T, message: str | None = None) -> T:
    _assert_kind(value, Kind.NUMBER, message)
    if not is_integer(value):
        fail("value is integer", f"value = {stringify(value)}", message)
    return value


def assert_string(value: T, message: str | None = None) -> T:
    return _assert_kind(value, Kind.STRING, message)


def assert_boolean(value: T, message: str | None = None) -> T:
    return _assert_kind(value, Kind.BOOLEAN, message)


def assert_true(value: T, message: str | None = None) -> T:
    if value is not True:
        fail("value is True", f"value = {stringify(value)}", message)
    return value


def assert_false(value: T, message: str | None = None) -> T:
    if value is not False:
        fail("value is False", f"value = {stringify(value)}", message)
    return value


def assert_table(value: T, message: str | None = None) -> T:
    return _assert_kind(value, Kind.TABLE, message)


def assert_function(value: T, message: str | None = None) -> T:
    return _assert_kind(value, Kind.FUNCTION, message)


def assert_thread(value: T, message: str | None = None) -> T:
    return _assert_kind(value, Kind.THREAD, message)


def assert_userdata(value: T, message: str | None = None) -> T:
    return _assert_kind(value, Kind.USERDATA, message)


assert_nil = assert_none
assert_kind = assert_type
assert_not_kind = assert_not_type
