"""Closed enumeration of value kinds and the classifier behind type assertions."""

from __future__ import annotations

import inspect
import threading
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from numbers import Real


class Kind(str, Enum):
    NIL = "nil"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    TABLE = "table"
    FUNCTION = "function"
    THREAD = "thread"
    USERDATA = "userdata"


def classify(value: object) -> Kind:
    """Return the kind of ``value``.

    The order of checks matters: ``bool`` is a subclass of ``int`` and ``str``
    is a ``Sequence``, so both are resolved before the broader kinds.
    """
    if value is None:
        return Kind.NIL
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, (Real, Decimal)):
        return Kind.NUMBER
    if isinstance(value, (str, bytes)):
        return Kind.STRING
    if (
        inspect.isgenerator(value)
        or inspect.iscoroutine(value)
        or inspect.isasyncgen(value)
        or isinstance(value, threading.Thread)
    ):
        return Kind.THREAD
    if isinstance(value, (Mapping, Sequence, Set)):
        return Kind.TABLE
    if callable(value):
        return Kind.FUNCTION
    return Kind.USERDATA


def to_kind(kind: Kind | str) -> Kind:
    """Coerce a kind name to :class:`Kind`, rejecting unknown names."""
    if isinstance(kind, Kind):
        return kind
    try:
        return Kind(kind)
    except ValueError:
        valid = ", ".join(k.value for k in Kind)
        raise ValueError(f"Unknown kind '{kind}'. Expected one of: {valid}") from None


def is_integer(value: object) -> bool:
    """True for numbers with no fractional part."""
    if classify(value) is not Kind.NUMBER:
        return False
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    try:
        return float(value).is_integer()  # type: ignore[arg-type]
    except (OverflowError, ValueError):
        # Huge ints overflow float(); they are integers all the same.
        return isinstance(value, int)
