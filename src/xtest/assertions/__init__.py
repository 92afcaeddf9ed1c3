"""Assertion catalog. Every assertion returns its input or raises AssertionFailure."""

from xtest.assertions.base import AssertionFailure, fail, stringify
from xtest.assertions.basic import assert_, assert_not
from xtest.assertions.comparison import (
    assert_almost_equal,
    assert_approx_eq,
    assert_eq,
    assert_equal,
    assert_ge,
    assert_greater_equal,
    assert_greater_than,
    assert_gt,
    assert_le,
    assert_less_equal,
    assert_less_than,
    assert_lt,
    assert_ne,
    assert_not_equal,
)
from xtest.assertions.exceptions import assert_error, assert_ok
from xtest.assertions.host import (
    assert_env,
    assert_executable,
    assert_module,
    assert_peripheral,
    assert_platform,
)
from xtest.assertions.kind_checks import (
    assert_boolean,
    assert_false,
    assert_function,
    assert_integer,
    assert_kind,
    assert_nil,
    assert_none,
    assert_not_kind,
    assert_not_type,
    assert_number,
    assert_string,
    assert_table,
    assert_thread,
    assert_true,
    assert_type,
    assert_userdata,
)
from xtest.assertions.structural import (
    assert_deep_eq,
    assert_deep_equal,
    assert_deep_ne,
    assert_deep_not_equal,
    assert_shallow_eq,
    assert_shallow_equal,
    assert_shallow_ne,
    assert_shallow_not_equal,
    deep_equal,
    shallow_equal,
)

__all__ = [
    "AssertionFailure",
    "assert_",
    "assert_almost_equal",
    "assert_approx_eq",
    "assert_boolean",
    "assert_deep_eq",
    "assert_deep_equal",
    "assert_deep_ne",
    "assert_deep_not_equal",
    "assert_env",
    "assert_eq",
    "assert_equal",
    "assert_error",
    "assert_executable",
    "assert_false",
    "assert_function",
    "assert_ge",
    "assert_greater_equal",
    "assert_greater_than",
    "assert_gt",
    "assert_integer",
    "assert_kind",
    "assert_le",
    "assert_less_equal",
    "assert_less_than",
    "assert_lt",
    "assert_module",
    "assert_ne",
    "assert_nil",
    "assert_none",
    "assert_not",
    "assert_not_equal",
    "assert_not_kind",
    "assert_not_type",
    "assert_number",
    "assert_ok",
    "assert_peripheral",
    "assert_platform",
    "assert_shallow_eq",
    "assert_shallow_equal",
    "assert_shallow_ne",
    "assert_shallow_not_equal",
    "assert_string",
    "assert_table",
    "assert_thread",
    "assert_true",
    "assert_type",
    "assert_userdata",
    "deep_equal",
    "fail",
    "shallow_equal",
    "stringify",
]
