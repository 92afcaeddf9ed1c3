"""Self-test suite: every check below should pass.

Run with ``xtest run examples/selftest_suite.py --continue``.
"""

import threading

import xtest as x


def _generator():
    yield 1


def basic():
    x.assert_(True, "always true")
    x.assert_not(False)


def kinds():
    x.assert_type(None, "nil")
    x.assert_type(1, "number")
    x.assert_type("I am a string", "string")
    x.assert_type(True, "boolean")
    x.assert_type({}, "table")
    x.assert_type(lambda: None, "function")
    x.assert_type(_generator(), "thread")
    x.assert_type(threading.Lock(), x.Kind.USERDATA)


def arithmetic():
    x.assert_eq(10, 10)
    x.assert_ne(10, 20)
    x.assert_gt(20, 10)
    x.assert_ge(20, 15)
    x.assert_ge(20, 20)
    x.assert_lt(10, 20)
    x.assert_le(15, 20)
    x.assert_le(20, 20)
    x.assert_approx_eq(0.1 + 0.2, 0.3)


def type_checks():
    x.assert_none(None)
    x.assert_number(10)
    x.assert_number(0.5)
    x.assert_integer(10)
    x.assert_string("I am a string")
    x.assert_boolean(True)
    x.assert_boolean(False)
    x.assert_true(True)
    x.assert_false(False)
    x.assert_table({})
    x.assert_function(lambda: None)
    x.assert_thread(_generator())


def structures():
    x.assert_shallow_eq({"a": 1, "b": 2}, {"b": 2, "a": 1, "c": 3})
    x.assert_deep_eq([1, [2, 3]], [1, [2, 3]])
    x.assert_deep_ne([1, [2, 3]], [1, [2, 4]])


def errors():
    x.assert_ok(int, "3")
    x.assert_error(int, "three")


tests = [
    "assert_ / assert_not",
    basic,
    "assert_type",
    kinds,
    "Arithmetic assertions",
    arithmetic,
    "Type assertions",
    type_checks,
    "Structural equality",
    structures,
    "Error assertions",
    errors,
]
