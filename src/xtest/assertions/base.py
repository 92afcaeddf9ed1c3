"""Base data structures for the assertion system."""

from __future__ import annotations

from typing import NoReturn


class XtestError(Exception):
    """Base class for xtest errors that are not test failures."""


class ConfigurationError(XtestError, TypeError):
    """Raised when the runner is handed malformed input."""


class AssertionFailure(AssertionError):
    """Structured failure raised by every assertion.

    Attributes:
        condition: The violated condition (e.g. "left == right"). May be None
            for failures that do not come from a named check.
        detail: Rendering of the actual operand(s).
        message: Caller-supplied override. When set it replaces ``detail``
            in the rendered text.
        error: The original exception when the runner wrapped a non-assertion
            error raised by a procedure.
    """

    def __init__(
        self,
        condition: str | None = None,
        detail: str | None = None,
        message: str | None = None,
        error: BaseException | None = None,
    ) -> None:
        self.condition = condition
        self.detail = detail
        self.message = message
        self.error = error
        super().__init__(self.render())

    @property
    def text(self) -> str | None:
        """The explanatory part of the failure, honouring the override."""
        return self.message if self.message is not None else self.detail

    def render(self) -> str:
        head = "assertion "
        if self.condition:
            head += f"'{self.condition}' "
        head += "failed"
        text = self.text
        if text:
            return f"{head}:\n{text}"
        return f"{head}!"

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> dict[str, str | None]:
        return {
            "condition": self.condition,
            "detail": self.detail,
            "message": self.message,
        }


def stringify(value: object) -> str:
    """Convert a value to a printable string, quoting strings and bytes."""
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="backslashreplace")
    if isinstance(value, str):
        escaped = (
            value.replace("\\", "\\\\")
            .replace('"', '\\"')
            .replace("\n", "\\n")
            .replace("\r", "\\r")
            .replace("\0", "\\0")
        )
        return f'"{escaped}"'
    return str(value)


def operands(left: object, right: object) -> str:
    return f"left = {stringify(left)},\nright = {stringify(right)}"


def fail(
    condition: str | None, detail: str | None = None, message: str | None = None
) -> NoReturn:
    """Raise an :class:`AssertionFailure` for ``condition``."""
    # Hide this frame so pytest-style tracebacks point at the caller.
    __tracebackhide__ = True
    raise AssertionFailure(condition=condition, detail=detail, message=message)
