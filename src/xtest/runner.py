from __future__ import annotations

import logging
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Callable, Union

from xtest.assertions.base import AssertionFailure, ConfigurationError
from xtest.config import RunConfig, resolve_config

Label = str
Procedure = Callable[[], Any]
TestItem = Union[Label, Procedure]
Output = Callable[[str], Any]

DEFAULT_LOGGER_NAME = "xtest.runner"


@dataclass
class TestOutcome:
    """Outcome of a single executed procedure."""

    __test__ = False

    number: int
    label: str | None
    passed: bool
    duration_seconds: float
    failure: AssertionFailure | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "label": self.label,
            "passed": self.passed,
            "duration_seconds": self.duration_seconds,
            "failure": self.failure.to_dict() if self.failure else None,
        }


@dataclass
class RunResult:
    """Aggregate counts for one run. ``passed + failed == total`` always."""

    passed: int = 0
    failed: int = 0
    total: int = 0
    elapsed_seconds: float | None = None
    outcomes: list[TestOutcome] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.failed == 0

    def record(self, outcome: TestOutcome) -> None:
        self.outcomes.append(outcome)
        self.total += 1
        if outcome.passed:
            self.passed += 1
        else:
            self.failed += 1

    def summary(self) -> str:
        lines = [
            "Test results:",
            f"\tpassed: {self.passed}",
            f"\tfailed: {self.failed}",
            f"\ttotal: {self.total}",
        ]
        if self.elapsed_seconds is not None:
            lines.append(f"\telapsed: {self.elapsed_seconds:.3f}s")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "failed": self.failed,
            "total": self.total,
            "elapsed_seconds": self.elapsed_seconds,
            "outcomes": [o.to_dict() for o in self.outcomes],
        }


def validate_items(items: Sequence[TestItem]) -> Sequence[TestItem]:
    """Check that ``items`` is a sequence of labels and procedures.

    Raises ConfigurationError naming the first bad index.
    """
    if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
        raise ConfigurationError(
            "Tests must be a sequence of callables and label strings, "
            f"got {type(items).__name__}"
        )
    for index, item in enumerate(items):
        if not isinstance(item, str) and not callable(item):
            raise ConfigurationError(
                "Tests should only contain a string label or a callable, but "
                f"instead got {item!r} of type {type(item).__name__} at index {index}."
            )
    return items


def _as_failure(error: Exception) -> AssertionFailure:
    if isinstance(error, AssertionFailure):
        return error
    return AssertionFailure(
        condition="procedure does not raise",
        detail=f"{type(error).__name__}: {error}",
        error=error,
    )


class Runner:
    """Runs labeled procedures one after another and counts the outcomes."""

    def __init__(
        self,
        config: RunConfig | Mapping[str, Any] | None = None,
        output: Output | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = resolve_config(config)
        self.output = output or print
        self.logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)

    def run(self, items: Sequence[TestItem]) -> tuple[bool, RunResult]:
        """Run every item in order. Returns ``(success, result)``."""
        validate_items(items)
        config = self.config
        result = RunResult()
        pending_label: str | None = None
        test_number = 0

        self.logger.debug(f"Starting run of {len(items)} item(s)")
        started = time.perf_counter()

        for item in items:
            if isinstance(item, str):
                if config.print_labels:
                    # Consecutive labels stack up for the next procedure
                    pending_label = (
                        item if pending_label is None else f"{pending_label}\n{item}"
                    )
                continue

            test_number += 1
            label = pending_label
            pending_label = None
            if config.print_labels:
                self.output(f"Test #{test_number} : {label or ''}")

            outcome = self._execute(test_number, label, item)
            result.record(outcome)

            if outcome.passed:
                if config.print_labels:
                    self.output("Passed!")
                continue

            if config.print_labels:
                self.output("Failed!")
                self.output(str(outcome.failure))
            if not config.continue_on_failure:
                self.logger.debug(
                    f"Stopping after test #{test_number}: continue_on_failure is off"
                )
                break

        result.elapsed_seconds = time.perf_counter() - started
        self.logger.debug(
            f"Run finished: {result.passed} passed, {result.failed} failed, "
            f"{result.total} total in {result.elapsed_seconds:.3f}s"
        )

        if config.print_summary:
            self.output(result.summary())
        return result.success, result

    def _execute(
        self, number: int, label: str | None, procedure: Procedure
    ) -> TestOutcome:
        """Call one procedure, turning anything it raises into a failure."""
        self.logger.debug(f"Running test #{number}: {label or '(unlabeled)'}")
        started = time.perf_counter()
        try:
            procedure()
        except Exception as e:
            duration = time.perf_counter() - started
            failure = _as_failure(e)
            self.logger.debug(
                f"Test #{number} failed: {failure}",
                exc_info=failure.error is not None,
            )
            return TestOutcome(
                number=number,
                label=label,
                passed=False,
                duration_seconds=duration,
                failure=failure,
            )
        duration = time.perf_counter() - started
        self.logger.debug(f"Test #{number} passed in {duration:.3f}s")
        return TestOutcome(
            number=number, label=label, passed=True, duration_seconds=duration
        )


def run(
    items: Sequence[TestItem],
    config: RunConfig | Mapping[str, Any] | None = None,
    output: Output | None = None,
    *,
    logger: logging.Logger | None = None,
) -> tuple[bool, RunResult]:
    """Run ``items`` with ``config`` merged onto the defaults."""
    return Runner(config=config, output=output, logger=logger).run(items)
