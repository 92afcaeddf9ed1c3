from __future__ import annotations

from pathlib import Path

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from xtest.metrics import duration_stats, pass_rate
from xtest.runner import RunResult


def _case_name(number: int, label: str | None) -> str:
    if not label:
        return f"Test #{number}"
    # JUnit names are single-line; stacked labels are joined with " / "
    return f"Test #{number} : " + " / ".join(label.splitlines())


def build_suite(result: RunResult, suite_name: str) -> TestSuite:
    suite = TestSuite(suite_name)

    suite.add_property("pass_rate", str(pass_rate(result)))
    stats = duration_stats(result)
    for stat_name, stat_val in stats.to_dict().items():
        if stat_val is not None:
            suite.add_property(f"duration_{stat_name}", str(stat_val))

    for outcome in result.outcomes:
        case = TestCase(_case_name(outcome.number, outcome.label))
        case.classname = suite_name
        case.time = outcome.duration_seconds
        if not outcome.passed and outcome.failure is not None:
            failure = Failure(outcome.failure.render())
            failure.text = outcome.failure.render()
            case.result = [failure]
        suite.add_testcase(case)

    suite.update_statistics()
    # Set time after update_statistics, which resets it to the sum of case times
    suite.time = float(result.elapsed_seconds or 0.0)
    return suite


def write_junit(result: RunResult, path: Path, suite_name: str = "xtest") -> Path:
    """Write a single-suite junit.xml for ``result``, return its path."""
    xml = JUnitXml()
    # Use append (not +=) to preserve properties and time
    xml.append(build_suite(result, suite_name))

    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path
