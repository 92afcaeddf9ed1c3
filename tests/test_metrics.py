import pytest

from xtest.metrics import compute_stats, duration_stats, pass_rate
from xtest.runner import RunResult, TestOutcome


def _outcome(number, passed, duration):
    return TestOutcome(
        number=number, label=None, passed=passed, duration_seconds=duration
    )


def test_compute_stats():
    stats = compute_stats([1.0, 2.0, 3.0])
    assert stats.avg == pytest.approx(2.0)
    assert stats.min == 1.0
    assert stats.max == 3.0
    assert stats.stddev == pytest.approx(0.816497, abs=1e-6)


def test_compute_stats_skips_none():
    stats = compute_stats([None, 4, None])
    assert stats.to_dict() == {"avg": 4.0, "min": 4.0, "max": 4.0, "stddev": 0.0}


def test_compute_stats_empty():
    stats = compute_stats([])
    assert stats.to_dict() == {"avg": None, "min": None, "max": None, "stddev": None}


def test_duration_stats_and_pass_rate():
    result = RunResult()
    result.record(_outcome(1, True, 0.5))
    result.record(_outcome(2, False, 1.5))
    result.record(_outcome(3, True, 1.0))

    assert duration_stats(result).avg == pytest.approx(1.0)
    assert pass_rate(result) == pytest.approx(66.67)


def test_pass_rate_empty_run():
    assert pass_rate(RunResult()) == 0.0
