import logging

import pytest

from xtest.assertions import assert_eq
from xtest.assertions.base import AssertionFailure, ConfigurationError
from xtest.config import RunConfig
from xtest.runner import Runner, RunResult, TestOutcome, run, validate_items


def _passing():
    pass


def _failing():
    assert_eq(10, 20)


# --- counting invariants ---


def test_all_passing(sink):
    success, result = run(["a", _passing, "b", _passing], output=sink.append)
    assert success is True
    assert (result.passed, result.failed, result.total) == (2, 0, 2)
    assert result.elapsed_seconds is not None


def test_labels_are_not_counted(quiet):
    success, result = run(["one", "two", "three", _passing], quiet)
    assert result.total == 1
    assert result.passed + result.failed == result.total


def test_empty_run(sink):
    success, result = run([], output=sink.append)
    assert success is True
    assert (result.passed, result.failed, result.total) == (0, 0, 0)
    assert sink[-1].startswith("Test results:")


def test_success_iff_no_failures(quiet):
    success, result = run([_passing, _failing], {**quiet, "continue": True})
    assert success is False
    assert result.failed == 1
    assert result.success is False


# --- continue-on-failure policy ---


def test_stops_at_first_failure_by_default(quiet):
    calls = []
    items = [_passing, _failing, lambda: calls.append("after")]

    success, result = run(items, quiet)

    assert success is False
    assert calls == []
    assert (result.passed, result.failed, result.total) == (1, 1, 2)


def test_continue_on_failure_runs_everything(quiet):
    calls = []
    items = [_failing, lambda: calls.append(1), _failing, lambda: calls.append(2)]

    success, result = run(items, {**quiet, "continue_on_failure": True})

    assert success is False
    assert calls == [1, 2]
    assert (result.passed, result.failed, result.total) == (2, 2, 4)


def test_continue_accepts_legacy_and_camel_case_keys(quiet):
    for key in ("continue", "continueOnFailure"):
        _, result = run([_failing, _passing], {**quiet, key: True})
        assert result.total == 2


# --- failure interception ---


def test_assertion_failure_payload_is_recorded(quiet):
    _, result = run([_failing], quiet)
    failure = result.outcomes[0].failure
    assert isinstance(failure, AssertionFailure)
    assert failure.condition == "left == right"
    assert "10" in failure.detail and "20" in failure.detail
    assert failure.error is None


def test_other_exceptions_are_wrapped(quiet):
    def boom():
        raise KeyError("missing")

    success, result = run([boom], quiet)
    assert success is False
    failure = result.outcomes[0].failure
    assert failure.condition == "procedure does not raise"
    assert "KeyError" in failure.detail
    assert isinstance(failure.error, KeyError)


def test_keyboard_interrupt_propagates(quiet):
    def interrupted():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        run([interrupted], quiet)


# --- labels and output ---


def test_consecutive_labels_are_joined(sink):
    _, result = run(["A", "B", _passing], {"print_summary": False}, sink.append)
    assert sink[0] == "Test #1 : A\nB"
    assert result.outcomes[0].label == "A\nB"


def test_label_is_cleared_after_use(sink):
    run(["A", _passing, _passing], {"print_summary": False}, sink.append)
    assert sink == ["Test #1 : A", "Passed!", "Test #2 : ", "Passed!"]


def test_labels_ignored_when_printing_disabled(sink):
    _, result = run(["A", _passing], {"print_labels": False}, sink.append)
    assert result.outcomes[0].label is None
    assert len(sink) == 1
    assert sink[0].startswith("Test results:")


def test_failure_output(sink):
    run(["breaks", _failing], {"print_summary": False}, sink.append)
    assert sink[0] == "Test #1 : breaks"
    assert sink[1] == "Failed!"
    assert sink[2].startswith("assertion 'left == right' failed:")


def test_summary_format(sink):
    run([_passing, _failing], {"print_labels": False, "continue": True}, sink.append)
    summary = sink[-1]
    assert summary.startswith(
        "Test results:\n\tpassed: 1\n\tfailed: 1\n\ttotal: 2\n\telapsed: "
    )


def test_default_output_is_stdout(capsys):
    run([_passing])
    out = capsys.readouterr().out
    assert "Test #1 : " in out
    assert "Passed!" in out
    assert "total: 1" in out


# --- configuration errors ---


def test_bad_item_raises_before_anything_runs(quiet):
    calls = []
    items = [lambda: calls.append(1), "label", 42]

    with pytest.raises(ConfigurationError) as exc_info:
        run(items, quiet)

    assert calls == []
    assert "index 2" in str(exc_info.value)
    assert "int" in str(exc_info.value)


@pytest.mark.parametrize("items", ["not a list", 5, None, {"a": 1}])
def test_non_sequence_is_a_configuration_error(items):
    with pytest.raises(ConfigurationError):
        validate_items(items)


def test_configuration_error_is_a_type_error():
    with pytest.raises(TypeError):
        run(None)


def test_bad_config_type():
    with pytest.raises(TypeError):
        Runner(config=["continue"])


def test_bad_config_value_raises_before_anything_runs():
    calls = []
    with pytest.raises(ConfigurationError):
        run([lambda: calls.append(1)], {"continue": "maybe"})
    assert calls == []


# --- runner object ---


def test_runner_accepts_run_config(quiet):
    runner = Runner(config=RunConfig(continue_on_failure=True, print_labels=False, print_summary=False))
    success, result = runner.run([_failing, _passing])
    assert result.total == 2


def test_runner_logs_progress(caplog, quiet):
    logger = logging.getLogger("xtest.test_runner")
    with caplog.at_level(logging.DEBUG, logger="xtest.test_runner"):
        run(["first", _passing, _failing], quiet, logger=logger)

    messages = [r.getMessage() for r in caplog.records]
    assert any("Running test #1: first" in m for m in messages)
    assert any("Test #2 failed" in m for m in messages)
    assert any("continue_on_failure is off" in m for m in messages)


def test_outcomes_are_ordered_and_timed(quiet):
    _, result = run([_passing, _failing], {**quiet, "continue": True})
    assert [o.number for o in result.outcomes] == [1, 2]
    assert all(o.duration_seconds >= 0 for o in result.outcomes)
    assert all(isinstance(o, TestOutcome) for o in result.outcomes)


def test_result_to_dict(quiet):
    _, result = run([_failing], quiet)
    data = result.to_dict()
    assert data["failed"] == 1
    assert data["outcomes"][0]["failure"]["condition"] == "left == right"


def test_run_result_record_keeps_invariant():
    result = RunResult()
    result.record(TestOutcome(number=1, label=None, passed=True, duration_seconds=0.0))
    result.record(TestOutcome(number=2, label=None, passed=False, duration_seconds=0.0))
    assert result.passed + result.failed == result.total == 2
