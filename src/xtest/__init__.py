"""xtest: a minimal sequential unit-testing micro-framework."""

from xtest.assertions import *  # noqa: F401,F403
from xtest.assertions import __all__ as _assertion_names
from xtest.assertions.base import ConfigurationError, XtestError
from xtest.config import RunConfig, load_config, resolve_config
from xtest.fixtures import FixtureManager, open_fixture
from xtest.kinds import Kind, classify
from xtest.runner import Runner, RunResult, TestOutcome, run

__all__ = [
    *_assertion_names,
    "ConfigurationError",
    "FixtureManager",
    "Kind",
    "RunConfig",
    "RunResult",
    "Runner",
    "TestOutcome",
    "XtestError",
    "classify",
    "load_config",
    "open_fixture",
    "resolve_config",
    "run",
]
