from __future__ import annotations

import importlib.util
import os
from contextlib import contextmanager
from pathlib import Path
from types import ModuleType
from typing import Iterator

import typer

app = typer.Typer(name="xtest", help="Run labeled test procedures")


def _load_suite(path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(f"xtest_suite_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise ValueError(f"cannot load suite file: {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@contextmanager
def _scratch_env(scratch_dir: str | None) -> Iterator[None]:
    """Export XTEST_SCRATCH while the suite runs, then restore the old value."""
    if scratch_dir is None:
        yield
        return
    previous = os.environ.get("XTEST_SCRATCH")
    os.environ["XTEST_SCRATCH"] = scratch_dir
    try:
        yield
    finally:
        if previous is None:
            os.environ.pop("XTEST_SCRATCH", None)
        else:
            os.environ["XTEST_SCRATCH"] = previous


@app.command()
def run(
    suite: str = typer.Argument(help="Python file defining the test items"),
    attr: str = typer.Option(
        "tests", "--attr", help="Name of the item list inside the suite file"
    ),
    config: str | None = typer.Option(None, "--config", "-c", help="Path to xtest.yaml"),
    continue_on_failure: bool | None = typer.Option(
        None,
        "--continue/--stop",
        help="Keep running after a failing test (overrides config)",
    ),
    labels: bool | None = typer.Option(
        None, "--labels/--no-labels", help="Print per-test labels and outcomes"
    ),
    summary: bool | None = typer.Option(
        None, "--summary/--no-summary", help="Print the final results summary"
    ),
    junit: str | None = typer.Option(None, help="Write a junit.xml report here"),
    output_dir: str = typer.Option(
        "runs", help="Output directory for debug.log and default reports"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Run the test items listed in a suite file."""
    from pydantic import ValidationError

    from xtest.assertions.base import ConfigurationError
    from xtest.config import ProjectConfig, load_config
    from xtest.runner import run as run_items
    from xtest.verbose import setup_logger

    suite_path = Path(suite)
    if not suite_path.exists():
        typer.echo(f"Error: suite file not found: {suite}", err=True)
        raise typer.Exit(1)

    if config is not None:
        config_path = Path(config)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {config}", err=True)
            raise typer.Exit(1)
        try:
            project = load_config(config_path)
        except ValidationError as e:
            typer.echo(f"Error: invalid config {config}:\n{e}", err=True)
            raise typer.Exit(1)
        scratch_dir: str | None = project.scratch_dir
    else:
        project = ProjectConfig()
        scratch_dir = None

    overrides = {
        "continue_on_failure": continue_on_failure,
        "print_labels": labels,
        "print_summary": summary,
    }
    run_config = project.run.model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )

    run_dir = Path(output_dir)
    run_dir.mkdir(parents=True, exist_ok=True)
    logger = setup_logger(run_dir / "debug.log", verbose=verbose, logger_name="xtest")
    logger.debug(f"Loading suite {suite_path} (attribute '{attr}')")

    with _scratch_env(scratch_dir):
        module = _load_suite(suite_path)
        items = getattr(module, attr, None)
        if items is None:
            typer.echo(f"Error: {suite} does not define '{attr}'", err=True)
            raise typer.Exit(1)

        try:
            success, result = run_items(items, run_config, typer.echo)
        except ConfigurationError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    junit_path = junit or project.junit
    if junit_path:
        from xtest.reporting.junit import write_junit

        written = write_junit(result, Path(junit_path), suite_name=suite_path.stem)
        typer.echo(f"JUnit report: {written}")
    if not verbose:
        typer.echo(f"Debug log: {run_dir / 'debug.log'}")

    if not success:
        raise typer.Exit(1)


EXAMPLE_CONFIG = """\
run:
  continue_on_failure: true
  print_labels: true
  print_summary: true
scratch_dir: ${XTEST_SCRATCH:-.xtest}
junit: reports/junit.xml
"""

EXAMPLE_SUITE = """\
import xtest as x

tests = [
    "arithmetic",
    lambda: x.assert_eq(1 + 1, 2),
    "ordering",
    lambda: x.assert_lt(1, 2),
    "structures",
    lambda: x.assert_deep_eq({"a": [1, 2]}, {"a": [1, 2]}),
]
"""


@app.command()
def init(
    dir: str = typer.Option("xtest", "--dir", help="Directory to initialize"),
):
    """Initialize a project with an example config and suite."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    config_file = project_dir / "xtest.yaml"
    if config_file.exists():
        typer.echo(f"xtest.yaml already exists in {dir}, skipping.")
        return

    config_file.write_text(EXAMPLE_CONFIG)
    suite_file = project_dir / "example_suite.py"
    if not suite_file.exists():
        suite_file.write_text(EXAMPLE_SUITE)

    typer.echo(f"Initialized xtest project in {dir}:")
    typer.echo("  xtest.yaml        - run configuration")
    typer.echo("  example_suite.py  - example test items")
