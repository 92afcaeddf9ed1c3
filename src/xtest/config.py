from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from xtest.assertions.base import ConfigurationError

DEFAULT_SCRATCH_DIR = "${XTEST_SCRATCH:-.xtest}"


class RunConfig(BaseModel):
    """Options read by the runner. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    continue_on_failure: bool = Field(
        False,
        validation_alias=AliasChoices(
            "continue_on_failure", "continueOnFailure", "continue"
        ),
    )
    print_labels: bool = Field(
        True,
        validation_alias=AliasChoices("print_labels", "printLabels", "printLabel"),
    )
    print_summary: bool = Field(
        True,
        validation_alias=AliasChoices(
            "print_summary", "printSummary", "printResults"
        ),
    )


def resolve_config(config: RunConfig | Mapping[str, Any] | None = None) -> RunConfig:
    """Merge caller overrides onto the defaults.

    Raises ConfigurationError for anything that is not a RunConfig, a mapping
    or None, and for mappings holding invalid values.
    """
    if config is None:
        return RunConfig()
    if isinstance(config, RunConfig):
        return config
    if isinstance(config, Mapping):
        try:
            return RunConfig.model_validate(dict(config))
        except ValidationError as e:
            raise ConfigurationError(f"invalid run configuration:\n{e}") from e
    raise ConfigurationError(
        f"config must be a RunConfig or a mapping, got {type(config).__name__}"
    )


class ProjectConfig(BaseModel):
    """Contents of an ``xtest.yaml`` file."""

    model_config = ConfigDict(extra="forbid")

    run: RunConfig = RunConfig()
    scratch_dir: str = Field(DEFAULT_SCRATCH_DIR, validate_default=True)
    junit: str | None = None

    @field_validator("scratch_dir")
    @classmethod
    def expand_scratch_dir(cls, v: str) -> str:
        expanded = expandvars(v)
        if not expanded:
            raise ValueError("scratch_dir must not be empty")
        return expanded


def load_config(path: Path) -> ProjectConfig:
    """Load and validate a project config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = ProjectConfig(**raw)

    # Resolve relative paths relative to config file location
    scratch = Path(config.scratch_dir)
    if not scratch.is_absolute():
        config.scratch_dir = str((config_dir / scratch).resolve())
    if config.junit is not None:
        junit = Path(config.junit)
        if not junit.is_absolute():
            config.junit = str((config_dir / junit).resolve())

    return config
