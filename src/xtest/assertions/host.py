"""Host-capability assertions.

Each check fails when the capability is missing and otherwise returns the
thing that proves it is present, so it can be used inline.
"""

from __future__ import annotations

import importlib.util
import os
import shutil
import sys
from importlib.machinery import ModuleSpec
from pathlib import Path

from xtest.assertions.base import fail, stringify


def assert_platform(name: str, message: str | None = None) -> str:
    """Assert ``sys.platform`` starts with ``name`` (e.g. "linux", "win")."""
    if not sys.platform.startswith(name):
        fail(
            f"sys.platform starts with {stringify(name)}",
            f"sys.platform = {stringify(sys.platform)}",
            message,
        )
    return sys.platform


def assert_module(name: str, message: str | None = None) -> ModuleSpec:
    """Assert that module ``name`` can be imported. Returns its spec."""
    try:
        spec = importlib.util.find_spec(name)
    except (ImportError, ValueError):
        spec = None
    if spec is None:
        fail("module is importable", f"module = {stringify(name)}", message)
    return spec


def assert_executable(name: str, message: str | None = None) -> str:
    """Assert that ``name`` resolves to an executable on PATH."""
    path = shutil.which(name)
    if path is None:
        fail("executable is on PATH", f"executable = {stringify(name)}", message)
    return path


def assert_peripheral(path: str | os.PathLike[str], message: str | None = None) -> Path:
    """Assert that a device node (or any other path) is attached."""
    device = Path(path)
    if not device.exists():
        fail("peripheral is attached", f"path = {stringify(str(device))}", message)
    return device


def assert_env(name: str, message: str | None = None) -> str:
    """Assert that environment variable ``name`` is set. Returns its value."""
    value = os.environ.get(name)
    if value is None:
        fail("environment variable is set", f"name = {stringify(name)}", message)
    return value
