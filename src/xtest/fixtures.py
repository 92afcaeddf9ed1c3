"""Scratch-space fixture files for test procedures."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import IO

from expandvars import expandvars

from xtest.config import DEFAULT_SCRATCH_DIR


class FixtureManager:
    """Manages fixture files under a scratch directory."""

    def __init__(self, base_dir: Path | str) -> None:
        self.base_dir = Path(base_dir)

    def path(self, name: str) -> Path:
        """Return the path of fixture ``name``, refusing to leave base_dir."""
        path = (self.base_dir / name).resolve()
        if not path.is_relative_to(self.base_dir.resolve()):
            raise ValueError(f"Fixture name escapes the scratch directory: {name}")
        return path

    def open(
        self,
        name: str,
        contents: str | None = None,
        prevent_replace: bool = False,
    ) -> IO[str]:
        """Open (creating if needed) fixture ``name`` for reading and writing.

        ``contents`` is written when the file is new, or always unless
        ``prevent_replace`` is set. The returned handle is positioned at the
        start of the file.
        """
        path = self.path(name)
        path.parent.mkdir(parents=True, exist_ok=True)

        existed = path.exists()
        if contents is not None and (not existed or not prevent_replace):
            path.write_text(contents)
        elif not existed:
            path.touch()

        return open(path, "r+")

    def cleanup(self) -> None:
        """Remove the scratch directory and everything in it."""
        if self.base_dir.exists():
            shutil.rmtree(self.base_dir)


def default_scratch_dir() -> Path:
    return Path(expandvars(DEFAULT_SCRATCH_DIR))


def open_fixture(
    name: str,
    contents: str | None = None,
    prevent_replace: bool = False,
    *,
    scratch_dir: Path | str | None = None,
) -> IO[str]:
    """Open fixture ``name`` under ``scratch_dir`` (default: $XTEST_SCRATCH or .xtest)."""
    base = Path(scratch_dir) if scratch_dir is not None else default_scratch_dir()
    return FixtureManager(base).open(name, contents, prevent_replace)
