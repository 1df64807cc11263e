"""Shared pytest fixtures for the create-express-app test suite.

Provides reusable fixtures for:
- An empty working directory to scaffold into
- A recording fake installer (no npm process is ever started)
- Pre-built JavaScript and TypeScript project specs
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from create_express_app.scaffolder import LanguageVariant, ProjectSpec


# ---------------------------------------------------------------------------
# Fake installer
# ---------------------------------------------------------------------------


class RecordingInstaller:
    """Installer double that records every call instead of running npm.

    ``exit_codes`` is consumed one per call; once exhausted every call
    succeeds.
    """

    def __init__(self, exit_codes: Sequence[int] = (), command: str = "npm") -> None:
        self.command = command
        self.exit_codes = list(exit_codes)
        self.calls: list[tuple[Path, list[str]]] = []

    def command_for(self, packages: Sequence[str]) -> list[str]:
        return [self.command, "install", *packages]

    async def install(self, cwd: Path, packages: Sequence[str] = ()) -> int:
        self.calls.append((Path(cwd), list(packages)))
        return self.exit_codes.pop(0) if self.exit_codes else 0


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Empty directory the tool is 'run' from."""
    directory = tmp_path / "workspace"
    directory.mkdir()
    yield directory


@pytest.fixture
def recording_installer() -> RecordingInstaller:
    return RecordingInstaller()


@pytest.fixture
def make_installer():
    """Factory for installers with scripted exit codes or another command.

    Usage::

        installer = make_installer(exit_codes=[0, 2], command="yarn")
    """

    def factory(exit_codes: Sequence[int] = (), command: str = "npm") -> RecordingInstaller:
        return RecordingInstaller(exit_codes=exit_codes, command=command)

    return factory


# ---------------------------------------------------------------------------
# Project specs
# ---------------------------------------------------------------------------


@pytest.fixture
def js_spec(workdir: Path) -> ProjectSpec:
    """``demo`` / JavaScript / no extra packages."""
    return ProjectSpec(raw_name="demo", variant=LanguageVariant.JAVASCRIPT, cwd=workdir)


@pytest.fixture
def ts_spec(workdir: Path) -> ProjectSpec:
    """``api`` / TypeScript / ``dotenv cors``."""
    return ProjectSpec.from_answers("api", "TypeScript", "dotenv cors", cwd=workdir)


# ---------------------------------------------------------------------------
# Generated output
# ---------------------------------------------------------------------------


@pytest.fixture
def project_files():
    """Callable listing every file below a root as POSIX relative paths."""

    def list_files(root: Path) -> set[str]:
        return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}

    return list_files
