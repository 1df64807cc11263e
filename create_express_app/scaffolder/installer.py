"""Package manager invocation for freshly generated projects.

The materializer only depends on the :class:`Installer` protocol, so tests
can substitute a recording fake for the real ``npm`` process.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from ..utils import run_command
from .models import ScaffoldError


class InstallError(ScaffoldError):
    """Raised when the package manager exits with a non-zero status."""

    def __init__(self, command: Sequence[str], exit_code: int) -> None:
        self.command = list(command)
        self.exit_code = exit_code
        super().__init__(
            f"`{' '.join(self.command)}` failed with exit code {exit_code}"
        )


class Installer(Protocol):
    """Something that can install npm dependencies into a project."""

    def command_for(self, packages: Sequence[str]) -> list[str]:
        ...

    async def install(self, cwd: Path, packages: Sequence[str] = ()) -> int:
        ...


class PackageManagerInstaller:
    """Runs ``<command> install [packages...]`` in the project directory.

    Standard streams are inherited so the package manager's progress output
    is visible live.  There is no timeout.
    """

    def __init__(self, command: str = "npm") -> None:
        self.command = command

    def command_for(self, packages: Sequence[str]) -> list[str]:
        return [self.command, "install", *packages]

    async def install(self, cwd: Path, packages: Sequence[str] = ()) -> int:
        """Run the install and return its exit status.

        Raises:
            FileNotFoundError: If the package manager executable is missing.
        """
        returncode, _, _ = await run_command(
            self.command_for(packages), cwd=cwd, timeout=None, capture=False
        )
        return returncode
