"""Target directory planning for a new project.

Resolves where the project goes, refuses to reuse an existing folder, and
creates the fixed ``src/`` subdirectory tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .models import CURRENT_DIRECTORY, ScaffoldError


# Created under the project root for every variant, in this order.
DIRECTORY_PLAN: tuple[str, ...] = (
    "src/routes",
    "src/controllers",
    "src/middlewares",
)


class CollisionError(ScaffoldError):
    """Raised when the target directory already exists."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f'Folder "{name}" already exists. Please choose another name.')


@dataclass(frozen=True)
class Layout:
    """Result of :func:`plan_layout`."""

    target_directory: Path
    resolved_name: str
    created: bool


def plan_layout(raw_name: str, cwd: str | Path) -> Layout:
    """Resolve and create the project root for *raw_name*.

    ``"."`` means "generate into *cwd*": nothing is checked or created.
    Any other name is joined onto *cwd*; the directory must not exist yet
    and is created empty.

    The existence check and the ``mkdir`` are not atomic.  Another process
    creating the folder in between makes ``mkdir`` raise
    ``FileExistsError`` rather than :class:`CollisionError`.

    Raises:
        CollisionError: If the target directory already exists.
    """
    base = Path(cwd).resolve()
    if raw_name == CURRENT_DIRECTORY:
        return Layout(target_directory=base, resolved_name=base.name, created=False)

    target = base / raw_name
    if target.exists():
        raise CollisionError(raw_name, target)

    target.mkdir(parents=True)
    return Layout(target_directory=target, resolved_name=target.name, created=True)


def create_directories(root: Path) -> list[Path]:
    """Create every directory of :data:`DIRECTORY_PLAN` below *root*.

    Existing directories are left alone.

    Returns:
        The created (or already present) directories, in plan order.
    """
    created: list[Path] = []
    for relative in DIRECTORY_PLAN:
        path = root / relative
        path.mkdir(parents=True, exist_ok=True)
        created.append(path)
    return created
