"""Main scaffolding orchestrator.

Takes a ``ProjectSpec`` and materializes the Express project on disk: plans
the layout, creates the ``src/`` tree, writes every rendered file and then
runs the package manager.  The sequence is not transactional; a failure
part-way leaves whatever was already written in place.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from ..utils import print_info, write_file_async
from .installer import InstallError, Installer
from .layout import create_directories, plan_layout
from .models import ProjectSpec
from .templates import TemplateRenderer, render_project


@dataclass
class MaterializeResult:
    """What :meth:`ProjectMaterializer.materialize` did."""

    target_directory: Path
    resolved_name: str
    written: list[Path] = field(default_factory=list)
    installs: list[list[str]] = field(default_factory=list)


class ProjectMaterializer:
    """Writes a complete project for a :class:`ProjectSpec`.

    Given a spec, produces:
    - ``index.<ext>`` and the ``src/`` app, router, controller and middleware
    - ``package.json`` and, for TypeScript, ``tsconfig.json``
    - ``.gitignore`` and ``README.md``

    and then installs dependencies through the injected :class:`Installer`.
    """

    def __init__(
        self,
        installer: Installer,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.installer = installer
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def materialize(self, spec: ProjectSpec, *, install: bool = True) -> MaterializeResult:
        """Generate the project described by *spec*.

        Args:
            spec: The project to create.
            install: Run the package manager after writing the files.

        Returns:
            The target directory, the files written and the install commands run.

        Raises:
            CollisionError: If the target directory already exists.  Nothing
                is written in that case.
            InstallError: If the package manager fails.
        """
        # 1. Resolve (and create) the project root
        layout = await asyncio.to_thread(plan_layout, spec.raw_name, spec.cwd)
        root = layout.target_directory
        result = MaterializeResult(target_directory=root, resolved_name=layout.resolved_name)
        print_info(f"\n📦 Creating {spec.variant.value} Express app in {escape(str(root))}\n")

        # 2. Create the src/ skeleton
        await asyncio.to_thread(create_directories, root)

        # 3. Render everything up front
        rendered = render_project(
            spec.variant, layout.resolved_name, spec.raw_name, renderer=self.renderer
        )

        # 4. Write files in order
        for template in rendered.files():
            path = await write_file_async(root / template.relative_path, template.content)
            result.written.append(path)

        # 5. Install dependencies
        if install:
            print_info("\n📥 Installing dependencies...\n")
            result.installs.append(await self.ensure_installed(root, []))

            if spec.extra_packages:
                print_info(f"\n📦 Installing extra packages: {escape(' '.join(spec.extra_packages))}\n")
                result.installs.append(await self.ensure_installed(root, spec.extra_packages))

        return result

    async def ensure_installed(self, cwd: Path, packages: Sequence[str]) -> list[str]:
        """Run one install and fail on a non-zero exit status.

        Returns:
            The command line that was run.

        Raises:
            InstallError: If the installer reports failure.
        """
        command = self.installer.command_for(packages)
        exit_code = await self.installer.install(cwd, list(packages))
        if exit_code != 0:
            raise InstallError(command, exit_code)
        return command
