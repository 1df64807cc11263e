"""create-express-app scaffolder -- generates minimal Express projects.

This module takes a ``ProjectSpec`` and writes a JavaScript or TypeScript
Express skeleton (routes, controllers, middlewares, manifest, readme) into a
new directory, then installs its dependencies.

Quick usage::

    from create_express_app.scaffolder import (
        PackageManagerInstaller,
        ProjectMaterializer,
        ProjectSpec,
    )

    spec = ProjectSpec.from_answers("demo", "TypeScript", "dotenv cors")
    materializer = ProjectMaterializer(PackageManagerInstaller("npm"))
    result = await materializer.materialize(spec)
"""

from create_express_app.scaffolder.generator import MaterializeResult, ProjectMaterializer
from create_express_app.scaffolder.installer import (
    InstallError,
    Installer,
    PackageManagerInstaller,
)
from create_express_app.scaffolder.layout import (
    DIRECTORY_PLAN,
    CollisionError,
    Layout,
    create_directories,
    plan_layout,
)
from create_express_app.scaffolder.models import (
    CompilerConfig,
    FileTemplate,
    LanguageVariant,
    PackageManifest,
    ProjectSpec,
    RenderedProject,
    ScaffoldError,
    UnknownVariantError,
)
from create_express_app.scaffolder.templates import TemplateRenderer, render_project

__all__ = [
    "DIRECTORY_PLAN",
    "CollisionError",
    "CompilerConfig",
    "FileTemplate",
    "InstallError",
    "Installer",
    "LanguageVariant",
    "Layout",
    "MaterializeResult",
    "PackageManagerInstaller",
    "PackageManifest",
    "ProjectMaterializer",
    "ProjectSpec",
    "RenderedProject",
    "ScaffoldError",
    "TemplateRenderer",
    "UnknownVariantError",
    "create_directories",
    "plan_layout",
    "render_project",
]
