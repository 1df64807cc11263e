"""Jinja2 template rendering for the Express project scaffolder.

Provides the TemplateRenderer class which serves the in-memory template
sources from :mod:`create_express_app.scaffolder.sources` through a Jinja2
``DictLoader``, and :func:`render_project`, which selects the variant's
sources and assembles the complete :class:`RenderedProject`.  Rendering
never touches the file system.
"""

from __future__ import annotations

from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape

from .models import (
    CURRENT_DIRECTORY,
    CompilerConfig,
    LanguageVariant,
    PackageManifest,
    RenderedProject,
    UnknownVariantError,
)
from .sources import TEMPLATE_SOURCES


# ---------------------------------------------------------------------------
# Variant lookup tables
# ---------------------------------------------------------------------------

_SOURCE_PREFIX: dict[LanguageVariant, str] = {
    LanguageVariant.JAVASCRIPT: "javascript",
    LanguageVariant.TYPESCRIPT: "typescript",
}

# variant -> (main, scripts, devDependencies)
_MANIFEST_PROFILES: dict[LanguageVariant, tuple[str, dict[str, str], dict[str, str]]] = {
    LanguageVariant.JAVASCRIPT: (
        "index.js",
        {
            "start": "node index.js",
            "dev": "nodemon index.js",
        },
        {
            "nodemon": "^3.1.0",
        },
    ),
    LanguageVariant.TYPESCRIPT: (
        "dist/index.js",
        {
            "dev": "ts-node-dev --respawn index.ts",
            "build": "tsc",
            "start": "node dist/index.js",
        },
        {
            "typescript": "^5.3.3",
            "ts-node-dev": "^2.0.0",
            "@types/express": "^4.17.21",
            "@types/node": "^20.5.7",
        },
    ),
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the scaffolder's Jinja2 templates.

    Templates are looked up by name (e.g. ``"typescript/app.j2"``) in a
    mapping of sources, which defaults to the bundled ``TEMPLATE_SOURCES``.
    Undefined placeholders raise instead of rendering as empty strings.
    """

    def __init__(self, sources: dict[str, str] | None = None) -> None:
        self.sources = dict(TEMPLATE_SOURCES if sources is None else sources)
        self.env = Environment(
            loader=DictLoader(self.sources),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, template_name: str, context: dict[str, Any] | None = None) -> str:
        """Render a single template with the provided context.

        Args:
            template_name: Template key, e.g. ``"javascript/index.j2"``.
            context: Variables available inside the template.

        Returns:
            The rendered text.
        """
        template = self.env.get_template(template_name)
        return template.render(**(context or {}))

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return the sorted template names starting with *prefix*."""
        return sorted(name for name in self.sources if name.startswith(prefix))


# ---------------------------------------------------------------------------
# Project rendering
# ---------------------------------------------------------------------------


def build_manifest(variant: LanguageVariant, package_name: str) -> PackageManifest:
    """Return the ``package.json`` document for *variant*."""
    try:
        main, scripts, dev_dependencies = _MANIFEST_PROFILES[variant]
    except KeyError as exc:
        raise UnknownVariantError(variant) from exc
    return PackageManifest(
        name=package_name,
        main=main,
        scripts=dict(scripts),
        dev_dependencies=dict(dev_dependencies),
    )


def render_project(
    variant: LanguageVariant | str,
    resolved_name: str,
    raw_name: str | None = None,
    *,
    renderer: TemplateRenderer | None = None,
) -> RenderedProject:
    """Render every file of a new project.

    Args:
        variant: Language of the generated sources.
        resolved_name: Package name, used for ``package.json`` and the
            readme title.
        raw_name: Name the user typed.  When it is ``"."`` the readme's
            quick start changes into ``.`` rather than the package folder.
            Defaults to *resolved_name*.
        renderer: Renderer to use; a default one is created when omitted.

    Raises:
        UnknownVariantError: If *variant* is not a supported language.
    """
    variant = LanguageVariant.parse(variant)
    renderer = renderer or TemplateRenderer()
    prefix = _SOURCE_PREFIX[variant]
    raw_name = resolved_name if raw_name is None else raw_name

    compiler_config = CompilerConfig() if variant is LanguageVariant.TYPESCRIPT else None
    readme_context = {
        "package_name": resolved_name,
        "language": variant.value,
        "ext": variant.extension,
        "cd_target": CURRENT_DIRECTORY if raw_name == CURRENT_DIRECTORY else resolved_name,
        "has_compiler_config": compiler_config is not None,
    }

    return RenderedProject(
        variant=variant,
        manifest=build_manifest(variant, resolved_name),
        entry_point=renderer.render(f"{prefix}/index.j2"),
        app_file=renderer.render(f"{prefix}/app.j2"),
        router_file=renderer.render(f"{prefix}/routes/index.j2"),
        controller_file=renderer.render(f"{prefix}/controllers/home.j2"),
        middleware_file=renderer.render(f"{prefix}/middlewares/logger.j2"),
        ignore_file=renderer.render("gitignore.j2"),
        readme=renderer.render("README.md.j2", readme_context),
        compiler_config=compiler_config,
    )
