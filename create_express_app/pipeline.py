"""create-express-app command line entry point.

Asks the scaffolding questions, materializes the project and installs its
dependencies.  This module is the only place that prints failures and turns
them into process exit codes.

Usage::

    create-express-app
    create-express-app my-api --language TypeScript --packages "dotenv cors"
    python -m create_express_app . -l js --skip-install
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

from pydantic import ValidationError
from rich.markup import escape

from create_express_app.config import Config
from create_express_app.prompts import Answers, collect_answers
from create_express_app.scaffolder import (
    Installer,
    MaterializeResult,
    PackageManagerInstaller,
    ProjectMaterializer,
    ProjectSpec,
    ScaffoldError,
)
from create_express_app.utils import (
    print_banner,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class Pipeline:
    """Runs one scaffolding session for an already collected ``ProjectSpec``.

    Attributes:
        config: Run configuration.
        installer: Package manager wrapper handed to the materializer.
    """

    def __init__(self, config: Config, installer: Installer | None = None) -> None:
        self.config = config
        self.installer = installer or PackageManagerInstaller(config.package_manager)
        self.materializer = ProjectMaterializer(self.installer)

    async def run(self, spec: ProjectSpec) -> MaterializeResult:
        """Materialize *spec* and print the next steps.

        Raises:
            CollisionError: If the target folder already exists.
            InstallError: If the package manager fails.
        """
        result = await self.materializer.materialize(
            spec, install=not self.config.skip_install
        )

        print_summary_table(
            {
                "Project": escape(result.resolved_name),
                "Language": spec.variant.value,
                "Directory": escape(str(result.target_directory)),
                "Files written": str(len(result.written)),
                "Installs run": str(len(result.installs)),
            },
            title="Project created",
        )
        print_success("✅ Setup complete!")
        print_info("\nTo start:")
        print_info(f"  cd {escape(self._cd_target(spec, result))}")
        if self.config.skip_install:
            print_info(f"  {self.config.package_manager} install")
        print_info(f"  {self.config.package_manager} run dev\n")
        return result

    @staticmethod
    def _cd_target(spec: ProjectSpec, result: MaterializeResult) -> str:
        return "." if spec.is_current_directory else result.resolved_name


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-express-app",
        description="Scaffold a minimal Express project (JavaScript or TypeScript)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-express-app\n"
            "  create-express-app my-api -l TypeScript -p \"dotenv cors\"\n"
            "  create-express-app . -l js --skip-install\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help='Project folder name; "." generates into the current directory',
    )
    parser.add_argument(
        "--language", "-l",
        default=None,
        help="JavaScript or TypeScript (js/ts accepted)",
    )
    parser.add_argument(
        "--packages", "-p",
        default=None,
        help="Extra npm packages to install, space-separated",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        default=None,
        help="Write the project but do not run the package manager",
    )
    parser.add_argument(
        "--package-manager",
        default=None,
        help="Package manager executable (default: npm)",
    )
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Environment configuration with command-line overrides applied."""
    config = Config.from_env()
    overrides: dict[str, object] = {}
    if args.package_manager:
        overrides["package_manager"] = args.package_manager
    if args.skip_install:
        overrides["skip_install"] = True
    if overrides:
        config = Config(**{**config.model_dump(), **overrides})
    return config


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``create-express-app``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ValidationError as exc:
        print_error(f"Invalid configuration: {escape(str(exc))}")
        sys.exit(EXIT_FAILURE)

    print_banner("🛠️  Welcome to Create Express App!")

    try:
        answers = collect_answers(
            Answers(
                project_name=args.project_name,
                language=args.language,
                extra_packages=args.packages,
            ),
            default_name=config.default_project_name,
        )
        spec = ProjectSpec.from_answers(
            answers.project_name or "",
            answers.language or "",
            answers.extra_packages or "",
        )
        asyncio.run(Pipeline(config).run(spec))
    except ScaffoldError as exc:
        # CollisionError, UnknownVariantError, InstallError
        print_error(f"❌ {escape(str(exc))}")
        sys.exit(EXIT_FAILURE)
    except ValidationError as exc:
        print_error(f"❌ Invalid project: {escape(str(exc))}")
        sys.exit(EXIT_FAILURE)
    except KeyboardInterrupt:
        print_warning("\nAborted.")
        sys.exit(EXIT_INTERRUPTED)


if __name__ == "__main__":
    main()
