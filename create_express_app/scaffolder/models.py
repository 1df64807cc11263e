"""Pydantic v2 models for the Express project scaffolder.

Defines the language variant enumeration, the description of the project to
scaffold, and the structured documents (``package.json``, ``tsconfig.json``)
written into the generated project.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for every failure the scaffolder reports to the user."""


class UnknownVariantError(ScaffoldError, ValueError):
    """Raised when a language variant outside the supported set is requested."""

    def __init__(self, value: object) -> None:
        self.value = value
        choices = ", ".join(v.value for v in LanguageVariant)
        super().__init__(f"Unknown language variant {value!r} (expected one of: {choices})")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


CURRENT_DIRECTORY = "."

_VARIANT_ALIASES: dict[str, str] = {
    "js": "JavaScript",
    "javascript": "JavaScript",
    "ts": "TypeScript",
    "typescript": "TypeScript",
}


class LanguageVariant(str, Enum):
    """Language of the generated project."""
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"

    @property
    def extension(self) -> str:
        """Source file extension without the leading dot."""
        return "ts" if self is LanguageVariant.TYPESCRIPT else "js"

    @classmethod
    def parse(cls, value: "LanguageVariant | str") -> "LanguageVariant":
        """Return the variant named by *value*.

        Accepts the enum itself, its display name, or a case-insensitive
        alias (``js``, ``ts``, ...).

        Raises:
            UnknownVariantError: If *value* does not name a known variant.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            canonical = _VARIANT_ALIASES.get(value.strip().lower())
            if canonical is not None:
                return cls(canonical)
        raise UnknownVariantError(value)


# ---------------------------------------------------------------------------
# Project description
# ---------------------------------------------------------------------------


class ProjectSpec(BaseModel):
    """Everything the materializer needs to know about the project to create."""

    raw_name: str = Field(..., description="Project name as typed by the user")
    variant: LanguageVariant = Field(..., description="Language of the generated sources")
    extra_packages: list[str] = Field(
        default_factory=list,
        description="Additional npm packages installed after the base install",
    )
    cwd: Path = Field(default_factory=Path.cwd, description="Directory the tool runs in")

    @field_validator("raw_name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("project name must not be empty")
        return value

    @field_validator("variant", mode="before")
    @classmethod
    def _coerce_variant(cls, value: object) -> LanguageVariant:
        return LanguageVariant.parse(value)  # type: ignore[arg-type]

    @classmethod
    def from_answers(
        cls,
        project_name: str,
        language: LanguageVariant | str,
        extra_packages: str = "",
        cwd: Path | None = None,
    ) -> "ProjectSpec":
        """Build a spec from the raw prompt answers.

        *extra_packages* is the free-text answer; it is split on whitespace.
        """
        return cls(
            raw_name=project_name,
            variant=LanguageVariant.parse(language),
            extra_packages=extra_packages.split(),
            cwd=cwd if cwd is not None else Path.cwd(),
        )

    @property
    def is_current_directory(self) -> bool:
        """Whether the project is generated in place, inside ``cwd``."""
        return self.raw_name == CURRENT_DIRECTORY

    @property
    def target_directory(self) -> Path:
        """Absolute path of the project root."""
        base = Path(self.cwd).resolve()
        if self.is_current_directory:
            return base
        return base / self.raw_name

    @property
    def resolved_name(self) -> str:
        """Package name: the final segment of :attr:`target_directory`."""
        return self.target_directory.name


# ---------------------------------------------------------------------------
# Generated documents
# ---------------------------------------------------------------------------


class FileTemplate(BaseModel):
    """A file to write, relative to the project root."""
    model_config = ConfigDict(frozen=True)

    relative_path: str
    content: str


class PackageManifest(BaseModel):
    """The generated ``package.json``."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    version: str = "1.0.0"
    main: str
    license: str = "MIT"
    scripts: dict[str, str] = Field(default_factory=dict)
    dependencies: dict[str, str] = Field(default_factory=lambda: {"express": "^4.19.2"})
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")

    def to_json(self) -> str:
        """Serialise with npm's key names and two-space indentation."""
        return self.model_dump_json(by_alias=True, indent=2)


class CompilerOptions(BaseModel):
    """``compilerOptions`` block of ``tsconfig.json``."""
    model_config = ConfigDict(populate_by_name=True)

    target: str = "ES2020"
    module: str = "CommonJS"
    root_dir: str = Field(default=".", alias="rootDir")
    out_dir: str = Field(default="dist", alias="outDir")
    es_module_interop: bool = Field(default=True, alias="esModuleInterop")
    strict: bool = True
    skip_lib_check: bool = Field(default=True, alias="skipLibCheck")


class CompilerConfig(BaseModel):
    """The generated ``tsconfig.json`` (TypeScript projects only)."""
    model_config = ConfigDict(populate_by_name=True)

    compiler_options: CompilerOptions = Field(
        default_factory=CompilerOptions, alias="compilerOptions"
    )
    include: list[str] = Field(default_factory=lambda: ["src/**/*", "index.ts"])

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


class RenderedProject(BaseModel):
    """Every piece of content the materializer writes for one project."""

    variant: LanguageVariant
    manifest: PackageManifest
    entry_point: str
    app_file: str
    router_file: str
    controller_file: str
    middleware_file: str
    ignore_file: str
    readme: str
    compiler_config: Optional[CompilerConfig] = None

    @property
    def extension(self) -> str:
        return self.variant.extension

    def files(self) -> list[FileTemplate]:
        """Return the files in the order they are written to disk."""
        ext = self.extension
        files = [
            FileTemplate(relative_path=f"index.{ext}", content=self.entry_point),
            FileTemplate(relative_path=f"src/app.{ext}", content=self.app_file),
            FileTemplate(relative_path=f"src/routes/index.{ext}", content=self.router_file),
            FileTemplate(
                relative_path=f"src/controllers/home.{ext}", content=self.controller_file
            ),
            FileTemplate(
                relative_path=f"src/middlewares/logger.{ext}", content=self.middleware_file
            ),
            FileTemplate(relative_path="package.json", content=self.manifest.to_json()),
        ]
        if self.compiler_config is not None:
            files.append(
                FileTemplate(relative_path="tsconfig.json", content=self.compiler_config.to_json())
            )
        files.append(FileTemplate(relative_path=".gitignore", content=self.ignore_file))
        files.append(FileTemplate(relative_path="README.md", content=self.readme))
        return files
