"""create-express-app configuration.

Typed settings for a scaffolding run, built from environment variables and
overridden by command-line flags.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global create-express-app configuration.

    Instances are created once by the CLI entry point and passed to the
    pipeline.
    """

    package_manager: str = Field(
        default="npm", description="Executable used for the install step"
    )
    default_project_name: str = Field(
        default="my-express-app", description="Suggested answer for the project name prompt"
    )
    skip_install: bool = Field(
        default=False, description="Write the files but do not run the package manager"
    )

    @field_validator("package_manager", "default_project_name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CEA_PACKAGE_MANAGER, CEA_DEFAULT_PROJECT_NAME, CEA_SKIP_INSTALL.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("CEA_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["CEA_PACKAGE_MANAGER"]
        if os.environ.get("CEA_DEFAULT_PROJECT_NAME"):
            kwargs["default_project_name"] = os.environ["CEA_DEFAULT_PROJECT_NAME"]
        if os.environ.get("CEA_SKIP_INSTALL"):
            kwargs["skip_install"] = os.environ["CEA_SKIP_INSTALL"].strip().lower() in _TRUE_VALUES
        return cls(**kwargs)
