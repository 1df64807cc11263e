"""create-express-app: scaffold minimal Express server projects.

Prompts for a project name, a language (JavaScript or TypeScript) and extra
npm packages, writes the project skeleton and runs ``npm install``.
"""

from create_express_app.config import Config
from create_express_app.scaffolder import ProjectMaterializer, ProjectSpec, render_project

__all__ = [
    "Config",
    "ProjectMaterializer",
    "ProjectSpec",
    "render_project",
]

__version__ = "1.0.0"
