"""Interactive questions asked before scaffolding.

Uses Rich prompts.  Answers already supplied on the command line are kept
and not asked again.
"""

from __future__ import annotations

from pydantic import BaseModel
from rich.console import Console
from rich.prompt import Prompt

from .scaffolder.models import LanguageVariant
from .utils import console as default_console

LANGUAGE_CHOICES: list[str] = [variant.value for variant in LanguageVariant]


class Answers(BaseModel):
    """Raw answers; ``None`` means "not answered yet"."""

    project_name: str | None = None
    language: str | None = None
    extra_packages: str | None = None


def collect_answers(
    answers: Answers | None = None,
    *,
    default_name: str = "my-express-app",
    console: Console | None = None,
) -> Answers:
    """Prompt for every answer missing from *answers*.

    Args:
        answers: Answers already known, typically from command-line flags.
        default_name: Suggested project name.
        console: Console to prompt on; defaults to the shared one.

    Returns:
        A complete set of answers.
    """
    console = console or default_console
    answers = answers.model_copy() if answers is not None else Answers()

    if answers.project_name is None:
        answers.project_name = Prompt.ask(
            "What is your project name?", default=default_name, console=console
        )
    if answers.language is None:
        answers.language = Prompt.ask(
            "Choose language", choices=LANGUAGE_CHOICES, default=LANGUAGE_CHOICES[0],
            console=console,
        )
    if answers.extra_packages is None:
        answers.extra_packages = Prompt.ask(
            "Enter any extra NPM packages you want to install "
            "(space-separated, or leave blank)",
            default="",
            show_default=False,
            console=console,
        )
    return answers
