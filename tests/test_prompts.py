"""Tests for the interactive answer collector."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from create_express_app.prompts import LANGUAGE_CHOICES, Answers, collect_answers

pytestmark = pytest.mark.unit


def test_language_choices():
    assert LANGUAGE_CHOICES == ["JavaScript", "TypeScript"]


def test_prompts_for_everything_missing():
    with patch(
        "create_express_app.prompts.Prompt.ask",
        side_effect=["demo", "TypeScript", "dotenv cors"],
    ) as ask:
        answers = collect_answers()

    assert answers == Answers(
        project_name="demo", language="TypeScript", extra_packages="dotenv cors"
    )
    assert ask.call_count == 3
    name_call, language_call, packages_call = ask.call_args_list
    assert name_call.kwargs["default"] == "my-express-app"
    assert language_call.kwargs["choices"] == ["JavaScript", "TypeScript"]
    assert packages_call.kwargs["default"] == ""


def test_custom_default_name():
    with patch(
        "create_express_app.prompts.Prompt.ask", side_effect=["starter", "JavaScript", ""]
    ) as ask:
        collect_answers(default_name="starter")
    assert ask.call_args_list[0].kwargs["default"] == "starter"


def test_known_answers_are_not_asked():
    known = Answers(project_name="api", language="ts")
    with patch("create_express_app.prompts.Prompt.ask", return_value="") as ask:
        answers = collect_answers(known)

    ask.assert_called_once()
    assert answers.project_name == "api"
    assert answers.language == "ts"
    assert answers.extra_packages == ""
    # The caller's object is left untouched
    assert known.extra_packages is None


def test_nothing_asked_when_complete():
    known = Answers(project_name=".", language="JavaScript", extra_packages="")
    with patch("create_express_app.prompts.Prompt.ask") as ask:
        assert collect_answers(known) == known
    ask.assert_not_called()
