"""
Nextboost Prompts - interactive interview for project name and UI library

Uses click.prompt together with click.Choice so the choice list is shown and
invalid answers are asked again. A Ctrl-C raises click.Abort; the run record
is marked aborted and the exception is left to typer.
"""

from __future__ import annotations

from typing import Any, Callable

import click

from nextboost.generator import ScaffoldResult
from nextboost.models import ScaffoldRequest, Stage, UiLibrary

PROJECT_NAME_PROMPT = "📁 Enter your project name"
UI_LIBRARY_PROMPT = "🎨 Select a UI library to use"

Prompt = Callable[..., Any]


class Interviewer:
    """Asks the two interview questions in order, recording progress on a ScaffoldResult."""

    def __init__(self, default_project_name: str = "nextjs-app", prompt: Prompt = click.prompt):
        self.default_project_name = default_project_name
        self.prompt = prompt

    def ask_project_name(self, result: ScaffoldResult) -> str:
        result.stage = Stage.INTERVIEWING_NAME
        return self.prompt(PROJECT_NAME_PROMPT, default=self.default_project_name)

    def ask_ui_library(self, result: ScaffoldResult) -> UiLibrary:
        result.stage = Stage.INTERVIEWING_UI
        answer = self.prompt(
            UI_LIBRARY_PROMPT,
            type=click.Choice([lib.value for lib in UiLibrary]),
            show_choices=True,
        )
        return UiLibrary(answer)

    def interview(self, result: ScaffoldResult | None = None) -> ScaffoldRequest:
        if result is None:
            result = ScaffoldResult()
        try:
            project_name = self.ask_project_name(result)
            result.project_name = project_name
            ui_library = self.ask_ui_library(result)
        except click.Abort:
            result.errors.append(f"Interview aborted during {result.stage.value}")
            result.stage = Stage.ABORTED
            raise
        return ScaffoldRequest(project_name=project_name, ui_library=ui_library)
