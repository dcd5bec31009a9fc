"""
Nextboost CLI - Command-line interface for project scaffolding

Usage:
    nextboost
    nextboost --config nextboost.yaml
    nextboost --version
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from nextboost.generator import ProjectScaffolder, ScaffoldResult
from nextboost.models import ScaffoldConfig
from nextboost.prompts import Interviewer
from nextboost.runner import ShellRunner

app = typer.Typer(
    name="nextboost",
    help="Bootstrap a performance-tuned Next.js project",
    add_completion=False,
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        from nextboost import __version__
        rprint(f"nextboost {__version__}")
        raise typer.Exit()


@app.command()
def create(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to nextboost.yaml with tool settings",
        dir_okay=False,
        resolve_path=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Create a Next.js app, tune its configs and install a UI library."""
    config = ScaffoldConfig()
    if config_file is not None:
        try:
            config = ScaffoldConfig.from_file(config_file)
        except Exception as e:
            rprint(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)

    result = ScaffoldResult()
    request = Interviewer(config.default_project_name).interview(result)

    scaffolder = ProjectScaffolder(ShellRunner(), config, console=console)
    scaffolder.run(request, result)

    if not result.success:
        raise typer.Exit(1)

    _show_next_steps(result, config)


def _show_next_steps(result: ScaffoldResult, config: ScaffoldConfig) -> None:
    """Show written files and next steps."""
    pm = config.package_manager.value
    project_name = result.project_name
    written = "\n".join(f"  {escape(project_name)}/{f.path}" for f in result.files)
    steps = f"""
[bold]Updated:[/bold]
{written}

[bold]💻 Run the following command to start your project:[/bold]
  cd {escape(project_name)} && {pm} run dev
"""
    rprint(Panel(steps, title="Done"))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
