"""
Nextboost Generator - create-next-app bootstrap with tuned config files

Runs create-next-app and the package manager through a CommandRunner and
overwrites next.config.mjs / tailwind.config.mjs from Jinja2 templates.
Any failed command aborts the run; nothing is rolled back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from rich.console import Console
from rich.markup import escape

from nextboost.models import (
    PackageManager,
    ScaffoldConfig,
    ScaffoldRequest,
    Stage,
    UiLibrary,
    ui_library_profile,
)
from nextboost.runner import CommandResult, CommandRunner


NEXT_CONFIG_FILE = "next.config.mjs"
TAILWIND_CONFIG_FILE = "tailwind.config.mjs"
INTL_PACKAGE = "next-intl@latest"

# Paths scanned by purgecss, relative to the generated project
CONTENT_GLOBS = (
    "./src/pages/**/*.{js,ts,jsx,tsx,mdx}",
    "./src/components/**/*.{js,ts,jsx,tsx,mdx}",
    "./src/app/**/*.{js,ts,jsx,tsx,mdx}",
)

GENERATOR_FLAGS = "--eslint --tailwind --app"


# ═══════════════════════════════════════════════════════════════════════════
# RESULT TRACKING
# ═══════════════════════════════════════════════════════════════════════════


@dataclass
class GeneratedFile:
    """Represents a written config file."""

    path: str  # Relative to the project directory


@dataclass
class ScaffoldResult:
    """Result of one scaffolding run."""

    project_name: str = ""
    stage: Stage = Stage.IDLE
    commands: list[CommandResult] = field(default_factory=list)
    files: list[GeneratedFile] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return len(self.errors) == 0

    @property
    def failed_command(self) -> str | None:
        return next((c.command for c in self.commands if not c.success), None)


# ═══════════════════════════════════════════════════════════════════════════
# JINJA ENVIRONMENT SETUP
# ═══════════════════════════════════════════════════════════════════════════


def create_jinja_env(templates_dir: Path) -> Environment:
    """Create Jinja2 environment for the config templates."""

    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


# ═══════════════════════════════════════════════════════════════════════════
# PROJECT SCAFFOLDER
# ═══════════════════════════════════════════════════════════════════════════


class ProjectScaffolder:
    """
    Bootstraps a Next.js project from a ScaffoldRequest.

    Steps run strictly in order: generate, install purge helper, write
    configs, install UI library. The first failing command stops the run.
    """

    def __init__(
        self,
        runner: CommandRunner,
        config: ScaffoldConfig | None = None,
        templates_dir: Path | None = None,
        console: Console | None = None,
        err_console: Console | None = None,
    ):
        """
        Initialize scaffolder.

        Args:
            runner: Executes shell commands (ShellRunner in production)
            config: Tool settings. Defaults reproduce plain npm + create-next-app.
            templates_dir: Path to Jinja2 templates. Defaults to package templates.
            console: Rich console for progress output
            err_console: Rich console for failure diagnostics (stderr by default)
        """
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.runner = runner
        self.config = config or ScaffoldConfig()
        self.env = create_jinja_env(templates_dir)
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    # ═══════════════════════════════════════════════════════════════════════
    # COMMANDS
    # ═══════════════════════════════════════════════════════════════════════

    def generator_command(self, project_name: str) -> str:
        """create-next-app invocation; the name is passed through unescaped."""
        command = f"{self.config.generator} {project_name} {GENERATOR_FLAGS}"
        if self.config.package_manager is not PackageManager.NPM:
            command += f" --use-{self.config.package_manager.value}"
        return command

    def install_command(self, project_path: str, package: str, dev: bool = False) -> str:
        return f"cd {project_path} && {self.config.install_args(package, dev=dev)}"

    # ═══════════════════════════════════════════════════════════════════════
    # CONFIG FILES
    # ═══════════════════════════════════════════════════════════════════════

    def render_next_config(self) -> str:
        template = self.env.get_template(f"{NEXT_CONFIG_FILE}.j2")
        return template.render(intl=self.config.intl)

    def render_tailwind_config(self, ui_library: UiLibrary | str) -> str:
        template = self.env.get_template(f"{TAILWIND_CONFIG_FILE}.j2")
        return template.render(
            content_globs=CONTENT_GLOBS,
            ui_plugin=ui_library_profile(ui_library).plugin,
        )

    def write_next_config(self, project_path: str, result: ScaffoldResult) -> None:
        self._write_file(project_path, NEXT_CONFIG_FILE, self.render_next_config(), result)

    def write_tailwind_config(
        self,
        project_path: str,
        ui_library: UiLibrary,
        result: ScaffoldResult,
    ) -> None:
        content = self.render_tailwind_config(ui_library)
        self._write_file(project_path, TAILWIND_CONFIG_FILE, content, result)

    def _write_file(
        self,
        project_path: str,
        relative_path: str,
        content: str,
        result: ScaffoldResult,
    ) -> None:
        """Overwrite a file inside the project and track it.

        The project directory must already exist; OSError propagates.
        """
        full_path = Path(project_path) / relative_path
        full_path.write_text(content)

        result.files.append(GeneratedFile(path=relative_path))
        self.console.print(f"✅ {relative_path} has been successfully updated.")

    # ═══════════════════════════════════════════════════════════════════════
    # PIPELINE
    # ═══════════════════════════════════════════════════════════════════════

    def run(
        self,
        request: ScaffoldRequest,
        result: ScaffoldResult | None = None,
    ) -> ScaffoldResult:
        """
        Scaffold a project.

        Args:
            request: Project name and UI library from the interview
            result: Record carried over from the interview, if any

        Returns:
            ScaffoldResult; stage is DONE on success, ABORTED otherwise
        """
        if result is None:
            result = ScaffoldResult()
        result.project_name = request.project_name
        ui = request.ui_library.value

        result.stage = Stage.GENERATING
        project_path = self.generate(request.project_name, result)
        if project_path is None:
            return result

        result.stage = Stage.INSTALLING_PURGE
        purge = self.config.purge_package
        self.console.print(f"📦 Installing {escape(purge)}...")
        if not self._execute(self.install_command(project_path, purge, dev=True), result):
            return result
        self.console.print(f"✅ Successfully installed {escape(purge)}.")

        result.stage = Stage.WRITING_CONFIGS
        self.write_next_config(project_path, result)
        self.write_tailwind_config(project_path, request.ui_library, result)

        result.stage = Stage.INSTALLING_UI
        self.console.print(f"📦 Installing {ui}...")
        if not self._execute(self.install_command(project_path, request.profile.package), result):
            return result
        self.console.print(f"✅ Successfully installed {ui}.")

        if self.config.intl:
            result.stage = Stage.INSTALLING_INTL
            self.console.print(f"📦 Installing {INTL_PACKAGE}...")
            if not self._execute(self.install_command(project_path, INTL_PACKAGE), result):
                return result
            self.console.print(f"✅ Successfully installed {INTL_PACKAGE}.")

        result.stage = Stage.DONE
        self.console.print("🎉 Next.js project setup completed successfully!")
        return result

    def generate(self, project_name: str, result: ScaffoldResult) -> str | None:
        """Run create-next-app. Returns the project name, or None on failure."""
        self.console.print(f"🚀 Creating a new Next.js app: {escape(project_name)}...")
        if not self._execute(self.generator_command(project_name), result):
            return None
        return project_name

    def _execute(self, command: str, result: ScaffoldResult) -> bool:
        """Run one command; on failure report it and mark the run aborted."""
        outcome = self.runner.run(command)
        result.commands.append(outcome)
        if outcome.success:
            return True

        self.err_console.print(
            f"[red]❌ Failed to execute command: {escape(command)}[/red]",
            soft_wrap=True,
        )
        message = f"Command failed ({outcome.returncode}): {command}"
        if outcome.error:
            message += f" - {outcome.error}"
        result.errors.append(message)
        result.stage = Stage.ABORTED
        return False


# ═══════════════════════════════════════════════════════════════════════════
# PUBLIC API
# ═══════════════════════════════════════════════════════════════════════════


def scaffold_project(
    request: ScaffoldRequest,
    runner: CommandRunner,
    config: ScaffoldConfig | None = None,
    templates_dir: Path | None = None,
) -> ScaffoldResult:
    """
    Scaffold a Next.js project.

    Args:
        request: Project name and UI library
        runner: Command runner used for every external command
        config: Optional tool settings
        templates_dir: Optional custom templates directory

    Returns:
        ScaffoldResult with commands run, files written and errors
    """
    scaffolder = ProjectScaffolder(runner, config, templates_dir)
    return scaffolder.run(request)
