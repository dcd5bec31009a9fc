"""
Nextboost - Next.js Performance Booster

Interactive scaffolder: runs create-next-app, installs next-purgecss and a
UI library, and writes tuned next.config.mjs / tailwind.config.mjs files.
"""

__version__ = "0.1.0"

from nextboost.models import ScaffoldConfig, ScaffoldRequest, Stage, UiLibrary
from nextboost.generator import ProjectScaffolder, ScaffoldResult, scaffold_project
from nextboost.runner import CommandResult, ShellRunner

__all__ = [
    "ScaffoldConfig",
    "ScaffoldRequest",
    "Stage",
    "UiLibrary",
    "ProjectScaffolder",
    "ScaffoldResult",
    "scaffold_project",
    "CommandResult",
    "ShellRunner",
]
