"""
Nextboost Runner - Synchronous shell command execution

Every external effect of the scaffolder (create-next-app, package installs)
goes through a CommandRunner. Runners report failure through the returned
CommandResult and never raise or exit on their own.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Protocol


@dataclass
class CommandResult:
    """Outcome of one shell command."""

    command: str
    returncode: int
    error: str | None = None  # Set when the process could not be spawned

    @property
    def success(self) -> bool:
        return self.returncode == 0 and self.error is None


class CommandRunner(Protocol):
    def run(self, command: str) -> CommandResult:
        ...


class ShellRunner:
    """
    Runs commands through the shell with inherited stdio.

    The child's output streams live to the terminal and interactive tools
    can read from it. Blocks until the child exits; there is no timeout.
    """

    def run(self, command: str) -> CommandResult:
        try:
            completed = subprocess.run(command, shell=True)
        except OSError as e:
            return CommandResult(command=command, returncode=127, error=str(e))
        return CommandResult(command=command, returncode=completed.returncode)
