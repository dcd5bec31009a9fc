"""Shared pytest fixtures for the nextboost test suite.

Provides a recording command runner that stands in for ShellRunner and a
working directory in which generated projects are created.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from nextboost.runner import CommandResult


class RecordingRunner:
    """Captures commands instead of executing them.

    Commands containing ``fail_on`` exit with 1. When ``create_dirs`` is set,
    a create-next-app command creates the project directory (relative to the
    current working directory), as the real generator would.
    """

    def __init__(self, fail_on: str | None = None, create_dirs: bool = True):
        self.fail_on = fail_on
        self.create_dirs = create_dirs
        self.commands: list[str] = []

    def run(self, command: str) -> CommandResult:
        self.commands.append(command)
        if self.fail_on is not None and self.fail_on in command:
            return CommandResult(command=command, returncode=1)
        if self.create_dirs and "create-next-app" in command:
            Path(command.split()[2]).mkdir(exist_ok=True)
        return CommandResult(command=command, returncode=0)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def make_runner():
    """Factory for runners with custom failure behaviour."""
    return RecordingRunner
