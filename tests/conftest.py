# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskbuddy.core.state import AppState
from taskbuddy.tasks.task_list import TaskList
from taskbuddy.tasks.task_store import TaskStore


class FakeReader:
    """
    Scripted input boundary for session-loop tests.

    Returns the given lines in order, then raises EOFError like input() does.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.reads = 0

    def __call__(self) -> str:
        if self.reads >= len(self._lines):
            raise EOFError
        line = self._lines[self.reads]
        self.reads += 1
        return line


class FakeWriter:
    """Captures everything the session prints."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, text: str) -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="taskbuddy",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        file_logging=False,
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "taskbuddy.txt",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState with an empty list and a real flat-file store under tmp_path."""
    return AppState(
        settings=settings,
        task_store=TaskStore(settings.tasks_path),
        tasks=TaskList(),
    )


@pytest.fixture()
def writer() -> FakeWriter:
    return FakeWriter()


@pytest.fixture()
def make_reader():
    return FakeReader
