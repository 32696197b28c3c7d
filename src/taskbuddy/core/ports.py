# src/taskbuddy/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the session loop.

The loop depends on Protocols instead of concrete implementations, so the
console, the data file and the test fakes are interchangeable.
"""

from typing import Iterable, Protocol

from ..tasks.task_models import Task


class LineReader(Protocol):
    """
    Input boundary: returns the next raw line.

    Raises EOFError when the input stream is exhausted.
    """

    def __call__(self) -> str: ...


class LineWriter(Protocol):
    """Output boundary: prints one (possibly multi-line) message."""

    def __call__(self, text: str) -> None: ...


class TaskRepo(Protocol):
    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
