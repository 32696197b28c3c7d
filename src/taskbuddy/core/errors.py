# src/taskbuddy/core/errors.py

"""
Error kinds raised by the parser, the task list and storage.

Every error carries a user-facing message (str(err)); the console loop
catches TaskBuddyError and prints it as a single line.
"""

from __future__ import annotations

from pathlib import Path


class TaskBuddyError(Exception):
    """Base class for all expected, user-reportable failures."""


class MalformedInputError(TaskBuddyError):
    """Argument text does not match the grammar of its command."""

    def __init__(self, message: str, usage: str | None = None) -> None:
        self.usage = usage
        if usage:
            message = f"{message} Usage: {usage}"
        super().__init__(message)


class OutOfRangeError(TaskBuddyError):
    """A syntactically valid task number that does not point at a task."""

    def __init__(self, number: int, size: int) -> None:
        self.number = number
        self.size = size
        noun = "task" if size == 1 else "tasks"
        super().__init__(
            f"Task number {number} is not on the list. There are only {size} {noun} in there."
        )


class UnknownCommandError(TaskBuddyError):
    def __init__(self, text: str, valid_commands: tuple[str, ...]) -> None:
        self.text = text
        self.valid_commands = valid_commands
        super().__init__(
            f'"{text}"?? I have no idea what that means. '
            f"Try one of these instead: {', '.join(valid_commands)}."
        )


class StorageError(TaskBuddyError):
    """The data file or its directory could not be created, read or written."""

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(f"{message} ({path})")
