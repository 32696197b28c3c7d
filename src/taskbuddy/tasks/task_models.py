# src/taskbuddy/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskKind(StrEnum):
    """
    Task variant tag.

    The value doubles as the type tag of a persisted record and as the
    bracketed prefix of the rendered form.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class Task:
    """
    One trackable item of work.

    Variants share this single class and are told apart by `kind`:
    - TODO: no extra fields
    - DEADLINE: `by`
    - EVENT: `start` and `end` (the "from" and "to" of the command)

    Extra fields are opaque text. Non-emptiness is checked by the parser,
    not here.
    """

    kind: TaskKind
    description: str
    done: bool = False

    by: str | None = None
    start: str | None = None
    end: str | None = None

    @classmethod
    def todo(cls, description: str) -> Task:
        return cls(kind=TaskKind.TODO, description=description)

    @classmethod
    def deadline(cls, description: str, by: str) -> Task:
        return cls(kind=TaskKind.DEADLINE, description=description, by=by)

    @classmethod
    def event(cls, description: str, start: str, end: str) -> Task:
        return cls(kind=TaskKind.EVENT, description=description, start=start, end=end)

    def mark_done(self) -> None:
        self.done = True

    def mark_not_done(self) -> None:
        self.done = False

    def status_glyph(self) -> str:
        return "X" if self.done else " "

    def render(self) -> str:
        head = f"[{self.kind.value}][{self.status_glyph()}] {self.description}"
        if self.kind is TaskKind.DEADLINE:
            return f"{head} (by: {self.by})"
        if self.kind is TaskKind.EVENT:
            return f"{head} (from: {self.start} to: {self.end})"
        return head

    def __str__(self) -> str:
        return self.render()
