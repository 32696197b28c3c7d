# src/taskbuddy/cli/commands.py

"""
Command interpreter: one trimmed input line -> effect on the task list.

The first whitespace-delimited token is the command keyword (matched
case-insensitively); everything after it, trimmed, is the argument text.
Handlers either return a CommandResult or raise a TaskBuddyError. A handler
that raises has not touched the task list.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core.errors import MalformedInputError, UnknownCommandError
from ..core.state import AppState
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

EXIT_COMMAND = "bye"

TODO_USAGE = "todo <description>"
DEADLINE_USAGE = "deadline <description> /by <date>"
EVENT_USAGE = "event <description> /from <start> /to <end>"

_NUMBER_RE = re.compile(r"[+-]?[0-9]+")
# Task numbers are 32-bit signed integers; anything wider is not a number.
_NUMBER_MIN, _NUMBER_MAX = -(2**31), 2**31 - 1


@dataclass(slots=True)
class CommandResult:
    reply: str
    # True when the task list changed and must be persisted.
    mutated: bool = False


CommandHandler = Callable[[AppState, str], CommandResult]


@dataclass(slots=True)
class _Command:
    handler: CommandHandler
    help_text: str
    usage: str


class CommandRegistry:
    """Keyword -> handler table used by the session loop (list, todo, mark, ...)."""

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
    ) -> None:
        self._commands[name.lower()] = _Command(handler, help_text, usage or name)

    def command_words(self) -> tuple[str, ...]:
        return (*self._commands, EXIT_COMMAND)

    def handle(self, state: AppState, line: str) -> CommandResult:
        """
        Parse and run one line such as "deadline report /by Friday".

        Raises UnknownCommandError when the keyword is not registered.
        """
        parts = line.strip().split(None, 1)
        if not parts:
            raise UnknownCommandError(line.strip(), self.command_words())

        name = parts[0].lower()
        args = parts[1].strip() if len(parts) > 1 else ""

        command = self._commands.get(name)
        if command is None:
            raise UnknownCommandError(line.strip(), self.command_words())

        logger.debug("Dispatching command=%s args=%r", name, args)
        return command.handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for command in self._commands.values():
            lines.append(f"  {command.usage:<45} {command.help_text}")
        lines.append(f"  {EXIT_COMMAND:<45} Save and quit.")
        return "\n".join(lines)


# -------------------- argument parsing --------------------


def parse_todo(args: str) -> Task:
    description = args.strip()
    if not description:
        raise MalformedInputError("A todo with no name? Even I'm not that forgetful!", TODO_USAGE)
    return Task.todo(description)


def parse_deadline(args: str) -> Task:
    details = args.strip()
    if not details:
        raise MalformedInputError("A deadline needs more info than that!", DEADLINE_USAGE)
    if "/by" not in details:
        raise MalformedInputError(
            "You forgot the /by part! How will I know when it's due?", DEADLINE_USAGE
        )

    description, by = (part.strip() for part in details.split("/by", 1))
    if not description or not by:
        raise MalformedInputError("Both a description AND a date are needed!", DEADLINE_USAGE)
    return Task.deadline(description, by)


def parse_event(args: str) -> Task:
    """
    Split "<desc> /from <start> /to <end>".

    The first "/from" ends the description; the first "/to" after it ends
    the start. Input whose only "/to" sits before "/from" is rejected.
    Separators match as substrings, so "/tomorrow" splits after "/to".
    """
    details = args.strip()
    if not details:
        raise MalformedInputError("An event with no details? That's a party with no snacks!", EVENT_USAGE)
    if "/from" not in details or "/to" not in details:
        raise MalformedInputError("I need both /from AND /to or I'll get lost!", EVENT_USAGE)

    description, times = details.split("/from", 1)
    if "/to" not in times:
        raise MalformedInputError("/to has to come after /from.", EVENT_USAGE)
    start, end = times.split("/to", 1)

    description, start, end = description.strip(), start.strip(), end.strip()
    if not description or not start or not end:
        raise MalformedInputError("You can't leave any blanks!", EVENT_USAGE)
    return Task.event(description, start, end)


def parse_task_number(args: str, command: str) -> int:
    """Accept a bare base-10 integer only; range is checked by the task list."""
    raw = args.strip()
    usage = f"{command} <task number>"
    if not raw:
        raise MalformedInputError(f"{command.capitalize()} WHAT exactly? Give me a number!", usage)
    if not _NUMBER_RE.fullmatch(raw):
        raise MalformedInputError(f'"{raw}" doesn\'t look like a number to me!', usage)
    number = int(raw)
    if not _NUMBER_MIN <= number <= _NUMBER_MAX:
        raise MalformedInputError(f'"{raw}" is way too big to be a task number!', usage)
    return number


def _count_phrase(size: int) -> str:
    return f"{size} task" if size == 1 else f"{size} tasks"


# -------------------- handlers --------------------


def cmd_list(state: AppState, args: str) -> CommandResult:
    if not len(state.tasks):
        return CommandResult("Your list is emptier than my brain! Go add some tasks.")
    lines = ["Here are the tasks in your list:"]
    for number, task in state.tasks.numbered():
        lines.append(f"{number}. {task.render()}")
    return CommandResult("\n".join(lines))


def _added(state: AppState, task: Task) -> CommandResult:
    size = state.tasks.add(task)
    logger.info("Task added kind=%s total=%d", task.kind.name, size)
    return CommandResult(
        f"Okie dokie! I scribbled that down:\n  {task.render()}\n"
        f"You've got {_count_phrase(size)} in the list now.",
        mutated=True,
    )


def cmd_todo(state: AppState, args: str) -> CommandResult:
    return _added(state, parse_todo(args))


def cmd_deadline(state: AppState, args: str) -> CommandResult:
    return _added(state, parse_deadline(args))


def cmd_event(state: AppState, args: str) -> CommandResult:
    return _added(state, parse_event(args))


def cmd_mark(state: AppState, args: str) -> CommandResult:
    task = state.tasks.mark_done(parse_task_number(args, "mark"))
    return CommandResult(f"Nice! I've marked this task as done:\n  {task.render()}", mutated=True)


def cmd_unmark(state: AppState, args: str) -> CommandResult:
    task = state.tasks.mark_not_done(parse_task_number(args, "unmark"))
    return CommandResult(
        f"OK, I've marked this task as not done yet:\n  {task.render()}", mutated=True
    )


def cmd_delete(state: AppState, args: str) -> CommandResult:
    task = state.tasks.delete(parse_task_number(args, "delete"))
    logger.info("Task deleted total=%d", len(state.tasks))
    return CommandResult(
        f"Noted. I've removed this task:\n  {task.render()}\n"
        f"You've got {_count_phrase(len(state.tasks))} in the list now.",
        mutated=True,
    )


def cmd_help(state: AppState, args: str) -> CommandResult:
    return CommandResult(registry.build_help())


registry = CommandRegistry()

registry.register("todo", cmd_todo, help_text="Add a todo.", usage=TODO_USAGE)
registry.register("deadline", cmd_deadline, help_text="Add a task with a deadline.", usage=DEADLINE_USAGE)
registry.register("event", cmd_event, help_text="Add an event with a start and an end.", usage=EVENT_USAGE)
registry.register("list", cmd_list, help_text="Show all tasks, numbered from 1.")
registry.register("mark", cmd_mark, help_text="Mark a task as done.", usage="mark <task number>")
registry.register("unmark", cmd_unmark, help_text="Mark a task as not done.", usage="unmark <task number>")
registry.register("delete", cmd_delete, help_text="Remove a task; later numbers shift down.", usage="delete <task number>")
registry.register("help", cmd_help, help_text="Show available commands.")
