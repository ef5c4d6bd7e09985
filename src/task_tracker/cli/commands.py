# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import TaskRepo
from ..tasks.task_commands import (
    CommandResult,
    add_task,
    delete_task,
    list_tasks,
    mark_status,
    update_task,
)
from ..tasks.task_models import TaskStatus

CommandHandler = Callable[[TaskRepo, list[str]], CommandResult]

logger = logging.getLogger(__name__)

PROG = "task-cli"

EXAMPLES = (
    'add "Buy groceries"',
    'update 1 "Buy groceries and cook dinner"',
    "delete 1",
    "mark-in-progress 1",
    "mark-done 1",
    "list",
    "list done",
)


class CommandRegistry:
    """Maps a command name (first CLI argument) to its handler and help line."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = (usage or key, help_text)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, repo: TaskRepo, argv: list[str]) -> CommandResult:
        """
        Dispatch argv like ["add", "Buy", "milk"] to a handler.
        No arguments shows the usage text; an unknown name is an error that also asks for usage.
        """
        if not argv:
            return CommandResult(ok=True, message=self.build_help())

        name = argv[0].lower()
        args = argv[1:]

        handler = self._handlers.get(name)
        if not handler:
            logger.debug("Unknown command %r", name)
            return CommandResult(ok=False, message=f"Unknown command: {argv[0]}", show_help=True)

        return handler(repo, args)

    def build_help(self) -> str:
        width = max((len(usage) for usage, _ in self._help.values()), default=0)
        lines = [
            "Task Tracker CLI",
            "================",
            "",
            "Usage:",
            f"  {PROG} <command> [arguments]",
            "",
            "Commands:",
        ]
        for usage, help_text in self._help.values():
            lines.append(f"  {usage.ljust(width)}  {help_text}")
        lines += ["", "Examples:"]
        lines += [f"  {PROG} {example}" for example in EXAMPLES]
        return "\n".join(lines)


registry = CommandRegistry()


def _arg(args: list[str], i: int) -> str | None:
    return args[i] if len(args) > i else None


def cmd_help(repo: TaskRepo, args: list[str]) -> CommandResult:
    return CommandResult(ok=True, message=registry.build_help())


def cmd_add(repo: TaskRepo, args: list[str]) -> CommandResult:
    return add_task(repo, " ".join(args))


def cmd_update(repo: TaskRepo, args: list[str]) -> CommandResult:
    return update_task(repo, _arg(args, 0), " ".join(args[1:]))


def cmd_delete(repo: TaskRepo, args: list[str]) -> CommandResult:
    return delete_task(repo, _arg(args, 0))


def cmd_mark_in_progress(repo: TaskRepo, args: list[str]) -> CommandResult:
    return mark_status(repo, _arg(args, 0), TaskStatus.IN_PROGRESS)


def cmd_mark_done(repo: TaskRepo, args: list[str]) -> CommandResult:
    return mark_status(repo, _arg(args, 0), TaskStatus.DONE)


def cmd_list(repo: TaskRepo, args: list[str]) -> CommandResult:
    return list_tasks(repo, _arg(args, 0) or "all")


registry.register("add", cmd_add, help_text="Add a new task", usage="add <description>")
registry.register(
    "update", cmd_update, help_text="Update a task's description", usage="update <id> <description>"
)
registry.register("delete", cmd_delete, help_text="Delete a task", usage="delete <id>")
registry.register(
    "mark-in-progress",
    cmd_mark_in_progress,
    help_text="Mark a task as in progress",
    usage="mark-in-progress <id>",
)
registry.register("mark-done", cmd_mark_done, help_text="Mark a task as done", usage="mark-done <id>")
registry.register(
    "list",
    cmd_list,
    help_text="List tasks, optionally only todo / in-progress / done",
    usage="list [todo|in-progress|done]",
)
registry.register("help", cmd_help, help_text="Show this help", aliases=["-h", "--help"])
