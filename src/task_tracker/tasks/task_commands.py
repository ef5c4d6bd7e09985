# src/task_tracker/tasks/task_commands.py

"""
Command handlers: one function per user command.

Every handler follows the same shape:
  load -> validate args -> locate / mutate / construct -> save (if mutated)
and reports the outcome as a CommandResult with a human-readable message.
User errors (missing argument, unknown id) never raise.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from ..core.ports import Clock, TaskRepo
from .task_models import Task, TaskStatus, utc_now_iso

logger = logging.getLogger(__name__)

# Filters that actually narrow the listing; anything else lists everything.
LIST_FILTERS: tuple[str, ...] = (TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.DONE)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(slots=True)
class CommandResult:
    ok: bool
    message: str
    tasks: list[Task] = field(default_factory=list)
    # Also print the usage text (to stdout) after the message.
    show_help: bool = False


def _error(message: str) -> CommandResult:
    return CommandResult(ok=False, message=f"Error: {message}")


def _is_missing(value: object) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def parse_task_id(raw: int | str) -> int | None:
    """
    Lenient id parsing: take the leading integer of the string ("3abc" -> 3).
    Returns None when there is no leading integer; such an id matches no task.
    """
    if isinstance(raw, int):
        return raw
    m = _LEADING_INT.match(raw)
    return int(m.group(1)) if m else None


def _locate(repo: TaskRepo, tasks: list[Task], raw_id: int | str) -> int | None:
    task_id = parse_task_id(raw_id)
    if task_id is None:
        return None
    return repo.find_index(tasks, task_id)


def _not_found(raw_id: int | str) -> CommandResult:
    return _error(f"Task with ID {raw_id} not found")


def _save_failed() -> CommandResult:
    # The store has already reported the write error; nothing more to print.
    return CommandResult(ok=False, message="")


def add_task(repo: TaskRepo, description: str | None, *, clock: Clock = utc_now_iso) -> CommandResult:
    if _is_missing(description):
        return _error("Task description is required")

    tasks = repo.load()
    now = clock()
    task = Task(
        id=repo.next_id(tasks),
        description=str(description),
        status=TaskStatus.TODO,
        created_at=now,
        updated_at=now,
    )
    tasks.append(task)
    if not repo.save(tasks):
        return _save_failed()

    logger.debug("Task added id=%s", task.id)
    return CommandResult(ok=True, message=f"Task added successfully (ID: {task.id})", tasks=[task])


def update_task(
    repo: TaskRepo,
    task_id: int | str | None,
    description: str | None,
    *,
    clock: Clock = utc_now_iso,
) -> CommandResult:
    if _is_missing(task_id) or _is_missing(description):
        return _error("Task ID and description are required")

    tasks = repo.load()
    idx = _locate(repo, tasks, task_id)
    if idx is None:
        return _not_found(task_id)

    task = tasks[idx]
    task.description = str(description)
    task.updated_at = clock()
    if not repo.save(tasks):
        return _save_failed()

    logger.debug("Task updated id=%s", task.id)
    return CommandResult(ok=True, message=f"Task {task_id} updated successfully", tasks=[task])


def delete_task(repo: TaskRepo, task_id: int | str | None) -> CommandResult:
    if _is_missing(task_id):
        return _error("Task ID is required")

    tasks = repo.load()
    idx = _locate(repo, tasks, task_id)
    if idx is None:
        return _not_found(task_id)

    removed = tasks.pop(idx)
    if not repo.save(tasks):
        return _save_failed()

    logger.debug("Task deleted id=%s", removed.id)
    return CommandResult(ok=True, message=f"Task {task_id} deleted successfully", tasks=[removed])


def mark_status(
    repo: TaskRepo,
    task_id: int | str | None,
    status: str,
    *,
    clock: Clock = utc_now_iso,
) -> CommandResult:
    """Set a task's status. The value is written as given; callers choose it."""
    if _is_missing(task_id):
        return _error("Task ID is required")

    tasks = repo.load()
    idx = _locate(repo, tasks, task_id)
    if idx is None:
        return _not_found(task_id)

    task = tasks[idx]
    task.status = status
    task.updated_at = clock()
    if not repo.save(tasks):
        return _save_failed()

    logger.debug("Task id=%s status=%s", task.id, status)
    return CommandResult(ok=True, message=f"Task {task_id} marked as {status}", tasks=[task])


def list_tasks(repo: TaskRepo, status_filter: str | None = "all") -> CommandResult:
    tasks = repo.load()
    if status_filter in LIST_FILTERS:
        tasks = [t for t in tasks if t.status == status_filter]

    if not tasks:
        return CommandResult(ok=True, message="No tasks found")
    return CommandResult(ok=True, message="", tasks=tasks)
