# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command handlers.

Handlers depend on these Protocols instead of the concrete JSON store,
so tests can swap in fakes and the CLI decides where error lines go.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import Task

ErrorReporter = Callable[[str], None]
# Receives one human-readable line, e.g. "Error reading tasks file: ...".

Clock = Callable[[], str]
# Returns the current time as an ISO-8601 string.


class TaskRepo(Protocol):
    """Whole-list persistence: load everything, mutate in memory, save everything."""

    def initialize(self) -> None: ...

    def load(self) -> list[Task]: ...

    def save(self, tasks: list[Task]) -> bool: ...

    def next_id(self, tasks: list[Task]) -> int: ...

    def find_index(self, tasks: list[Task], task_id: int) -> int | None: ...
