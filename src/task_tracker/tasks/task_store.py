# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from ..core.ports import ErrorReporter
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON file task store.

    The file holds a single array of task records and is rewritten in full
    (pretty-printed) on every save:
    - write to a sibling .tmp file
    - os.replace() it over the real file

    Read failures degrade to an empty list so a command can still run;
    the failure is surfaced through `on_error` (or logged if none is set).
    """

    def __init__(self, path: str | Path = "tasks.json", *, on_error: ErrorReporter | None = None) -> None:
        self._path = Path(path)
        self._on_error = on_error

    @property
    def path(self) -> Path:
        return self._path

    def _report(self, message: str) -> None:
        if self._on_error is not None:
            self._on_error(message)
        else:
            logger.error(message)

    # ---- persistence ----

    def initialize(self) -> None:
        """Create an empty store file if there is none yet."""
        if self._path.exists():
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps([], indent=2), "utf-8")
        logger.info("Created empty task store at %s", self._path)

    def load(self) -> list[Task]:
        try:
            data = json.loads(self._path.read_text("utf-8"))
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            tasks = [Task.from_dict(item) for item in data]
        except (OSError, ValueError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors.
            logger.debug("Failed to load tasks from %s", self._path, exc_info=True)
            self._report(f"Error reading tasks file: {e}")
            return []

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: list[Task]) -> bool:
        """Replace the whole store with `tasks`. Returns False if the write failed."""
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except (OSError, ValueError) as e:
            # ValueError: text that cannot be encoded as UTF-8 (e.g. undecodable argv bytes).
            logger.debug("Failed to save tasks to %s", self._path, exc_info=True)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            self._report(f"Error writing tasks file: {e}")
            return False

        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
        return True

    # ---- lookups ----

    @staticmethod
    def next_id(tasks: list[Task]) -> int:
        if not tasks:
            return 1
        return max(t.id for t in tasks) + 1

    @staticmethod
    def find_index(tasks: list[Task], task_id: int) -> int | None:
        for i, task in enumerate(tasks):
            if task.id == task_id:
                return i
        return None
