# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once (or takes injected ones),
- ensures the tasks file directory exists,
- wires the JSON TaskStore with the error reporter the CLI prints through.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import ErrorReporter
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    # Only the store's own directory; data_dir may be unused when the tasks file lives elsewhere.
    # The log file directory is created by setup_logging when file logging is on.
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_task_store(*, settings=None, on_error: ErrorReporter | None = None) -> TaskStore:
    """
    Build the TaskStore for the configured file and make sure the file exists.

    Keeping settings injectable makes the CLI easy to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_path, on_error=on_error)
    store.initialize()
    logger.debug("TaskStore ready path=%s", store.path)
    return store
