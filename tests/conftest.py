# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.tasks.task_store import TaskStore

from .fakes import FakeClock, RecordingReporter


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and cli.main.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the caller's environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.json",
        log_path=data_dir / "task-tracker.log",
    )


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(tmp_path: Path, reporter: RecordingReporter) -> TaskStore:
    """Real JSON store in a tmp dir; its error lines are captured by `reporter`."""
    s = TaskStore(tmp_path / "tasks.json", on_error=reporter)
    s.initialize()
    return s


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """cli.main reconfigures the root logger; put the previous handlers back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
