# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.config import Settings, load_env_file


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ("DATA_DIR", "TASKS_FILE", "LOG_LEVEL", "LOG_TO_FILE"):
        monkeypatch.delenv(f"TASK_TRACKER_{name}", raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()

    assert s.data_dir == Path("~/.local/share/task-tracker").expanduser()
    assert s.tasks_path == s.data_dir / "tasks.json"
    assert s.log_path == s.data_dir / "task-tracker.log"
    assert s.log_level == "WARNING"
    assert s.log_to_file is False


def test_data_dir_moves_tasks_file(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASK_TRACKER_DATA_DIR", str(tmp_path))

    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "tasks.json"


def test_explicit_tasks_file_and_logging(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASK_TRACKER_TASKS_FILE", str(tmp_path / "mine.json"))
    clean_env.setenv("TASK_TRACKER_LOG_LEVEL", "debug")
    clean_env.setenv("TASK_TRACKER_LOG_TO_FILE", "yes")

    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "mine.json"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is True


def test_env_file_is_read_from_working_directory(clean_env, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(f"TASK_TRACKER_DATA_DIR={tmp_path / 'fromenv'}\n", "utf-8")
    clean_env.chdir(tmp_path)
    # load_dotenv writes os.environ directly; register the var so monkeypatch removes it again.
    clean_env.setenv("TASK_TRACKER_DATA_DIR", "placeholder")
    clean_env.delenv("TASK_TRACKER_DATA_DIR")

    assert Path(load_env_file()).resolve() == (tmp_path / ".env").resolve()
    assert Settings.from_env().data_dir == tmp_path / "fromenv"
