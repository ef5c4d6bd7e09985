# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- The store location is configuration, passed explicitly to TaskStore.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASK_TRACKER"

DEFAULT_DATA_DIR = Path("~/.local/share/task-tracker")
TASKS_FILE_NAME = "tasks.json"
LOG_FILE_NAME = "task-tracker.log"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def load_env_file() -> str:
    """Load .env from the working directory (or a parent). Returns the path used, '' if none."""
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=False)
    return path


load_env_file()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default.expanduser()
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Logging ----
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    log_path: Path

    @staticmethod
    def from_env() -> "Settings":
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), False)

        data_dir = _env_path(_k("DATA_DIR"), DEFAULT_DATA_DIR)
        tasks_path = _env_path(_k("TASKS_FILE"), data_dir / TASKS_FILE_NAME)

        return Settings(
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            tasks_path=tasks_path,
            log_path=data_dir / LOG_FILE_NAME,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
