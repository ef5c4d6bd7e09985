# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the task store, then runs exactly one command:
- confirmations and listings go to stdout,
- error lines go to stderr,
- exit status is 0 on success and 1 on any error.
"""

from __future__ import annotations

import logging
import sys

from ..config import get_settings
from ..logging_setup import setup_logging
from .bootstrap import create_task_store
from .commands import registry as command_registry
from .render import render_task_list

logger = logging.getLogger(__name__)


def _print_error(text: str) -> None:
    print(text, file=sys.stderr)


def main(argv: list[str] | None = None, *, settings=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    console_level = getattr(logging, str(settings.log_level).upper(), logging.WARNING)
    log_file = settings.log_path if settings.log_to_file else None
    setup_logging(console_level=console_level, log_file=log_file)

    try:
        store = create_task_store(settings=settings, on_error=_print_error)
    except OSError as e:
        logger.debug("Task store setup failed.", exc_info=True)
        _print_error(f"Error initializing tasks file: {e}")
        return 1

    try:
        result = command_registry.handle(store, argv)
    except Exception:
        logger.exception("Command handler crashed.")
        _print_error("Internal error while handling a command.")
        return 1

    if result.ok:
        if result.message:
            print(result.message)
        elif result.tasks:
            print(render_task_list(result.tasks))
        return 0

    if result.message:
        _print_error(result.message)
    if result.show_help:
        print(command_registry.build_help())
    return 1


if __name__ == "__main__":
    sys.exit(main())
