"""Assemble the interpreter and run the interactive CLI loop."""

from __future__ import annotations

import logging
from typing import Dict

from app.config import (
    get_command_log_path,
    get_log_backup_count,
    get_log_level,
    get_log_max_bytes,
    get_tasks_path,
    is_logging_enabled,
)
from core.command_log import CommandLog
from core.interpreter import Interpreter
from core.task_storage import TaskStorage
from tools.task_list import TaskList

logger = logging.getLogger(__name__)


# -- Interpreter construction --------------------------------------------------
def build_interpreter(env: Dict[str, str] | None = None) -> Interpreter:
    """Wire storage, the command log, and the saved task list into an ``Interpreter``.

    WHAT: load the saved tasks and build the interpreter with its collaborators.
    WHY: the CLI and the web API share this wiring so both surfaces see the
    same tasks and write the same command log.
    HOW: read paths and log settings from ``app.config``; a missing, corrupt or
    unreadable task file is logged and the session starts with an empty list.
    """
    storage = TaskStorage(get_tasks_path(env))
    try:
        tasks = storage.load()
    except (OSError, ValueError):
        logger.exception("Task file %s is unreadable; starting with an empty list", storage.path)
        tasks = []

    command_log = CommandLog(
        log_path=get_command_log_path(env),
        enabled=is_logging_enabled(env),
        max_bytes=get_log_max_bytes(env),
        backup_count=get_log_backup_count(env),
    )
    return Interpreter(TaskList(tasks), storage=storage, command_log=command_log)


def configure_logging(env: Dict[str, str] | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, get_log_level(env)),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# -- Interactive CLI loop ------------------------------------------------------
def main() -> None:
    """Read commands from stdin until ``bye`` or EOF and print each reply."""
    configure_logging()
    interpreter = build_interpreter()
    print("Hello! What can I do for you? Type 'bye' to stop.")

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print("\nExiting.")
            break

        if not line.strip():
            continue

        response = interpreter.handle_line_with_details(line)
        print(response.text)
        print()
        if response.should_exit:
            break


if __name__ == "__main__":
    main()
