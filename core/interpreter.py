"""Apply parsed commands to the task list and produce the reply text.

The interpreter is the single funnel for every input line: parse it, run the
resulting command against the ``TaskList``, persist mutations, and record the
turn in the command log. Parse failures and out-of-range task numbers become
reply messages; nothing here ends the session except ``bye``.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Dict, Optional

from core.command_log import CommandLog, CommandRecord
from core.command_parser import parse_command
from core.parsers.types import (
    AddCommand,
    Command,
    CommandKind,
    DeleteCommand,
    DoneCommand,
    FindCommand,
    ParseFailure,
)
from core.task_storage import TaskStorage
from tools.task_list import TaskIndexError, TaskList, format_task, format_task_count, format_task_lines

logger = logging.getLogger(__name__)

GOODBYE_MESSAGE = "Bye. Hope to see you again soon!"

_MUTATING_KINDS = {
    CommandKind.ADD_TODO,
    CommandKind.ADD_DEADLINE,
    CommandKind.ADD_EVENT,
    CommandKind.DONE,
    CommandKind.DELETE,
}


@dataclass
class InterpreterResponse:
    """Structured result for a single interpreted line."""

    text: str
    user_text: str
    command: Optional[Command]
    error: Optional[ParseFailure]
    success: bool
    should_exit: bool
    latency_ms: int


class Interpreter:
    """WHAT: run parsed command descriptors against a shared ``TaskList``.

    WHY: the CLI and the web API must apply commands identically, and the web
    API calls in from several worker threads at once.
    HOW: parse each line, dispatch on ``CommandKind``, save after mutations,
    and log the turn; one lock covers parse, apply and save so concurrent
    lines never interleave on the list or the task file.
    """

    def __init__(
        self,
        task_list: Optional[TaskList] = None,
        storage: Optional[TaskStorage] = None,
        command_log: Optional[CommandLog] = None,
    ) -> None:
        self._tasks = task_list if task_list is not None else TaskList()
        self._storage = storage
        self._command_log = command_log
        self._lock = threading.Lock()
        self._handlers: Dict[CommandKind, Callable[..., str]] = {
            CommandKind.LIST: self._list,
            CommandKind.DONE: self._done,
            CommandKind.DELETE: self._delete,
            CommandKind.ADD_TODO: self._add,
            CommandKind.ADD_DEADLINE: self._add,
            CommandKind.ADD_EVENT: self._add,
            CommandKind.FIND: self._find,
            CommandKind.EXIT: self._exit,
        }

    @property
    def task_list(self) -> TaskList:
        return self._tasks

    def handle_line(self, line: str) -> str:
        """Convenience wrapper for callers that only need the reply text."""
        return self.handle_line_with_details(line).text

    def handle_line_with_details(self, line: str) -> InterpreterResponse:
        start = perf_counter()
        raw_line = line or ""
        with self._lock:
            response = self._handle_locked(raw_line, start)
            self._emit_log(response)
        return response

    def _handle_locked(self, raw_line: str, start: float) -> InterpreterResponse:
        result = parse_command(raw_line)

        command = result.command
        error = result.error
        success = False
        if error is not None:
            logger.info("Rejected input (%s): %r", error.kind.value, raw_line)
            text = error.message
        else:
            logger.debug("Parsed %s command from %r", command.kind.value, raw_line)
            try:
                text = self._handlers[command.kind](command)
                success = True
            except TaskIndexError as exc:
                # Task numbers are only checked against the list here, not while parsing.
                text = str(exc)
            else:
                if command.kind in _MUTATING_KINDS:
                    text = self._persist(text)

        latency_ms = int((perf_counter() - start) * 1000)
        return InterpreterResponse(
            text=text,
            user_text=raw_line,
            command=command,
            error=error,
            success=success,
            should_exit=command is not None and command.kind is CommandKind.EXIT,
            latency_ms=latency_ms,
        )

    def _list(self, command: Command) -> str:
        if not len(self._tasks):
            return "Your task list is empty."
        lines = format_task_lines(self._tasks.numbered())
        return "Here are the tasks in your list:\n" + "\n".join(lines)

    def _add(self, command: AddCommand) -> str:
        task = self._tasks.add(command.to_task())
        return "\n".join(
            [
                "Got it. I've added this task:",
                f"  {format_task(task)}",
                format_task_count(len(self._tasks)),
            ]
        )

    def _done(self, command: DoneCommand) -> str:
        task = self._tasks.mark_done(command.index)
        return f"Nice! I've marked this task as done:\n  {format_task(task)}"

    def _delete(self, command: DeleteCommand) -> str:
        task = self._tasks.delete(command.index)
        return "\n".join(
            [
                "Noted. I've removed this task:",
                f"  {format_task(task)}",
                format_task_count(len(self._tasks)),
            ]
        )

    def _find(self, command: FindCommand) -> str:
        matches = self._tasks.find(command.keyword)
        if not matches:
            return f"No tasks match '{command.keyword}'."
        return "Here are the matching tasks in your list:\n" + "\n".join(format_task_lines(matches))

    def _exit(self, command: Command) -> str:
        return GOODBYE_MESSAGE

    def _persist(self, text: str) -> str:
        if self._storage is None:
            return text
        try:
            self._storage.save(self._tasks.tasks())
        except OSError:
            logger.exception("Could not save tasks to %s", self._storage.path)
            return text + "\n(Warning: the change could not be saved to disk.)"
        return text

    def _emit_log(self, response: InterpreterResponse) -> None:
        if self._command_log is None or not self._command_log.enabled:
            return
        record = CommandRecord.new(
            user_text=response.user_text,
            command_kind=response.command.kind.value if response.command else None,
            success=response.success,
            error_kind=response.error.kind.value if response.error else None,
            response_text=response.text,
            latency_ms=response.latency_ms,
        )
        try:
            self._command_log.log_command(record)
        except OSError:
            logger.exception("Could not write command log to %s", self._command_log.log_path)


__all__ = ["GOODBYE_MESSAGE", "Interpreter", "InterpreterResponse"]
