"""Command parser that turns one input line into a typed command descriptor."""

from __future__ import annotations

from typing import Callable, Tuple

from core.parsers import control, find, index, tasks
from core.parsers.types import CommandKind, ParseErrorKind, ParseResult

Extractor = Callable[[str, int], ParseResult]

UNKNOWN_COMMAND_MESSAGE = "Sorry, I don't know what that means."

# (keyword, whole-line match required, extractor); checked in this order.
_KEYWORDS: Tuple[Tuple[CommandKind, bool, Extractor], ...] = (
    (CommandKind.LIST, True, control.parse_list),
    (CommandKind.DONE, False, index.parse_done),
    (CommandKind.ADD_TODO, False, tasks.parse_todo),
    (CommandKind.ADD_DEADLINE, False, tasks.parse_deadline),
    (CommandKind.ADD_EVENT, False, tasks.parse_event),
    (CommandKind.DELETE, False, index.parse_delete),
    (CommandKind.FIND, False, find.parse),
    (CommandKind.EXIT, True, control.parse_exit),
)


def parse_command(message: str) -> ParseResult:
    """Classify ``message`` by its leading keyword and run that command's extractor.

    Keywords match case-insensitively. ``list`` and ``bye`` must be the whole
    line; every other keyword matches as a prefix. The result is always a
    ``ParseResult``: parsing never raises and never touches the task list.
    """
    line = (message or "").strip()
    lowered = line.lower()

    for kind, whole_line, extractor in _KEYWORDS:
        keyword = kind.value
        matched = lowered == keyword if whole_line else lowered.startswith(keyword)
        if matched:
            return extractor(line, len(keyword))

    return ParseResult.failure(ParseErrorKind.UNKNOWN_COMMAND, UNKNOWN_COMMAND_MESSAGE, line)


__all__ = ["parse_command", "ParseResult", "UNKNOWN_COMMAND_MESSAGE"]
