"""Index extraction for ``done`` and ``delete``."""

from __future__ import annotations

import re
from typing import Optional

from core.parser_utils import second_token
from core.parsers.types import DeleteCommand, DoneCommand, ParseErrorKind, ParseResult

_INDEX_PATTERN = re.compile(r"[0-9]+")

INVALID_INDEX_MESSAGE = "I can't do that, please give a valid task ID."


def parse_done(line: str, keyword_length: int) -> ParseResult:
    index = _extract_index(line)
    if index is None:
        return ParseResult.failure(ParseErrorKind.INVALID_INDEX, INVALID_INDEX_MESSAGE, line)
    return ParseResult.success(DoneCommand(raw=line, index=index))


def parse_delete(line: str, keyword_length: int) -> ParseResult:
    index = _extract_index(line)
    if index is None:
        return ParseResult.failure(ParseErrorKind.INVALID_INDEX, INVALID_INDEX_MESSAGE, line)
    return ParseResult.success(DeleteCommand(raw=line, index=index))


def _extract_index(line: str) -> Optional[int]:
    # Whether the index exists in the list is only known when the command runs.
    token = second_token(line)
    if token is None or not _INDEX_PATTERN.fullmatch(token):
        return None
    index = int(token)
    return index if index > 0 else None


__all__ = ["INVALID_INDEX_MESSAGE", "parse_delete", "parse_done"]
