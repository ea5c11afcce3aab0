"""Keyword extraction for ``find``."""

from __future__ import annotations

from core.parser_utils import text_after_keyword
from core.parsers.types import FindCommand, ParseErrorKind, ParseResult

FIND_FORMAT_MESSAGE = "Please give a search in the right format: 'find [keyword]'"


def parse(line: str, keyword_length: int) -> ParseResult:
    keyword = text_after_keyword(line, keyword_length)
    if keyword is None:
        return ParseResult.failure(ParseErrorKind.BAD_FORMAT, FIND_FORMAT_MESSAGE, line)
    if not keyword:
        return ParseResult.failure(
            ParseErrorKind.EMPTY_FIELD, "Can't search for something with nothing.", line
        )
    return ParseResult.success(FindCommand(raw=line, keyword=keyword))


__all__ = ["FIND_FORMAT_MESSAGE", "parse"]
