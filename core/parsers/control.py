"""Commands without fields: ``list`` and ``bye``."""

from __future__ import annotations

from core.parsers.types import ExitCommand, ListCommand, ParseResult


def parse_list(line: str, keyword_length: int) -> ParseResult:
    return ParseResult.success(ListCommand(raw=line))


def parse_exit(line: str, keyword_length: int) -> ParseResult:
    return ParseResult.success(ExitCommand(raw=line))


__all__ = ["parse_exit", "parse_list"]
