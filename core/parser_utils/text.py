"""Slicing helpers shared by the field extractors."""

from __future__ import annotations

from typing import Optional, Tuple


def text_after_keyword(line: str, keyword_length: int) -> Optional[str]:
    """Return the trimmed remainder after the leading keyword.

    ``None`` signals that the line is too short to hold the keyword at all,
    which the extractors report as a format problem rather than an empty field.
    """
    if len(line) < keyword_length:
        return None
    return line[keyword_length:].strip()


def split_on_marker(line: str, keyword_length: int, marker: str) -> Optional[Tuple[str, str]]:
    """Split ``line`` into (description, trailing text) around ``marker``.

    The first occurrence of the marker wins. Returns ``None`` when the marker is
    missing or sits inside the keyword itself.
    """
    index = line.find(marker)
    if index < keyword_length:
        return None
    description = line[keyword_length:index].strip()
    trailing = line[index + len(marker):].strip()
    return description, trailing


def split_range(text: str, separator: str = "-") -> Optional[Tuple[str, str]]:
    """Split ``start - end`` text on the first separator, or ``None`` when absent."""
    if separator not in text:
        return None
    start, end = text.split(separator, 1)
    return start.strip(), end.strip()


def second_token(line: str) -> Optional[str]:
    parts = line.split()
    if len(parts) < 2:
        return None
    return parts[1]


__all__ = ["second_token", "split_on_marker", "split_range", "text_after_keyword"]
