"""Shared helper utilities for command parsing."""

from .text import second_token, split_on_marker, split_range, text_after_keyword
from .datetime import (
    ANY_SHAPE,
    DATE_OR_DATE_TIME,
    MomentShape,
    ParsedMoment,
    format_point,
    on_day_of,
    parse_moment,
    render_point,
    to_point,
)

__all__ = [
    "ANY_SHAPE",
    "DATE_OR_DATE_TIME",
    "MomentShape",
    "ParsedMoment",
    "format_point",
    "on_day_of",
    "parse_moment",
    "render_point",
    "second_token",
    "split_on_marker",
    "split_range",
    "text_after_keyword",
    "to_point",
]
