"""Field extraction for the task-adding commands (todo, deadline, event)."""

from __future__ import annotations

from core.parser_utils import (
    ANY_SHAPE,
    DATE_OR_DATE_TIME,
    MomentShape,
    on_day_of,
    parse_moment,
    split_on_marker,
    split_range,
    text_after_keyword,
    to_point,
)
from core.parser_utils.datetime import DATETIME_FORMAT_HINT
from core.parsers.types import (
    AddDeadlineCommand,
    AddEventCommand,
    AddTodoCommand,
    ParseErrorKind,
    ParseResult,
)

DEADLINE_MARKER = "/by"
EVENT_MARKER = "/at"

TODO_FORMAT_MESSAGE = "Please give a todo in the right format: 'todo [description]'"
DEADLINE_FORMAT_MESSAGE = (
    "Please give a deadline in the right format: 'deadline [description] /by [datetime]'\n"
    f"\tdatetime format: {DATETIME_FORMAT_HINT} (time is optional)"
)
EVENT_FORMAT_MESSAGE = (
    "Please give an event in the right format:\n"
    "\t'event [description] /at [start datetime] - [end datetime]'\n"
    f"\tdatetime format: {DATETIME_FORMAT_HINT}"
)


def parse_todo(line: str, keyword_length: int) -> ParseResult:
    description = text_after_keyword(line, keyword_length)
    if description is None:
        return ParseResult.failure(ParseErrorKind.BAD_FORMAT, TODO_FORMAT_MESSAGE, line)
    if not description:
        return ParseResult.failure(
            ParseErrorKind.EMPTY_FIELD, "The description of a todo cannot be empty.", line
        )
    return ParseResult.success(AddTodoCommand(raw=line, description=description))


def parse_deadline(line: str, keyword_length: int) -> ParseResult:
    parts = split_on_marker(line, keyword_length, DEADLINE_MARKER)
    if parts is None:
        return ParseResult.failure(ParseErrorKind.BAD_FORMAT, DEADLINE_FORMAT_MESSAGE, line)
    description, by_text = parts
    if not description:
        return ParseResult.failure(
            ParseErrorKind.EMPTY_FIELD, "The description of a deadline cannot be empty.", line
        )
    if not by_text:
        return ParseResult.failure(
            ParseErrorKind.EMPTY_FIELD, "The date of a deadline cannot be empty.", line
        )

    parsed = parse_moment(by_text, DATE_OR_DATE_TIME)
    if parsed is None:
        return ParseResult.failure(ParseErrorKind.BAD_FORMAT, DEADLINE_FORMAT_MESSAGE, line)
    return ParseResult.success(AddDeadlineCommand(raw=line, description=description, by=to_point(parsed)))


def parse_event(line: str, keyword_length: int) -> ParseResult:
    """Extract an event with either a single start or a ``start - end`` pair.

    Accepted pairs: date+time to date+time, date to date, and date to a bare
    time on the same day. Every other mix is rejected instead of guessed.
    """
    parts = split_on_marker(line, keyword_length, EVENT_MARKER)
    if parts is None:
        return ParseResult.failure(ParseErrorKind.BAD_FORMAT, EVENT_FORMAT_MESSAGE, line)
    description, at_text = parts
    if not description:
        return ParseResult.failure(
            ParseErrorKind.EMPTY_FIELD, "The description of an event cannot be empty.", line
        )
    if not at_text:
        return ParseResult.failure(
            ParseErrorKind.EMPTY_FIELD, "The start and end of an event cannot be empty.", line
        )

    bounds = split_range(at_text)
    if bounds is None:
        parsed = parse_moment(at_text, DATE_OR_DATE_TIME)
        if parsed is None:
            return ParseResult.failure(ParseErrorKind.BAD_FORMAT, EVENT_FORMAT_MESSAGE, line)
        return ParseResult.success(AddEventCommand(raw=line, description=description, start=to_point(parsed)))

    start_text, end_text = bounds
    start = parse_moment(start_text, DATE_OR_DATE_TIME)
    end = parse_moment(end_text, ANY_SHAPE)
    if start is None or end is None:
        return ParseResult.failure(ParseErrorKind.BAD_FORMAT, EVENT_FORMAT_MESSAGE, line)

    pair = (start.shape, end.shape)
    if pair in {(MomentShape.DATE_TIME, MomentShape.DATE_TIME), (MomentShape.DATE, MomentShape.DATE)}:
        start_point, end_point = to_point(start), to_point(end)
    elif pair == (MomentShape.DATE, MomentShape.TIME):
        start_point = to_point(start)
        end_point = on_day_of(start_point, end.value)  # type: ignore[arg-type]
    else:
        return ParseResult.failure(ParseErrorKind.BAD_FORMAT, EVENT_FORMAT_MESSAGE, line)

    return ParseResult.success(
        AddEventCommand(raw=line, description=description, start=start_point, end=end_point)
    )


__all__ = ["DEADLINE_MARKER", "EVENT_MARKER", "parse_deadline", "parse_event", "parse_todo"]
