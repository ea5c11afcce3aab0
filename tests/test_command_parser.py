from datetime import datetime

import pytest

from core.command_parser import UNKNOWN_COMMAND_MESSAGE, parse_command
from core.parser_utils import DATE_OR_DATE_TIME, format_point, parse_moment, to_point
from core.parsers.types import (
    AddDeadlineCommand,
    AddEventCommand,
    AddTodoCommand,
    CommandKind,
    DeleteCommand,
    DoneCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    ParseErrorKind,
    ParseFailure,
    ParseResult,
)
from core.tasks import Deadline, Event, Todo


def _command(line: str):
    result = parse_command(line)
    assert result.ok, result.error
    assert result.error is None
    return result.command


def _error_kind(line: str) -> ParseErrorKind:
    result = parse_command(line)
    assert not result.ok
    assert result.command is None
    return result.error.kind


@pytest.mark.parametrize(
    "line, expected",
    [
        ("list", ListCommand),
        ("LIST", ListCommand),
        ("  list  ", ListCommand),
        ("bye", ExitCommand),
        ("Bye", ExitCommand),
        ("done 1", DoneCommand),
        ("delete 2", DeleteCommand),
        ("todo read", AddTodoCommand),
        ("TODO read", AddTodoCommand),
        ("deadline x /by 2/12/2019", AddDeadlineCommand),
        ("event x /at 2/12/2019", AddEventCommand),
        ("find book", FindCommand),
    ],
)
def test_classifier_routes_keywords(line, expected):
    assert isinstance(_command(line), expected)


@pytest.mark.parametrize("line", ["foo bar", "list all", "bye now", "", "   ", "tod o"])
def test_unrecognized_lines_are_unknown_commands(line):
    result = parse_command(line)
    assert result.error.kind is ParseErrorKind.UNKNOWN_COMMAND
    assert result.error.message == UNKNOWN_COMMAND_MESSAGE


def test_unknown_command_carries_offending_input():
    result = parse_command("foo bar")
    assert result.error.raw == "foo bar"


def test_todo_description_is_trimmed():
    command = _command("todo    read book   ")
    assert command.kind is CommandKind.ADD_TODO
    assert command.description == "read book"
    assert command.raw == "todo    read book"
    assert command.to_task() == Todo("read book")


def test_todo_keyword_keeps_description_case():
    assert _command("ToDo Call Mom").description == "Call Mom"


@pytest.mark.parametrize("line", ["todo", "todo   "])
def test_empty_todo_is_empty_field(line):
    assert _error_kind(line) is ParseErrorKind.EMPTY_FIELD


def test_deadline_with_time():
    command = _command("deadline Submit /by 2/12/2019 1800")
    assert command.description == "Submit"
    assert command.by.value == datetime(2019, 12, 2, 18, 0)
    assert command.has_time is True
    assert command.to_task() == Deadline("Submit", command.by)


def test_deadline_date_only_is_start_of_day():
    command = _command("deadline Submit /by 2/12/2019")
    assert command.by.value == datetime(2019, 12, 2, 0, 0)
    assert command.has_time is False
    assert command.by.date_only


@pytest.mark.parametrize(
    "line, kind",
    [
        ("deadline /by 2/12/2019", ParseErrorKind.EMPTY_FIELD),
        ("deadline    /by 2/12/2019", ParseErrorKind.EMPTY_FIELD),
        ("deadline Submit /by", ParseErrorKind.EMPTY_FIELD),
        ("deadline Submit /by   ", ParseErrorKind.EMPTY_FIELD),
        ("deadline Submit", ParseErrorKind.BAD_FORMAT),
        ("deadline Submit by 2/12/2019", ParseErrorKind.BAD_FORMAT),
        ("deadline Submit /by tomorrow", ParseErrorKind.BAD_FORMAT),
        ("deadline Submit /by 2019-12-02", ParseErrorKind.BAD_FORMAT),
        ("deadline Submit /by 31/2/2019", ParseErrorKind.BAD_FORMAT),
        ("deadline Submit /by 2/12/2019 2500", ParseErrorKind.BAD_FORMAT),
        ("deadline Submit /by 2/12/2019 180", ParseErrorKind.BAD_FORMAT),
    ],
)
def test_deadline_failures(line, kind):
    assert _error_kind(line) is kind


def test_deadline_bad_format_message_reminds_of_pattern():
    message = parse_command("deadline Submit").error.message
    assert "/by" in message
    assert "d/M/yyyy HHmm" in message


def test_event_with_full_start_and_end():
    command = _command("event Meeting /at 2/12/2019 1400 - 2/12/2019 1600")
    assert command.description == "Meeting"
    assert command.start.value == datetime(2019, 12, 2, 14, 0)
    assert command.end.value == datetime(2019, 12, 2, 16, 0)
    assert command.date_only is False


def test_event_spanning_two_dates():
    command = _command("event Meeting /at 2/12/2019 - 3/12/2019")
    assert command.start.value == datetime(2019, 12, 2)
    assert command.end.value == datetime(2019, 12, 3)
    assert command.date_only is True


def test_event_date_then_time_ends_on_same_day():
    command = _command("event Meeting /at 2/12/2019 - 1600")
    assert command.start.value == datetime(2019, 12, 2, 0, 0)
    assert command.end.value == datetime(2019, 12, 2, 16, 0)
    assert command.end.has_time
    assert command.date_only is True


def test_event_without_end_is_open_ended():
    timed = _command("event Party /at 2/12/2019 2000")
    assert timed.end is None
    assert timed.start.value == datetime(2019, 12, 2, 20, 0)
    assert timed.date_only is False

    untimed = _command("event Party /at 2/12/2019")
    assert untimed.end is None
    assert untimed.date_only is True
    assert isinstance(untimed.to_task(), Event)


@pytest.mark.parametrize(
    "line",
    [
        "event Meeting /at 1600 - 2/12/2019",
        "event Meeting /at 1400 - 1600",
        "event Meeting /at 2/12/2019 1400 - 3/12/2019",
        "event Meeting /at 2/12/2019 1400 - 1600",
        "event Meeting /at 2/12/2019 - 3/12/2019 1600",
        "event Meeting /at 2/12/2019 -",
        "event Meeting /at - 2/12/2019",
        "event Meeting /at soon",
        "event Meeting /at 1600",
        "event Meeting 2/12/2019",
    ],
)
def test_event_rejected_shapes_are_bad_format(line):
    assert _error_kind(line) is ParseErrorKind.BAD_FORMAT


def test_event_bad_format_message_mentions_range_syntax():
    message = parse_command("event Meeting /at 1600 - 2/12/2019").error.message
    assert "[start datetime] - [end datetime]" in message
    assert "d/M/yyyy HHmm" in message


@pytest.mark.parametrize("line", ["event /at 2/12/2019", "event Meeting /at", "event Meeting /at   "])
def test_event_empty_fields(line):
    assert _error_kind(line) is ParseErrorKind.EMPTY_FIELD


def test_event_description_may_contain_dash():
    command = _command("event Stand-up /at 2/12/2019 0900 - 2/12/2019 0915")
    assert command.description == "Stand-up"


@pytest.mark.parametrize("line, index", [("done 1", 1), ("done 12", 12), ("DONE  3", 3), ("delete 7", 7)])
def test_index_commands(line, index):
    assert _command(line).index == index


@pytest.mark.parametrize("line", ["done abc", "done", "delete", "delete x1", "done -1", "done 0", "delete 1.5"])
def test_invalid_index(line):
    result = parse_command(line)
    assert result.error.kind is ParseErrorKind.INVALID_INDEX
    assert "valid task ID" in result.error.message


def test_index_is_not_checked_against_any_list():
    assert _command("delete 999").index == 999


def test_find_keyword():
    command = _command("find   book  ")
    assert command.keyword == "book"


def test_find_empty_is_empty_field():
    assert _error_kind("find   ") is ParseErrorKind.EMPTY_FIELD


def test_parsing_is_repeatable():
    line = "event Meeting /at 2/12/2019 1400 - 2/12/2019 1600"
    assert parse_command(line) == parse_command(line)


def test_descriptors_are_immutable():
    command = _command("todo read")
    with pytest.raises(AttributeError):
        command.description = "other"


@pytest.mark.parametrize(
    "line",
    [
        "deadline Submit /by 2/12/2019 1800",
        "deadline Submit /by 2/12/2019",
        "event Meeting /at 2/12/2019 1400 - 2/12/2019 1600",
        "event Meeting /at 2/12/2019 - 3/12/2019",
        "event Meeting /at 2/12/2019 - 1600",
    ],
)
def test_points_survive_reformatting(line):
    command = _command(line)
    points = [command.by] if isinstance(command, AddDeadlineCommand) else [command.start, command.end]
    for point in points:
        reparsed = parse_moment(format_point(point), DATE_OR_DATE_TIME)
        assert to_point(reparsed) == point


def test_parse_result_holds_exactly_one_outcome():
    with pytest.raises(ValueError):
        ParseResult()
    with pytest.raises(ValueError):
        ParseResult(
            command=ListCommand(raw="list"),
            error=ParseFailure(kind=ParseErrorKind.BAD_FORMAT, message="x"),
        )
