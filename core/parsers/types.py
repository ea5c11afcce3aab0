"""Shared dataclasses for parser outputs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from core.tasks import Deadline, Event, PointInTime, Todo


class CommandKind(Enum):
    LIST = "list"
    DONE = "done"
    DELETE = "delete"
    ADD_TODO = "todo"
    ADD_DEADLINE = "deadline"
    ADD_EVENT = "event"
    FIND = "find"
    EXIT = "bye"


class ParseErrorKind(Enum):
    UNKNOWN_COMMAND = "unknown_command"
    EMPTY_FIELD = "empty_field"
    BAD_FORMAT = "bad_format"
    INVALID_INDEX = "invalid_index"


@dataclass(frozen=True)
class ListCommand:
    raw: str
    kind = CommandKind.LIST


@dataclass(frozen=True)
class ExitCommand:
    raw: str
    kind = CommandKind.EXIT


@dataclass(frozen=True)
class DoneCommand:
    raw: str
    index: int
    kind = CommandKind.DONE


@dataclass(frozen=True)
class DeleteCommand:
    raw: str
    index: int
    kind = CommandKind.DELETE


@dataclass(frozen=True)
class FindCommand:
    raw: str
    keyword: str
    kind = CommandKind.FIND


@dataclass(frozen=True)
class AddTodoCommand:
    raw: str
    description: str
    kind = CommandKind.ADD_TODO

    def to_task(self) -> Todo:
        return Todo(self.description)


@dataclass(frozen=True)
class AddDeadlineCommand:
    raw: str
    description: str
    by: PointInTime
    kind = CommandKind.ADD_DEADLINE

    @property
    def has_time(self) -> bool:
        return self.by.has_time

    def to_task(self) -> Deadline:
        return Deadline(self.description, self.by)


@dataclass(frozen=True)
class AddEventCommand:
    raw: str
    description: str
    start: PointInTime
    end: Optional[PointInTime] = None
    kind = CommandKind.ADD_EVENT

    @property
    def date_only(self) -> bool:
        return self.to_task().date_only

    def to_task(self) -> Event:
        return Event(self.description, self.start, self.end)


Command = Union[
    ListCommand,
    ExitCommand,
    DoneCommand,
    DeleteCommand,
    FindCommand,
    AddTodoCommand,
    AddDeadlineCommand,
    AddEventCommand,
]
AddCommand = Union[AddTodoCommand, AddDeadlineCommand, AddEventCommand]


@dataclass(frozen=True)
class ParseFailure:
    kind: ParseErrorKind
    message: str
    raw: str = ""


@dataclass(frozen=True)
class ParseResult:
    """Either a command descriptor or the reason the line could not be parsed."""

    command: Optional[Command] = None
    error: Optional[ParseFailure] = None

    def __post_init__(self) -> None:
        if (self.command is None) == (self.error is None):
            raise ValueError("A parse result holds exactly one of a command or an error")

    @property
    def ok(self) -> bool:
        return self.command is not None

    @classmethod
    def success(cls, command: Command) -> "ParseResult":
        return cls(command=command)

    @classmethod
    def failure(cls, kind: ParseErrorKind, message: str, raw: str) -> "ParseResult":
        return cls(error=ParseFailure(kind=kind, message=message, raw=raw))


__all__ = [
    "AddCommand",
    "AddDeadlineCommand",
    "AddEventCommand",
    "AddTodoCommand",
    "Command",
    "CommandKind",
    "DeleteCommand",
    "DoneCommand",
    "ExitCommand",
    "FindCommand",
    "ListCommand",
    "ParseErrorKind",
    "ParseFailure",
    "ParseResult",
]
