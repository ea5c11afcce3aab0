"""Task variants tracked by the interpreter.

Tasks form a closed set (todo, deadline, event). Each variant is a frozen
dataclass so a task produced by the parser can be handed to the task list
without anyone mutating it afterwards; marking a task done yields a copy.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Union


@dataclass(frozen=True)
class PointInTime:
    """A calendar date with an optional clock time.

    Date-only values are stored at midnight so they compare like any other
    timestamp, while ``has_time`` remembers that no time should be displayed.
    """

    value: datetime
    has_time: bool = True

    @property
    def date_only(self) -> bool:
        return not self.has_time


@dataclass(frozen=True)
class Todo:
    description: str
    done: bool = False

    icon = "T"


@dataclass(frozen=True)
class Deadline:
    description: str
    by: PointInTime
    done: bool = False

    icon = "D"


@dataclass(frozen=True)
class Event:
    description: str
    start: PointInTime
    end: Optional[PointInTime] = None
    done: bool = False

    icon = "E"

    @property
    def date_only(self) -> bool:
        """True when any part of the event was given without a time of day."""
        if self.start.date_only:
            return True
        return self.end is not None and self.end.date_only


Task = Union[Todo, Deadline, Event]


def mark_done(task: Task) -> Task:
    return replace(task, done=True)


__all__ = ["PointInTime", "Todo", "Deadline", "Event", "Task", "mark_done"]
