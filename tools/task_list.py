"""In-memory ordered task list plus the text renderers used by the interpreter."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from core.parser_utils import render_point
from core.tasks import Deadline, Event, Task, mark_done


class TaskIndexError(ValueError):
    """Raised when a 1-based task number does not exist in the list."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"There is no task number {index}; the list has {size} task(s).")
        self.index = index
        self.size = size


class TaskList:
    """Ordered task container addressed with 1-based indices."""

    def __init__(self, tasks: Optional[Iterable[Task]] = None) -> None:
        self._tasks: List[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def tasks(self) -> List[Task]:
        return list(self._tasks)

    def numbered(self) -> List[Tuple[int, Task]]:
        return list(enumerate(self._tasks, start=1))

    def add(self, task: Task) -> Task:
        self._tasks.append(task)
        return task

    def mark_done(self, index: int) -> Task:
        position = self._position(index)
        updated = mark_done(self._tasks[position])
        self._tasks[position] = updated
        return updated

    def delete(self, index: int) -> Task:
        position = self._position(index)
        return self._tasks.pop(position)

    def find(self, keyword: str) -> List[Tuple[int, Task]]:
        """Return ``(index, task)`` pairs whose description contains ``keyword`` (case-insensitive)."""
        needle = keyword.strip().lower()
        return [(number, task) for number, task in self.numbered() if needle in task.description.lower()]

    def _position(self, index: int) -> int:
        if index < 1 or index > len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))
        return index - 1


def format_task(task: Task) -> str:
    """Render a single task, e.g. ``[D][X] Submit (by: Dec 2 2019 18:00)``."""
    status = "X" if task.done else " "
    text = f"[{task.icon}][{status}] {task.description}"
    if isinstance(task, Deadline):
        text += f" (by: {render_point(task.by)})"
    elif isinstance(task, Event):
        when = render_point(task.start)
        if task.end is not None:
            when += f" - {render_point(task.end)}"
        text += f" (at: {when})"
    return text


def format_task_lines(pairs: Iterable[Tuple[int, Task]]) -> List[str]:
    return [f"{number}.{format_task(task)}" for number, task in pairs]


def format_task_count(size: int) -> str:
    noun = "task" if size == 1 else "tasks"
    return f"Now you have {size} {noun} in the list."


__all__ = [
    "TaskIndexError",
    "TaskList",
    "format_task",
    "format_task_count",
    "format_task_lines",
]
