"""File-backed persistence for the task list.

Tasks are written as a JSON document ``{"tasks": [...]}``. Points in time are
stored in the same ``d/M/yyyy[ HHmm]`` form users type, so loading goes back
through the command parser's date reader rather than a second format.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from core.parser_utils import DATE_OR_DATE_TIME, format_point, parse_moment, to_point
from core.tasks import Deadline, Event, PointInTime, Task, Todo

logger = logging.getLogger(__name__)

_TYPE_NAMES = {Todo: "todo", Deadline: "deadline", Event: "event"}


class TaskStorage:
    """Load and save tasks as JSON at ``path``."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> List[Task]:
        """Return the stored tasks, or an empty list when the file is absent or blank."""
        if not self._path.exists():
            return []
        raw = self._path.read_text(encoding="utf-8")
        if not raw.strip():
            return []
        payload = json.loads(raw)
        raw_items = payload.get("tasks", []) if isinstance(payload, dict) else None
        if not isinstance(raw_items, list):
            raise ValueError("Invalid task file format: 'tasks' must be a list")

        tasks: List[Task] = []
        for position, item in enumerate(raw_items, start=1):
            task = decode_task(item) if isinstance(item, dict) else None
            if task is None:
                logger.warning("Skipping unreadable task entry %d in %s", position, self._path)
                continue
            tasks.append(task)
        return tasks

    def save(self, tasks: List[Task]) -> None:
        """Persist ``tasks`` atomically."""
        payload = {"tasks": [encode_task(task) for task in tasks]}
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self._path.parent,
            prefix=f"{self._path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            json.dump(payload, handle, indent=2, ensure_ascii=False)
            tmp_path = Path(handle.name)
        try:
            os.replace(tmp_path, self._path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise


def encode_task(task: Task) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "type": _TYPE_NAMES[type(task)],
        "description": task.description,
        "done": task.done,
    }
    if isinstance(task, Deadline):
        data["by"] = format_point(task.by)
    elif isinstance(task, Event):
        data["start"] = format_point(task.start)
        if task.end is not None:
            data["end"] = format_point(task.end)
    return data


def decode_task(item: Dict[str, Any]) -> Optional[Task]:
    raw_description = item.get("description")
    done = item.get("done", False)
    if not isinstance(raw_description, str) or not isinstance(done, bool):
        return None
    description = raw_description.strip()
    if not description:
        return None
    kind = item.get("type")

    if kind == "todo":
        return Todo(description, done=done)
    if kind == "deadline":
        by = _decode_point(item.get("by"))
        return Deadline(description, by, done=done) if by else None
    if kind == "event":
        start = _decode_point(item.get("start"))
        if start is None:
            return None
        end = None
        if item.get("end") is not None:
            end = _decode_point(item.get("end"))
            if end is None:
                return None
        return Event(description, start, end, done=done)
    return None


def _decode_point(value: Any) -> Optional[PointInTime]:
    if not isinstance(value, str):
        return None
    parsed = parse_moment(value, DATE_OR_DATE_TIME)
    return to_point(parsed) if parsed else None


__all__ = ["TaskStorage", "decode_task", "encode_task"]
