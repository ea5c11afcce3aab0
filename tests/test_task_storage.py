"""Tests for the JSON task file."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest

from core.task_storage import TaskStorage, decode_task, encode_task
from core.tasks import Deadline, Event, PointInTime, Todo


def _tasks():
    return [
        Todo("read book", done=True),
        Deadline("return book", PointInTime(datetime(2019, 12, 2, 18, 0))),
        Event("trip", PointInTime(datetime(2019, 12, 2), has_time=False), PointInTime(datetime(2019, 12, 4), has_time=False)),
        Event("party", PointInTime(datetime(2019, 12, 6, 20, 0))),
    ]


def test_save_then_load_restores_tasks(tmp_path: Path) -> None:
    storage = TaskStorage(tmp_path / "nested" / "tasks.json")
    storage.save(_tasks())

    assert storage.load() == _tasks()
    assert not (tmp_path / "nested" / "tasks.json.tmp").exists()


def test_points_are_stored_in_input_pattern(tmp_path: Path) -> None:
    storage = TaskStorage(tmp_path / "tasks.json")
    storage.save(_tasks())

    payload = json.loads(storage.path.read_text(encoding="utf-8"))
    entries = payload["tasks"]
    assert entries[0] == {"type": "todo", "description": "read book", "done": True}
    assert entries[1]["by"] == "2/12/2019 1800"
    assert entries[2]["start"] == "2/12/2019"
    assert entries[2]["end"] == "4/12/2019"
    assert "end" not in entries[3]


def test_missing_or_blank_file_loads_empty(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    assert TaskStorage(path).load() == []
    path.write_text("   ", encoding="utf-8")
    assert TaskStorage(path).load() == []


def test_invalid_layout_raises(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps({"tasks": {"oops": 1}}), encoding="utf-8")
    with pytest.raises(ValueError):
        TaskStorage(path).load()


def test_unreadable_entries_are_skipped(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(
        json.dumps(
            {
                "tasks": [
                    {"type": "todo", "description": "keep me"},
                    {"type": "deadline", "description": "bad date", "by": "someday"},
                    {"type": "unknown", "description": "x"},
                    {"type": "todo", "description": None},
                    {"type": "todo", "description": "stringly done", "done": "false"},
                    "not a dict",
                ]
            }
        ),
        encoding="utf-8",
    )
    with caplog.at_level("WARNING"):
        tasks = TaskStorage(path).load()
    assert tasks == [Todo("keep me")]
    assert "Skipping unreadable task entry" in caplog.text


def test_decode_rejects_bad_event_end() -> None:
    item = {"type": "event", "description": "x", "start": "2/12/2019", "end": "1600"}
    assert decode_task(item) is None


def test_encode_decode_single_task() -> None:
    task = Deadline("submit", PointInTime(datetime(2020, 1, 5), has_time=False), done=True)
    assert decode_task(encode_task(task)) == task


def test_decode_requires_string_description_and_bool_done() -> None:
    assert decode_task({"type": "todo", "description": None}) is None
    assert decode_task({"type": "todo", "description": "x", "done": "false"}) is None
    assert decode_task({"type": "todo", "description": "x", "done": 1}) is None
    assert decode_task({"type": "todo", "description": "x"}) == Todo("x")


def test_save_leaves_no_temp_files(tmp_path: Path) -> None:
    storage = TaskStorage(tmp_path / "tasks.json")
    storage.save(_tasks())
    storage.save(_tasks()[:1])
    assert sorted(path.name for path in tmp_path.iterdir()) == ["tasks.json"]
    assert storage.load() == _tasks()[:1]
