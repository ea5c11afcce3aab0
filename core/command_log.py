"""JSONL audit log of interpreted command lines.

Every line the interpreter handles is recorded as a ``CommandRecord``: what was
typed, which command it became (or why it was rejected), and how long it took.
Files are size-bounded with numbered backups so a long-running session cannot
grow the log without limit.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import IO, Any, Dict


def _utc_now() -> str:
    return datetime.now(tz=timezone.utc).isoformat()


@dataclass
class CommandRecord:
    """One interpreted line."""

    timestamp: str
    user_text: str
    command_kind: str | None
    success: bool
    error_kind: str | None = None
    response_text: str = ""
    latency_ms: int | None = None

    @classmethod
    def new(
        cls,
        *,
        user_text: str,
        command_kind: str | None,
        success: bool,
        error_kind: str | None = None,
        response_text: str = "",
        latency_ms: int | None = None,
    ) -> "CommandRecord":
        """Build a record stamped with the current UTC time."""

        return cls(
            timestamp=_utc_now(),
            user_text=user_text,
            command_kind=command_kind,
            success=success,
            error_kind=error_kind,
            response_text=response_text,
            latency_ms=latency_ms,
        )


class CommandLog:
    """WHAT: JSONL writer for ``CommandRecord`` rows.

    WHY: every interpreted line should be traceable after the session, while a
    long-running process must not grow the file without bound.
    HOW: skip writes when disabled, otherwise serialize the record, rotate to
    numbered backups once ``max_bytes`` would be exceeded, and append a line.
    """

    def __init__(
        self,
        *,
        log_path: Path,
        enabled: bool = True,
        max_bytes: int = 0,
        backup_count: int = 0,
    ) -> None:
        self._log_path = log_path
        self._enabled = enabled
        self._max_bytes = max_bytes
        self._backup_count = backup_count

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def log_path(self) -> Path:
        return self._log_path

    def log_command(self, record: CommandRecord) -> None:
        if not self._enabled:
            return
        self._append_json_line(self._log_path, asdict(record))

    def _append_json_line(self, path: Path, payload: Dict[str, Any]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        line = json.dumps(payload, ensure_ascii=False)
        self._rotate_if_needed(path, len(line.encode("utf-8")) + 1)
        with self._open_file(path) as handle:
            handle.write(line)
            handle.write("\n")

    @staticmethod
    def _open_file(path: Path) -> IO[str]:
        return path.open("a", encoding="utf-8")

    def _rotate_if_needed(self, path: Path, incoming_bytes: int) -> None:
        """Shift ``path`` to ``path.1`` (and older backups up by one) once it would exceed ``max_bytes``."""
        if self._max_bytes <= 0:
            return
        if not path.exists():
            return

        current_size = path.stat().st_size
        if current_size + incoming_bytes <= self._max_bytes:
            return

        if self._backup_count <= 0:
            path.unlink()
            return

        for index in range(self._backup_count - 1, 0, -1):
            src = Path(f"{path}.{index}")
            dst = Path(f"{path}.{index + 1}")
            if src.exists():
                src.replace(dst)

        rotated = Path(f"{path}.1")
        if rotated.exists():
            rotated.unlink()
        path.replace(rotated)


__all__ = ["CommandLog", "CommandRecord"]
