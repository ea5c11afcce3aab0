"""Centralize defaults and environment lookups for the task interpreter."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Default configuration values
# ---------------------------------------------------------------------------
_DEFAULT_TASKS_PATH = "data/tasks.json"
_DEFAULT_LOGGING_ENABLED: bool = True
_DEFAULT_LOG_DIR = "logs"
_COMMAND_LOG_FILENAME = "commands.jsonl"
_DEFAULT_LOG_MAX_BYTES = 1_000_000
_DEFAULT_LOG_BACKUP_COUNT = 5
_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_DEFAULT_WEB_UI_HOST = "127.0.0.1"
_DEFAULT_WEB_UI_PORT = 9000


def _parse_bool(raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in {"0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _parse_non_negative_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(value, 0)


# ---------------------------------------------------------------------------
# Environment-derived settings
# ---------------------------------------------------------------------------
def get_tasks_path(env: Dict[str, str] | None = None) -> Path:
    """Return the JSON file the task list is loaded from and saved to.

    Args:
        env: Optional mapping used instead of ``os.environ`` to simplify testing.
    """

    source = env if env is not None else os.environ
    override = source.get("TASKS_PATH")
    return Path(override) if override else Path(_DEFAULT_TASKS_PATH)


def is_logging_enabled(env: Dict[str, str] | None = None) -> bool:
    """Determine whether the JSONL command log is written."""

    source = env if env is not None else os.environ
    return _parse_bool(source.get("LOGGING_ENABLED"), _DEFAULT_LOGGING_ENABLED)


def get_log_dir(env: Dict[str, str] | None = None) -> Path:
    source = env if env is not None else os.environ
    override = source.get("LOG_DIR")
    return Path(override) if override else Path(_DEFAULT_LOG_DIR)


def get_command_log_path(env: Dict[str, str] | None = None) -> Path:
    """Return the full path for the command log JSONL file."""

    return get_log_dir(env) / _COMMAND_LOG_FILENAME


def get_log_max_bytes(env: Dict[str, str] | None = None) -> int:
    """Return the maximum size in bytes before rotating the command log."""

    source = env if env is not None else os.environ
    return _parse_non_negative_int(source.get("LOG_MAX_BYTES"), _DEFAULT_LOG_MAX_BYTES)


def get_log_backup_count(env: Dict[str, str] | None = None) -> int:
    """Return the number of rotated command logs to retain."""

    source = env if env is not None else os.environ
    return _parse_non_negative_int(source.get("LOG_BACKUP_COUNT"), _DEFAULT_LOG_BACKUP_COUNT)


def get_log_level(env: Dict[str, str] | None = None) -> str:
    """Return the diagnostic logging level name (unknown names fall back to the default)."""

    source = env if env is not None else os.environ
    raw = (source.get("LOG_LEVEL") or "").strip().upper()
    return raw if raw in _LOG_LEVELS else _DEFAULT_LOG_LEVEL


def get_web_ui_host(env: Dict[str, str] | None = None) -> str:
    source = env if env is not None else os.environ
    return source.get("WEB_UI_HOST", _DEFAULT_WEB_UI_HOST)


def get_web_ui_port(env: Dict[str, str] | None = None) -> int:
    source = env if env is not None else os.environ
    raw = source.get("WEB_UI_PORT")
    if raw is None:
        return _DEFAULT_WEB_UI_PORT
    try:
        value = int(raw)
    except ValueError:
        return _DEFAULT_WEB_UI_PORT
    return value if 0 < value <= 65535 else _DEFAULT_WEB_UI_PORT
