"""Per-command field extractors."""

from . import control, find, index, tasks

__all__ = ["control", "find", "index", "tasks"]
