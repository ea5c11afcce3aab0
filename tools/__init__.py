"""Task list container and the text renderers the interpreter replies with."""

from tools.task_list import TaskIndexError, TaskList, format_task, format_task_lines

__all__ = ["TaskIndexError", "TaskList", "format_task", "format_task_lines"]
