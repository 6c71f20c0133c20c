# src/task_cli/tasks/__init__.py

from .errors import FormatError, TaskCliError, ValidationError
from .task_models import Task, TaskStatus
from .task_store import TaskStore, parse_task_id

__all__ = [
    "FormatError",
    "Task",
    "TaskCliError",
    "TaskStatus",
    "TaskStore",
    "ValidationError",
    "parse_task_id",
]
