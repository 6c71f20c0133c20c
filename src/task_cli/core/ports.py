# src/task_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on this Protocol rather than on TaskStore itself, so tests
can drive them with an in-memory fake.
"""

from typing import Any, Protocol

from ..tasks.task_models import Task, TaskStatus


class TaskRepo(Protocol):
    def load(self) -> None: ...

    def add_task(self, description: str) -> int: ...

    def update_task(self, task_id: Any, description: str) -> bool: ...

    def delete_task(self, task_id: Any) -> bool: ...

    def mark_task(self, task_id: Any, status: str | TaskStatus) -> bool: ...

    def list_tasks(self, status: str | TaskStatus | None = None) -> list[Task]: ...
