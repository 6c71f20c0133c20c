# src/task_cli/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
import re
from collections.abc import Callable, Sequence
from dataclasses import replace
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

from .errors import FormatError
from .task_models import Task, TaskStatus, format_timestamp, parse_timestamp, utc_now

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "tasks.json"

_INT_RE = re.compile(r"\s*[+-]?\d+\s*")


def parse_task_id(raw: Any) -> int | None:
    """
    Coerce a caller-supplied id to int.

    Returns None for anything that is not a whole decimal number, which then
    simply matches no task. Partial numbers like "12abc" are rejected.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _INT_RE.fullmatch(raw):
        try:
            return int(raw)
        except ValueError:
            # beyond the int string conversion digit limit
            return None
    return None


class TaskStore:
    """
    JSON-file task store.

    The whole collection lives in memory for the lifetime of one instance and
    the file is rewritten after every mutation:
    - load() once at startup (missing file = empty store)
    - each mutation builds the new collection, writes it, then swaps it in,
      so a failed write leaves memory and disk unchanged
    - writes go to a temp file that is renamed over the target

    Ids are max(id) + 1 over the current contents, so deleting the newest task
    frees its id for reuse.

    Not safe for concurrent writers on the same file.
    """

    def __init__(
        self,
        path: str | Path = DEFAULT_TASKS_FILE,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._path = Path(path)
        self._clock = clock
        self._tasks: list[Task] = []

    @property
    def path(self) -> Path:
        return self._path

    # ---- persistence ----

    def load(self) -> None:
        self._tasks = []
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.debug("No tasks file at %s; starting empty.", self._path)
            return
        except UnicodeDecodeError as e:
            raise FormatError() from e

        try:
            data = json.loads(raw)
            tasks = self._decode(data)
        except (ValueError, TypeError, RecursionError) as e:
            raise FormatError() from e

        self._tasks = tasks
        logger.info("TaskStore loaded file=%s total=%s", self._path, len(tasks))

    def save(self) -> None:
        self._write(self._tasks)

    @staticmethod
    def _decode(data: Any) -> list[Task]:
        if not isinstance(data, list):
            raise TypeError(f"tasks file must hold a list, got {type(data).__name__}")
        tasks = [Task.from_dict(item) for item in data]
        seen: set[int] = set()
        for t in tasks:
            if t.id in seen:
                raise ValueError(f"duplicate task id {t.id}")
            seen.add(t.id)
        return tasks

    def _write(self, tasks: Sequence[Task]) -> None:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise
        logger.debug("TaskStore saved file=%s total=%s", self._path, len(tasks))

    def _commit(self, tasks: list[Task]) -> None:
        self._write(tasks)
        self._tasks = tasks

    # ---- helpers ----

    def _find_index(self, task_id: Any) -> int | None:
        tid = parse_task_id(task_id)
        if tid is None:
            return None
        for i, t in enumerate(self._tasks):
            if t.id == tid:
                return i
        return None

    def _next_timestamp(self, previous: str | None = None) -> str:
        """Current time, forced strictly past `previous` when given."""
        stamp = format_timestamp(self._clock())
        if previous is not None:
            prev = parse_timestamp(previous)
            # compare at the stored (millisecond) precision
            if parse_timestamp(stamp) <= prev:
                stamp = format_timestamp(prev + timedelta(milliseconds=1))
        return stamp

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def next_id(self) -> int:
        return max((t.id for t in self._tasks), default=0) + 1

    def get_task(self, task_id: Any) -> Task | None:
        idx = self._find_index(task_id)
        return None if idx is None else self._tasks[idx]

    def add_task(self, description: str) -> int:
        now = self._next_timestamp()
        task = Task(
            id=self.next_id(),
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        self._commit([*self._tasks, task])
        logger.debug("Task added id=%s", task.id)
        return task.id

    def update_task(self, task_id: Any, description: str) -> bool:
        idx = self._find_index(task_id)
        if idx is None:
            return False
        old = self._tasks[idx]
        tasks = list(self._tasks)
        tasks[idx] = replace(
            old,
            description=description,
            updated_at=self._next_timestamp(old.updated_at),
        )
        self._commit(tasks)
        logger.debug("Task updated id=%s", old.id)
        return True

    def delete_task(self, task_id: Any) -> bool:
        idx = self._find_index(task_id)
        if idx is None:
            return False
        tasks = list(self._tasks)
        removed = tasks.pop(idx)
        self._commit(tasks)
        logger.debug("Task deleted id=%s", removed.id)
        return True

    def mark_task(self, task_id: Any, status: str | TaskStatus) -> bool:
        new_status = TaskStatus.parse(status)
        idx = self._find_index(task_id)
        if idx is None:
            return False
        old = self._tasks[idx]
        tasks = list(self._tasks)
        tasks[idx] = replace(
            old,
            status=new_status,
            updated_at=self._next_timestamp(old.updated_at),
        )
        self._commit(tasks)
        logger.debug("Task marked id=%s status=%s", old.id, new_status.value)
        return True

    def list_tasks(self, status: str | TaskStatus | None = None) -> list[Task]:
        """All tasks in insertion order, or only those with the given status."""
        if not status:
            return list(self._tasks)
        wanted = TaskStatus.parse(status)
        return [t for t in self._tasks if t.status == wanted]
