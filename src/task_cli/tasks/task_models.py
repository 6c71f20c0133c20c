# src/task_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from .errors import ValidationError


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Any status may move to any other; "done" is not terminal.
    """

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(s.value for s in cls)

    @classmethod
    def parse(cls, raw: str | TaskStatus) -> TaskStatus:
        """Strict conversion; raises ValidationError for anything outside the enum."""
        try:
            return cls(raw)
        except ValueError:
            raise ValidationError(cls.values()) from None


# ---- timestamps ----


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(dt: datetime) -> str:
    """UTC, millisecond precision, "Z" suffix: 2024-05-01T12:00:00.000Z"""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(raw: str) -> datetime:
    dt = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus

    # ISO-8601 strings, kept verbatim from disk
    created_at: str
    updated_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from one persisted record.

        Raises ValueError/TypeError when the record does not have the expected
        shape; the store turns those into FormatError.
        """
        if not isinstance(raw, dict):
            raise TypeError(f"task record must be an object, got {type(raw).__name__}")

        task_id = raw.get("id")
        # bool is an int subclass
        if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id < 1:
            raise ValueError(f"invalid task id: {task_id!r}")

        description = raw.get("description")
        if not isinstance(description, str):
            raise TypeError(f"task {task_id}: description must be a string")

        status = raw.get("status")
        if status not in TaskStatus.values():
            raise ValueError(f"task {task_id}: invalid status {status!r}")

        created_at = raw.get("createdAt")
        updated_at = raw.get("updatedAt")
        for name, value in (("createdAt", created_at), ("updatedAt", updated_at)):
            if not isinstance(value, str):
                raise TypeError(f"task {task_id}: {name} must be a string")
            parse_timestamp(value)

        return cls(
            id=task_id,
            description=description,
            status=TaskStatus(status),
            created_at=created_at,
            updated_at=updated_at,
        )
