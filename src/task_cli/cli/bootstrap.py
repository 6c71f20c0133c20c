# src/task_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

Composition root: takes settings (injected or from the environment) and
builds a loaded TaskStore for one invocation.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_task_store(*, settings=None) -> TaskStore:
    """
    Build a TaskStore for settings.tasks_file and load it.

    Keeping settings injectable avoids hidden global config reads in tests.
    Load errors (FormatError, OSError) propagate to the caller.
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_file)
    store.load()
    logger.debug("Task store ready file=%s total=%s", store.path, store.count_tasks())
    return store
