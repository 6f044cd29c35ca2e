# src/todo_list/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..core.ports import Storage
from ..errors import SerializationError
from .codec import CodecError, decode_tasks, encode_tasks
from .task_models import Task

logger = logging.getLogger(__name__)

TASKS_KEY = b"tasks"


def load_tasks(storage: Storage) -> list[Task]:
    """
    Load the whole collection.

    A missing key and an undecodable blob both load as an empty list;
    this never raises for bad stored data.
    """
    data = storage.get(TASKS_KEY) or b""
    try:
        return decode_tasks(data)
    except CodecError as e:
        if data:
            logger.debug("Stored task blob is undecodable (%d bytes), loading empty: %s", len(data), e)
        return []


def save_tasks(storage: Storage, tasks: Sequence[Task]) -> None:
    """Encode and overwrite the whole collection. Nothing is written if encoding fails."""
    try:
        data = encode_tasks(tasks)
    except CodecError as e:
        raise SerializationError(e) from e
    storage.set(TASKS_KEY, data)
    logger.debug("Saved %d tasks (%d bytes)", len(tasks), len(data))


class TaskStore:
    """Task collection bound to one storage handle."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    @property
    def storage(self) -> Storage:
        return self._storage

    def load(self) -> list[Task]:
        return load_tasks(self._storage)

    def save(self, tasks: Sequence[Task]) -> None:
        save_tasks(self._storage, tasks)

    def count_tasks(self) -> int:
        return len(self.load())
