# src/todo_list/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..host import Host
from ..tasks.task_store import TaskStore
from .ports import Storage


@dataclass
class AppState:
    # Settings (or a test stand-in) kept on the state for the CLI.
    settings: object

    storage: Storage
    host: Host

    @property
    def task_store(self) -> TaskStore:
        return TaskStore(self.storage)
