# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_list.cli.bootstrap import create_initial_state
from todo_list.core.state import AppState
from todo_list.host import Host
from todo_list.storage import MemoryStorage

from .fakes import RecordingStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the CLI.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        storage_backend="sqlite",
        data_dir=tmp_path / "data",
        db_path=tmp_path / "data" / "todo.sqlite3",
        auto_instantiate=True,
    )


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def recording_storage() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture()
def host(storage: MemoryStorage) -> Host:
    h = Host(storage)
    h.instantiate()
    return h


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState built by the real bootstrap.

    NOTE: We keep the real SQLite backend here because persistence across
    calls is part of what we want to test.
    """
    return create_initial_state(settings=settings)
