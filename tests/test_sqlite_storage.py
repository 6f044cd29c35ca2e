# tests/test_sqlite_storage.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_list.errors import StdError
from todo_list.host import Host
from todo_list.storage import SqliteStorage
from todo_list.tasks.task_store import TASKS_KEY


def test_get_set_overwrite(tmp_path: Path) -> None:
    store = SqliteStorage(tmp_path / "kv.sqlite3")

    assert store.get(b"missing") is None
    store.set(b"k", b"\x00\x01")
    store.set(b"k", b"\x02")

    assert store.get(b"k") == b"\x02"
    assert store.count_keys() == 1


def test_tasks_survive_reopen(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "todo.sqlite3"
    host = Host(SqliteStorage(db))
    host.instantiate()
    host.execute({"add_task": {"description": "persist me"}})
    host.execute({"complete_task": {"id": 1}})

    reopened = Host(SqliteStorage(db))
    assert reopened.query_json({"get_tasks": {}}) == {
        "tasks": [{"id": 1, "description": "persist me", "completed": True}]
    }
    assert reopened.storage.count_keys() == 2


def test_failed_execute_leaves_database_untouched(tmp_path: Path) -> None:
    storage = SqliteStorage(tmp_path / "todo.sqlite3")
    host = Host(storage)
    host.execute({"add_task": {"description": "a"}})
    before = storage.get(TASKS_KEY)

    with pytest.raises(StdError):
        host.execute({"complete_task": {"id": 42}})

    assert storage.get(TASKS_KEY) == before
