# tests/test_config.py

from __future__ import annotations

import os
from pathlib import Path

import pytest

from todo_list.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TODOLIST_APP_NAME",
        "TODOLIST_LOG_LEVEL",
        "TODOLIST_STORAGE",
        "TODOLIST_DATA_DIR",
        "TODOLIST_DB_PATH",
        "TODOLIST_AUTO_INSTANTIATE",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env(load_env_file=False)

    assert s.app_name == "todo-list"
    assert s.log_level == "INFO"
    assert s.storage_backend == "sqlite"
    assert s.data_dir == Path(".local/todo")
    assert s.db_path == Path(".local/todo/todo.sqlite3")
    assert s.auto_instantiate is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODOLIST_STORAGE", "Memory")
    monkeypatch.setenv("TODOLIST_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TODOLIST_AUTO_INSTANTIATE", "no")

    s = Settings.from_env(load_env_file=False)

    assert s.storage_backend == "memory"
    assert s.db_path == tmp_path / "todo.sqlite3"
    assert s.auto_instantiate is False


def test_unknown_backend_falls_back_to_sqlite(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODOLIST_STORAGE", "redis")
    assert Settings.from_env(load_env_file=False).storage_backend == "sqlite"


def test_dotenv_file_is_loaded(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TODOLIST_APP_NAME=from-dotenv\n", "utf-8")
    monkeypatch.chdir(tmp_path)

    try:
        assert Settings.from_env().app_name == "from-dotenv"
    finally:
        os.environ.pop("TODOLIST_APP_NAME", None)
