# src/todo_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the storage backend and the Host into AppState,
- instantiates the contract on first start.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Storage
from ..core.state import AppState
from ..errors import StdError
from ..host import Host
from ..storage import MemoryStorage, SqliteStorage
from ..versioning import get_contract_version

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def build_storage(settings) -> Storage:
    backend = str(getattr(settings, "storage_backend", "sqlite"))
    if backend == "memory":
        logger.info("Using in-memory storage (nothing is persisted).")
        return MemoryStorage()
    return SqliteStorage(settings.db_path)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = build_storage(settings)
    state = AppState(settings=settings, storage=storage, host=Host(storage))

    if getattr(settings, "auto_instantiate", True):
        try:
            info = get_contract_version(storage)
            logger.debug("Contract already instantiated: %s %s", info.contract, info.version)
        except StdError:
            state.host.instantiate()
    return state
