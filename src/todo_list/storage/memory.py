# src/todo_list/storage/memory.py

from __future__ import annotations

import logging

from ..core.ports import Storage

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Dict-backed storage. Nothing survives the process."""

    def __init__(self, initial: dict[bytes, bytes] | None = None) -> None:
        self._data: dict[bytes, bytes] = dict(initial or {})

    def get(self, key: bytes) -> bytes | None:
        return self._data.get(bytes(key))

    def set(self, key: bytes, value: bytes) -> None:
        self._data[bytes(key)] = bytes(value)

    def count_keys(self) -> int:
        return len(self._data)

    def close(self) -> None:
        return


class StorageTransaction:
    """
    Write buffer over another storage.

    Reads see buffered writes first. Nothing reaches the inner storage
    until commit(); discard() drops the buffer.
    """

    def __init__(self, inner: Storage) -> None:
        self._inner = inner
        self._pending: dict[bytes, bytes] = {}

    def get(self, key: bytes) -> bytes | None:
        key = bytes(key)
        if key in self._pending:
            return self._pending[key]
        return self._inner.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        self._pending[bytes(key)] = bytes(value)

    @property
    def pending_keys(self) -> list[bytes]:
        return list(self._pending)

    def commit(self) -> None:
        for key, value in self._pending.items():
            self._inner.set(key, value)
        logger.debug("Transaction committed keys=%d", len(self._pending))
        self._pending.clear()

    def discard(self) -> None:
        if self._pending:
            logger.debug("Transaction discarded keys=%d", len(self._pending))
        self._pending.clear()
