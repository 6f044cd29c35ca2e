# src/todo_list/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Entry points only ever see a Storage: the byte-oriented key/value capability
supplied by the host. Concrete backends live in todo_list.storage.
"""

from typing import Protocol


class Storage(Protocol):
    """Opaque key/value store. `get` returns None for a missing key."""

    def get(self, key: bytes) -> bytes | None: ...
    def set(self, key: bytes, value: bytes) -> None: ...
