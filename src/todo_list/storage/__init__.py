"""
Storage backends.

- memory.py: dict-backed storage and the per-invocation write buffer
- sqlite.py: SQLite key/value table
"""

from .memory import MemoryStorage, StorageTransaction
from .sqlite import SqliteStorage

__all__ = ["MemoryStorage", "SqliteStorage", "StorageTransaction"]
