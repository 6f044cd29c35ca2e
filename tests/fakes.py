# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class RecordingStorage:
    """
    Dict-backed Storage that records every write.

    Lets tests assert that a failed operation performed no write at all.
    """

    data: dict[bytes, bytes] = field(default_factory=dict)
    writes: list[tuple[bytes, bytes]] = field(default_factory=list)

    def get(self, key: bytes) -> bytes | None:
        return self.data.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        self.writes.append((key, value))
        self.data[key] = value
