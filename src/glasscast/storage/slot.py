"""Single-slot durable byte storage."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol


class KeyValueSlot(Protocol):
    """One durable value, overwritten as a whole on every write."""

    def write(self, data: bytes) -> None:
        ...

    def read(self) -> bytes | None:
        ...


class MemorySlot:
    """In-memory slot; also counts writes, which tests rely on."""

    def __init__(self, data: bytes | None = None) -> None:
        self._data = data
        self.write_count = 0

    def write(self, data: bytes) -> None:
        self._data = bytes(data)
        self.write_count += 1

    def read(self) -> bytes | None:
        return self._data


class FileSlot:
    """Slot backed by one file; missing file reads as absent."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def write(self, data: bytes) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_bytes(data)

    def read(self) -> bytes | None:
        try:
            return self._path.read_bytes()
        except FileNotFoundError:
            return None
