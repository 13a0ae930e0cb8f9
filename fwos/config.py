"""Configuration store and its write-ahead log."""

from __future__ import annotations

import os
from pathlib import Path


class ConfigEngine:
    """In-memory configuration; unknown keys read as empty."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def get(self, key: str) -> str:
        return self._data.setdefault(key, "")


class WriteAheadLog:
    """Appends entries, one per line, to a log file."""

    def __init__(self, path: str | os.PathLike[str] = "fwos.wal") -> None:
        self.path = Path(path)

    def append(self, entry: str) -> None:
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(entry + "\n")