# honeyscan/utils/storage.py
# Purpose: Named-blob persistence port. In-memory for tests, JSON files on disk otherwise.
from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol, Union


class KeyValueStore(Protocol):
    def read(self, key: str) -> Optional[str]: ...

    def write(self, key: str, blob: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, blob: str) -> None:
        self._data[key] = blob


_SAFE_KEY = re.compile(r"[^A-Za-z0-9_.-]")


class JsonFileStore:
    """
    One '<key>.json' file per key under `directory`.
    Writes go to a temp file next to the target and are swapped in with
    os.replace, so a reader sees either the old blob or the new one.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{_SAFE_KEY.sub('_', key)}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write(self, key: str, blob: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        fd, tmp = tempfile.mkstemp(prefix=path.name, suffix=".tmp", dir=str(self.directory))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(blob)
            os.replace(tmp, path)
        except BaseException:
            try:
                os.unlink(tmp)
            except FileNotFoundError:
                pass
            raise


__all__ = ["KeyValueStore", "MemoryStore", "JsonFileStore"]
