"""
Key-value persistence backends.

QuizStore only needs get/set/delete by string key, so any object with those
three methods can back it. Two implementations ship here:
- InMemoryStore: dict-backed, for tests and throwaway sessions
- JsonFileStore: one JSON text file per key in a directory
"""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Dict, Iterator, Optional, Protocol

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStore(Protocol):
    """Synchronous string key-value store."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class InMemoryStore:
    """Dict-backed store. Contents are lost when the object is discarded."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> Iterator[str]:
        return iter(list(self._data))

    def __contains__(self, key: str) -> bool:
        return key in self._data


class JsonFileStore:
    """
    Directory-backed store with one UTF-8 file per key.

    Features:
    - Files live at <root_dir>/<key>.json
    - Writes go through a temp file and os.replace
    - Missing keys read as None, deleting them is a no-op
    """

    def __init__(self, root_dir: Path | str):
        """
        Initialize file store.

        Args:
            root_dir: Directory holding the key files (created if missing)
        """
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.root_dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        filepath = self._path_for(key)
        if not filepath.exists():
            return None
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read()

    def set(self, key: str, value: str) -> None:
        filepath = self._path_for(key)
        fd, tmp_path = tempfile.mkstemp(dir=self.root_dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_path, filepath)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        self._path_for(key).unlink(missing_ok=True)

    def keys(self) -> Iterator[str]:
        return iter(sorted(p.stem for p in self.root_dir.glob("*.json")))

    def __contains__(self, key: str) -> bool:
        return self._path_for(key).exists()
