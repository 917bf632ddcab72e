"""Storage backends for the lab note collection.

A backend stores opaque string blobs under string keys. The store keeps the
whole collection as one JSON blob under one key, so a backend never needs
to understand notes.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Protocol, runtime_checkable

from simlab.utils import StorageUnavailableError

logger = logging.getLogger(__name__)


@runtime_checkable
class NoteStorage(Protocol):
    """Key/value blob storage.

    Implementations signal an unusable backend with StorageUnavailableError
    (or let an OSError propagate); the store degrades on either.
    """

    def load(self, key: str) -> str | None: ...

    def save(self, key: str, blob: str) -> None: ...

    def delete(self, key: str) -> None: ...


class InMemoryStorage:
    """Thread-safe dict-based storage, mostly for tests and embedding."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def load(self, key: str) -> str | None:
        with self._lock:
            return self._store.get(key)

    def save(self, key: str, blob: str) -> None:
        with self._lock:
            self._store[key] = blob

    def delete(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._store)


class JsonFileStorage:
    """One ``<key>.json`` file per key under *directory*."""

    def __init__(self, directory: Path | str) -> None:
        self._dir = Path(directory)

    def _path(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def load(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        with open(path, encoding="utf-8") as f:
            return f.read()

    def save(self, key: str, blob: str) -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".json.tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(blob)
        tmp.replace(path)

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class DisabledStorage:
    """A backend that is never available, e.g. persistence turned off."""

    def load(self, key: str) -> str | None:
        raise StorageUnavailableError("Lab note storage is disabled")

    def save(self, key: str, blob: str) -> None:
        raise StorageUnavailableError("Lab note storage is disabled")

    def delete(self, key: str) -> None:
        raise StorageUnavailableError("Lab note storage is disabled")
