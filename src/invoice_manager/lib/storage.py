"""
String-keyed persistence media for the invoice store.

The store never talks to a concrete backend directly; it receives a Storage
instance exposing get/set/remove over string keys and values. Backends:

- MemoryStorage: a plain dict, used by tests and the ``memory`` store kind
- DiskStorage: a diskcache directory, thread-safe and process-safe
- UnavailableStorage: stands in when no medium can be opened; reads see an
  empty medium and writes raise StorageUnavailableError
"""

from abc import ABC, abstractmethod
from pathlib import Path

import diskcache

from invoice_manager.errors import StorageUnavailableError


class Storage(ABC):
    """Abstract string key/value medium."""

    @property
    def available(self) -> bool:
        """Return True when the medium can be read and written."""
        return True

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove key. Removing an absent key is not an error."""

    def close(self) -> None:
        """Release any resources held by the medium."""


class MemoryStorage(Storage):
    """In-memory medium backed by a dict."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        """Return the stored keys in insertion order."""
        return list(self._data)


class DiskStorage(Storage):
    """
    Disk-backed medium stored in a diskcache directory.

    Values never expire; the directory is created if it doesn't exist.

    Attributes:
        directory: Path to the cache directory.
    """

    def __init__(self, directory: str | Path) -> None:
        """
        Open the disk medium.

        Args:
            directory: Directory path for storing cache files.
        """
        self.directory = Path(directory)
        self._cache = diskcache.Cache(str(self.directory))

    def get(self, key: str) -> str | None:
        return self._cache.get(key, default=None)

    def set(self, key: str, value: str) -> None:
        self._cache.set(key, value)

    def remove(self, key: str) -> None:
        self._cache.delete(key)

    def close(self) -> None:
        """Close the cache and release resources."""
        self._cache.close()


class UnavailableStorage(Storage):
    """Medium used when no real backend could be opened."""

    @property
    def available(self) -> bool:
        return False

    def get(self, key: str) -> str | None:
        return None

    def set(self, key: str, value: str) -> None:
        raise StorageUnavailableError(f"Cannot write {key!r}: no storage available")

    def remove(self, key: str) -> None:
        raise StorageUnavailableError(f"Cannot remove {key!r}: no storage available")
