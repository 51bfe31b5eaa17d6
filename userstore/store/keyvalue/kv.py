"""
Key-Value Stores
----------------

The flat key-value stores the :class:`~userstore.store.keyvalue.store.KeyValueUserRepository`
persists to. A store maps string keys to raw bytes and knows nothing
about what the bytes mean.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union


class KeyValueStore(ABC):
    """The abstract key-value store interface."""

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Gets the value at the given key, or None if it was never set."""

    @abstractmethod
    def set(self, key: str, value: bytes):
        """Sets the key to the given value, replacing what was there."""


class MemoryKeyValueStore(KeyValueStore):
    """Keeps the values in a dictionary for the lifetime of the process."""

    def __init__(self):
        self._values: Dict[str, bytes] = {}

    def get(self, key: str) -> Optional[bytes]:
        return self._values.get(key)

    def set(self, key: str, value: bytes):
        self._values[key] = bytes(value)

    def __contains__(self, key):
        return key in self._values


class FileKeyValueStore(KeyValueStore):
    """
    Keeps each value in its own file in a directory,
    so that values outlive the process that wrote them.
    The directory is created on the first write.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not key or "/" in key or key in (".", ".."):
            raise KeyError(f"Key {key!r} can not be used as a file name.")
        return self.directory / key

    def get(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        if not path.is_file():
            return None
        return path.read_bytes()

    def set(self, key: str, value: bytes):
        path = self._path(key)
        self.directory.mkdir(parents=True, exist_ok=True)
        path.write_bytes(value)

    def __contains__(self, key):
        return self._path(key).is_file()
