"""
Handles all the persistence for the application.
Currently has two implementations: in-memory and
key-value serialized. Both fulfill the
:class:`~userstore.store.repository.UserRepository` contract.
"""

from typing import Optional

from userstore import config, logger
from .errors import StoreError, EncodingError, DecodingError
from .keyvalue import KeyValueUserRepository, KeyValueStore, MemoryKeyValueStore, FileKeyValueStore
from .memory import MemoryUserRepository
from .repository import UserRepository

BACKENDS = ("memory", "keyvalue")


def build_repository(backend: Optional[str] = None, path: Optional[str] = None) -> UserRepository:
    """
    Builds the configured user repository.

    :param backend: The backend to use, defaults to :data:`~userstore.config.store_backend`.
    :param path: The directory the key-value backend persists to, defaults
        to :data:`~userstore.config.store_path`. Kept in memory if neither is set.
    :raises ValueError: If the backend is not one of :data:`BACKENDS`.
    """
    backend = backend if backend is not None else config.store_backend
    path = path if path is not None else config.store_path

    if backend == "memory":
        logger.info("Keeping users in memory")
        return MemoryUserRepository()

    if backend == "keyvalue":
        if path is None:
            logger.info("Keeping serialized users in memory")
            return KeyValueUserRepository(MemoryKeyValueStore())
        logger.info("Keeping serialized users in %s", path)
        return KeyValueUserRepository(FileKeyValueStore(path))

    raise ValueError(f"Unknown backend {backend!r}, expected one of {', '.join(BACKENDS)}.")
