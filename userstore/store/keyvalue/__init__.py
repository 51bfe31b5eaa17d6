"""
Provides a user repository that keeps the whole collection
of users serialized under a single key of a flat key-value store.

.. versionadded:: 0.2.0
"""

from .kv import KeyValueStore, MemoryKeyValueStore, FileKeyValueStore
from .store import KeyValueUserRepository, USERS_KEY
