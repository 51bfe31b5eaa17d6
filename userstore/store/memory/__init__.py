"""
Provides a simple in-memory implementation of the user repository,
for testing and mocking purposes.

.. versionadded:: 0.1.0
"""

from .store import MemoryUserRepository
