"""
Errors
------

The errors a storage backend may raise. Only backends that
persist their users as bytes can fail: a missing user is never
an error, it is simply ``None``.
"""


class StoreError(Exception):
    """Raised when a backend fails to read or write its users."""


class EncodingError(StoreError):
    """Raised when the collection of users cannot be turned into bytes."""


class DecodingError(StoreError):
    """Raised when persisted bytes exist but cannot be read back into users."""
