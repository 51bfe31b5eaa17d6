import os

server_mode = os.getenv("SERVER_MODE", "development")
"""The operational mode of the server."""

store_backend = os.getenv("USERSTORE_BACKEND", "memory")
"""The backend that holds the users, either ``memory`` or ``keyvalue``."""

store_path = os.getenv("USERSTORE_PATH", None)
"""The directory the key-value backend persists to. Kept in memory when unset."""
