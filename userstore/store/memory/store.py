from asyncio import Lock
from typing import List, Optional
from uuid import UUID

from userstore import logger
from userstore.models.user import User
from userstore.store.repository import UserRepository


class MemoryUserRepository(UserRepository):
    """
    Emulates a database by doing all the operations in memory.

    The users are only ever touched while holding the lock,
    so each operation completes before the next one starts
    no matter how many callers share the repository.
    """

    _users: List[User]

    def __init__(self):
        self._users = []
        self._lock = Lock()

    async def create(self, user: User):
        async with self._lock:
            logger.debug("Adding user %s to memory", user)
            self._users.append(user)

    async def find(self, user_id: UUID) -> Optional[User]:
        async with self._lock:
            return next((user for user in self._users if user.id == user_id), None)

    async def remove(self, user_id: UUID):
        async with self._lock:
            logger.debug("Removing user %s from memory", user_id)
            self._users = [user for user in self._users if user.id != user_id]

    async def users(self) -> List[User]:
        """Gets a copy of all the users, in the order they were added."""
        async with self._lock:
            return list(self._users)

    def __len__(self):
        """
        Counts the users without waiting for the lock, so the count
        may be taken in between the steps of another operation.
        """
        return len(self._users)
