"""
This module hosts the abstract base class for all user repositories.
This class is used to define the "contract" that all storage backends
must adhere to. Anything that depends on users should depend on this
interface and never on a specific backend.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from userstore.models.user import User


class UserRepository(ABC):
    """The abstract user repository interface."""

    @abstractmethod
    async def create(self, user: User):
        """
        Adds a user to the repository.

        .. note:: No uniqueness check is made. Adding two users with
            the same id stores both of them.

        :raises EncodingError: If the backend could not persist the users.
        """

    @abstractmethod
    async def find(self, user_id: UUID) -> Optional[User]:
        """
        Gets the first user with the given id.

        :return: The user, or None if there is no such user.
        :raises DecodingError: If the backend could not read the persisted users.
        """

    @abstractmethod
    async def remove(self, user_id: UUID):
        """
        Removes every user with the given id. Removing
        an id that does not exist does nothing.
        """
