"""
Users View Model
----------------
"""
from typing import Callable, Optional
from uuid import UUID, uuid4

from userstore.models.user import User
from userstore.store import build_repository
from userstore.store.repository import UserRepository


class UsersViewModel:
    """
    Creates, finds, and deletes users through whichever
    repository it was given. It never knows which backend
    it is talking to, and lets any of its errors through.
    """

    def __init__(self, repository: UserRepository, id_factory: Callable[[], UUID] = uuid4):
        """
        :param repository: The repository that holds the users.
        :param id_factory: Generates the id for each new user.
        """
        self._repository = repository
        self._id_factory = id_factory

    @classmethod
    def configured(cls, backend: Optional[str] = None, path: Optional[str] = None) -> "UsersViewModel":
        """
        Builds a view model over the configured backend.

        .. code:: python

            # keep the users in memory
            users = UsersViewModel.configured("memory")

            # or serialize them to a directory
            users = UsersViewModel.configured("keyvalue", "data")

        :raises ValueError: If the backend is unknown.
        """
        return cls(build_repository(backend, path))

    @property
    def repository(self) -> UserRepository:
        return self._repository

    async def create_user(self, name: str) -> User:
        """
        Creates a new user.

        :raises EncodingError: When the repository could not persist the user.
        """
        user = User(name=name, id=self._id_factory())
        await self._repository.create(user)
        return user

    async def delete(self, user: User):
        await self._repository.remove(user.id)

    async def find_user(self, user_id: UUID) -> Optional[User]:
        return await self._repository.find(user_id)
