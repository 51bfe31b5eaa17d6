import json
from typing import List, Optional
from uuid import UUID

from marshmallow import ValidationError

from userstore import logger
from userstore.models.user import User
from userstore.serializer.models import UserSchema
from userstore.store.errors import DecodingError, EncodingError
from userstore.store.keyvalue.kv import KeyValueStore, MemoryKeyValueStore
from userstore.store.repository import UserRepository

USERS_KEY = "users"
"""The key the whole collection of users is kept under."""


class KeyValueUserRepository(UserRepository):
    """
    Stores every user as a single JSON document in a key-value store.

    Each operation reads the whole collection back, changes it,
    and writes the whole collection again. Nothing coordinates
    concurrent writers: when two of them interleave, the last
    write wins and the other update is lost.
    """

    key = USERS_KEY

    def __init__(self, store: Optional[KeyValueStore] = None):
        self.store = store if store is not None else MemoryKeyValueStore()
        self._schema = UserSchema(many=True)

    async def create(self, user: User):
        users = self._fetch_users()
        users.append(user)
        logger.debug("Adding user %s under key %s", user, self.key)
        self._store_users(users)

    async def find(self, user_id: UUID) -> Optional[User]:
        return next((user for user in self._fetch_users() if user.id == user_id), None)

    async def remove(self, user_id: UUID):
        users = [user for user in self._fetch_users() if user.id != user_id]
        logger.debug("Removing user %s under key %s", user_id, self.key)
        self._store_users(users)

    async def users(self) -> List[User]:
        """Gets all the users, in the order they were added."""
        return self._fetch_users()

    def _fetch_users(self) -> List[User]:
        """
        Reads the users from the store. A missing key is an empty list.

        :raises DecodingError: If the stored bytes are not a list of users.
        """
        data = self.store.get(self.key)
        if data is None:
            return []

        try:
            return self._schema.load(json.loads(data.decode("utf-8")))
        except (UnicodeDecodeError, ValueError, RecursionError, ValidationError) as error:
            raise DecodingError(f"Could not decode the users stored under {self.key!r}.") from error

    def _store_users(self, users: List[User]):
        """
        Writes the users to the store, replacing what was there.

        :raises EncodingError: If the users cannot be serialized. Nothing is written.
        """
        try:
            payload = self._schema.dump(users)
            errors = self._schema.validate(payload)
            if errors:
                raise ValidationError(errors)
            data = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError, AttributeError, ValidationError) as error:
            raise EncodingError(f"Could not encode the users stored under {self.key!r}.") from error

        self.store.set(self.key, data)
