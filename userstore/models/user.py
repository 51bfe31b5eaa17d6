"""
User
---------------------------
"""
from uuid import UUID, uuid4

import attr


@attr.s(frozen=True, auto_attribs=True)
class User:
    """
    Represents a User in the system.

    Users are immutable once built, and two users are
    the same user if (and only if) they share an id.
    """

    name: str = attr.ib(eq=False)
    id: UUID = attr.ib(factory=uuid4)

    def serialize(self):
        return {
            "id": str(self.id),
            "name": self.name
        }

    def __str__(self):
        return f"[{self.id}] {self.name}"
