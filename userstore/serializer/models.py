"""
Model Serializers
-----------------

Defines serializers for the various models in the system.
"""

from marshmallow import Schema, post_load
from marshmallow.fields import String, UUID

from userstore.models.user import User


class UserSchema(Schema):
    """
    The schema corresponding to the :class:`~userstore.models.user.User` model.

    Loading a payload through this schema yields :class:`~userstore.models.user.User`
    instances. Partial schemas (for example ``UserSchema(only=("name",))`` for
    incoming requests) load into plain dictionaries instead, since they do not
    carry enough to build a user.
    """

    id = UUID(required=True)
    name = String(required=True)

    @post_load
    def make_user(self, data, **kwargs):
        if "id" not in data:
            return data
        return User(name=data["name"], id=data["id"])
