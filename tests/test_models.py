import attr
import pytest

from userstore.models import User


def test_users_get_unique_ids():
    """Assert that every new user is given its own id."""
    users = [User(name="Ada") for _ in range(100)]
    assert len({user.id for user in users}) == 100


def test_equality_is_by_id(random_user):
    """Assert that users are equal when their ids are, whatever their names."""
    renamed = User(name=random_user.name + " Lovelace", id=random_user.id)
    assert renamed == random_user
    assert hash(renamed) == hash(random_user)
    assert User(name=random_user.name) != random_user


def test_user_is_immutable(random_user):
    with pytest.raises(attr.exceptions.FrozenInstanceError):
        random_user.name = "Grace"


def test_serialize(random_user):
    assert random_user.serialize() == {"id": str(random_user.id), "name": random_user.name}
