import pytest
from faker import Faker
from faker.providers import person

from userstore.models import User
from userstore.service import UsersViewModel
from userstore.store import KeyValueUserRepository, MemoryKeyValueStore, MemoryUserRepository

fake = Faker()
fake.add_provider(person)


@pytest.fixture
def random_user() -> User:
    """Creates a random user that no repository knows about yet."""
    return User(name=fake.name())


@pytest.fixture
def random_user_factory():
    def create_user(name=None):
        return User(name=name if name is not None else fake.name())

    return create_user


@pytest.fixture
def memory_repository() -> MemoryUserRepository:
    return MemoryUserRepository()


@pytest.fixture
def kv_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def keyvalue_repository(kv_store) -> KeyValueUserRepository:
    return KeyValueUserRepository(kv_store)


@pytest.fixture(params=["memory", "keyvalue"])
def repository(request):
    """Each of the backends, so a test runs once against every one of them."""
    return request.getfixturevalue(f"{request.param}_repository")


@pytest.fixture
def view_model(repository) -> UsersViewModel:
    return UsersViewModel(repository)

