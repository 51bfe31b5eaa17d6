import asyncio

from userstore.store import MemoryUserRepository


async def test_operations_wait_for_each_other(memory_repository: MemoryUserRepository, random_user):
    """Assert that an operation does not start while another holds the repository."""
    async with memory_repository._lock:
        task = asyncio.ensure_future(memory_repository.create(random_user))
        await asyncio.sleep(0)
        assert not task.done()
        assert len(memory_repository) == 0

    await task
    assert len(memory_repository) == 1


async def test_instances_do_not_share_users(random_user):
    first, second = MemoryUserRepository(), MemoryUserRepository()
    await first.create(random_user)
    assert await second.find(random_user.id) is None


async def test_users_is_a_copy(memory_repository, random_user):
    """Assert that changing the returned list does not change the repository."""
    await memory_repository.create(random_user)
    users = await memory_repository.users()
    users.clear()
    assert await memory_repository.find(random_user.id) == random_user


def test_lock_outlives_construction_loop(random_user_factory):
    """Assert that a repository built before any loop runs still serializes callers on a later loop."""
    repository = MemoryUserRepository()
    users = [random_user_factory() for _ in range(5)]

    async def contend():
        async with repository._lock:
            tasks = [asyncio.ensure_future(repository.create(user)) for user in users]
            await asyncio.sleep(0)
            assert not any(task.done() for task in tasks)
        await asyncio.gather(*tasks)

    asyncio.run(contend())
    assert len(repository) == 5
