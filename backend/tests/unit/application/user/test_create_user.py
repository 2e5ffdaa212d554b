"""Tests for create user command."""

import pytest

from application.user.commands.create_user import CreateUserCommand
from application.user.queries.get_user import GetUserQuery
from domain.user.core.entities.user import User
from infrastructure.persistence.in_memory.user_repository import InMemoryUserRepository


@pytest.fixture
def repository():
    """Create in-memory repository."""
    return InMemoryUserRepository()


@pytest.fixture
def command(repository):
    """Create command."""
    return CreateUserCommand(repository)


@pytest.mark.asyncio
async def test_create_user_returns_id(command, repository):
    """Test successful creation stores the full record."""
    user_id = await command.execute(User.create("Ada", "@ada", public_key="k"))

    stored = await GetUserQuery(repository).by_id(user_id)
    assert stored.name == "Ada"
    assert stored.twitter_handle == "@ada"
    assert stored.public_key == "k"
    assert stored.active is False


@pytest.mark.asyncio
async def test_create_user_ids_unique_and_non_empty(command):
    """Test every call returns a distinct, non-empty id."""
    ids = [await command.execute(User.create("Ada", "@ada")) for _ in range(20)]

    assert all(ids)
    assert len(set(ids)) == len(ids)


@pytest.mark.asyncio
async def test_create_user_does_not_deduplicate(command, repository):
    """Test same name and handle can be registered twice."""
    await command.execute(User.create("Ada", "@ada"))
    await command.execute(User.create("Ada", "@ada"))

    assert repository.count() == 2


@pytest.mark.asyncio
async def test_create_persisted_user_rejected(command):
    """Test a user that already has an id is rejected."""
    user = User(name="Ada", twitter_handle="@ada", user_id="u1")

    with pytest.raises(ValueError, match="already has an id"):
        await command.execute(user)


@pytest.mark.asyncio
async def test_create_user_with_empty_name(command, repository):
    """Test a user with an empty name is stored and listed."""
    user_id = await command.execute(User(name="", twitter_handle="@anon"))

    stored = await GetUserQuery(repository).by_id(user_id)
    assert stored.name == ""
    assert [u.user_id for u in await repository.list_all()] == [user_id]
