"""Tests for update public key command."""

import pytest

from application.user.commands.create_user import CreateUserCommand
from application.user.commands.mark_user_active import MarkUserActiveCommand
from application.user.commands.update_public_key import UpdatePublicKeyCommand
from application.user.queries.get_user import GetUserQuery
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserNotFoundError
from infrastructure.persistence.in_memory.user_repository import InMemoryUserRepository


@pytest.fixture
def repository():
    """Create in-memory repository."""
    return InMemoryUserRepository()


@pytest.mark.asyncio
async def test_update_public_key_preserves_other_fields(repository):
    """Test only the public key changes."""
    user_id = await CreateUserCommand(repository).execute(
        User.create("Ada", "@ada", public_key="old")
    )
    await MarkUserActiveCommand(repository).execute(user_id)
    before = await GetUserQuery(repository).by_id(user_id)

    await UpdatePublicKeyCommand(repository).execute(user_id, "abc")

    after = await GetUserQuery(repository).by_id(user_id)
    assert after.public_key == "abc"
    assert (after.user_id, after.name, after.twitter_handle, after.active) == (
        before.user_id,
        before.name,
        before.twitter_handle,
        before.active,
    )


@pytest.mark.asyncio
async def test_update_public_key_unknown_user(repository):
    """Test missing user raises UserNotFoundError."""
    with pytest.raises(UserNotFoundError):
        await UpdatePublicKeyCommand(repository).execute("missing", "abc")
