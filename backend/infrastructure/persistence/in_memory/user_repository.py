"""In-memory User Repository for testing."""

import asyncio
import uuid
from copy import deepcopy
from typing import Dict, List, Optional

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserNotFoundError
from domain.user.core.ports.user_repository import IUserRepository


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository for testing.

    Stores users in insertion order keyed by user_id.
    Useful for unit tests and local development without MongoDB.
    Multi-step operations hold a lock, so the single-active-user invariant
    also holds between concurrent coroutines.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user_id = await repo.create(User.create("Ada", "@ada"))
        >>> await repo.mark_active(user_id)
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}
        self._lock = asyncio.Lock()

    async def list_all(self) -> List[User]:
        """List every user in insertion order."""
        return [deepcopy(user) for user in self._users.values()]

    async def create(self, user: User) -> str:
        """Store user under a new identifier.

        Args:
            user: User entity to create

        Returns:
            New user identifier
        """
        user.user_id = str(uuid.uuid4())
        self._users[user.user_id] = deepcopy(user)
        return user.user_id

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by identifier.

        Returns:
            Copy of the user, or None if not found
        """
        user = self._users.get(user_id)
        return deepcopy(user) if user else None

    async def mark_active(self, user_id: str) -> None:
        """Make ``user_id`` the only active user.

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        async with self._lock:
            if user_id not in self._users:
                raise UserNotFoundError(user_id)

            for stored in self._users.values():
                stored.deactivate()
            self._users[user_id].activate()

    async def update_public_key(self, user_id: str, public_key: str) -> None:
        """Replace the public key.

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        user.update_public_key(public_key)

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        self._users.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._users)
