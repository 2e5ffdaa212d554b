"""Create user command."""

import logging
from dataclasses import dataclass

from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)


@dataclass
class CreateUserCommand:
    """Command to register a new user.

    The repository allocates the identifier. Users are created inactive
    unless the entity says otherwise; no duplicate check is made by name
    or handle.

    Examples:
        >>> command = CreateUserCommand(repository)
        >>> user_id = await command.execute(User.create("Ada", "@ada"))
    """

    repository: IUserRepository

    async def execute(self, user: User) -> str:
        """Execute create user command.

        Args:
            user: User entity without identifier

        Returns:
            New user identifier

        Raises:
            ValueError: If the user already has an identifier
            StoreConnectionError: If the store is unreachable
            WriteError: If the user cannot be written
        """
        if user.is_persisted:
            raise ValueError(f"User already has an id: {user.user_id}")

        user_id = await self.repository.create(user)

        logger.info(
            "User created",
            extra={"user_id": user_id, "twitter_handle": user.twitter_handle},
        )
        return user_id
