"""Get user query."""

from dataclasses import dataclass
from typing import Optional

from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class GetUserQuery:
    """Query to get user by identifier.

    Read-only operation that retrieves user from repository.

    Examples:
        >>> query = GetUserQuery(repository)
        >>> user = await query.by_id("user-id")
    """

    repository: IUserRepository

    async def by_id(self, user_id: str) -> Optional[User]:
        """Get user by identifier.

        Args:
            user_id: User identifier

        Returns:
            User entity or None if not found
        """
        return await self.repository.find_by_id(user_id)
