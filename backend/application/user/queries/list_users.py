"""List users query."""

from dataclasses import dataclass
from typing import List

from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class ListUsersQuery:
    """Query returning every user, in store default order."""

    repository: IUserRepository

    async def execute(self) -> List[User]:
        """Execute list users query.

        Raises:
            StoreConnectionError: If the store is unreachable
            QueryError: If reading the result stream fails
        """
        return await self.repository.list_all()
