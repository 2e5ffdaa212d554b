"""Mark user active command."""

import logging
from dataclasses import dataclass

from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)


@dataclass
class MarkUserActiveCommand:
    """Command to make one user the active user.

    Every other active user is deactivated. With the MongoDB backend and
    transactions enabled both phases commit together; otherwise a failure
    between them can leave no active user, and is not corrected.

    Examples:
        >>> command = MarkUserActiveCommand(repository)
        >>> await command.execute("user-id")
    """

    repository: IUserRepository

    async def execute(self, user_id: str) -> None:
        """Execute mark user active command.

        Args:
            user_id: User to activate

        Raises:
            UserNotFoundError: If user doesn't exist
            ConflictError: If a concurrent activation interfered
            QueryError: If active users cannot be read
            WriteError: If a flag update fails
        """
        await self.repository.mark_active(user_id)
        logger.info("User marked active", extra={"user_id": user_id})
