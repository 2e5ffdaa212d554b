"""Update public key command."""

import logging
from dataclasses import dataclass

from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)


@dataclass
class UpdatePublicKeyCommand:
    """Command to replace a user's public key.

    Only the public key changes; every other field keeps its stored value.
    """

    repository: IUserRepository

    async def execute(self, user_id: str, public_key: str) -> None:
        """Execute update public key command.

        Raises:
            UserNotFoundError: If user doesn't exist
            WriteError: If the update fails
        """
        await self.repository.update_public_key(user_id, public_key)
        logger.info("User public key updated", extra={"user_id": user_id})
