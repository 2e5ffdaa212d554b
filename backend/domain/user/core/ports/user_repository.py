"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.user.core.entities.user import User


class IUserRepository(ABC):
    """Repository interface for User aggregate.

    Defines contract for user persistence operations.
    Implementations must handle User entity serialization/deserialization
    and translate store failures into ``domain.shared.errors`` types.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class MongoUserRepository(IUserRepository):
        ...     async def create(self, user: User) -> str:
        ...         # Insert into MongoDB
        ...         pass
    """

    @abstractmethod
    async def list_all(self) -> List[User]:
        """List every user in store default order.

        Returns:
            List of users (empty if none)

        Raises:
            StoreConnectionError: If the store is unreachable
            QueryError: If reading the result stream fails
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> str:
        """Persist a new user under a freshly allocated identifier.

        The identifier is set on ``user`` before the write.

        Args:
            user: User entity without identifier

        Returns:
            The new user identifier

        Raises:
            StoreConnectionError: If the store is unreachable
            WriteError: If the document cannot be written

        Note:
            No duplicate check by name or handle.
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by identifier.

        Args:
            user_id: User identifier

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def mark_active(self, user_id: str) -> None:
        """Make ``user_id`` the single active user.

        Every other active user is deactivated first.

        Args:
            user_id: User to activate

        Raises:
            UserNotFoundError: If user doesn't exist
            QueryError: If active users cannot be read
            WriteError: If a flag update fails
            ConflictError: If a concurrent writer interfered
        """
        pass

    @abstractmethod
    async def update_public_key(self, user_id: str, public_key: str) -> None:
        """Replace the public key of a user, leaving other fields untouched.

        Args:
            user_id: User identifier
            public_key: New public key

        Raises:
            UserNotFoundError: If user doesn't exist
            WriteError: If the update fails
        """
        pass

    async def ensure_indexes(self) -> None:
        """Create store-side guard indexes. No-op for stores without them."""
        return None
