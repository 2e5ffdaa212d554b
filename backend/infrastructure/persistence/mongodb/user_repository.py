"""MongoDB User Repository implementation."""

import logging
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserNotFoundError
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import get_users_collection

from .base import MongoBaseRepository

logger = logging.getLogger(__name__)

# Stored field names
NAME = "Name"
TWITTER_HANDLE = "TwitterHandle"
PUBLIC_KEY = "PublicKey"
ACTIVE = "Active"


class MongoUserRepository(MongoBaseRepository[User], IUserRepository):
    """MongoDB implementation of User repository.

    Document layout (``users`` collection):
    - _id: string identifier allocated on creation
    - Name, TwitterHandle, PublicKey: strings
    - Active: at most one document has ``Active: true``

    Activation runs in a single transaction when transactions are enabled.
    The ``single_active_user`` partial unique index (see ``ensure_indexes``)
    rejects a second active user even without transactions.

    Examples:
        >>> repo = MongoUserRepository(client)
        >>> user_id = await repo.create(User.create("Ada", "@ada"))
        >>> await repo.mark_active(user_id)
    """

    @property
    def collection_name(self) -> str:
        """MongoDB collection name."""
        return get_users_collection()

    def to_document(self, entity: User) -> Dict[str, Any]:
        """Convert User entity to MongoDB document."""
        return {
            "_id": entity.user_id,
            NAME: entity.name,
            TWITTER_HANDLE: entity.twitter_handle,
            PUBLIC_KEY: entity.public_key,
            ACTIVE: entity.active,
        }

    def from_document(self, doc: Dict[str, Any]) -> User:
        """Convert MongoDB document to User entity.

        Missing fields fall back to their empty values so partially written
        documents still load.
        """
        return User(
            user_id=str(doc["_id"]),
            name=doc.get(NAME) or "",
            twitter_handle=doc.get(TWITTER_HANDLE) or "",
            public_key=doc.get(PUBLIC_KEY) or "",
            active=bool(doc.get(ACTIVE, False)),
        )

    async def ensure_indexes(self) -> None:
        """Create the single-active guard index."""
        await self._create_index(
            [(ACTIVE, ASCENDING)],
            name="single_active_user",
            unique=True,
            partialFilterExpression={ACTIVE: True},
        )

    async def list_all(self) -> List[User]:
        """List every user in store default order."""
        docs = await self._find_many({}, step="iterate users")
        return [self.from_document(doc) for doc in docs]

    async def create(self, user: User) -> str:
        """Persist a new user under a freshly allocated identifier."""
        user.user_id = self.new_id()
        await self._insert_one(self.to_document(user), step="add user")
        return user.user_id

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by identifier."""
        doc = await self._find_one({"_id": user_id}, step="get user")
        if doc is None:
            return None
        return self.from_document(doc)

    async def mark_active(self, user_id: str) -> None:
        """Deactivate every other active user, then activate ``user_id``.

        The target is looked up first, so an unknown id leaves the store
        untouched.
        """
        async with self._transaction() as session:
            doc = await self._find_one({"_id": user_id}, session=session, step="get user")
            if doc is None:
                raise UserNotFoundError(user_id)

            deactivated = await self._update_many(
                {ACTIVE: True, "_id": {"$ne": user_id}},
                {"$set": {ACTIVE: False}},
                session=session,
                step="inactivate existing active user",
            )
            matched = await self._update_one(
                {"_id": user_id},
                {"$set": {ACTIVE: True}},
                session=session,
                step="activate user",
            )
            if matched == 0:
                raise UserNotFoundError(user_id)

        logger.debug(f"Activated user {user_id}, deactivated {deactivated} other(s)")

    async def update_public_key(self, user_id: str, public_key: str) -> None:
        """Set the public key field only."""
        matched = await self._update_one(
            {"_id": user_id},
            {"$set": {PUBLIC_KEY: public_key}},
            step="update public key",
        )
        if matched == 0:
            raise UserNotFoundError(user_id)
