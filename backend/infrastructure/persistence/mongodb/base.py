"""Base MongoDB repository with reusable patterns.

Provides common functionality for all MongoDB repositories:
- Connection management
- Document mapping (domain ↔ MongoDB)
- Error translation (pymongo errors → domain.shared.errors)
- Optional multi-document transactions
- Logging

All concrete MongoDB repositories should inherit from MongoBaseRepository.
"""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Generic, List, Optional, Type, TypeVar

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import errors as mongo_errors

from domain.shared.errors import (
    ConflictError,
    QueryError,
    RepositoryError,
    StoreConnectionError,
    WriteError,
)
from infrastructure.config import get_mongodb_database, get_mongodb_transactions_enabled
from infrastructure.persistence.mongodb.client import get_mongo_client

TEntity = TypeVar("TEntity")

logger = logging.getLogger(__name__)

# MongoDB server error codes for rejected credentials
_AUTH_ERROR_CODES = (18, 13)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Provides common functionality:
    - Shared connection pool (one Motor client per process)
    - Document ↔ Entity mapping contract
    - Error translation with proper logging
    - Transaction scope for multi-step operations

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    Example:
        class MongoWordRepository(MongoBaseRepository[Word]):
            @property
            def collection_name(self) -> str:
                return "words"

            def to_document(self, word: Word) -> Dict[str, Any]:
                ...

            def from_document(self, doc: Dict[str, Any]) -> Word:
                ...
    """

    def __init__(
        self,
        client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None,
        use_transactions: Optional[bool] = None,
    ):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, uses the shared process-wide client)
            use_transactions: Wrap multi-step operations in a transaction
                (if None, read from MONGODB_TRANSACTIONS)
        """
        self._client = client if client is not None else get_mongo_client()
        self._use_transactions = (
            get_mongodb_transactions_enabled() if use_transactions is None else use_transactions
        )

        database_name = get_mongodb_database()
        self._db = self._client[database_name]
        self._collection = self._db[self.collection_name]

        logger.info(
            f"Initialized {self.__class__.__name__} "
            f"for collection '{self.collection_name}' "
            f"(transactions={'on' if self._use_transactions else 'off'})"
        )

    # ============================================================
    # Abstract Properties/Methods (must be implemented)
    # ============================================================

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """
        Convert domain entity to MongoDB document.

        Args:
            entity: Domain entity

        Returns:
            MongoDB document (dict)
        """
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Args:
            doc: MongoDB document

        Returns:
            Domain entity
        """
        pass

    # ============================================================
    # Protected Utility Methods (for subclasses)
    # ============================================================

    @property
    def collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        """Get MongoDB collection handle."""
        return self._collection

    @staticmethod
    def new_id() -> str:
        """Allocate a new document identifier."""
        return str(uuid.uuid4())

    def _translate_error(
        self,
        error: mongo_errors.PyMongoError,
        step: str,
        default: Type[RepositoryError],
    ) -> RepositoryError:
        """
        Map a driver exception to the store error taxonomy.

        Args:
            error: Exception raised by pymongo/motor
            step: Human-readable description of the failing step
            default: Error type used when no specific mapping applies

        Returns:
            Domain store error (caller raises it chained to ``error``)
        """
        message = f"failed to {step}: {error}"

        if isinstance(error, (mongo_errors.ConnectionFailure, mongo_errors.ConfigurationError)):
            return StoreConnectionError(message, self.collection_name)
        if (
            isinstance(error, mongo_errors.OperationFailure)
            and error.code in _AUTH_ERROR_CODES
        ):
            return StoreConnectionError(message, self.collection_name)
        if isinstance(error, mongo_errors.DuplicateKeyError):
            return ConflictError(message, self.collection_name)
        if error.has_error_label("TransientTransactionError"):
            return ConflictError(message, self.collection_name)

        return default(message, self.collection_name)

    def _fail(
        self,
        error: mongo_errors.PyMongoError,
        step: str,
        default: Type[RepositoryError],
        filter_dict: Optional[Dict[str, Any]] = None,
    ) -> RepositoryError:
        logger.error(
            f"Error in {step}: collection={self.collection_name}, "
            f"filter={filter_dict}, error={error}"
        )
        return self._translate_error(error, step, default)

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[Optional[Any]]:
        """
        Scope for a multi-step operation.

        Yields a client session bound to an open transaction, or None when
        transactions are disabled. The transaction commits when the block
        exits normally and aborts when it raises.

        Raises:
            ConflictError: If the commit loses against a concurrent writer
            StoreConnectionError: If the store is unreachable
        """
        if not self._use_transactions:
            yield None
            return

        try:
            async with await self._client.start_session() as session:
                async with session.start_transaction():
                    yield session
        except mongo_errors.PyMongoError as e:
            raise self._fail(e, "commit transaction", WriteError) from e

    async def _find_one(
        self,
        filter_dict: Dict[str, Any],
        session: Optional[Any] = None,
        step: str = "get document",
    ) -> Optional[Dict[str, Any]]:
        """
        Find single document with error handling.

        Args:
            filter_dict: MongoDB filter
            session: Optional transaction session
            step: Description used in error messages

        Returns:
            Document dict or None if not found

        Raises:
            QueryError: If the lookup fails
        """
        try:
            return await self._collection.find_one(filter_dict, session=session)
        except mongo_errors.PyMongoError as e:
            raise self._fail(e, step, QueryError, filter_dict) from e

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        session: Optional[Any] = None,
        step: str = "iterate",
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents with error handling.

        Documents are returned in store default order.

        Args:
            filter_dict: MongoDB filter
            session: Optional transaction session
            step: Description used in error messages

        Returns:
            List of document dicts

        Raises:
            QueryError: If the query or result iteration fails
        """
        documents: List[Dict[str, Any]] = []
        try:
            async for doc in self._collection.find(filter_dict, session=session):
                documents.append(doc)
        except mongo_errors.PyMongoError as e:
            raise self._fail(e, step, QueryError, filter_dict) from e
        return documents

    async def _insert_one(
        self,
        document: Dict[str, Any],
        session: Optional[Any] = None,
        step: str = "insert document",
    ) -> None:
        """
        Insert single document with error handling.

        Raises:
            WriteError: If the write fails
            ConflictError: If a unique index rejects the document
        """
        try:
            await self._collection.insert_one(document, session=session)
        except mongo_errors.PyMongoError as e:
            raise self._fail(e, step, WriteError) from e

    async def _update_one(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
        session: Optional[Any] = None,
        step: str = "update document",
    ) -> int:
        """
        Update single document with error handling.

        Returns:
            Number of documents matched (0 or 1)

        Raises:
            WriteError: If the write fails
            ConflictError: If a unique index rejects the update
        """
        try:
            result = await self._collection.update_one(
                filter_dict, update_dict, session=session
            )
            return result.matched_count
        except mongo_errors.PyMongoError as e:
            raise self._fail(e, step, WriteError, filter_dict) from e

    async def _update_many(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
        session: Optional[Any] = None,
        step: str = "update documents",
    ) -> int:
        """
        Update all matching documents with error handling.

        Returns:
            Number of documents modified

        Raises:
            WriteError: If the write fails
        """
        try:
            result = await self._collection.update_many(
                filter_dict, update_dict, session=session
            )
            return result.modified_count
        except mongo_errors.PyMongoError as e:
            raise self._fail(e, step, WriteError, filter_dict) from e

    async def _create_index(self, keys: List[Any], **kwargs: Any) -> None:
        """Create an index, translating failures into WriteError."""
        try:
            await self._collection.create_index(keys, **kwargs)
        except mongo_errors.PyMongoError as e:
            raise self._fail(e, f"create index {kwargs.get('name', keys)}", WriteError) from e
        logger.info(
            f"Ensured index '{kwargs.get('name', keys)}' on '{self.collection_name}'"
        )
