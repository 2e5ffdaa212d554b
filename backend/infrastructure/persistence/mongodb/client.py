"""Process-wide MongoDB client.

Motor pools connections internally, so a single AsyncIOMotorClient is shared
by every repository. It is created lazily on first use and released by
``close_mongo_client()`` at shutdown.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import errors as mongo_errors

from domain.shared.errors import StoreConnectionError
from infrastructure.config import (
    get_mongodb_server_selection_timeout_ms,
    get_mongodb_uri,
)

logger = logging.getLogger(__name__)

_client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None


def create_mongo_client(uri: Optional[str] = None) -> AsyncIOMotorClient[Dict[str, Any]]:
    """
    Create a new Motor client.

    Args:
        uri: Connection string (if None, read from config)

    Returns:
        Unconnected Motor client (motor connects on first operation)

    Raises:
        ValueError: If no URI is configured
        StoreConnectionError: If the URI or client options are invalid
    """
    uri = uri or get_mongodb_uri()
    if not uri:
        raise ValueError(
            "MONGODB_URI not configured. "
            "Set MONGODB_URI, MONGODB_USER, "
            "and MONGODB_PASSWORD environment variables."
        )

    try:
        client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(
            uri,
            serverSelectionTimeoutMS=get_mongodb_server_selection_timeout_ms(),
        )
    except mongo_errors.ConfigurationError as e:
        logger.error(f"Invalid MongoDB configuration: error={e}")
        raise StoreConnectionError(f"error initializing MongoDB client: {e}") from e

    return client


def get_mongo_client() -> AsyncIOMotorClient[Dict[str, Any]]:
    """
    Get singleton Motor client, creating it on first call.

    Returns:
        Shared Motor client
    """
    global _client
    if _client is None:
        _client = create_mongo_client()
        logger.info("MongoDB client initialized")
    return _client


def close_mongo_client() -> None:
    """Close the shared client, if any. Safe to call repeatedly."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB client closed")


async def ping(client: AsyncIOMotorClient[Dict[str, Any]]) -> None:
    """
    Check that the store is reachable and credentials are accepted.

    Raises:
        StoreConnectionError: If the ping fails
    """
    try:
        await client.admin.command("ping")
    except mongo_errors.PyMongoError as e:
        logger.error(f"MongoDB ping failed: error={e}")
        raise StoreConnectionError(f"error connecting to MongoDB: {e}") from e
