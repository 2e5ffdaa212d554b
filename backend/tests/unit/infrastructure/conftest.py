"""Fixtures for MongoDB repository tests.

The Motor client is replaced by MagicMock/AsyncMock objects so repository
logic and error translation run without a server.
"""

from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest


class FakeCursor:
    """Async-iterable cursor yielding documents, optionally failing partway."""

    def __init__(self, docs: List[Dict[str, Any]], error: Optional[Exception] = None):
        self._docs = docs
        self._error = error

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for doc in self._docs:
            yield doc
        if self._error is not None:
            raise self._error


@pytest.fixture
def cursor_factory():
    """Build cursors for collection.find."""
    return FakeCursor


@pytest.fixture
def collection():
    """Mock Motor collection with async write/read methods."""
    col = MagicMock()
    col.find_one = AsyncMock(return_value=None)
    col.insert_one = AsyncMock()
    col.update_one = AsyncMock(return_value=MagicMock(matched_count=1, modified_count=1))
    col.update_many = AsyncMock(return_value=MagicMock(modified_count=0))
    col.create_index = AsyncMock()
    col.find = MagicMock(return_value=FakeCursor([]))
    return col


@pytest.fixture
def session():
    """Mock client session whose transaction commits on clean exit."""
    sess = MagicMock()
    sess.__aenter__ = AsyncMock(return_value=sess)
    sess.__aexit__ = AsyncMock(return_value=False)

    transaction = MagicMock()
    transaction.__aenter__ = AsyncMock(return_value=transaction)
    transaction.__aexit__ = AsyncMock(return_value=False)
    sess.start_transaction = MagicMock(return_value=transaction)
    return sess


@pytest.fixture
def mongo_client(collection, session):
    """Mock Motor client: client[db][collection] returns ``collection``."""
    database = MagicMock()
    database.__getitem__.return_value = collection

    client = MagicMock()
    client.__getitem__.return_value = database
    client.start_session = AsyncMock(return_value=session)
    client.admin.command = AsyncMock(return_value={"ok": 1})
    return client
