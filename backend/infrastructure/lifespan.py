"""Data access lifecycle: logging setup, startup and graceful shutdown.

Callers (an HTTP app, a CLI, a scheduled job) wrap their work in
``data_access_lifespan()`` and receive the repositories to inject into the
application commands and queries:

    async with data_access_lifespan() as repos:
        query = ListUsersQuery(repos.users)
        users = await query.execute()
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

from dotenv import load_dotenv

from domain.user.core.ports.user_repository import IUserRepository
from domain.word.core.ports.word_repository import IWordRepository
from infrastructure.config import (
    get_log_level,
    get_mongodb_ensure_indexes,
    get_repository_backend,
)
from infrastructure.persistence.factory import (
    get_user_repository,
    get_word_repository,
    reset_repositories,
)

logger = logging.getLogger("startup")


@dataclass(frozen=True)
class Repositories:
    """Repositories shared by all operations for the process lifetime."""

    users: IUserRepository
    words: IWordRepository


def configure_logging() -> None:
    """Apply basic logging configuration from LOG_LEVEL."""
    level_name = get_log_level()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@asynccontextmanager
async def data_access_lifespan() -> AsyncIterator[Repositories]:
    """Initialize repositories on entry, release the store client on exit.

    Variables from a .env file are loaded first, without overriding the
    process environment.

    In mongodb mode the store is pinged at startup (failing fast with
    StoreConnectionError) and guard indexes are created unless
    MONGODB_ENSURE_INDEXES=false.
    """
    load_dotenv()
    configure_logging()
    backend = get_repository_backend()
    logger.info("lifespan.startup", extra={"backend": backend})

    repos = Repositories(users=get_user_repository(), words=get_word_repository())

    try:
        if backend == "mongodb":
            from infrastructure.persistence.mongodb.client import get_mongo_client, ping

            await ping(get_mongo_client())
            if get_mongodb_ensure_indexes():
                for repo in (repos.users, repos.words):
                    await repo.ensure_indexes()

        logger.info("lifespan.ready", extra={"backend": backend})
        yield repos
    finally:
        logger.info("lifespan.shutdown", extra={"status": "cleanup"})
        if backend == "mongodb":
            from infrastructure.persistence.mongodb.client import close_mongo_client

            close_mongo_client()
        reset_repositories()
