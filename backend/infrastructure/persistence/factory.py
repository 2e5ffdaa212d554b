"""Repository Factory for Persistence Layer.

Environment-based repository selection.
Strategy:
- .env (runtime): REPOSITORY_BACKEND=mongodb (production persistence)
- .env.test (pytest): REPOSITORY_BACKEND=inmemory (fast, isolated tests)
- Default: inmemory (safe fallback if env vars not set)

Usage:
    from infrastructure.persistence.factory import (
        get_user_repository,
        get_word_repository,
    )

    users = get_user_repository()   # Singleton, inmemory or mongodb
    words = get_word_repository()
"""

from typing import Optional

from domain.user.core.ports.user_repository import IUserRepository
from domain.word.core.ports.word_repository import IWordRepository
from infrastructure.config import get_mongodb_uri, get_repository_backend
from infrastructure.persistence.in_memory.user_repository import InMemoryUserRepository
from infrastructure.persistence.in_memory.word_repository import InMemoryWordRepository

_BACKENDS = ("inmemory", "mongodb")


def _resolve_backend() -> str:
    mode = get_repository_backend()

    if mode not in _BACKENDS:
        raise ValueError(
            f"Invalid REPOSITORY_BACKEND value: {mode}. "
            "Expected 'inmemory' or 'mongodb'"
        )

    if mode == "mongodb" and not get_mongodb_uri():
        raise ValueError(
            "REPOSITORY_BACKEND=mongodb but MONGODB_URI not set. "
            "Set MONGODB_URI in .env or use REPOSITORY_BACKEND=inmemory"
        )

    return mode


def create_user_repository() -> IUserRepository:
    """Create user repository based on REPOSITORY_BACKEND env var.

    Returns:
        IUserRepository: Repository instance

    Raises:
        ValueError: If the backend is unknown, or mongodb without MONGODB_URI
    """
    if _resolve_backend() == "mongodb":
        from infrastructure.persistence.mongodb.user_repository import (
            MongoUserRepository,
        )

        return MongoUserRepository()

    return InMemoryUserRepository()


def create_word_repository() -> IWordRepository:
    """Create word repository based on REPOSITORY_BACKEND env var.

    Returns:
        IWordRepository: Repository instance

    Raises:
        ValueError: If the backend is unknown, or mongodb without MONGODB_URI
    """
    if _resolve_backend() == "mongodb":
        from infrastructure.persistence.mongodb.word_repository import (
            MongoWordRepository,
        )

        return MongoWordRepository()

    return InMemoryWordRepository()


# Singleton instances (lazy initialization)
_user_repository: Optional[IUserRepository] = None
_word_repository: Optional[IWordRepository] = None


def get_user_repository() -> IUserRepository:
    """Get singleton user repository instance."""
    global _user_repository
    if _user_repository is None:
        _user_repository = create_user_repository()
    return _user_repository


def get_word_repository() -> IWordRepository:
    """Get singleton word repository instance."""
    global _word_repository
    if _word_repository is None:
        _word_repository = create_word_repository()
    return _word_repository


def reset_repositories() -> None:
    """Reset singleton repository instances.

    Useful for testing to force re-creation with different env vars.

    Example:
        # In tests:
        reset_repositories()
        os.environ["REPOSITORY_BACKEND"] = "inmemory"
        repo = get_user_repository()  # Creates new instance
    """
    global _user_repository, _word_repository
    _user_repository = None
    _word_repository = None
