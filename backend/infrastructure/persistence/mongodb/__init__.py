"""MongoDB repository implementations."""

from .base import MongoBaseRepository
from .user_repository import MongoUserRepository
from .word_repository import MongoWordRepository

__all__ = [
    "MongoBaseRepository",
    "MongoUserRepository",
    "MongoWordRepository",
]
