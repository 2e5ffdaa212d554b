"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.user_repository import (
    InMemoryUserRepository,
)
from infrastructure.persistence.in_memory.word_repository import (
    InMemoryWordRepository,
)

__all__ = [
    "InMemoryUserRepository",
    "InMemoryWordRepository",
]
