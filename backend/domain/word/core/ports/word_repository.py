"""Word repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.word.core.entities.word import Word


class IWordRepository(ABC):
    """Repository interface for words of the day.

    At most one word with non-empty text may exist per date. Implementations
    check the day before writing and translate store failures into
    ``domain.shared.errors`` types.
    """

    @abstractmethod
    async def add(self, word: Word) -> str:
        """Persist a word for its day under a freshly allocated identifier.

        Args:
            word: Word entity without identifier

        Returns:
            The new word identifier

        Raises:
            WordAlreadyExistsError: If the day already has a word
            StoreConnectionError: If the store is unreachable
            QueryError: If the day check fails
            WriteError: If the document cannot be written
        """
        pass

    @abstractmethod
    async def find_by_date(self, date: str) -> Optional[Word]:
        """Find the word for a day.

        Documents whose word text is empty are skipped.

        Args:
            date: Calendar date

        Returns:
            Word entity if found, None otherwise

        Raises:
            StoreConnectionError: If the store is unreachable
            QueryError: If the query or iteration fails
        """
        pass

    async def ensure_indexes(self) -> None:
        """Create store-side guard indexes. No-op for stores without them."""
        return None
