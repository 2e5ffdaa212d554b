"""In-memory Word Repository for testing."""

import asyncio
import uuid
from typing import Dict, Optional

from domain.word.core.entities.word import Word
from domain.word.core.exceptions.word_errors import WordAlreadyExistsError
from domain.word.core.ports.word_repository import IWordRepository


class InMemoryWordRepository(IWordRepository):
    """In-memory implementation of Word repository.

    Words are immutable, so they are stored and returned without copying.
    The day check and the insert run under one lock.
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._words: Dict[str, Word] = {}
        self._lock = asyncio.Lock()

    async def add(self, word: Word) -> str:
        """Store word under a new identifier.

        Raises:
            WordAlreadyExistsError: If the day already has a word
        """
        async with self._lock:
            if await self.find_by_date(word.date) is not None:
                raise WordAlreadyExistsError(word.date)

            word_id = str(uuid.uuid4())
            self._words[word_id] = word.with_id(word_id)
            return word_id

    async def find_by_date(self, date: str) -> Optional[Word]:
        """Find first word with non-empty text for ``date``."""
        for word in self._words.values():
            if word.date == date and word.word:
                return word
        return None

    def clear(self) -> None:
        """Clear all words from memory."""
        self._words.clear()

    def count(self) -> int:
        """Get total number of words in memory."""
        return len(self._words)
