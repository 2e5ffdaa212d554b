"""MongoDB Word Repository implementation."""

from typing import Any, Dict, Optional

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from domain.shared.errors import ConflictError
from domain.word.core.entities.word import Word
from domain.word.core.exceptions.word_errors import WordAlreadyExistsError
from domain.word.core.ports.word_repository import IWordRepository
from infrastructure.config import get_words_collection

from .base import MongoBaseRepository

# Stored field names
WORD = "Word"
DATE = "Date"
USER_ID = "UserId"


class MongoWordRepository(MongoBaseRepository[Word], IWordRepository):
    """MongoDB implementation of Word repository.

    Document layout (``words`` collection):
    - _id: string identifier allocated on creation
    - Word: word text
    - Date: calendar date string, equality key for lookups
    - UserId: user credited with the word

    The day check and the insert share one transaction when transactions
    are enabled; the ``one_word_per_day`` partial unique index closes the
    remaining race between concurrent inserts.
    """

    @property
    def collection_name(self) -> str:
        """MongoDB collection name."""
        return get_words_collection()

    def to_document(self, entity: Word) -> Dict[str, Any]:
        """Convert Word entity to MongoDB document."""
        return {
            "_id": entity.word_id,
            WORD: entity.word,
            DATE: entity.date,
            USER_ID: entity.user_id,
        }

    def from_document(self, doc: Dict[str, Any]) -> Word:
        """Convert MongoDB document to Word entity."""
        return Word(
            word_id=str(doc["_id"]),
            word=doc.get(WORD) or "",
            date=doc.get(DATE) or "",
            user_id=doc.get(USER_ID) or "",
        )

    async def ensure_indexes(self) -> None:
        """Create the date lookup index and the one-word-per-day guard.

        The guard excludes documents with empty word text, matching the
        lookup rule of ``find_by_date``.
        """
        await self._create_index([(DATE, ASCENDING), (WORD, ASCENDING)], name="word_date")
        await self._create_index(
            [(DATE, ASCENDING)],
            name="one_word_per_day",
            unique=True,
            partialFilterExpression={WORD: {"$gt": ""}},
        )

    async def add(self, word: Word) -> str:
        """Persist a word unless its day already has one."""
        word_id = self.new_id()
        word = word.with_id(word_id)

        async with self._transaction() as session:
            existing = await self._find_word(word.date, session)
            if existing is not None:
                raise WordAlreadyExistsError(word.date)
            try:
                await self._insert_one(self.to_document(word), session=session, step="add word")
            except ConflictError as e:
                if isinstance(e.__cause__, DuplicateKeyError):
                    raise WordAlreadyExistsError(word.date) from e
                raise

        return word_id

    async def find_by_date(self, date: str) -> Optional[Word]:
        """Find the first word with non-empty text for ``date``."""
        return await self._find_word(date)

    async def _find_word(self, date: str, session: Optional[Any] = None) -> Optional[Word]:
        docs = await self._find_many({DATE: date}, session=session, step="iterate words")
        for doc in docs:
            word = self.from_document(doc)
            if word.word:
                return word
        return None
