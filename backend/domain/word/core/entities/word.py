"""Word entity."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Word:
    """Word of the day.

    Immutable once created. The identifier is assigned by the repository,
    so a freshly built word carries ``word_id=None``.

    ``date`` is a calendar-date string such as ``"2024-01-01"``. It is kept
    as a string because it is the equality key used by the store.

    Examples:
        >>> word = Word.create("apple", "2024-01-01", user_id="u1")
        >>> word.word_id is None
        True
        >>> word.with_id("w1").word_id
        'w1'
    """

    word: str
    date: str
    user_id: str = ""
    word_id: Optional[str] = None

    @staticmethod
    def create(word: str, date: str, user_id: str = "") -> "Word":
        """Factory method to create a new, not yet persisted word.

        Args:
            word: Word text
            date: Calendar date the word belongs to
            user_id: User credited with the word

        Returns:
            New Word instance without identifier

        Raises:
            ValueError: If word or date is blank
        """
        if not word or not word.strip():
            raise ValueError("Word text cannot be empty")
        if not date or not date.strip():
            raise ValueError("Word date cannot be empty")

        return Word(word=word.strip(), date=date.strip(), user_id=user_id)

    @property
    def is_persisted(self) -> bool:
        """True once the repository assigned an identifier."""
        return bool(self.word_id)

    def with_id(self, word_id: str) -> "Word":
        """Return a copy carrying the given identifier."""
        return replace(self, word_id=word_id)
