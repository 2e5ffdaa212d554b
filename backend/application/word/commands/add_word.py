"""Add word command."""

import logging
from dataclasses import dataclass

from domain.word.core.entities.word import Word
from domain.word.core.ports.word_repository import IWordRepository

logger = logging.getLogger(__name__)


@dataclass
class AddWordCommand:
    """Command to register the word for a day.

    Only one word may exist per date: the repository checks the day before
    writing and fails with WordAlreadyExistsError when it is taken.

    Examples:
        >>> command = AddWordCommand(repository)
        >>> word_id = await command.execute(Word.create("apple", "2024-01-01", "u1"))
    """

    repository: IWordRepository

    async def execute(self, word: Word) -> str:
        """Execute add word command.

        Args:
            word: Word entity without identifier

        Returns:
            New word identifier

        Raises:
            ValueError: If the word already has an identifier
            WordAlreadyExistsError: If the day already has a word
            QueryError: If the day check fails
            WriteError: If the word cannot be written
        """
        if word.is_persisted:
            raise ValueError(f"Word already has an id: {word.word_id}")

        word_id = await self.repository.add(word)

        logger.info(
            "Word added",
            extra={"word_id": word_id, "date": word.date, "user_id": word.user_id},
        )
        return word_id
