"""Get word for the day query."""

from dataclasses import dataclass
from typing import Optional

from domain.word.core.entities.word import Word
from domain.word.core.ports.word_repository import IWordRepository


@dataclass
class GetWordForTheDayQuery:
    """Query to get the word registered for a date.

    Examples:
        >>> query = GetWordForTheDayQuery(repository)
        >>> word = await query.execute("2024-01-01")
        >>> if word is None:
        ...     print("no word yet")
    """

    repository: IWordRepository

    async def execute(self, date: str) -> Optional[Word]:
        """Execute get word for the day query.

        Args:
            date: Calendar date

        Returns:
            Word entity, or None when the day has no word

        Raises:
            StoreConnectionError: If the store is unreachable
            QueryError: If the query fails
        """
        return await self.repository.find_by_date(date)
