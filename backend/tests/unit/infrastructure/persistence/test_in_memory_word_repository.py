"""Unit tests for InMemoryWordRepository."""

import asyncio

import pytest

from domain.word.core.entities.word import Word
from domain.word.core.exceptions.word_errors import WordAlreadyExistsError
from infrastructure.persistence.in_memory.word_repository import InMemoryWordRepository


@pytest.fixture
def repository():
    """Create fresh repository for each test."""
    return InMemoryWordRepository()


@pytest.mark.asyncio
class TestInMemoryWordRepository:
    """Test InMemoryWordRepository implementation."""

    async def test_add_and_find_by_date(self, repository):
        """Test a stored word is found by its date."""
        word_id = await repository.add(Word.create("apple", "2024-01-01", user_id="u1"))

        found = await repository.find_by_date("2024-01-01")

        assert found == Word(word="apple", date="2024-01-01", user_id="u1", word_id=word_id)

    async def test_find_by_date_missing_returns_none(self, repository):
        """Test a day without word returns None."""
        await repository.add(Word.create("apple", "2024-01-01"))

        assert await repository.find_by_date("2024-01-02") is None

    async def test_second_word_for_same_day_rejected(self, repository):
        """Test only one word per day."""
        await repository.add(Word.create("apple", "2024-01-01"))

        with pytest.raises(WordAlreadyExistsError) as exc_info:
            await repository.add(Word.create("pear", "2024-01-01"))

        assert exc_info.value.date == "2024-01-01"
        assert repository.count() == 1

    async def test_different_days_accepted(self, repository):
        """Test words on distinct days coexist."""
        first = await repository.add(Word.create("apple", "2024-01-01"))
        second = await repository.add(Word.create("pear", "2024-01-02"))

        assert first != second
        assert (await repository.find_by_date("2024-01-02")).word == "pear"

    async def test_word_with_empty_text_is_ignored(self, repository):
        """Test stored words with empty text do not count for the day."""
        await repository.add(Word(word="", date="2024-01-01"))

        assert await repository.find_by_date("2024-01-01") is None

        word_id = await repository.add(Word.create("apple", "2024-01-01"))
        assert (await repository.find_by_date("2024-01-01")).word_id == word_id

    async def test_concurrent_adds_for_same_day(self, repository):
        """Test exactly one of many concurrent adds wins the day."""
        results = await asyncio.gather(
            *(repository.add(Word.create(f"w{i}", "2024-01-01")) for i in range(10)),
            return_exceptions=True,
        )

        successes = [r for r in results if isinstance(r, str)]
        failures = [r for r in results if isinstance(r, WordAlreadyExistsError)]
        assert len(successes) == 1
        assert len(failures) == 9

    async def test_ensure_indexes_is_noop(self, repository):
        """Test the index hook is available and leaves storage untouched."""
        await repository.add(Word.create("apple", "2024-01-01"))

        await repository.ensure_indexes()

        assert repository.count() == 1
