"""Word domain exceptions."""


class WordDomainError(Exception):
    """Base exception for Word domain errors."""

    pass


class WordAlreadyExistsError(WordDomainError):
    """A word is already registered for the given day."""

    def __init__(self, date: str):
        """Initialize with the conflicting date.

        Args:
            date: Calendar date that already has a word
        """
        self.date = date
        super().__init__(f"word already exists for the day: {date}")
