"""Unit tests for repository factory.

Tests environment-based repository selection.
"""

import pytest

from infrastructure.persistence.factory import (
    create_user_repository,
    create_word_repository,
    get_user_repository,
    get_word_repository,
    reset_repositories,
)
from infrastructure.persistence.in_memory.user_repository import InMemoryUserRepository
from infrastructure.persistence.in_memory.word_repository import InMemoryWordRepository


class TestRepositoryFactory:
    """Test create_*_repository() factory functions."""

    def test_default_to_inmemory_when_env_not_set(self, monkeypatch):
        """Should return in-memory repositories when REPOSITORY_BACKEND not set."""
        monkeypatch.delenv("REPOSITORY_BACKEND", raising=False)

        assert isinstance(create_user_repository(), InMemoryUserRepository)
        assert isinstance(create_word_repository(), InMemoryWordRepository)

    def test_case_insensitive_selection(self, monkeypatch):
        """Should handle case-insensitive backend names."""
        monkeypatch.setenv("REPOSITORY_BACKEND", "InMemory")

        assert isinstance(create_user_repository(), InMemoryUserRepository)

    def test_invalid_backend_raises_error(self, monkeypatch):
        """Should reject unknown backends."""
        monkeypatch.setenv("REPOSITORY_BACKEND", "firestore")

        with pytest.raises(ValueError, match="Invalid REPOSITORY_BACKEND"):
            create_user_repository()

    def test_mongodb_without_uri_raises_error(self, monkeypatch):
        """Should raise ValueError when mongodb but no MONGODB_URI."""
        monkeypatch.setenv("REPOSITORY_BACKEND", "mongodb")
        monkeypatch.delenv("MONGODB_URI", raising=False)

        with pytest.raises(ValueError, match="MONGODB_URI not set"):
            create_word_repository()

    def test_mongodb_creates_mongo_repositories(self, monkeypatch, mongo_client):
        """Should create Mongo repositories sharing the process-wide client."""
        from infrastructure.persistence.mongodb import client as client_module
        from infrastructure.persistence.mongodb.user_repository import MongoUserRepository
        from infrastructure.persistence.mongodb.word_repository import MongoWordRepository

        monkeypatch.setenv("REPOSITORY_BACKEND", "mongodb")
        monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017")
        monkeypatch.setattr(client_module, "_client", mongo_client)

        users = create_user_repository()
        words = create_word_repository()

        assert isinstance(users, MongoUserRepository)
        assert isinstance(words, MongoWordRepository)
        assert users._client is mongo_client
        assert words._client is mongo_client


class TestRepositorySingletons:
    """Test get_*_repository() singletons."""

    def test_singleton_returns_same_instance(self):
        """Should cache repositories until reset."""
        assert get_user_repository() is get_user_repository()
        assert get_word_repository() is get_word_repository()

    def test_reset_forces_new_instance(self):
        """Should create fresh repositories after reset."""
        users = get_user_repository()
        words = get_word_repository()

        reset_repositories()

        assert get_user_repository() is not users
        assert get_word_repository() is not words
