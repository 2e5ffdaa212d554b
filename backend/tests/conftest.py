"""Shared test fixtures.

Loads .env.test when present and isolates every test from the process-wide
repository singletons and from backend selection set in the environment.
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from dotenv import load_dotenv

env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)


@pytest.fixture(autouse=True)
def _isolate_backend(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Force the in-memory backend and fresh singletons for each test.

    Tests that need another backend set it with monkeypatch.setenv.
    """
    from infrastructure.persistence.factory import reset_repositories

    monkeypatch.setenv("REPOSITORY_BACKEND", "inmemory")
    reset_repositories()
    yield
    reset_repositories()
