"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from bookshelf.graphql.schema import schema
from bookshelf.store import AuthorRecord, BookRecord, InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    """A store holding the built-in seed records."""
    return InMemoryStore.seeded()


@pytest.fixture
def execute(store: InMemoryStore):
    """Execute a GraphQL document against ``store`` and return the result."""

    def _execute(query: str, variables: dict[str, Any] | None = None, target=None):
        return schema.execute_sync(
            query,
            variable_values=variables,
            context_value={"store": target if target is not None else store},
        )

    return _execute


@pytest.fixture
def duplicate_author_store() -> InMemoryStore:
    """A store with two authors sharing a name and one author with no books."""
    return InMemoryStore(
        books=[
            BookRecord(title="Sphere", publish_date="01/05/1987", author="Michael Crichton"),
            BookRecord(title="Congo", publish_date="01/11/1980", author="Michael Crichton"),
            BookRecord(title="Anonymous Pamphlet", publish_date="", author="Nobody Listed"),
        ],
        authors=[
            AuthorRecord(name="Michael Crichton"),
            AuthorRecord(name="Michael Crichton"),
            AuthorRecord(name="Ursula K. Le Guin"),
        ],
    )


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
