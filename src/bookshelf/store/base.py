"""Record types and the store interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class BookRecord:
    """A stored book.

    ``author`` is free text matched against ``AuthorRecord.name``; nothing
    requires it to name an existing author.
    """

    title: str | None
    publish_date: str | None
    author: str | None


@dataclass(frozen=True)
class AuthorRecord:
    """A stored author. ``name`` doubles as the identity key."""

    name: str | None


class BookStore(ABC):
    """Abstract interface for book and author storage."""

    @abstractmethod
    def all_books(self) -> Sequence[BookRecord]:
        """Return every book in store order."""
        pass

    @abstractmethod
    def all_authors(self) -> Sequence[AuthorRecord]:
        """Return every author in store order."""
        pass

    @abstractmethod
    def add_book(
        self, title: str | None, author: str | None, publish_date: str | None
    ) -> BookRecord:
        """Append a book at the end of the store and return it."""
        pass
