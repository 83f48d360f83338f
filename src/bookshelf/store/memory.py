"""In-memory store implementation."""

import threading
from collections.abc import Iterable

from ..logging import get_logger
from .base import AuthorRecord, BookRecord, BookStore

logger = get_logger(__name__)


class InMemoryStore(BookStore):
    """Book store held in process memory.

    Reads hand out copies of the underlying lists, so a sequence returned to
    the execution engine never changes under it. Appends are serialized by a
    lock to keep store order well defined.
    """

    def __init__(
        self,
        books: Iterable[BookRecord] = (),
        authors: Iterable[AuthorRecord] = (),
    ):
        self._books: list[BookRecord] = list(books)
        self._authors: list[AuthorRecord] = list(authors)
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls) -> "InMemoryStore":
        """Create a store holding the built-in seed records."""
        from .seed_data import SEED_AUTHORS, SEED_BOOKS

        return cls(books=SEED_BOOKS, authors=SEED_AUTHORS)

    def all_books(self) -> list[BookRecord]:
        return list(self._books)

    def all_authors(self) -> list[AuthorRecord]:
        return list(self._authors)

    def add_book(
        self, title: str | None, author: str | None, publish_date: str | None
    ) -> BookRecord:
        book = BookRecord(title=title, publish_date=publish_date, author=author)
        with self._lock:
            self._books.append(book)
            count = len(self._books)
        logger.info("Book added", title=title, author=author, book_count=count)
        return book
