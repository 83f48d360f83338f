from __future__ import annotations

from typing import Any

from ...store import BookRecord, BookStore


def resolve_books(store: BookStore, parent: Any = None) -> list[BookRecord]:
    """Return every book, unfiltered, in store order."""
    return list(store.all_books())


def add_book(
    store: BookStore,
    parent: Any = None,
    title: str | None = None,
    author: str | None = None,
    publish_date: str | None = None,
) -> BookRecord:
    """Append a book built from the arguments and return it.

    Values are stored exactly as received; nothing checks that ``author``
    names an existing author.
    """
    return store.add_book(title=title, author=author, publish_date=publish_date)
