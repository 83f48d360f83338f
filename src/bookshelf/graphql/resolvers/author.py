from __future__ import annotations

from typing import Any

from ...logging import get_logger
from ...store import AuthorRecord, BookRecord, BookStore

logger = get_logger(__name__)


def resolve_authors(store: BookStore, parent: Any = None) -> list[AuthorRecord]:
    """Return every author in store order."""
    return list(store.all_authors())


def resolve_author_by_name(
    store: BookStore, parent: Any = None, name: str | None = None
) -> AuthorRecord | None:
    """Return the first author whose name equals ``name`` exactly.

    Matching is case-sensitive. An omitted name matches nothing.
    """
    if name is None:
        return None

    for author in store.all_authors():
        if author.name == name:
            return author

    logger.debug("Author not found", name=name)
    return None


def resolve_author_books(store: BookStore, parent: Any) -> list[BookRecord]:
    """Return the books whose ``author`` equals the parent author's name, in store order."""
    name = getattr(parent, "name", None)
    if name is None:
        return []
    return [book for book in store.all_books() if book.author == name]
