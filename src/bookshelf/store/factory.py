"""Factory for creating the configured book store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..logging import get_logger
from .memory import InMemoryStore
from .seed_data import load_seed_file

if TYPE_CHECKING:
    from ..config import Settings

logger = get_logger(__name__)


def create_store(settings: Settings | None = None) -> InMemoryStore:
    """Create a store from settings.

    Loads records from ``settings.seed_data_path`` when set, otherwise uses the
    built-in seed records.
    """
    if settings is None:
        from ..config import settings as default_settings

        settings = default_settings

    if settings.seed_data_path:
        books, authors = load_seed_file(settings.seed_data_path)
        store = InMemoryStore(books=books, authors=authors)
    else:
        store = InMemoryStore.seeded()

    logger.info(
        "Book store created",
        source=settings.seed_data_path or "builtin",
        book_count=len(store.all_books()),
        author_count=len(store.all_authors()),
    )
    return store
