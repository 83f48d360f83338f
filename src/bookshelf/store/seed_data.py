"""
Seed records for the book store.

Provides the built-in catalogue and loading of a replacement catalogue from a
YAML file of the form::

    books:
      - title: Jurassic Park
        publishDate: 14/01/2014
        author: Michael Crichton
    authors:
      - name: Michael Crichton
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..errors import SeedDataError
from ..logging import get_logger
from .base import AuthorRecord, BookRecord

logger = get_logger(__name__)

SEED_BOOKS: tuple[BookRecord, ...] = (
    BookRecord(
        title="Harry Potter and the Chamber of Secrets",
        publish_date="11/11/2010",
        author="J.K. Rowling",
    ),
    BookRecord(
        title="Jurassic Park",
        publish_date="14/01/2014",
        author="Michael Crichton",
    ),
)

SEED_AUTHORS: tuple[AuthorRecord, ...] = (
    AuthorRecord(name="J.K. Rowling"),
    AuthorRecord(name="Michael Crichton"),
)


def _string_field(entry: dict[str, Any], *keys: str) -> str | None:
    for key in keys:
        if key in entry:
            value = entry[key]
            if value is not None and not isinstance(value, str):
                raise SeedDataError(f"Field '{key}' must be a string, got {type(value).__name__}")
            return value
    return None


def _entries(data: dict[str, Any], section: str) -> list[dict[str, Any]]:
    entries = data.get(section) or []
    if not isinstance(entries, list):
        raise SeedDataError(f"Section '{section}' must be a list")
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise SeedDataError(f"Entry {index} of '{section}' must be a mapping")
    return entries


def parse_seed_data(data: Any) -> tuple[list[BookRecord], list[AuthorRecord]]:
    """Build records from parsed seed content, preserving file order."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SeedDataError("Seed data must be a mapping with 'books' and 'authors' sections")

    books = [
        BookRecord(
            title=_string_field(entry, "title"),
            publish_date=_string_field(entry, "publishDate", "publish_date"),
            author=_string_field(entry, "author"),
        )
        for entry in _entries(data, "books")
    ]
    authors = [AuthorRecord(name=_string_field(entry, "name")) for entry in _entries(data, "authors")]
    return books, authors


def load_seed_file(path: str | Path) -> tuple[list[BookRecord], list[AuthorRecord]]:
    """Load books and authors from a YAML seed file.

    Raises:
        SeedDataError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise SeedDataError(f"Seed data file not found: {path}") from e
    except yaml.YAMLError as e:
        raise SeedDataError(f"Invalid YAML in seed data file {path}: {e}") from e

    books, authors = parse_seed_data(data)
    logger.info(
        "Loaded seed data",
        path=str(path),
        book_count=len(books),
        author_count=len(authors),
    )
    return books, authors
