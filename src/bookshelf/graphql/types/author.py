"""
Author GraphQL type definitions
"""

import strawberry

from ...store import AuthorRecord
from ..context import get_store
from ..resolvers import resolve
from .book import Book


@strawberry.type
class Author:
    """Author type for GraphQL API."""

    name: str | None

    @strawberry.field
    def books(self, info: strawberry.Info) -> list[Book | None] | None:
        """Get the books written by this author."""
        records = resolve("Author", "books")(get_store(info), self)
        return [Book.from_record(record) for record in records]

    @classmethod
    def from_record(cls, record: AuthorRecord) -> "Author":
        return cls(name=record.name)
