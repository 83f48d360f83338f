"""
Root GraphQL query definitions
"""

import strawberry

from ..context import get_store, unset_to_none
from ..resolvers import resolve
from ..types.author import Author
from ..types.book import Book


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(name="getBooks")
    def get_books(self, info: strawberry.Info) -> list[Book | None] | None:
        """Get every book."""
        records = resolve("Query", "getBooks")(get_store(info), self)
        return [Book.from_record(record) for record in records]

    @strawberry.field(name="getAuthors")
    def get_authors(self, info: strawberry.Info) -> list[Author | None] | None:
        """Get every author."""
        records = resolve("Query", "getAuthors")(get_store(info), self)
        return [Author.from_record(record) for record in records]

    @strawberry.field(name="getAuthor")
    def get_author(
        self, info: strawberry.Info, name: str | None = strawberry.UNSET
    ) -> Author | None:
        """Get the first author with exactly this name."""
        record = resolve("Query", "getAuthor")(get_store(info), self, name=unset_to_none(name))
        if record is None:
            return None
        return Author.from_record(record)
