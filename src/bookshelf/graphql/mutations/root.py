"""
Root GraphQL mutation definitions
"""

import strawberry

from ..context import get_store, unset_to_none
from ..resolvers import resolve
from ..types.book import Book


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addBook")
    def add_book(
        self,
        info: strawberry.Info,
        title: str | None = strawberry.UNSET,
        author: str | None = strawberry.UNSET,
        publish_date: str | None = strawberry.UNSET,
    ) -> Book | None:
        """Add a book to the store and return it."""
        record = resolve("Mutation", "addBook")(
            get_store(info),
            self,
            title=unset_to_none(title),
            author=unset_to_none(author),
            publish_date=unset_to_none(publish_date),
        )
        return Book.from_record(record)
