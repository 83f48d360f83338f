"""
Book GraphQL type definitions
"""

import strawberry

from ...store import BookRecord


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    title: str | None
    publish_date: str | None
    author: str | None

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        return cls(
            title=record.title,
            publish_date=record.publish_date,
            author=record.author,
        )
