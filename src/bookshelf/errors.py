"""
Exception hierarchy for the Bookshelf API
"""


class BookshelfError(Exception):
    """Base exception for Bookshelf errors."""

    pass


class SeedDataError(BookshelfError):
    """Seed data file is missing or malformed."""

    pass


class ResolverNotFoundError(BookshelfError):
    """No resolver is registered for a (type, field) pair."""

    def __init__(self, type_name: str, field_name: str):
        super().__init__(f"No resolver registered for {type_name}.{field_name}")
        self.type_name = type_name
        self.field_name = field_name


class SchemaValidationError(BookshelfError):
    """GraphQL schema failed validation at startup."""

    pass
