"""Resolver registry for the GraphQL schema.

Each resolver is a plain function ``(store, parent, **args) -> value`` keyed by
the ``(type name, field name)`` pair it serves. Schema fields look their
resolver up here; startup validation checks every key against the schema.
"""

from collections.abc import Callable
from typing import Any

from ...errors import ResolverNotFoundError
from .author import resolve_author_books, resolve_author_by_name, resolve_authors
from .book import add_book, resolve_books

Resolver = Callable[..., Any]

RESOLVERS: dict[tuple[str, str], Resolver] = {
    ("Query", "getBooks"): resolve_books,
    ("Query", "getAuthors"): resolve_authors,
    ("Query", "getAuthor"): resolve_author_by_name,
    ("Author", "books"): resolve_author_books,
    ("Mutation", "addBook"): add_book,
}


def resolve(type_name: str, field_name: str) -> Resolver:
    """Look up the resolver registered for ``type_name.field_name``.

    Raises:
        ResolverNotFoundError: If nothing is registered for the pair
    """
    try:
        return RESOLVERS[(type_name, field_name)]
    except KeyError:
        raise ResolverNotFoundError(type_name, field_name) from None


__all__ = ["RESOLVERS", "Resolver", "resolve"]
