"""
Helpers for reading the per-request GraphQL context
"""

from typing import Any

import strawberry

from ..store import BookStore


def get_store(info: strawberry.Info) -> BookStore:
    """Get the book store injected into the GraphQL context."""
    return info.context["store"]


def unset_to_none(value: Any) -> Any:
    """Map an omitted argument to None."""
    if value is strawberry.UNSET:
        return None
    return value
