"""
Book and author storage
"""

from .base import AuthorRecord, BookRecord, BookStore
from .factory import create_store
from .memory import InMemoryStore

__all__ = [
    "AuthorRecord",
    "BookRecord",
    "BookStore",
    "InMemoryStore",
    "create_store",
]
