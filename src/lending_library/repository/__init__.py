"""
Lending Library repository package.

Exports the repository contract, its in-memory implementation and the
exceptions raised for integrity problems.
"""

from .base import (
    DuplicateError,
    EntityStore,
    LibraryRepository,
    NotFoundError,
    RepositoryException,
)
from .memory import InMemoryRepository

__all__ = [
    "DuplicateError",
    "EntityStore",
    "InMemoryRepository",
    "LibraryRepository",
    "NotFoundError",
    "RepositoryException",
]
