"""
Repository contract for the Lending Library.

This module provides the data access layer that the service builds on. The
repository pattern keeps the lending rules apart from storage concerns:

1. **Separation**: The service only asks for entities by key and never
   touches the containers holding them
2. **Testability**: Any implementation of ``LibraryRepository`` can back the
   service, so tests can swap in their own
3. **Consistency**: Every entity type is stored through the same keyed
   ``EntityStore`` with the same add/remove/get/all operations
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Collection, Hashable
from typing import Generic, TypeVar
from uuid import UUID

from ..models import Book, Loan, LoanStatus, Reader

logger = logging.getLogger(__name__)

KeyType = TypeVar("KeyType", bound=Hashable)
EntityType = TypeVar("EntityType")


class RepositoryException(Exception):
    """Base exception for repository operations."""


class NotFoundError(RepositoryException):
    """Raised when an entity is not found."""


class DuplicateError(RepositoryException):
    """Raised when attempting to store a second entity under an existing key."""


class EntityStore(Generic[KeyType, EntityType]):
    """
    Keyed in-memory store for a single entity type.

    Entities are kept in a dict keyed by ``key_of(entity)``, which gives
    constant-time lookups while preserving insertion order for listings.
    """

    def __init__(self, key_of: Callable[[EntityType], KeyType], entity_name: str):
        """Initialize an empty store."""
        self._key_of = key_of
        self._entity_name = entity_name
        self._items: dict[KeyType, EntityType] = {}

    def add(self, entity: EntityType) -> None:
        """
        Store an entity under its key.

        Raises:
            DuplicateError: If an entity with the same key is already stored
        """
        key = self._key_of(entity)
        if key in self._items:
            raise DuplicateError(f"{self._entity_name} {key} already exists")
        self._items[key] = entity
        logger.debug("Stored %s %s", self._entity_name, key)

    def remove(self, key: KeyType) -> bool:
        """Remove the entity stored under key. Returns False if there was none."""
        if key not in self._items:
            return False
        del self._items[key]
        logger.debug("Removed %s %s", self._entity_name, key)
        return True

    def get(self, key: KeyType) -> EntityType | None:
        """Get the entity stored under key, or None."""
        return self._items.get(key)

    def all(self) -> Collection[EntityType]:
        """
        Return a live view of the stored entities.

        The view reflects later additions and removals when iterated again;
        it is not a snapshot.
        """
        return self._items.values()

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)


class LibraryRepository(ABC):
    """
    Abstract repository holding the library's books, readers and loans.

    Loans are never removed; they only change status. Adding a loan marks
    its book unavailable.
    """

    # === Books ===

    @abstractmethod
    def add_book(self, book: Book) -> None:
        """Add a book to the catalog."""

    @abstractmethod
    def remove_book(self, isbn: str) -> bool:
        """Remove a book by ISBN. Returns True if a book was removed."""

    @abstractmethod
    def get_book_by_isbn(self, isbn: str) -> Book | None:
        """Get a book by ISBN, or None."""

    @abstractmethod
    def get_all_books(self) -> Collection[Book]:
        """Return a live view of all books."""

    # === Readers ===

    @abstractmethod
    def add_reader(self, reader: Reader) -> None:
        """Register a reader."""

    @abstractmethod
    def remove_reader(self, reader_id: UUID) -> bool:
        """Remove a reader by id. Returns True if a reader was removed."""

    @abstractmethod
    def get_reader(self, reader_id: UUID) -> Reader | None:
        """Get a reader by id, or None."""

    @abstractmethod
    def get_all_readers(self) -> Collection[Reader]:
        """Return a live view of all readers."""

    # === Loans ===

    @abstractmethod
    def add_loan(self, loan: Loan) -> None:
        """Record a loan and mark its book unavailable."""

    @abstractmethod
    def get_loan(self, loan_id: UUID) -> Loan | None:
        """Get a loan by id, or None."""

    @abstractmethod
    def get_all_loans(self) -> Collection[Loan]:
        """Return a live view of all loans."""

    # === Shared queries ===

    def loans_referencing_book(self, isbn: str) -> list[Loan]:
        """Return the loans for this book that have not been completed."""
        return [
            loan
            for loan in self.get_all_loans()
            if loan.book_isbn == isbn and loan.status != LoanStatus.COMPLETED
        ]

    def loans_referencing_reader(self, reader_id: UUID) -> list[Loan]:
        """Return the loans for this reader that have not been completed."""
        return [
            loan
            for loan in self.get_all_loans()
            if loan.reader_id == reader_id and loan.status != LoanStatus.COMPLETED
        ]
