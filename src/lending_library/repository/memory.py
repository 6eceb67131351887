"""
In-memory repository implementation for the Lending Library.

All state lives in three ``EntityStore`` instances (books by ISBN, readers
by id, loans by id). Loans reference books and readers by key, so removing a
book or reader that an unfinished loan still points at is refused instead of
leaving the loan dangling.

The repository is not thread-safe; it assumes a single caller.
"""

import logging
from collections.abc import Collection
from uuid import UUID

from ..models import Book, Loan, Reader
from .base import EntityStore, LibraryRepository, NotFoundError

logger = logging.getLogger(__name__)


class InMemoryRepository(LibraryRepository):
    """Repository keeping books, readers and loans in process memory."""

    def __init__(self) -> None:
        """Initialize empty stores."""
        self._books: EntityStore[str, Book] = EntityStore(lambda b: b.isbn, "Book")
        self._readers: EntityStore[UUID, Reader] = EntityStore(lambda r: r.id, "Reader")
        self._loans: EntityStore[UUID, Loan] = EntityStore(lambda loan: loan.id, "Loan")

    # === Books ===

    def add_book(self, book: Book) -> None:
        self._books.add(book)

    def remove_book(self, isbn: str) -> bool:
        """
        Remove a book from the catalog.

        Returns False if no such book exists, or if a loan that has not been
        completed still references it.
        """
        if isbn in self._books and self.loans_referencing_book(isbn):
            logger.info("Book %s is still on loan and cannot be removed", isbn)
            return False
        return self._books.remove(isbn)

    def get_book_by_isbn(self, isbn: str) -> Book | None:
        return self._books.get(isbn)

    def get_all_books(self) -> Collection[Book]:
        return self._books.all()

    # === Readers ===

    def add_reader(self, reader: Reader) -> None:
        self._readers.add(reader)

    def remove_reader(self, reader_id: UUID) -> bool:
        """
        Remove a reader.

        Returns False if no such reader exists, or if the reader still holds
        a loan that has not been completed.
        """
        if reader_id in self._readers and self.loans_referencing_reader(reader_id):
            logger.info("Reader %s still holds books and cannot be removed", reader_id)
            return False
        return self._readers.remove(reader_id)

    def get_reader(self, reader_id: UUID) -> Reader | None:
        return self._readers.get(reader_id)

    def get_all_readers(self) -> Collection[Reader]:
        return self._readers.all()

    # === Loans ===

    def add_loan(self, loan: Loan) -> None:
        """
        Record a loan and mark its book as loaned.

        Raises:
            NotFoundError: If the loan's book is not in the catalog
            DuplicateError: If a loan with the same id is already recorded
        """
        book = self._books.get(loan.book_isbn)
        if book is None:
            raise NotFoundError(f"Book {loan.book_isbn} not found")
        self._loans.add(loan)
        book.mark_as_loaned()

    def get_loan(self, loan_id: UUID) -> Loan | None:
        return self._loans.get(loan_id)

    def get_all_loans(self) -> Collection[Loan]:
        return self._loans.all()
