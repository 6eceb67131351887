"""
Lending service for the Lending Library.

This module layers the library's business rules on top of a
``LibraryRepository``:

1. **Lending**: issue a loan only when the book exists, is on the shelf and
   the reader is registered
2. **Returns**: complete an active loan and put its book back on the shelf
3. **Overdue tracking**: move active loans past their return date to OVERDUE
4. **Search and reporting**: case-insensitive title/author search and
   availability partitions

Every refused request is logged as an INFO notice and returned as a
failed ``ServiceResult`` naming the rule that refused it.
"""

import logging
from collections.abc import Collection, Iterator
from datetime import datetime, timedelta
from uuid import UUID

from ..config import LibraryConfig, get_config
from ..models import Book, Librarian, Loan, LoanStatus, Reader
from ..repository import LibraryRepository
from .results import FailureKind, ServiceResult

logger = logging.getLogger(__name__)


class LibraryService:
    """
    Business-rule layer over the library repository.

    CRUD calls are passed straight through to the repository; lending
    operations validate their preconditions first.
    """

    def __init__(self, repository: LibraryRepository, config: LibraryConfig | None = None):
        """Initialize with a repository and optional configuration."""
        self.repository = repository
        self.config = config or get_config()

    def _refuse(self, kind: FailureKind, message: str) -> ServiceResult[Loan]:
        logger.info(message)
        return ServiceResult.fail(kind, message)

    # =========================================================================
    # BOOKS
    # =========================================================================

    def add_book(self, book: Book) -> None:
        self.repository.add_book(book)

    def remove_book(self, isbn: str) -> bool:
        return self.repository.remove_book(isbn)

    def get_book_by_isbn(self, isbn: str) -> Book | None:
        return self.repository.get_book_by_isbn(isbn)

    def search_books_by_title(self, title: str | None) -> Iterator[Book]:
        """Yield books whose title contains ``title``, ignoring case."""
        term = (title or "").casefold()
        return (b for b in self.repository.get_all_books() if term in b.title.casefold())

    def search_books_by_author(self, author: str | None) -> Iterator[Book]:
        """Yield books whose author contains ``author``, ignoring case."""
        term = (author or "").casefold()
        return (b for b in self.repository.get_all_books() if term in b.author.casefold())

    # =========================================================================
    # READERS
    # =========================================================================

    def add_reader(self, reader: Reader) -> None:
        self.repository.add_reader(reader)

    def remove_reader(self, reader_id: UUID) -> bool:
        return self.repository.remove_reader(reader_id)

    def get_reader(self, reader_id: UUID) -> Reader | None:
        return self.repository.get_reader(reader_id)

    def get_all_readers(self) -> Collection[Reader]:
        return self.repository.get_all_readers()

    def reader_count(self) -> int:
        return len(self.repository.get_all_readers())

    # =========================================================================
    # LOANS
    # =========================================================================

    def issue_loan(
        self,
        isbn: str,
        reader_id: UUID,
        loan_date: datetime | None = None,
        return_date: datetime | None = None,
        issued_by: Librarian | None = None,
    ) -> ServiceResult[Loan]:
        """
        Lend a book to a reader.

        Checks, in order: the book exists, the book is available, the reader
        exists, and the loan period is not inverted.

        Args:
            isbn: ISBN of the book to lend
            reader_id: Borrowing reader
            loan_date: Start of the loan (default: now)
            return_date: Due date (default: loan_date plus the configured
                loan period)
            issued_by: Librarian handing out the book

        Returns:
            Result carrying the new ACTIVE loan, or the reason for refusal
        """
        book = self.repository.get_book_by_isbn(isbn)
        if book is None:
            return self._refuse(FailureKind.BOOK_NOT_FOUND, f"Book {isbn} not found")

        if not book.is_available:
            return self._refuse(
                FailureKind.BOOK_UNAVAILABLE, f"Book '{book.title}' is currently unavailable"
            )

        reader = self.repository.get_reader(reader_id)
        if reader is None:
            return self._refuse(FailureKind.READER_NOT_FOUND, f"Reader {reader_id} not found")

        loan_date = loan_date or datetime.now()
        return_date = return_date or loan_date + timedelta(days=self.config.default_loan_days)
        if return_date < loan_date:
            return self._refuse(
                FailureKind.INVALID_LOAN_PERIOD,
                f"Return date {return_date:%Y-%m-%d} is before loan date {loan_date:%Y-%m-%d}",
            )

        loan = Loan(
            book_isbn=book.isbn,
            reader_id=reader.id,
            loan_date=loan_date,
            return_date=return_date,
            issued_by=issued_by,
        )
        self.repository.add_loan(loan)
        logger.info("Issued '%s' to %s until %s", book.title, reader.name, return_date.date())
        return ServiceResult.success(loan)

    def return_book(self, loan_id: UUID) -> ServiceResult[Loan]:
        """
        Close an active loan and put its book back on the shelf.

        Completed and overdue loans cannot be returned through this call.
        """
        loan = self.repository.get_loan(loan_id)
        if loan is None:
            return self._refuse(FailureKind.LOAN_NOT_FOUND, f"Loan {loan_id} not found")

        if not loan.is_active:
            return self._refuse(
                FailureKind.LOAN_NOT_ACTIVE, f"Loan {loan_id} is {loan.status.value}, not active"
            )

        loan.complete()
        book = self.repository.get_book_by_isbn(loan.book_isbn)
        # Books on unfinished loans cannot be removed, so the lookup holds
        if book is not None:
            book.mark_as_available()
        logger.info("Loan %s completed; book %s is available", loan.id, loan.book_isbn)
        return ServiceResult.success(loan)

    def mark_overdue_loans(self, as_of: datetime | None = None) -> list[Loan]:
        """
        Move every active loan past its return date to OVERDUE.

        Returns the loans that changed status.

        OVERDUE is final: the book stays unavailable and cannot be returned
        through ``return_book``, lent again or removed, and the reader cannot
        be removed while the loan exists.
        """
        as_of = as_of or datetime.now()
        overdue = [loan for loan in self.repository.get_all_loans() if loan.is_past_due(as_of)]
        for loan in overdue:
            loan.mark_overdue()
            logger.info("Loan %s for book %s is overdue", loan.id, loan.book_isbn)
        return overdue

    def get_all_loans(self) -> Collection[Loan]:
        return self.repository.get_all_loans()

    def get_active_loans(self) -> Iterator[Loan]:
        return (loan for loan in self.repository.get_all_loans() if loan.is_active)

    def get_overdue_loans(self) -> Iterator[Loan]:
        return (
            loan
            for loan in self.repository.get_all_loans()
            if loan.status == LoanStatus.OVERDUE
        )

    def get_loans_for_reader(self, reader_id: UUID) -> Iterator[Loan]:
        return (loan for loan in self.repository.get_all_loans() if loan.reader_id == reader_id)

    # =========================================================================
    # REPORTS
    # =========================================================================

    def get_available_books(self) -> Iterator[Book]:
        return (b for b in self.repository.get_all_books() if b.is_available)

    def get_loaned_books(self) -> Iterator[Book]:
        return (b for b in self.repository.get_all_books() if not b.is_available)
