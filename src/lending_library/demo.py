"""
Scripted walkthrough of the Lending Library.

Builds a small catalog, lends and returns a book, and prints what the
service reports at each step.

Usage:
    python -m lending_library [--log-level LEVEL]
"""

import argparse
import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta

from .config import get_config
from .models import Book, Librarian, Reader
from .repository import InMemoryRepository
from .services import LibraryService

logger = logging.getLogger(__name__)

HOBBIT_ISBN = "978-0261102217"

SAMPLE_BOOKS = [
    Book(isbn="978-0140449136", title="The Odyssey", author="Homer"),
    Book(isbn=HOBBIT_ISBN, title="The Hobbit", author="J. R. R. Tolkien"),
    Book(
        isbn="978-0131103627",
        title="The C Programming Language",
        author="Kernighan and Ritchie",
    ),
]


def run_demo(
    service: LibraryService | None = None,
    out: Callable[[str], None] = print,
) -> LibraryService:
    """Run the scripted scenario against service and return it."""
    if service is None:
        service = LibraryService(InMemoryRepository())

    librarian = Librarian(name="Elena Smirnova", position="Head Librarian")

    for book in SAMPLE_BOOKS:
        service.add_book(book.model_copy())

    reader = Reader(name="Ivan Petrov", email="ivan.petrov@example.com")
    service.add_reader(reader)

    out("=== Initial books ===")
    for book in service.get_available_books():
        out(f" - {book}")

    out("\nSearching for 'Hobbit':")
    for book in service.search_books_by_title("Hobbit"):
        out(f" Found: {book}")

    out("\nLending 'The Hobbit' to Ivan...")
    now = datetime.now()
    result = service.issue_loan(HOBBIT_ISBN, reader.id, now, now + timedelta(days=14), librarian)
    if result:
        out(f" Loan created: {result.value}")

    out("\nTrying to lend the same book again:")
    second = service.issue_loan(HOBBIT_ISBN, reader.id, now, now + timedelta(days=14), librarian)
    out(" Cannot lend: book is unavailable." if not second else " Lent again (unexpected).")

    out("\n=== Books on loan ===")
    for book in service.get_loaned_books():
        out(f" - {book}")

    out("\n=== All loans ===")
    for loan in service.get_all_loans():
        out(f" - {loan}")

    out("\nReturning the book...")
    if result.value is not None:
        service.return_book(result.value.id)
    out("Availability after the return:")
    for book in service.get_available_books():
        out(f" - {book}")

    out("\nAdding another reader and removing them:")
    other = Reader(name="Olga Ivanova", email="olga@example.com")
    service.add_reader(other)
    out(f" Readers after adding: {service.reader_count()}")
    removed = service.remove_reader(other.id)
    out(f" Removed? {removed}. Readers now: {service.reader_count()}")

    out("\nSearching by author 'Homer':")
    for book in service.search_books_by_author("Homer"):
        out(f" - {book}")

    out("")
    out("Demo complete.")
    return service


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the demo."""
    config = get_config()
    parser = argparse.ArgumentParser(description="Run the Lending Library walkthrough")
    parser.add_argument(
        "--log-level",
        default=config.effective_log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for service notices",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.debug("Starting walkthrough for %s", config.library_name)

    run_demo(LibraryService(InMemoryRepository(), config))
    return 0
