"""
Lending Library Package.

This package models a small library lending workflow held entirely in
memory: books, readers, librarians and the loans that connect them.

Key Components:
- models: Pydantic models for books, readers, librarians and loans
- repository: Keyed in-memory stores for every managed entity
- services: Lending rules (issue, return, search, reporting)
- config: Configuration management with pydantic-settings
- demo: Scripted walkthrough of the service
"""

__version__ = "0.1.0"

from .models import Book, Librarian, Loan, LoanStatus, Reader
from .repository import InMemoryRepository, LibraryRepository
from .services import FailureKind, LibraryService, ServiceResult

__all__ = [
    "Book",
    "FailureKind",
    "InMemoryRepository",
    "LibraryRepository",
    "LibraryService",
    "Librarian",
    "Loan",
    "LoanStatus",
    "Reader",
    "ServiceResult",
    "__version__",
]
