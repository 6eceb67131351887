"""
Lending Library Models.

This package contains Pydantic models for all entities in the lending
library. These models provide:

1. Data validation using Pydantic v2
2. Validation on assignment, so mutable fields stay consistent
3. Type hints for all fields

The models represent:
- Book: Catalog items, one physical unit per ISBN
- Reader: People who borrow books
- Librarian: Staff member recorded on a loan
- Loan: One book lent to one reader, with a lifecycle status
"""

from .book import Book
from .librarian import Librarian
from .loan import Loan, LoanStatus
from .reader import Reader

__all__ = [
    "Book",
    "Librarian",
    "Loan",
    "LoanStatus",
    "Reader",
]
