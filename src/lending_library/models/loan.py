"""
Loan model for the Lending Library.

A loan records one book lent to one reader over a date range. Loans refer
to their book and reader by key (ISBN and reader id) rather than holding the
objects themselves; the repository resolves those keys.

Status lifecycle:
- ACTIVE -> COMPLETED when the book comes back
- ACTIVE -> OVERDUE when the due date passes without a return
Once a loan leaves ACTIVE its status never changes again.
"""

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .librarian import Librarian


class LoanStatus(str, Enum):
    """Status of a loan."""

    ACTIVE = "active"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class Loan(BaseModel):
    """
    Represents a single lending transaction.

    Loans are only created by the service once its preconditions hold, and
    are never deleted, only moved through their status lifecycle.
    """

    id: UUID = Field(
        default_factory=uuid4,
        description="Generated unique identifier for the loan",
        frozen=True,
    )

    book_isbn: str = Field(
        ...,
        description="ISBN of the lent book",
        min_length=1,
        frozen=True,
    )

    reader_id: UUID = Field(
        ...,
        description="Identifier of the borrowing reader",
        frozen=True,
    )

    loan_date: datetime = Field(
        ...,
        description="When the book was handed out",
        frozen=True,
    )

    return_date: datetime = Field(
        ...,
        description="When the book is due back",
        frozen=True,
    )

    issued_by: Librarian | None = Field(
        None,
        description="Librarian who issued the loan, if recorded",
    )

    status: LoanStatus = Field(
        default=LoanStatus.ACTIVE,
        description="Current status of the loan",
    )

    @model_validator(mode="after")
    def validate_dates(self) -> "Loan":
        """Ensure the loan period is not inverted."""
        if self.return_date < self.loan_date:
            raise ValueError("Return date cannot be before loan date")
        return self

    @property
    def is_active(self) -> bool:
        """Check if the book is still out under this loan."""
        return self.status == LoanStatus.ACTIVE

    def is_past_due(self, as_of: datetime) -> bool:
        """Check whether an active loan has passed its return date."""
        return self.is_active and self.return_date < as_of

    def complete(self) -> None:
        """
        Mark the loan as completed.

        Raises:
            ValueError: If the loan is not active
        """
        if not self.is_active:
            raise ValueError(f"Cannot complete a loan that is {self.status.value}")
        self.status = LoanStatus.COMPLETED

    def mark_overdue(self) -> None:
        """
        Mark the loan as overdue.

        Raises:
            ValueError: If the loan is not active
        """
        if not self.is_active:
            raise ValueError(f"Cannot mark a {self.status.value} loan as overdue")
        self.status = LoanStatus.OVERDUE

    def __str__(self) -> str:
        issuer = self.issued_by.name if self.issued_by else "-"
        return (
            f"{self.id} : {self.book_isbn} -> {self.reader_id} "
            f"from {self.loan_date:%Y-%m-%d} to {self.return_date:%Y-%m-%d} "
            f"[{self.status.value}] (issued by: {issuer})"
        )

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "id": "0d5a3f7c-9a53-4c1e-8f0e-6b1f0a2d4c77",
                "book_isbn": "978-0261102217",
                "reader_id": "5f0c8a7e-2b7d-4a53-9d8e-0c1f3f5e6a11",
                "loan_date": "2024-03-01T10:30:00",
                "return_date": "2024-03-15T10:30:00",
                "status": "active",
            }
        },
    )
