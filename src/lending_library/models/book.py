"""
Book model for the Lending Library.

A book is keyed by its ISBN and exists as a single lendable unit. The
availability flag is flipped by the loan workflow: issuing a loan marks the
book as loaned, completing the loan marks it available again.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Book(BaseModel):
    """
    Represents a book in the library catalog.

    The ISBN is the lookup key used by the repository and by loans, so it
    cannot be reassigned once the book exists. Title and author are free to
    change.
    """

    isbn: str = Field(
        ...,
        description="ISBN identifying the book; unique key in the catalog",
        min_length=1,
        frozen=True,
        examples=["978-0140449136", "9780261102217"],
    )

    title: str = Field(
        ...,
        description="The title of the book",
        examples=["The Odyssey", "The Hobbit"],
    )

    author: str = Field(
        ...,
        description="Author (or authors) of the book",
        examples=["Homer", "J. R. R. Tolkien"],
    )

    is_available: bool = Field(
        default=True,
        description="False while the book is out on a loan",
    )

    @field_validator("isbn")
    @classmethod
    def reject_blank_isbn(cls, v: str) -> str:
        """Reject whitespace-only ISBNs. The key is stored exactly as given."""
        if not v.strip():
            raise ValueError("ISBN must not be blank")
        return v

    def mark_as_loaned(self) -> None:
        """Flag the book as out on loan."""
        self.is_available = False

    def mark_as_available(self) -> None:
        """Flag the book as back on the shelf."""
        self.is_available = True

    def __str__(self) -> str:
        state = "Available" if self.is_available else "On loan"
        return f"{self.title} by {self.author} (ISBN: {self.isbn}) - {state}"

    model_config = ConfigDict(
        # Title and author are mutable; keep assignments validated
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "isbn": "978-0261102217",
                "title": "The Hobbit",
                "author": "J. R. R. Tolkien",
                "is_available": True,
            }
        },
    )
