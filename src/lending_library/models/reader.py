"""
Reader model for the Lending Library.

Readers are the people who borrow books. Each reader receives a generated
UUID when created; that identifier is what loans and repository lookups use.
"""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class Reader(BaseModel):
    """Represents a registered reader who can borrow books."""

    id: UUID = Field(
        default_factory=uuid4,
        description="Generated unique identifier for the reader",
        frozen=True,
    )

    name: str = Field(
        ...,
        description="Full name of the reader",
        min_length=1,
        max_length=200,
        examples=["Ivan Petrov", "Olga Ivanova"],
    )

    # Several readers may share an address; uniqueness is not enforced
    email: EmailStr = Field(
        ...,
        description="Contact email address",
        examples=["ivan.petrov@example.com"],
    )

    def __str__(self) -> str:
        return f"{self.name} ({self.email}) [{self.id}]"

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "id": "5f0c8a7e-2b7d-4a53-9d8e-0c1f3f5e6a11",
                "name": "Ivan Petrov",
                "email": "ivan.petrov@example.com",
            }
        },
    )
