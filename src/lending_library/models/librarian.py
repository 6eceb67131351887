"""Librarian value object recorded on the loans they issue."""

from pydantic import BaseModel, ConfigDict, Field


class Librarian(BaseModel):
    """A staff member. Not stored in the repository; loans keep their own copy."""

    name: str = Field(..., description="Full name of the librarian", min_length=1)

    position: str = Field(
        ...,
        description="Job title",
        examples=["Head Librarian", "Circulation Assistant"],
    )

    def __str__(self) -> str:
        return f"{self.name} - {self.position}"

    model_config = ConfigDict(frozen=True)
