"""
Result types returned by the lending service.

Lending decisions never raise. Each one returns a ``ServiceResult`` that
either carries the affected entity or names the rule that refused the
request, so callers and tests can tell failures apart.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

ValueType = TypeVar("ValueType")


class FailureKind(str, Enum):
    """Why a lending operation was refused."""

    BOOK_NOT_FOUND = "book_not_found"
    BOOK_UNAVAILABLE = "book_unavailable"
    READER_NOT_FOUND = "reader_not_found"
    LOAN_NOT_FOUND = "loan_not_found"
    LOAN_NOT_ACTIVE = "loan_not_active"
    INVALID_LOAN_PERIOD = "invalid_loan_period"

    @property
    def is_not_found(self) -> bool:
        """True for missing entities, False for violated preconditions."""
        return self in {
            FailureKind.BOOK_NOT_FOUND,
            FailureKind.READER_NOT_FOUND,
            FailureKind.LOAN_NOT_FOUND,
        }


class ServiceResult(BaseModel, Generic[ValueType]):
    """
    Outcome of a lending operation.

    Truthy when the operation succeeded, so ``if service.return_book(...)``
    reads the same as a boolean result.
    """

    value: ValueType | None = None
    failure: FailureKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        """Check if the operation succeeded."""
        return self.failure is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: Any) -> "ServiceResult[Any]":
        """Build a successful result carrying value."""
        return cls(value=value)

    @classmethod
    def fail(cls, kind: FailureKind, message: str) -> "ServiceResult[Any]":
        """Build a failed result."""
        return cls(failure=kind, message=message)

    model_config = ConfigDict(frozen=True)
