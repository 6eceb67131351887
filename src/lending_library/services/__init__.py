"""Lending Library services: business rules and their result types."""

from .library_service import LibraryService
from .results import FailureKind, ServiceResult

__all__ = [
    "FailureKind",
    "LibraryService",
    "ServiceResult",
]
