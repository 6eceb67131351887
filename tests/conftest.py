"""Test configuration and fixtures for the Lending Library.

Every test gets a fresh in-memory repository and a service built on it, so
no state leaks between tests.
"""

from collections.abc import Generator
from datetime import datetime, timedelta

import pytest

from lending_library.config import LibraryConfig, reset_config
from lending_library.models import Book, Librarian, Reader
from lending_library.repository import InMemoryRepository
from lending_library.services import LibraryService

ODYSSEY_ISBN = "978-0140449136"
HOBBIT_ISBN = "978-0261102217"
KR_ISBN = "978-0131103627"


@pytest.fixture(autouse=True)
def clean_config() -> Generator[None, None, None]:
    """Drop the cached configuration around each test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def test_config() -> LibraryConfig:
    """Configuration with defaults, independent of the environment."""
    return LibraryConfig(default_loan_days=14, log_level="INFO", debug=False)


@pytest.fixture
def repository() -> InMemoryRepository:
    """Provide an empty repository."""
    return InMemoryRepository()


@pytest.fixture
def service(repository: InMemoryRepository, test_config: LibraryConfig) -> LibraryService:
    """Provide a service over the empty repository."""
    return LibraryService(repository, test_config)


@pytest.fixture
def books() -> list[Book]:
    """Three catalog books, the middle one being the Hobbit."""
    return [
        Book(isbn=ODYSSEY_ISBN, title="Одиссея", author="Гомер"),
        Book(isbn=HOBBIT_ISBN, title="Хоббит", author="Дж. Р. Р. Толкин"),
        Book(isbn=KR_ISBN, title="Язык программирования C", author="Керниган и Ричи"),
    ]


@pytest.fixture
def reader() -> Reader:
    return Reader(name="Иван Петров", email="ivan.petrov@example.com")


@pytest.fixture
def librarian() -> Librarian:
    return Librarian(name="Елена Смирнова", position="Главный библиотекарь")


@pytest.fixture
def stocked_service(service: LibraryService, books: list[Book], reader: Reader) -> LibraryService:
    """Service with three books and one reader registered."""
    for book in books:
        service.add_book(book)
    service.add_reader(reader)
    return service


@pytest.fixture
def loan_period() -> tuple[datetime, datetime]:
    """A two week loan starting now."""
    start = datetime.now()
    return start, start + timedelta(days=14)
