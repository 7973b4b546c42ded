"""Test configuration and fixtures for the Local Library catalog.

1. Isolated databases - in-memory SQLite per test, or a temporary file when
   a test needs a ``DatabaseManager``
2. Configuration overrides - the global config and database manager are
   reset around each test that touches them
3. Repository stubs - ``Mock(spec=...)`` stand-ins for page handler tests
"""

from collections.abc import Generator
from datetime import date
from pathlib import Path
from unittest.mock import Mock

import logfire
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from local_library.config import LibraryConfig, reset_config
from local_library.database import (
    AuthorRepository,
    Base,
    BookInstanceRepository,
    BookRepository,
    DatabaseManager,
    reset_db_manager,
    seed_catalog,
)
from local_library.models import Author, Book


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire() -> None:
    """Spans are created by the page handlers; keep them local."""
    logfire.configure(send_to_logfire=False, console=False)


# === Database Fixtures ===


@pytest.fixture
def test_session() -> Generator[Session, None, None]:
    """In-memory database session with the schema created."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    session_local = sessionmaker(bind=engine, autoflush=False)
    session = session_local()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def seeded_session(test_session: Session) -> Session:
    """In-memory session holding the sample catalog."""
    seed_catalog(test_session)
    test_session.commit()
    return test_session


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    return tmp_path / "test_library.db"


@pytest.fixture
def db_manager(test_db_path: Path) -> Generator[DatabaseManager, None, None]:
    """File-backed database manager with the schema created."""
    manager = DatabaseManager(f"sqlite:///{test_db_path}")
    manager.init_database()
    yield manager
    manager.close()


@pytest.fixture
def test_config(test_db_path: Path) -> Generator[LibraryConfig, None, None]:
    reset_config()
    config = LibraryConfig(
        server_name="test-local-library",
        server_version="0.0.1-test",
        database_path=test_db_path,
        debug=True,
        log_level="DEBUG",
    )
    yield config
    reset_config()


@pytest.fixture
def clean_globals() -> Generator[None, None, None]:
    """Reset the global config and database manager around a test."""
    reset_config()
    reset_db_manager()
    yield
    reset_db_manager()
    reset_config()


# === Record Fixtures ===


@pytest.fixture
def sorted_authors() -> list[Author]:
    """Authors in the order a family-name sort returns them."""
    return [
        Author(
            id="a1",
            first_name="Jane",
            family_name="Austen",
            date_of_birth=date(1775, 12, 16),
            date_of_death=date(1817, 7, 18),
        ),
        Author(
            id="a2",
            first_name="Amitav",
            family_name="Ghosh",
            date_of_birth=date(1835, 11, 30),
            date_of_death=date(1910, 4, 21),
        ),
        Author(
            id="a3",
            first_name="Rabindranath",
            family_name="Tagore",
            date_of_birth=date(1812, 2, 7),
            date_of_death=date(1870, 6, 9),
        ),
    ]


@pytest.fixture
def mock_book() -> Book:
    return Book(
        id="12345",
        title="Mock Book Title",
        author=Author(id="a9", first_name="Mock", family_name="Author"),
    )


@pytest.fixture
def mock_copies() -> list[dict[str, str]]:
    return [
        {"imprint": "First Edition", "status": "Available"},
        {"imprint": "Second Edition", "status": "Loaned"},
    ]


# === Repository Stubs ===


@pytest.fixture
def author_repo() -> Mock:
    return Mock(spec=AuthorRepository)


@pytest.fixture
def book_repo() -> Mock:
    return Mock(spec=BookRepository)


@pytest.fixture
def copy_repo() -> Mock:
    return Mock(spec=BookInstanceRepository)


@pytest.fixture
def response() -> Mock:
    """Response stub whose ``status()`` chains back to itself."""
    res = Mock()
    res.status.return_value = res
    return res
