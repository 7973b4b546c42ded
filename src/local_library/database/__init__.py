"""
Database package for the Local Library catalog.

This package provides:
- SQLAlchemy schema definitions (schema.py)
- Session management and connection handling (session.py)
- One repository per collection (authors, books, book instances)
- A fixed sample catalog (seed.py)
"""

from .author_repository import AuthorCreateSchema, AuthorRepository
from .book_instance_repository import BookInstanceCreateSchema, BookInstanceRepository
from .book_repository import BookCreateSchema, BookRepository
from .exceptions import QueryError, RepositoryException
from .repository import BaseRepository, SortDirection, parse_projection
from .schema import Author, Base, Book, BookInstance, BookInstanceStatusEnum
from .seed import seed_catalog
from .session import (
    DatabaseManager,
    get_db_manager,
    reset_db_manager,
    safe_query,
    session_scope,
)

__all__ = [
    "Author",
    "AuthorCreateSchema",
    "AuthorRepository",
    "Base",
    "BaseRepository",
    "Book",
    "BookCreateSchema",
    "BookInstance",
    "BookInstanceCreateSchema",
    "BookInstanceRepository",
    "BookInstanceStatusEnum",
    "BookRepository",
    "DatabaseManager",
    "QueryError",
    "RepositoryException",
    "SortDirection",
    "get_db_manager",
    "parse_projection",
    "reset_db_manager",
    "safe_query",
    "seed_catalog",
    "session_scope",
]
