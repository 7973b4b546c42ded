"""Exceptions raised by the catalog repositories."""


class RepositoryException(Exception):
    """Base exception for repository operations."""


class QueryError(RepositoryException):
    """Raised when a query is malformed or the database rejects it."""
