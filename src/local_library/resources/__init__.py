"""MCP resources for the Local Library catalog.

Resources are read-only endpoints addressed by URI; they expose the same
catalog pages the HTTP app serves.
"""

from .catalog import catalog_resources, get_book_details_handler, list_authors_handler

__all__ = [
    "catalog_resources",
    "get_book_details_handler",
    "list_authors_handler",
]
