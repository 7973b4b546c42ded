"""Catalog page handlers.

Each handler takes the response to write to and the repositories it reads
from, so hosts decide how sessions are opened and how responses are rendered.
"""

from .authors import NO_AUTHORS_FOUND, format_author, get_author_list, show_all_authors
from .book_details import show_book_details
from .response import Response, ResponseAlreadySentError, ResponseWriter

__all__ = [
    "NO_AUTHORS_FOUND",
    "Response",
    "ResponseAlreadySentError",
    "ResponseWriter",
    "format_author",
    "get_author_list",
    "show_all_authors",
    "show_book_details",
]
