"""Book detail page."""

import logging
from typing import Any

from ..database.book_instance_repository import BookInstanceRepository
from ..database.book_repository import BookRepository
from ..observability import trace_page
from .response import Response

logger = logging.getLogger(__name__)

COPY_FIELDS = "imprint status"


def book_not_found(book_id: Any) -> str:
    return f"Book {book_id} not found"


def book_fetch_error(book_id: Any) -> str:
    return f"Error fetching book {book_id}"


def _lookup(
    book_id: Any, books: BookRepository, copies: BookInstanceRepository
) -> tuple[int | None, Any]:
    """Return the status to set (None for the default) and the body to send."""
    if not isinstance(book_id, str):
        return 404, book_not_found(book_id)

    try:
        book = books.query_one({"_id": book_id}, populate=["author"])
    except Exception:
        logger.exception("Failed to fetch book %s", book_id)
        return 500, book_fetch_error(book_id)

    try:
        book_copies = copies.query_where({"book": book_id}, projection=COPY_FIELDS)
    except Exception:
        logger.exception("Failed to fetch copies of book %s", book_id)
        return 500, book_fetch_error(book_id)

    # An empty copies list is a valid answer for an existing book; None is not.
    if book is None or book_copies is None:
        logger.debug("Book %s not found (book=%r, copies=%r)", book_id, book, book_copies)
        return 404, book_not_found(book_id)

    try:
        payload = {
            "title": book.title,
            "author": book.author_name,
            "copies": book_copies,
        }
    except Exception:
        logger.exception("Failed to build details of book %s", book_id)
        return 500, book_fetch_error(book_id)

    return None, payload


@trace_page("book.details")
async def show_book_details(
    response: Response,
    book_id: str,
    books: BookRepository,
    copies: BookInstanceRepository,
) -> None:
    """Send ``{"title", "author", "copies"}`` for one book.

    Writes 404 when the id is not a string, the book does not exist or the
    copies query returned None. An existing book with no copies is a 200 with
    ``"copies": []``. Either query raising, or a book record that cannot be
    read, writes 500. Never raises.
    """
    status, body = _lookup(book_id, books, copies)

    try:
        if status is None:
            response.send(body)
        else:
            response.status(status).send(body)
    except Exception:
        logger.exception("Failed to send details for book %s", book_id)
