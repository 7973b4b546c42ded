"""Catalog Resources - the catalog pages over MCP

Resources:
- library://authors/list - formatted author list
- library://books/{book_id}/details - title, author and copies of one book

Each handler opens a session, runs the page handler into a ``ResponseWriter``
and turns an error status into a ``ResourceError``.
"""

import logging
from typing import Any

from fastmcp.exceptions import ResourceError

from ..database.author_repository import AuthorRepository
from ..database.book_instance_repository import BookInstanceRepository
from ..database.book_repository import BookRepository
from ..database.session import session_scope
from ..pages import ResponseWriter, show_all_authors, show_book_details

logger = logging.getLogger(__name__)


async def list_authors_handler() -> dict[str, Any]:
    """Returns the author list, sorted by family name."""
    logger.debug("MCP Resource Request - authors/list")

    writer = ResponseWriter()
    with session_scope() as session:
        await show_all_authors(writer, AuthorRepository(session))

    if isinstance(writer.body, list):
        return {"authors": writer.body}
    return {"authors": [], "message": writer.body}


async def get_book_details_handler(book_id: str) -> dict[str, Any]:
    """Returns title, author name and copies for one book."""
    logger.debug("MCP Resource Request - books/%s/details", book_id)

    writer = ResponseWriter()
    with session_scope() as session:
        await show_book_details(
            writer, book_id, BookRepository(session), BookInstanceRepository(session)
        )

    if writer.is_error:
        raise ResourceError(str(writer.body))
    return writer.body


catalog_resources: list[dict[str, Any]] = [
    {
        "uri": "library://authors/list",
        "name": "Author List",
        "description": "All authors as 'Family, First: birth - death', sorted by family name",
        "mime_type": "application/json",
        "handler": list_authors_handler,
    },
    {
        "uri": "library://books/{book_id}/details",
        "name": "Book Details",
        "description": "Title, author name and copies (imprint and status) of one book",
        "mime_type": "application/json",
        "handler": get_book_details_handler,
    },
]
