"""Author list page.

Both functions query every author sorted by family name. Neither raises: a
failed query or a record that cannot be formatted gives an empty list, and a
failed send is retried once with the "No authors found" message.
"""

import logging

from ..database.author_repository import AuthorRepository
from ..models.author import Author
from ..observability import trace_page
from .response import Response

logger = logging.getLogger(__name__)

NO_AUTHORS_FOUND = "No authors found"
AUTHOR_SORT = [("family_name", "ascending")]


def format_author(author: Author, separator: str = " : ") -> str:
    """Render ``"{name}{separator}{birth} - {death}"``."""
    return f"{author.name}{separator}{author.birth_year} - {author.death_year}"


def _author_entries(authors: AuthorRepository, separator: str) -> list[str]:
    """Query and format every author; [] if either step fails."""
    try:
        return [
            format_author(author, separator=separator)
            for author in authors.query_all(sort=AUTHOR_SORT)
        ]
    except Exception:
        logger.exception("Failed to build author list")
        return []


@trace_page("authors.list")
async def get_author_list(authors: AuthorRepository) -> list[str]:
    """Return ``"Family, First : birth - death"`` for every author.

    Never raises; returns ``[]`` when the query or formatting fails.
    """
    return _author_entries(authors, separator=" : ")


@trace_page("authors.show")
async def show_all_authors(response: Response, authors: AuthorRepository) -> None:
    """Send the formatted author list, or "No authors found".

    Never raises. Entries are ``"Family, First: birth - death"``.
    """
    entries = _author_entries(authors, separator=": ")

    try:
        if entries:
            response.send(entries)
        else:
            response.send(NO_AUTHORS_FOUND)
    except Exception:
        logger.exception("Failed to send author list")
        try:
            response.send(NO_AUTHORS_FOUND)
        except Exception:
            logger.exception("Failed to send fallback author response")
