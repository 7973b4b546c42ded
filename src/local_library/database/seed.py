"""
Sample catalog for the Local Library.

A small fixed data set: a handful of authors, their books and a few copies of
each in different states. Used by ``local-library-init-db --sample-data`` and
by the tests that exercise real queries.
"""

import logging
from datetime import date

from sqlalchemy.orm import Session

from .author_repository import AuthorCreateSchema, AuthorRepository
from .book_instance_repository import BookInstanceCreateSchema, BookInstanceRepository
from .book_repository import BookCreateSchema, BookRepository
from .schema import BookInstanceStatusEnum

logger = logging.getLogger(__name__)

SAMPLE_AUTHORS: list[dict] = [
    {"first_name": "Patrick", "family_name": "Rothfuss", "date_of_birth": date(1973, 6, 6)},
    {"first_name": "Ben", "family_name": "Bova", "date_of_birth": date(1932, 11, 8)},
    {
        "first_name": "Isaac",
        "family_name": "Asimov",
        "date_of_birth": date(1920, 1, 2),
        "date_of_death": date(1992, 4, 6),
    },
    {"first_name": "Bob", "family_name": "Billings"},
    {"first_name": "Jim", "family_name": "Jones", "date_of_birth": date(1971, 12, 16)},
]

# (title, index into SAMPLE_AUTHORS, isbn, summary)
SAMPLE_BOOKS: list[tuple[str, int, str, str]] = [
    (
        "The Name of the Wind (The Kingkiller Chronicle, #1)",
        0,
        "9781473211896",
        "I have stolen princesses back from sleeping barrow kings.",
    ),
    (
        "The Wise Man's Fear (The Kingkiller Chronicle, #2)",
        0,
        "9788401352836",
        "Picking up the tale of Kvothe Kingkiller once again.",
    ),
    (
        "The Slow Regard of Silent Things (Kingkiller Chronicle)",
        0,
        "9780756411336",
        "Deep below the University, there is a dark place.",
    ),
    ("Apes and Angels", 1, "9780765379528", "Humankind headed out to the stars."),
    ("Death Wave", 1, "9780765379504", "The wave of deadly radiation spreads outward."),
    ("Test Book 1", 4, "ISBN111111", "Summary of test book 1"),
    ("Test Book 2", 4, "ISBN222222", "Summary of test book 2"),
]

# (index into SAMPLE_BOOKS, imprint, status)
SAMPLE_COPIES: list[tuple[int, str, BookInstanceStatusEnum]] = [
    (0, "London Gollancz, 2014.", BookInstanceStatusEnum.AVAILABLE),
    (1, "Gollancz, 2011.", BookInstanceStatusEnum.LOANED),
    (2, "Gollancz, 2015.", BookInstanceStatusEnum.MAINTENANCE),
    (3, "New York Tom Doherty Associates, 2016.", BookInstanceStatusEnum.AVAILABLE),
    (3, "New York Tom Doherty Associates, 2016.", BookInstanceStatusEnum.AVAILABLE),
    (3, "New York Tom Doherty Associates, 2016.", BookInstanceStatusEnum.AVAILABLE),
    (4, "New York, NY Tom Doherty Associates, LLC, 2015.", BookInstanceStatusEnum.AVAILABLE),
    (4, "New York, NY Tom Doherty Associates, LLC, 2015.", BookInstanceStatusEnum.MAINTENANCE),
    (4, "New York, NY Tom Doherty Associates, LLC, 2015.", BookInstanceStatusEnum.LOANED),
    (0, "Imprint XXX2", BookInstanceStatusEnum.RESERVED),
    (1, "Imprint XXX3", BookInstanceStatusEnum.AVAILABLE),
]


def seed_catalog(session: Session) -> int:
    """
    Insert the sample catalog.

    Args:
        session: Open session; the caller commits

    Returns:
        Number of records created
    """
    author_repo = AuthorRepository(session)
    book_repo = BookRepository(session)
    copy_repo = BookInstanceRepository(session)

    authors = [author_repo.create(AuthorCreateSchema(**data)) for data in SAMPLE_AUTHORS]
    logger.info("Created %d authors", len(authors))

    books = [
        book_repo.create(
            BookCreateSchema(
                title=title, author_id=authors[author_index].id, isbn=isbn, summary=summary
            )
        )
        for title, author_index, isbn, summary in SAMPLE_BOOKS
    ]
    logger.info("Created %d books", len(books))

    copies = [
        copy_repo.create(
            BookInstanceCreateSchema(
                book_id=books[book_index].id, imprint=imprint, status=status.value
            )
        )
        for book_index, imprint, status in SAMPLE_COPIES
    ]
    logger.info("Created %d book instances", len(copies))

    return len(authors) + len(books) + len(copies)
