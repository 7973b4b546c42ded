"""
Local Library catalog models.

Pydantic records returned by the repositories:

- Author: people who wrote the books
- Book: catalog entries
- BookInstance: loanable copies of a book
"""

from .author import Author
from .book import Book
from .book_instance import BookInstance

__all__ = [
    "Author",
    "Book",
    "BookInstance",
]
