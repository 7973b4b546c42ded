"""
Book repository implementation for the Local Library catalog.

Books reference their author by id. ``query_one(..., populate=["author"])``
loads the author in the same query and embeds it in the returned record,
which is what the book detail page reads the author's display name from.
"""

from collections.abc import Sequence

from pydantic import BaseModel

from ..database.schema import Book as BookDB
from ..models.author import Author as AuthorModel
from ..models.book import Book as BookModel
from .exceptions import RepositoryException
from .repository import BaseRepository


class BookCreateSchema(BaseModel):
    """Schema for creating a new book."""

    title: str | None = None
    author_id: str | None = None
    summary: str | None = None
    isbn: str | None = None


class BookRepository(BaseRepository[BookDB, BookModel]):
    """Repository for book data access."""

    @property
    def model_class(self):
        return BookDB

    @property
    def response_schema(self):
        return BookModel

    def _to_response_model(self, db_obj: BookDB, populate: Sequence[str] = ()) -> BookModel:
        """
        Convert a database book, embedding the author when it was populated.

        Args:
            db_obj: Database book object
            populate: relations the query resolved

        Returns:
            Book model whose ``author`` is an ``Author`` or the author id
        """
        author: AuthorModel | str | None = db_obj.author_id
        if "author" in populate and db_obj.author is not None:
            author = AuthorModel.model_validate(db_obj.author, from_attributes=True)

        return BookModel(
            id=db_obj.id,
            title=db_obj.title,
            author=author,
            summary=db_obj.summary,
            isbn=db_obj.isbn,
        )

    def create(self, data: BookCreateSchema) -> BookModel:
        """Create a new book."""
        try:
            db_book = BookDB(**data.model_dump())
            self.session.add(db_book)
            self.session.flush()
            return self._to_response_model(db_book)
        except Exception as e:
            self.session.rollback()
            raise RepositoryException(f"Failed to create book: {e!s}") from e
