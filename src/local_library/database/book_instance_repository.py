"""
Book instance repository implementation for the Local Library catalog.

Copies are usually read through ``query_where({"book": book_id},
projection="imprint status")``, which returns plain dicts ready to embed in a
response payload.
"""

from collections.abc import Sequence
from datetime import date

from pydantic import BaseModel

from ..database.schema import BookInstance as BookInstanceDB
from ..database.schema import BookInstanceStatusEnum
from ..models.book_instance import BookInstance as BookInstanceModel
from .exceptions import RepositoryException
from .repository import BaseRepository


class BookInstanceCreateSchema(BaseModel):
    """Schema for creating a new copy."""

    book_id: str
    imprint: str
    status: str = BookInstanceStatusEnum.MAINTENANCE.value
    due_back: date | None = None


class BookInstanceRepository(BaseRepository[BookInstanceDB, BookInstanceModel]):
    """Repository for copy data access."""

    @property
    def model_class(self):
        return BookInstanceDB

    @property
    def response_schema(self):
        return BookInstanceModel

    def _to_response_model(
        self,
        db_obj: BookInstanceDB,
        populate: Sequence[str] = (),  # noqa: ARG002
    ) -> BookInstanceModel:
        return BookInstanceModel(
            id=db_obj.id,
            book=db_obj.book_id,
            imprint=db_obj.imprint,
            status=db_obj.status,
            due_back=db_obj.due_back,
        )

    def create(self, data: BookInstanceCreateSchema) -> BookInstanceModel:
        """Create a new copy of an existing book."""
        try:
            db_instance = BookInstanceDB(**data.model_dump())
            self.session.add(db_instance)
            self.session.flush()
            return self._to_response_model(db_instance)
        except Exception as e:
            self.session.rollback()
            raise RepositoryException(f"Failed to create book instance: {e!s}") from e
