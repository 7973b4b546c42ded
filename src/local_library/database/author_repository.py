"""
Author repository implementation for the Local Library catalog.

The author list page only needs ``query_all`` sorted by family name; the
create method exists for seeding and tests.
"""

from datetime import date

from pydantic import BaseModel

from ..database.schema import Author as AuthorDB
from ..models.author import Author as AuthorModel
from .exceptions import RepositoryException
from .repository import BaseRepository


class AuthorCreateSchema(BaseModel):
    """Schema for creating a new author."""

    first_name: str = ""
    family_name: str
    date_of_birth: date | None = None
    date_of_death: date | None = None


class AuthorRepository(BaseRepository[AuthorDB, AuthorModel]):
    """Repository for author data access."""

    @property
    def model_class(self):
        return AuthorDB

    @property
    def response_schema(self):
        return AuthorModel

    def create(self, data: AuthorCreateSchema) -> AuthorModel:
        """
        Create a new author.

        Args:
            data: Author creation data

        Returns:
            Created author model
        """
        try:
            db_author = AuthorDB(**data.model_dump())
            self.session.add(db_author)
            self.session.flush()
            return self._to_response_model(db_author)
        except Exception as e:
            self.session.rollback()
            raise RepositoryException(f"Failed to create author: {e!s}") from e
