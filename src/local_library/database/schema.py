"""
SQLAlchemy database schema for the Local Library catalog.

Three tables back the catalog pages:

- ``authors``: people who wrote the books
- ``books``: catalog entries, each referencing one author
- ``book_instances``: loanable copies of a book

Primary keys are 24-character hex strings, the same shape as document-store
object ids, so identifiers in URLs look the same whichever store produced them.
"""

import enum
import secrets

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship, validates
from sqlalchemy.sql import func

Base = declarative_base()


def new_object_id() -> str:
    """Generate a 24-character hex identifier."""
    return secrets.token_hex(12)


class BookInstanceStatusEnum(str, enum.Enum):
    """Known copy statuses. The column itself accepts any string."""

    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"


class Author(Base):
    """
    Authors table.

    Relationships: one-to-many with books.
    """

    __tablename__ = "authors"

    id = Column(String(24), primary_key=True, default=new_object_id)
    first_name = Column(String(100), nullable=False, default="")
    family_name = Column(String(100), nullable=False, index=True)
    date_of_birth = Column(Date, nullable=True)
    date_of_death = Column(Date, nullable=True)

    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=False, default=func.now(), onupdate=func.now())

    books = relationship("Book", back_populates="author", cascade="all, delete-orphan")

    __table_args__ = (Index("idx_author_family_name", "family_name"),)

    @validates("date_of_death")
    def validate_date_of_death(self, key, value):  # noqa: ARG002
        """Ensure death date is after birth date."""
        if value and self.date_of_birth and value < self.date_of_birth:
            raise ValueError("Death date cannot be before birth date")
        return value


class Book(Base):
    """
    Books table.

    ``author`` is the relation resolved when a query asks to populate it.
    """

    __tablename__ = "books"

    id = Column(String(24), primary_key=True, default=new_object_id)
    title = Column(String(500), nullable=True, index=True)
    author_id = Column(String(24), ForeignKey("authors.id"), nullable=True)
    summary = Column(Text, nullable=True)
    isbn = Column(String(20), nullable=True)

    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=True, default=func.now(), onupdate=func.now())

    author = relationship("Author", back_populates="books")
    instances = relationship("BookInstance", back_populates="book", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_book_title", "title"),
        Index("idx_book_author", "author_id"),
    )


class BookInstance(Base):
    """Book instances table: one row per physical copy."""

    __tablename__ = "book_instances"

    id = Column(String(24), primary_key=True, default=new_object_id)
    book_id = Column(String(24), ForeignKey("books.id"), nullable=False)
    imprint = Column(String(200), nullable=False)
    status = Column(String(20), nullable=False, default=BookInstanceStatusEnum.MAINTENANCE.value)
    due_back = Column(Date, nullable=True)

    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=False, default=func.now(), onupdate=func.now())

    book = relationship("Book", back_populates="instances")

    __table_args__ = (
        Index("idx_book_instance_book", "book_id"),
        Index("idx_book_instance_status", "status"),
        CheckConstraint("length(imprint) > 0", name="check_imprint_not_empty"),
    )
