"""
Book model for the Local Library catalog.

``author`` holds the author's id unless the query populated the relation, in
which case it holds the full ``Author`` record.
"""

from pydantic import BaseModel, ConfigDict, Field

from .author import Author


class Book(BaseModel):
    """Represents a catalog entry."""

    id: str = Field(
        ...,
        description="Unique identifier for the book",
        examples=["65a1f0c2b7e4d93a1c2f4e21"],
    )

    title: str | None = Field(
        None,
        description="Book title",
        max_length=500,
        examples=["The Name of the Wind (The Kingkiller Chronicle, #1)"],
    )

    author: Author | str | None = Field(
        None,
        description="Author id, or the author record when populated",
    )

    summary: str | None = Field(
        None,
        description="Short summary of the book",
        max_length=5000,
    )

    isbn: str | None = Field(
        None,
        description="ISBN as printed",
        max_length=20,
        examples=["9781473211896"],
    )

    @property
    def author_name(self) -> str | None:
        """Display name of a populated author, otherwise None."""
        if isinstance(self.author, Author):
            return self.author.name
        return None

    model_config = ConfigDict(from_attributes=True)
