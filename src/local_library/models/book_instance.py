"""BookInstance model: one loanable copy of a book."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class BookInstance(BaseModel):
    """Represents a physical copy of a catalog entry."""

    id: str = Field(..., description="Unique identifier for the copy")

    book: str = Field(..., description="Id of the book this is a copy of")

    imprint: str = Field(
        ...,
        description="Publisher and edition details",
        min_length=1,
        max_length=200,
        examples=["London Gollancz, 2014."],
    )

    status: str = Field(
        default="Maintenance",
        description="Availability status",
        max_length=20,
        examples=["Available", "Loaned"],
    )

    due_back: date | None = Field(
        None,
        description="Date a loaned copy is due back",
    )

    model_config = ConfigDict(from_attributes=True)
