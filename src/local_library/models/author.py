"""
Author model for the Local Library catalog.

Authors are read by the author list page and embedded in book records when a
query populates the ``author`` relation.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class Author(BaseModel):
    """
    Represents an author in the library catalog.

    ``name`` and the lifespan years are derived from the stored fields and are
    what the catalog pages display.
    """

    id: str = Field(
        ...,
        description="Unique identifier for the author",
        examples=["65a1f0c2b7e4d93a1c2f4e10"],
    )

    first_name: str = Field(
        default="",
        description="Given name; may be empty",
        max_length=100,
        examples=["Jane", "Rabindranath"],
    )

    family_name: str = Field(
        ...,
        description="Family name, used for sorting",
        max_length=100,
        examples=["Austen", "Tagore"],
    )

    date_of_birth: date | None = Field(
        None,
        description="Author's date of birth",
        examples=["1775-12-16"],
    )

    date_of_death: date | None = Field(
        None,
        description="Author's date of death (if applicable)",
        examples=["1817-07-18"],
    )

    @field_validator("first_name", mode="before")
    @classmethod
    def coerce_missing_first_name(cls, v: str | None) -> str:
        return v or ""

    @field_validator("date_of_death")
    @classmethod
    def validate_date_of_death(cls, v: date | None, info: ValidationInfo) -> date | None:
        """Ensure death date is not before birth date."""
        if v is None:
            return v

        birth = info.data.get("date_of_birth")
        if birth and v < birth:
            raise ValueError("Death date must be after birth date")

        return v

    @property
    def name(self) -> str:
        """Display name, ``"family, first"``; empty unless both parts are set."""
        if self.first_name and self.family_name:
            return f"{self.family_name}, {self.first_name}"
        return ""

    @property
    def birth_year(self) -> str:
        return str(self.date_of_birth.year) if self.date_of_birth else ""

    @property
    def death_year(self) -> str:
        return str(self.date_of_death.year) if self.date_of_death else ""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "65a1f0c2b7e4d93a1c2f4e10",
                "first_name": "Jane",
                "family_name": "Austen",
                "date_of_birth": "1775-12-16",
                "date_of_death": "1817-07-18",
            }
        },
    )
