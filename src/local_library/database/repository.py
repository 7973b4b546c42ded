"""
Repository pattern implementation for the Local Library catalog.

Repositories are the only code that touches SQLAlchemy. Page handlers receive
them as arguments and only see Pydantic records (or plain dicts for projected
queries), which keeps the handlers testable against stubs.

The query vocabulary mirrors a document-store mapper:

- filters are dicts of ``field -> value`` (``_id`` is the primary key, a
  relation name such as ``author`` matches its foreign key)
- sorts are ``[(field, direction)]`` pairs, direction being ``ascending``,
  ``asc``, ``1``, ``descending``, ``desc`` or ``-1``
- projections are space-separated field names (``"imprint status"``)
- ``populate`` names relations to resolve into embedded records
"""

import enum
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, asc, desc, select
from sqlalchemy.orm import RelationshipProperty, Session, joinedload

from .exceptions import QueryError
from .schema import Base
from .session import safe_query

ModelType = TypeVar("ModelType", bound=Base)
ResponseSchemaType = TypeVar("ResponseSchemaType", bound=BaseModel)

SortSpec = Sequence[tuple[str, str | int]]


class SortDirection(str, enum.Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def parse(cls, value: str | int) -> "SortDirection":
        """Accept the direction spellings a document mapper accepts."""
        normalized = str(value).strip().lower()
        if normalized in {"ascending", "asc", "1"}:
            return cls.ASCENDING
        if normalized in {"descending", "desc", "-1"}:
            return cls.DESCENDING
        raise QueryError(f"Invalid sort direction: {value!r}")


def parse_projection(fields: str | Iterable[str] | None) -> list[str] | None:
    """Split a projection such as ``"imprint status"`` into field names."""
    if fields is None:
        return None
    names = fields.split() if isinstance(fields, str) else [str(f) for f in fields]
    if not names:
        return None
    return names


class BaseRepository(ABC, Generic[ModelType, ResponseSchemaType]):
    """
    Abstract base repository providing the shared read operations.

    Subclasses name their SQLAlchemy model and Pydantic record, and override
    ``_to_response_model`` when a record needs relations resolved by hand.
    """

    def __init__(self, session: Session):
        """Initialize repository with database session."""
        self.session = session

    @property
    @abstractmethod
    def model_class(self) -> type[ModelType]:
        """Return the SQLAlchemy model class."""

    @property
    @abstractmethod
    def response_schema(self) -> type[ResponseSchemaType]:
        """Return the Pydantic response schema."""

    def _to_response_model(
        self,
        db_obj: ModelType,
        populate: Sequence[str] = (),  # noqa: ARG002
    ) -> ResponseSchemaType:
        """Convert database model to Pydantic response model."""
        return self.response_schema.model_validate(db_obj, from_attributes=True)

    # === Query building ===

    def _relationship(self, name: str) -> RelationshipProperty:
        relationships = self.model_class.__mapper__.relationships
        if name not in relationships:
            raise QueryError(f"{self.model_class.__name__} has no relation named {name!r}")
        return relationships[name]

    def _column(self, field: str):
        """Resolve a filter or sort field to a column attribute."""
        if field == "_id":
            field = "id"

        mapper = self.model_class.__mapper__
        if field in mapper.relationships:
            # A relation compared to an id means its (single) foreign key column
            local_columns = list(mapper.relationships[field].local_columns)
            return getattr(self.model_class, local_columns[0].key)
        if field in mapper.columns:
            return getattr(self.model_class, field)

        raise QueryError(f"{self.model_class.__name__} has no field named {field!r}")

    def _apply_filters(self, query: Select, filters: Mapping[str, Any] | None) -> Select:
        for field, value in (filters or {}).items():
            query = query.where(self._column(field) == value)
        return query

    def _apply_sort(self, query: Select, sort: SortSpec | None) -> Select:
        for field, direction in sort or ():
            column = self._column(field)
            if SortDirection.parse(direction) is SortDirection.DESCENDING:
                query = query.order_by(desc(column))
            else:
                query = query.order_by(asc(column))
        return query

    def _project(self, record: ResponseSchemaType, fields: list[str] | None) -> dict[str, Any]:
        data = record.model_dump(mode="json")
        if fields is None:
            return data

        unknown = [f for f in fields if f not in data]
        if unknown:
            raise QueryError(
                f"{self.model_class.__name__} has no field(s) named {', '.join(unknown)}"
            )
        return {f: data[f] for f in fields}

    # === Read operations ===

    def query_all(self, sort: SortSpec | None = None) -> list[ResponseSchemaType]:
        """
        Get every record, optionally sorted.

        Args:
            sort: ``[(field, direction)]`` pairs applied in order

        Raises:
            QueryError: On an unknown field/direction or a database failure
        """
        query = self._apply_sort(select(self.model_class), sort)
        results = safe_query(
            self.session,
            lambda s: s.execute(query).scalars().all(),
            f"Failed to list {self.model_class.__name__} records",
        )
        return [self._to_response_model(item) for item in results]

    def query_one(
        self,
        filters: Mapping[str, Any],
        populate: Sequence[str] = (),
    ) -> ResponseSchemaType | None:
        """
        Get the first record matching ``filters``.

        Args:
            filters: ``field -> value`` equality filters
            populate: relation names to resolve into embedded records

        Returns:
            The record, or None if nothing matches

        Raises:
            QueryError: On an unknown field/relation or a database failure
        """
        query = self._apply_filters(select(self.model_class), filters)
        for name in populate:
            query = query.options(joinedload(self._relationship(name).class_attribute))

        db_obj = safe_query(
            self.session,
            lambda s: s.execute(query.limit(1)).unique().scalar_one_or_none(),
            f"Failed to get {self.model_class.__name__}",
        )
        if db_obj is None:
            return None

        return self._to_response_model(db_obj, populate)

    def query_where(
        self,
        filters: Mapping[str, Any],
        projection: str | Iterable[str] | None = None,
        sort: SortSpec | None = None,
    ) -> list[dict[str, Any]]:
        """
        Get every record matching ``filters`` as JSON-ready dicts.

        Args:
            filters: ``field -> value`` equality filters
            projection: projection, e.g. ``"imprint status"``; all fields when None
            sort: ``[(field, direction)]`` pairs applied in order

        Raises:
            QueryError: On an unknown field/direction or a database failure
        """
        fields = parse_projection(projection)
        query = self._apply_sort(self._apply_filters(select(self.model_class), filters), sort)

        results = safe_query(
            self.session,
            lambda s: s.execute(query).scalars().all(),
            f"Failed to find {self.model_class.__name__} records",
        )
        return [self._project(self._to_response_model(item), fields) for item in results]
