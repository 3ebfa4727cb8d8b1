"""
Base record type for top-level collections.

Every collection is a table keyed by an opaque string id that the store
assigns on first save. Listing and search follow document-store semantics:
ordered by one field, limited to a page, continued after a cursor record.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar
from uuid import uuid4

from sqlalchemy import DateTime, and_, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.types import TypeDecorator
from sqlmodel import Field, Session, SQLModel, select

from app.core.errors import NotFoundError, ValidationError, wrap_store_error

# Upper bound of a prefix range. Sorts after every BMP character under the
# binary string collation the store uses, so [s, s + sentinel) matches "s*".
PREFIX_SENTINEL = "\uffff"

T = TypeVar("T", bound="DocumentModel")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Convert to aware UTC; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UtcTimestamp(TypeDecorator):
    """Stored as naive UTC, always read back as aware UTC."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return as_utc(value).replace(tzinfo=None)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return as_utc(value)


def new_document_id() -> str:
    return uuid4().hex


@dataclass
class Page(Generic[T]):
    """One page of records plus the last raw record, used as the next cursor."""

    items: list[T] = field(default_factory=list)
    last_doc: Optional[T] = None
    has_more: bool = False

    @classmethod
    def from_items(cls, items: list[T], page_size: int) -> "Page[T]":
        return cls(
            items=items,
            last_doc=items[-1] if items else None,
            # A short page is the only reliable sign the listing is exhausted
            has_more=len(items) >= page_size,
        )


class DocumentModel(SQLModel):
    """Shared id column and persistence lifecycle of entity records."""

    __entity_name__ = "Document"
    __searchable_fields__ = ("Nombre",)

    id: Optional[str] = Field(default=None, primary_key=True, max_length=64)

    # -- instance lifecycle -------------------------------------------------

    def save(self: T, session: Session) -> T:
        """Insert when the record has no id yet, otherwise write its current state."""
        record = self
        try:
            if record.id is None:
                record.id = new_document_id()
                session.add(record)
            else:
                record = session.merge(record)
            session.commit()
            session.refresh(record)
        except SQLAlchemyError as exc:
            session.rollback()
            raise wrap_store_error(exc, f"Error saving {self.__entity_name__}") from exc
        self.id = record.id
        return record

    def delete(self, session: Session) -> None:
        if not self.id:
            raise ValidationError(f"{self.__entity_name__} id not specified")
        try:
            stored = session.get(type(self), self.id)
            if stored is not None:
                session.delete(stored)
                session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise wrap_store_error(
                exc, f"Error deleting {self.__entity_name__}"
            ) from exc

    def apply_changes(self, data: dict[str, Any]) -> None:
        """Partial merge: only the supplied known fields are written."""
        for name, value in data.items():
            if name == "id" or name not in type(self).model_fields:
                continue
            setattr(self, name, value)

    # -- queries --------------------------------------------------------------

    @classmethod
    def find_by_id(cls: type[T], session: Session, id: str) -> T:
        try:
            record = session.get(cls, id)
        except SQLAlchemyError as exc:
            raise wrap_store_error(
                exc, f"Error fetching {cls.__entity_name__}"
            ) from exc
        if record is None:
            raise NotFoundError(f"{cls.__entity_name__} not found")
        return record

    @classmethod
    def find_all(
        cls: type[T],
        session: Session,
        start_after: str | None = None,
        page_size: int = 10,
        order_by: str = "Nombre",
    ) -> Page[T]:
        try:
            statement = cls._paged(
                session, select(cls), order_by, start_after, page_size
            )
            items = list(session.exec(statement).all())
        except SQLAlchemyError as exc:
            raise wrap_store_error(
                exc, f"Error listing {cls.__entity_name__} records"
            ) from exc
        return Page.from_items(items, page_size)

    @classmethod
    def search(
        cls: type[T],
        session: Session,
        search_string: str,
        start_after: str | None = None,
        page_size: int = 10,
        field: str = "Nombre",
    ) -> Page[T]:
        if field not in cls.__searchable_fields__:
            raise ValidationError(
                f"Search on '{field}' is not supported for {cls.__entity_name__}"
            )
        column = cls._column(field)
        statement = select(cls).where(
            column >= search_string,
            column < search_string + PREFIX_SENTINEL,
        )
        try:
            statement = cls._paged(session, statement, field, start_after, page_size)
            items = list(session.exec(statement).all())
        except SQLAlchemyError as exc:
            raise wrap_store_error(
                exc, f"Error searching {cls.__entity_name__} records"
            ) from exc
        return Page.from_items(items, page_size)

    @classmethod
    def _column(cls, name: str):
        if name not in cls.model_fields:
            raise ValidationError(
                f"Unknown field '{name}' for {cls.__entity_name__}"
            )
        return getattr(cls, name)

    @classmethod
    def _paged(cls, session: Session, statement, field: str, start_after, page_size):
        """Order by `field` then id, limit, and continue after the cursor record if it exists."""
        column = cls._column(field)
        statement = statement.order_by(column.asc().nulls_first(), cls.id)

        if start_after:
            cursor = session.get(cls, start_after)
            # An unknown cursor restarts from the first page
            if cursor is not None:
                value = getattr(cursor, field)
                if value is None:
                    after = or_(
                        column.is_not(None),
                        and_(column.is_(None), cls.id > cursor.id),
                    )
                else:
                    after = or_(
                        column > value,
                        and_(column == value, cls.id > cursor.id),
                    )
                statement = statement.where(after)

        return statement.limit(page_size)
