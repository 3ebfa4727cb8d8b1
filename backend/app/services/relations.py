"""Generic add/remove/lookup of composite-key relation records."""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.core.errors import NotFoundError, ValidationError, wrap_store_error
from app.models import RelationModel, get_collection_model, relation_key

logger = logging.getLogger(__name__)


class RelationOperationsService:
    """
    Relation records stored under `relation_key(from_id, to_id)`.

    Adding the same pair twice overwrites the first record (upsert, last
    write wins). Removal is a direct key delete.
    """

    def __init__(self, session: Session, collection_name: str) -> None:
        if not collection_name:
            raise ValueError("Collection name is required")
        model = get_collection_model(collection_name)
        if not issubclass(model, RelationModel):
            raise ValueError(f"{collection_name!r} is not a relation collection")
        self.session = session
        self.collection_name = collection_name
        self.model: type[RelationModel] = model

    def validate_exists(self, id: str, session: Optional[Session] = None) -> RelationModel:
        """Point lookup by key, optionally inside the caller's session/transaction."""
        record = (session or self.session).get(self.model, id)
        if record is None:
            raise NotFoundError(f"Relation {id} not found")
        return record

    def get_relation(self, from_id: str, to_id: str) -> Optional[RelationModel]:
        return self.session.get(self.model, relation_key(from_id, to_id))

    def exists(self, from_id: str, to_id: str) -> bool:
        return self.get_relation(from_id, to_id) is not None

    def add_relation(
        self, from_id: str, to_id: str, data: Optional[dict[str, Any]] = None
    ) -> RelationModel:
        if not from_id or not to_id:
            raise ValidationError("Both fromId and toId are required")

        record = self.model.for_pair(from_id, to_id, **(data or {}))
        try:
            record = self.session.merge(record)
            self.session.commit()
            self.session.refresh(record)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise wrap_store_error(exc, "Error creating relation") from exc
        logger.info(f"Relation stored in {self.collection_name}: {record.id}")
        return record

    def remove_relation(self, from_id: str, to_id: str) -> bool:
        record = self.validate_exists(relation_key(from_id, to_id))
        try:
            self.session.delete(record)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise wrap_store_error(exc, "Error removing relation") from exc
        logger.info(f"Relation removed from {self.collection_name}: {record.id}")
        return True

    def list_by_entity(self, entity_id: str) -> list[RelationModel]:
        statement = (
            select(self.model)
            .where(self.model.entity_id == entity_id)
            .order_by(self.model.added_at, self.model.id)
        )
        return self._fetch(statement)

    def list_by_member(self, member_id: str) -> list[RelationModel]:
        statement = (
            select(self.model)
            .where(self.model.member_id == member_id)
            .order_by(self.model.added_at, self.model.id)
        )
        return self._fetch(statement)

    def _fetch(self, statement) -> list[RelationModel]:
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as exc:
            raise wrap_store_error(exc, "Error reading relations") from exc
