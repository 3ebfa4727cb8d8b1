"""Generic CRUD operations over one collection."""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlmodel import Session

from app.models import DocumentModel, Page, get_collection_model

logger = logging.getLogger(__name__)


class BaseOperationsService:
    """
    Paginated listing, prefix search and CRUD for the collection named at
    construction time.

    Updates are partial merges: only the supplied fields are written, then
    the full record is re-read and returned.
    """

    default_order_field = "Nombre"

    def __init__(self, session: Session, collection_name: str) -> None:
        if not collection_name:
            raise ValueError("Collection name is required")
        self.session = session
        self.collection_name = collection_name
        self.model: type[DocumentModel] = get_collection_model(collection_name)

    @property
    def entity_name(self) -> str:
        return self.model.__entity_name__

    def get_all(
        self,
        start_after_id: Optional[str] = None,
        page_size: int = 10,
        order_by_field: Optional[str] = None,
    ) -> Page:
        return self.model.find_all(
            self.session,
            start_after=start_after_id,
            page_size=page_size,
            order_by=order_by_field or self.default_order_field,
        )

    def get_by_id(self, id: str) -> DocumentModel:
        return self.model.find_by_id(self.session, id)

    def create(self, data: dict[str, Any]) -> str:
        record = self.model()
        record.apply_changes(data)
        record = record.save(self.session)
        logger.info(f"{self.entity_name} created: id={record.id}")
        return record.id

    def update(self, id: str, data: dict[str, Any]) -> DocumentModel:
        record = self.get_by_id(id)
        record.apply_changes(data)
        record.save(self.session)
        logger.info(f"{self.entity_name} updated: id={id}, fields={sorted(data)}")
        return self.get_by_id(id)

    def delete(self, id: str) -> bool:
        self.model(id=id).delete(self.session)
        logger.info(f"{self.entity_name} deleted: id={id}")
        return True

    def search(
        self,
        search_string: str,
        start_after_id: Optional[str] = None,
        page_size: int = 10,
        search_field: Optional[str] = None,
    ) -> Page:
        return self.model.search(
            self.session,
            search_string,
            start_after=start_after_id,
            page_size=page_size,
            field=search_field or self.default_order_field,
        )
