from __future__ import annotations

from datetime import datetime

from sqlmodel import Field

from app.models.base import DocumentModel, UtcTimestamp, utcnow


class Event(DocumentModel, table=True):
    """Community event."""

    __tablename__ = "events"
    __entity_name__ = "Event"

    Nombre: str = Field(default="", max_length=150, index=True)
    Descripcion: str = Field(default="", max_length=1000)
    Fecha: datetime = Field(default_factory=utcnow, sa_type=UtcTimestamp, nullable=False)
    Estado: str = Field(default="", max_length=32)
    Lugar: str = Field(default="", max_length=200)
