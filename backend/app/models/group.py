from __future__ import annotations

from datetime import datetime

from sqlmodel import Field

from app.models.base import DocumentModel, UtcTimestamp, utcnow


class Group(DocumentModel, table=True):
    """Ministry, cell or any other standing group of members."""

    __tablename__ = "groups"
    __entity_name__ = "Group"

    Nombre: str = Field(default="", max_length=100, index=True)
    Descripcion: str = Field(default="", max_length=500)
    TipoGrupo: str = Field(default="", max_length=32)
    Estado: str = Field(default="", max_length=32)
    FechaCreacion: datetime = Field(default_factory=utcnow, sa_type=UtcTimestamp, nullable=False)
