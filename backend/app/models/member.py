from __future__ import annotations

from datetime import datetime

from sqlmodel import Field

from app.models.base import DocumentModel, UtcTimestamp, utcnow


class Member(DocumentModel, table=True):
    """Church member or visitor."""

    __tablename__ = "members"
    __entity_name__ = "Member"
    __searchable_fields__ = ("Nombre", "Email")

    Nombre: str = Field(default="", max_length=50, index=True)
    Email: str = Field(default="", max_length=255)
    EstadoCivil: str = Field(default="", max_length=32)
    TipoMiembro: str = Field(default="Visitante", max_length=32)
    Oficio: str = Field(default="", max_length=100)
    FechaRegistro: datetime = Field(default_factory=utcnow, sa_type=UtcTimestamp, nullable=False)
