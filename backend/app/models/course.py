from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from app.models.base import DocumentModel, UtcTimestamp, utcnow


class Course(DocumentModel, table=True):
    """Teaching course members can enroll in."""

    __tablename__ = "courses"
    __entity_name__ = "Course"

    Nombre: str = Field(default="", max_length=100, index=True)
    Descripcion: str = Field(default="", max_length=500)
    Duracion: Optional[int] = Field(default=None, ge=0)
    FechaInicio: Optional[datetime] = Field(default=None, sa_type=UtcTimestamp, nullable=True)
    Nivel: str = Field(default="", max_length=32)
    Estado: str = Field(default="", max_length=32)
    FechaCreacion: datetime = Field(default_factory=utcnow, sa_type=UtcTimestamp, nullable=False)
