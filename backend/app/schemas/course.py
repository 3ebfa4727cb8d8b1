from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import EntityInput, PartialUpdate, UtcDatetime

NivelChoice = Literal["", "Basico", "Intermedio", "Avanzado"]
EstadoCursoChoice = Literal["", "Activo", "Inactivo", "Pendiente"]


class CourseCreate(EntityInput):
    Nombre: str = Field(min_length=3, max_length=100)
    Descripcion: str = Field(min_length=1, max_length=500)
    Duracion: Optional[int] = Field(default=None, ge=0)
    FechaInicio: Optional[UtcDatetime] = None
    Nivel: NivelChoice = ""
    Estado: EstadoCursoChoice = ""


class CourseUpdate(PartialUpdate):
    Nombre: Optional[str] = Field(default=None, min_length=3, max_length=100)
    Descripcion: Optional[str] = Field(default=None, min_length=1, max_length=500)
    Duracion: Optional[int] = Field(default=None, ge=0)
    FechaInicio: Optional[UtcDatetime] = None
    Nivel: Optional[NivelChoice] = None
    Estado: Optional[EstadoCursoChoice] = None


class CourseRead(BaseModel):
    id: str
    Nombre: str
    Descripcion: str
    Duracion: Optional[int] = None
    FechaInicio: Optional[datetime] = None
    Nivel: str
    Estado: str
    FechaCreacion: datetime

    model_config = ConfigDict(from_attributes=True)


class CourseReadWithRole(CourseRead):
    role: Optional[str] = None
