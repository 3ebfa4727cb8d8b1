from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.schemas.common import EntityInput, PartialUpdate, UtcDatetime

EstadoEventoChoice = Literal["", "Programado", "Realizado", "Cancelado"]

# Older clients send the date as FechaEvento
_fecha = AliasChoices("Fecha", "FechaEvento")


class EventCreate(EntityInput):
    Nombre: str = Field(min_length=3, max_length=150)
    Descripcion: str = Field(default="", max_length=1000)
    Fecha: Optional[UtcDatetime] = Field(default=None, validation_alias=_fecha)
    Lugar: str = Field(default="", max_length=200)
    Estado: EstadoEventoChoice = ""


class EventUpdate(PartialUpdate):
    Nombre: Optional[str] = Field(default=None, min_length=3, max_length=150)
    Descripcion: Optional[str] = Field(default=None, max_length=1000)
    Fecha: Optional[UtcDatetime] = Field(default=None, validation_alias=_fecha)
    Lugar: Optional[str] = Field(default=None, max_length=200)
    Estado: Optional[EstadoEventoChoice] = None


class EventRead(BaseModel):
    id: str
    Nombre: str
    Descripcion: str
    Fecha: datetime
    Estado: str
    Lugar: str

    model_config = ConfigDict(from_attributes=True)


class EventReadWithRole(EventRead):
    role: Optional[str] = None
