from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import EntityInput, PartialUpdate

TipoGrupoChoice = Literal["", "Ministerio", "Celula", "Otro"]
EstadoGrupoChoice = Literal["", "Activo", "Inactivo"]


class GroupCreate(EntityInput):
    Nombre: str = Field(min_length=3, max_length=100)
    Descripcion: str = Field(default="", max_length=500)
    TipoGrupo: TipoGrupoChoice = ""
    Estado: EstadoGrupoChoice = ""


class GroupUpdate(PartialUpdate):
    Nombre: Optional[str] = Field(default=None, min_length=3, max_length=100)
    Descripcion: Optional[str] = Field(default=None, max_length=500)
    TipoGrupo: Optional[TipoGrupoChoice] = None
    Estado: Optional[EstadoGrupoChoice] = None


class GroupRead(BaseModel):
    id: str
    Nombre: str
    Descripcion: str
    TipoGrupo: str
    Estado: str
    FechaCreacion: datetime

    model_config = ConfigDict(from_attributes=True)


class GroupReadWithRole(GroupRead):
    role: Optional[str] = None
