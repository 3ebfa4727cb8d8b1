from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field

from app.schemas.common import EntityInput, PartialUpdate

TipoMiembroChoice = Literal["Miembro", "Visitante", "Bautizado"]
EstadoCivilChoice = Literal["", "Soltero", "Casado", "Divorciado", "Viudo", "Union", "Separado"]
# Empty string means "no email on file"
EmailOrBlank = Annotated[Union[EmailStr, Literal[""]], AfterValidator(str.lower)]


class MemberCreate(EntityInput):
    Nombre: str = Field(min_length=3, max_length=50)
    Email: EmailOrBlank = ""
    TipoMiembro: TipoMiembroChoice
    EstadoCivil: EstadoCivilChoice = ""
    Oficio: str = Field(default="", max_length=100)


class MemberUpdate(PartialUpdate):
    Nombre: Optional[str] = Field(default=None, min_length=3, max_length=50)
    Email: Optional[EmailOrBlank] = None
    TipoMiembro: Optional[TipoMiembroChoice] = None
    EstadoCivil: Optional[EstadoCivilChoice] = None
    Oficio: Optional[str] = Field(default=None, max_length=100)


class MemberRead(BaseModel):
    id: str
    Nombre: str
    Email: str
    EstadoCivil: str
    TipoMiembro: str
    Oficio: str
    FechaRegistro: datetime

    model_config = ConfigDict(from_attributes=True)


class MemberSummary(BaseModel):
    """Fields shown when picking members to assign."""

    id: str
    Nombre: str
    TipoMiembro: str
    Email: str

    model_config = ConfigDict(from_attributes=True)
