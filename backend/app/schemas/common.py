from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Generic, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from app.models.base import as_utc

T = TypeVar("T")

# Ids are assigned by the store and are always alphanumeric
ID_PATTERN = r"^[A-Za-z0-9]+$"

# Offsets are converted to UTC; a naive value is read as UTC
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class CursorPage(BaseModel, Generic[T]):
    """One page of a cursor-paginated listing."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[T] = Field(description="Records on this page")
    next_start_after: Optional[str] = Field(
        default=None,
        alias="nextStartAfter",
        description="Pass as startAfter to fetch the next page",
    )
    has_more: bool = Field(
        default=False,
        alias="hasMore",
        description="False once a page comes back shorter than pageSize",
    )


class EntityInput(BaseModel):
    """Request body shared settings: strings are trimmed, unknown keys ignored."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    def to_store(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class PartialUpdate(EntityInput):
    """Update bodies must carry at least one known, non-null field."""

    @model_validator(mode="after")
    def check_has_update_data(self):
        if not any(getattr(self, name) is not None for name in self.model_fields_set):
            raise ValueError("No valid data provided for update")
        return self


class MessageResponse(BaseModel):
    message: str


class MemberRelationCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    member_id: str = Field(alias="memberId", min_length=1, pattern=ID_PATTERN)
    role: Optional[str] = Field(default=None, max_length=64)


class RelationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    entity_id: str = Field(alias="entityId")
    member_id: str = Field(alias="memberId")
    role: Optional[str] = None
    member_name: Optional[str] = Field(default=None, alias="memberName")
    added_at: datetime = Field(alias="addedAt")


class RelationEnvelope(BaseModel):
    message: str
    result: RelationRead


class MemberRelationRead(BaseModel):
    """A related member with its display fields and the stored role."""

    model_config = ConfigDict(populate_by_name=True)

    member_id: str = Field(alias="memberId")
    Nombre: str
    TipoMiembro: str
    role: Optional[str] = None
    added_at: Optional[datetime] = Field(default=None, alias="addedAt")
