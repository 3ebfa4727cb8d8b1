"""
Join records between a Member and one entity.

The storage key is derived from both ids, so existence checks, upserts and
deletes are point lookups and each (entity, member) pair has one record.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlmodel import Field, SQLModel

from app.models.base import UtcTimestamp, utcnow

KEY_SEPARATOR = ":"


def relation_key(owner_id: str, target_id: str) -> str:
    return f"{owner_id}{KEY_SEPARATOR}{target_id}"


def split_relation_key(key: str) -> tuple[str, str]:
    owner_id, sep, target_id = key.partition(KEY_SEPARATOR)
    if not sep:
        raise ValueError(f"Not a relation key: {key!r}")
    return owner_id, target_id


class RelationModel(SQLModel):
    """Member relation with an optional role and a snapshot of the member name."""

    id: str = Field(primary_key=True, max_length=130)
    entity_id: str = Field(index=True, max_length=64)
    member_id: str = Field(index=True, max_length=64)
    role: Optional[str] = Field(default=None, max_length=64)
    member_name: Optional[str] = Field(default=None, max_length=255)
    added_at: datetime = Field(default_factory=utcnow, sa_type=UtcTimestamp, nullable=False)

    @classmethod
    def for_pair(cls, entity_id: str, member_id: str, **data: Any):
        return cls(
            id=relation_key(entity_id, member_id),
            entity_id=entity_id,
            member_id=member_id,
            **data,
        )
