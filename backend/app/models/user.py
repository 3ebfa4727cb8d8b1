from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, Session, select

from app.models.base import DocumentModel, UtcTimestamp, utcnow


class User(DocumentModel, table=True):
    """Account of the identity provider; anonymous accounts have no email."""

    __tablename__ = "users"
    __entity_name__ = "User"
    __searchable_fields__ = ("email",)

    email: Optional[str] = Field(
        default=None, index=True, unique=True, max_length=255, nullable=True
    )
    hashed_password: Optional[str] = Field(default=None, max_length=255)
    is_anonymous: bool = Field(default=False)
    # Bumped on sign-out; tokens carrying an older version are rejected
    token_version: int = Field(default=0, nullable=False)
    created_at: datetime = Field(default_factory=utcnow, sa_type=UtcTimestamp, nullable=False)

    @classmethod
    def find_by_email(cls, session: Session, email: str) -> Optional["User"]:
        return session.exec(select(cls).where(cls.email == email)).one_or_none()
