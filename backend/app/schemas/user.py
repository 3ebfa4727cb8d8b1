from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCredentials(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


class UserCreate(UserCredentials):
    password: str = Field(min_length=6, max_length=128)


class UserRead(BaseModel):
    uid: str = Field(validation_alias="id")
    email: Optional[str] = None
    is_anonymous: bool = False
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AuthSession(BaseModel):
    user: UserRead
    access_token: str
    token_type: str = "bearer"
