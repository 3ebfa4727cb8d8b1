"""Accounts and bearer tokens."""

from __future__ import annotations

import logging

from fastapi import status
from sqlmodel import Session

from app.core.errors import ApiError, ConflictError, ValidationError
from app.core.security import (
    create_access_token,
    get_password_hash,
    verify_password,
    verify_token,
)
from app.models import User

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, session: Session) -> None:
        self.session = session

    def issue_token(self, user: User) -> str:
        return create_access_token(user.id, user.token_version)

    def sign_up(self, email: str, password: str) -> tuple[User, str]:
        email = email.lower()
        if User.find_by_email(self.session, email) is not None:
            raise ConflictError("Email is already registered")
        user = User(email=email, hashed_password=get_password_hash(password))
        user = user.save(self.session)
        logger.info(f"User registered: {user.id}")
        return user, self.issue_token(user)

    def sign_in(self, email: str, password: str) -> tuple[User, str]:
        user = User.find_by_email(self.session, email.lower())
        if (
            user is None
            or not user.hashed_password
            or not verify_password(password, user.hashed_password)
        ):
            raise ValidationError("Incorrect email or password")
        return user, self.issue_token(user)

    def sign_in_anonymously(self) -> tuple[User, str]:
        user = User(is_anonymous=True).save(self.session)
        logger.info(f"Anonymous user created: {user.id}")
        return user, self.issue_token(user)

    def sign_out(self, user: User) -> None:
        """Revoke every token issued to the user so far."""
        user.token_version += 1
        user.save(self.session)
        logger.info(f"User signed out: {user.id}")

    def get_by_id(self, user_id: str) -> User:
        return User.find_by_id(self.session, user_id)

    def authenticate(self, token: str) -> User:
        try:
            payload = verify_token(token, token_type="access")
        except ValueError:
            raise ApiError(status.HTTP_401_UNAUTHORIZED, "Invalid token") from None

        user_id = payload.get("sub")
        user = self.session.get(User, user_id) if user_id else None
        if user is None or payload.get("ver") != user.token_version:
            raise ApiError(status.HTTP_401_UNAUTHORIZED, "Invalid token")
        return user
