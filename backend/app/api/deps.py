from __future__ import annotations

from typing import Annotated, Optional

from fastapi import Depends, status
from fastapi.security import OAuth2PasswordBearer

from app.core.config import settings
from app.core.errors import ApiError
from app.db import SessionDep
from app.models import User
from app.services import (
    CourseService,
    EventService,
    GroupService,
    MemberService,
    UserService,
)

oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_PREFIX}/auth/signin", auto_error=False
)


def get_member_service(session: SessionDep) -> MemberService:
    return MemberService(session)


def get_group_service(session: SessionDep) -> GroupService:
    return GroupService(session)


def get_event_service(session: SessionDep) -> EventService:
    return EventService(session)


def get_course_service(session: SessionDep) -> CourseService:
    return CourseService(session)


def get_user_service(session: SessionDep) -> UserService:
    return UserService(session)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]


def get_current_user(
    users: UserServiceDep,
    token: Optional[str] = Depends(oauth2_scheme),
) -> User:
    """
    Resolve the bearer token to its user. Failures are 401s with the
    uniform `{"error": ...}` body, not a `{"message": ...}` body.
    """
    if not token:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "No token provided")
    return users.authenticate(token)


CurrentUser = Annotated[User, Depends(get_current_user)]
