from .common import (
    CursorPage,
    MemberRelationCreate,
    MemberRelationRead,
    MessageResponse,
    RelationEnvelope,
    RelationRead,
)
from .course import CourseCreate, CourseRead, CourseReadWithRole, CourseUpdate
from .event import EventCreate, EventRead, EventReadWithRole, EventUpdate
from .group import GroupCreate, GroupRead, GroupReadWithRole, GroupUpdate
from .member import MemberCreate, MemberRead, MemberSummary, MemberUpdate
from .user import AuthSession, UserCreate, UserCredentials, UserRead

__all__ = [
    "AuthSession",
    "CourseCreate",
    "CourseRead",
    "CourseReadWithRole",
    "CourseUpdate",
    "CursorPage",
    "EventCreate",
    "EventRead",
    "EventReadWithRole",
    "EventUpdate",
    "GroupCreate",
    "GroupRead",
    "GroupReadWithRole",
    "GroupUpdate",
    "MemberCreate",
    "MemberRead",
    "MemberRelationCreate",
    "MemberRelationRead",
    "MemberSummary",
    "MemberUpdate",
    "MessageResponse",
    "RelationEnvelope",
    "RelationRead",
    "UserCreate",
    "UserCredentials",
    "UserRead",
]
