from .base import BaseOperationsService
from .members import MemberService
from .membership import CourseService, EntityWithMembersService, EventService, GroupService
from .relations import RelationOperationsService
from .users import UserService

__all__ = [
    "BaseOperationsService",
    "CourseService",
    "EntityWithMembersService",
    "EventService",
    "GroupService",
    "MemberService",
    "RelationOperationsService",
    "UserService",
]
