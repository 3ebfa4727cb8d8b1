from .base import DocumentModel, Page, PREFIX_SENTINEL
from .course import Course
from .course_member import CourseMember
from .event import Event
from .event_member import EventMember
from .group import Group
from .group_member import GroupMember
from .member import Member
from .relation import RelationModel, relation_key, split_relation_key
from .user import User

COLLECTIONS: dict[str, type] = {
    model.__tablename__: model
    for model in (
        Member,
        Group,
        Event,
        Course,
        User,
        GroupMember,
        EventMember,
        CourseMember,
    )
}


def get_collection_model(name: str) -> type:
    """Resolve a collection name (table name) to its record type."""
    try:
        return COLLECTIONS[name]
    except KeyError:
        raise ValueError(f"Unknown collection: {name!r}") from None


__all__ = [
    "COLLECTIONS",
    "Course",
    "CourseMember",
    "DocumentModel",
    "Event",
    "EventMember",
    "Group",
    "GroupMember",
    "Member",
    "Page",
    "PREFIX_SENTINEL",
    "RelationModel",
    "User",
    "get_collection_model",
    "relation_key",
    "split_relation_key",
]
