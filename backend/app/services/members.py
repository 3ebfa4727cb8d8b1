from __future__ import annotations

from typing import Optional

from sqlmodel import Session

from app.core.errors import ValidationError
from app.models import CourseMember, EventMember, GroupMember, Member, Page
from app.services.base import BaseOperationsService
from app.services.relations import RelationOperationsService

# Entity kinds accepted by search_available, English or Spanish
EXCLUDABLE_RELATIONS = {
    "group": GroupMember.__tablename__,
    "grupo": GroupMember.__tablename__,
    "course": CourseMember.__tablename__,
    "curso": CourseMember.__tablename__,
    "event": EventMember.__tablename__,
    "evento": EventMember.__tablename__,
}


class MemberService(BaseOperationsService):
    def __init__(self, session: Session) -> None:
        super().__init__(session, Member.__tablename__)

    def search_available(
        self,
        search_string: str,
        exclude_from: Optional[str] = None,
        entity_id: Optional[str] = None,
        start_after_id: Optional[str] = None,
        page_size: int = 10,
    ) -> Page:
        """
        Prefix search over members, dropping those already related to the
        given group, course or event.

        The cursor and `has_more` of the returned page come from the
        unfiltered search, so a page may hold fewer than `page_size` items
        while more remain.
        """
        page = self.search(search_string, start_after_id, page_size)
        if not exclude_from or not entity_id:
            return page

        collection = EXCLUDABLE_RELATIONS.get(exclude_from.lower())
        if collection is None:
            raise ValidationError(
                f"excludeFrom must be one of: group, course, event (got {exclude_from!r})"
            )
        relations = RelationOperationsService(self.session, collection)
        assigned = {relation.member_id for relation in relations.list_by_entity(entity_id)}
        return Page(
            items=[member for member in page.items if member.id not in assigned],
            last_doc=page.last_doc,
            has_more=page.has_more,
        )
