"""Entities that members can be related to: groups, events and courses."""

from __future__ import annotations

import logging
from typing import Optional

from sqlmodel import Session

from app.models import (
    Course,
    CourseMember,
    DocumentModel,
    Event,
    EventMember,
    Group,
    GroupMember,
    Member,
    RelationModel,
)
from app.schemas import MemberRelationRead
from app.services.base import BaseOperationsService
from app.services.relations import RelationOperationsService

logger = logging.getLogger(__name__)


class EntityWithMembersService(BaseOperationsService):
    """CRUD for one entity collection plus its member relation collection."""

    collection: str = ""
    relation_collection: str = ""

    def __init__(self, session: Session) -> None:
        super().__init__(session, self.collection)
        self.relations = RelationOperationsService(session, self.relation_collection)
        self.members = BaseOperationsService(session, Member.__tablename__)

    def add_member(
        self, entity_id: str, member_id: str, role: Optional[str] = None
    ) -> RelationModel:
        self.get_by_id(entity_id)
        member = self.members.get_by_id(member_id)
        return self.relations.add_relation(
            entity_id,
            member_id,
            {"role": role, "member_name": member.Nombre},
        )

    def remove_member(self, entity_id: str, member_id: str) -> bool:
        return self.relations.remove_relation(entity_id, member_id)

    def get_entity_members(self, entity_id: str) -> list[MemberRelationRead]:
        """Members related to the entity; one member lookup per relation."""
        self.get_by_id(entity_id)
        result: list[MemberRelationRead] = []
        for relation in self.relations.list_by_entity(entity_id):
            member = self.session.get(Member, relation.member_id)
            if member is None:
                logger.warning(
                    f"Member {relation.member_id} referenced by {relation.id} not found"
                )
                continue
            result.append(
                MemberRelationRead(
                    member_id=member.id,
                    Nombre=member.Nombre,
                    TipoMiembro=member.TipoMiembro,
                    role=relation.role,
                    added_at=relation.added_at,
                )
            )
        return result

    def get_member_entities(
        self, member_id: str
    ) -> list[tuple[DocumentModel, Optional[str]]]:
        """Entities the member is related to, each paired with the stored role."""
        self.members.get_by_id(member_id)
        result: list[tuple[DocumentModel, Optional[str]]] = []
        for relation in self.relations.list_by_member(member_id):
            entity = self.session.get(self.model, relation.entity_id)
            if entity is None:
                logger.warning(
                    f"{self.entity_name} {relation.entity_id} referenced by {relation.id} not found"
                )
                continue
            result.append((entity, relation.role))
        return result


class GroupService(EntityWithMembersService):
    collection = Group.__tablename__
    relation_collection = GroupMember.__tablename__


class EventService(EntityWithMembersService):
    collection = Event.__tablename__
    relation_collection = EventMember.__tablename__


class CourseService(EntityWithMembersService):
    collection = Course.__tablename__
    relation_collection = CourseMember.__tablename__
