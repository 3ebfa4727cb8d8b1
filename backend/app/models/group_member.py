from __future__ import annotations

from app.models.relation import RelationModel


class GroupMember(RelationModel, table=True):
    """Membership of a member in a group."""

    __tablename__ = "group_members"
