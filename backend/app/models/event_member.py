from __future__ import annotations

from app.models.relation import RelationModel


class EventMember(RelationModel, table=True):
    """Member taking part in an event."""

    __tablename__ = "event_members"
