from __future__ import annotations

from app.models.relation import RelationModel


class CourseMember(RelationModel, table=True):
    """Member enrolled in a course."""

    __tablename__ = "course_members"
