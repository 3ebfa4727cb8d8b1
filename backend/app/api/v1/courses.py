from fastapi import APIRouter

from app.api.crud import RelationController
from app.api.deps import get_course_service
from app.schemas import CourseCreate, CourseRead, CourseReadWithRole, CourseUpdate


def build_router() -> APIRouter:
    return RelationController(
        service_dependency=get_course_service,
        entity_name="Course",
        entity_plural="courses",
        read_schema=CourseRead,
        create_schema=CourseCreate,
        update_schema=CourseUpdate,
        with_role_schema=CourseReadWithRole,
    ).build_router()
