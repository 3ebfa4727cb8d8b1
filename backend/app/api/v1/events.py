from fastapi import APIRouter

from app.api.crud import RelationController
from app.api.deps import get_event_service
from app.schemas import EventCreate, EventRead, EventReadWithRole, EventUpdate


def build_router() -> APIRouter:
    return RelationController(
        service_dependency=get_event_service,
        entity_name="Event",
        entity_plural="events",
        read_schema=EventRead,
        create_schema=EventCreate,
        update_schema=EventUpdate,
        with_role_schema=EventReadWithRole,
    ).build_router()
