from fastapi import APIRouter

from app.api.crud import RelationController
from app.api.deps import get_group_service
from app.schemas import GroupCreate, GroupRead, GroupReadWithRole, GroupUpdate


def build_router() -> APIRouter:
    return RelationController(
        service_dependency=get_group_service,
        entity_name="Group",
        entity_plural="groups",
        read_schema=GroupRead,
        create_schema=GroupCreate,
        update_schema=GroupUpdate,
        with_role_schema=GroupReadWithRole,
    ).build_router()
