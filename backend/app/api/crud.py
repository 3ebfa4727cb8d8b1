"""
Generic HTTP layer for entity collections.

Request bodies are validated by the pydantic schemas a controller is built
with; handlers only translate between HTTP and the service. The endpoint
functions are closures over the configured schemas, so this module keeps
runtime annotations (no postponed evaluation).
"""

from typing import Annotated, Any, Callable, List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.core.config import settings
from app.core.errors import ValidationError
from app.models import Page
from app.schemas import (
    CursorPage,
    MemberRelationCreate,
    MemberRelationRead,
    MessageResponse,
    RelationEnvelope,
    RelationRead,
)
from app.schemas.common import ID_PATTERN
from app.services import BaseOperationsService, EntityWithMembersService

PageSize = Annotated[
    int, Query(ge=1, le=settings.MAX_PAGE_SIZE, alias="pageSize")
]
StartAfter = Annotated[Optional[str], Query(alias="startAfter")]
SearchField = Annotated[Optional[str], Query(alias="searchField")]


def id_path(description: str):
    return Path(pattern=ID_PATTERN, description=description)


class BaseController:
    """List, get, create, update, delete and prefix search for one entity."""

    def __init__(
        self,
        *,
        service_dependency: Callable[..., BaseOperationsService],
        entity_name: str,
        entity_plural: str,
        read_schema: type,
        create_schema: type,
        update_schema: type,
    ) -> None:
        if service_dependency is None:
            raise ValueError("Service is required in BaseController")
        self.service_dependency = service_dependency
        self.entity_name = entity_name
        self.entity_plural = entity_plural
        self.read_schema = read_schema
        self.create_schema = create_schema
        self.update_schema = update_schema

    # -- handlers -------------------------------------------------------------

    def to_page(self, page: Page) -> CursorPage:
        return CursorPage[self.read_schema](
            items=[self.read_schema.model_validate(item) for item in page.items],
            next_start_after=page.last_doc.id if page.last_doc is not None else None,
            has_more=page.has_more,
        )

    def get_all(
        self,
        service: BaseOperationsService,
        page_size: int,
        start_after: Optional[str],
    ) -> CursorPage:
        return self.to_page(service.get_all(start_after, page_size))

    def get_by_id(self, service: BaseOperationsService, id: str) -> Any:
        return self.read_schema.model_validate(service.get_by_id(id))

    def create(self, service: BaseOperationsService, payload) -> Any:
        new_id = service.create(payload.to_store())
        return self.read_schema.model_validate(service.get_by_id(new_id))

    def update(self, service: BaseOperationsService, id: str, payload) -> Any:
        return self.read_schema.model_validate(service.update(id, payload.to_store()))

    def delete(self, service: BaseOperationsService, id: str) -> Response:
        service.delete(id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    def search(
        self,
        service: BaseOperationsService,
        search_string: Optional[str],
        page_size: int,
        start_after: Optional[str],
        search_field: Optional[str] = None,
    ) -> CursorPage:
        if not search_string or not search_string.strip():
            raise ValidationError("The searchString parameter is required")
        page = service.search(search_string, start_after, page_size, search_field)
        return self.to_page(page)

    # -- routing ----------------------------------------------------------------

    def build_router(self) -> APIRouter:
        router = APIRouter()
        self.register_collection_routes(router)
        self.register_extra_routes(router)
        self.register_item_routes(router)
        return router

    def register_extra_routes(self, router: APIRouter) -> None:
        """Fixed-path routes that must be matched before `/{id}`."""

    def register_collection_routes(self, router: APIRouter) -> None:
        Service = Annotated[BaseOperationsService, Depends(self.service_dependency)]
        page_schema = CursorPage[self.read_schema]
        create_schema = self.create_schema
        name, plural = self.entity_name, self.entity_plural

        @router.get("", response_model=page_schema, summary=f"List {plural}")
        def list_entities(
            service: Service,
            page_size: PageSize = settings.DEFAULT_PAGE_SIZE,
            start_after: StartAfter = None,
        ):
            return self.get_all(service, page_size, start_after)

        @router.post(
            "",
            response_model=self.read_schema,
            status_code=status.HTTP_201_CREATED,
            summary=f"Create {name}",
        )
        def create_entity(payload: create_schema, service: Service):
            return self.create(service, payload)

        @router.get(
            "/search",
            response_model=page_schema,
            summary=f"Search {plural} by prefix",
        )
        def search_entities(
            service: Service,
            search_string: Optional[str] = Query(default=None, alias="searchString"),
            search_field: SearchField = None,
            page_size: PageSize = settings.DEFAULT_PAGE_SIZE,
            start_after: StartAfter = None,
        ):
            return self.search(service, search_string, page_size, start_after, search_field)

        @router.get(
            "/search/{search_string}",
            response_model=page_schema,
            summary=f"Search {plural} by prefix",
        )
        def search_entities_by_path(
            search_string: str,
            service: Service,
            search_field: SearchField = None,
            page_size: PageSize = settings.DEFAULT_PAGE_SIZE,
            start_after: StartAfter = None,
        ):
            return self.search(service, search_string, page_size, start_after, search_field)

    def register_item_routes(self, router: APIRouter) -> None:
        Service = Annotated[BaseOperationsService, Depends(self.service_dependency)]
        update_schema = self.update_schema
        name = self.entity_name
        EntityId = Annotated[str, id_path(f"{name} id")]

        @router.get("/{id}", response_model=self.read_schema, summary=f"Get {name} by id")
        def get_entity(id: EntityId, service: Service):
            return self.get_by_id(service, id)

        @router.put("/{id}", response_model=self.read_schema, summary=f"Update {name}")
        def update_entity(id: EntityId, payload: update_schema, service: Service):
            return self.update(service, id, payload)

        @router.delete(
            "/{id}",
            status_code=status.HTTP_204_NO_CONTENT,
            response_class=Response,
            summary=f"Delete {name}",
        )
        def delete_entity(id: EntityId, service: Service):
            return self.delete(service, id)


class RelationController(BaseController):
    """
    Adds member relation endpoints to an entity controller:

    * ``POST /{entity_id}/members`` add (or overwrite) a member relation
    * ``DELETE /{entity_id}/members/{member_id}`` remove it
    * ``GET /{entity_id}/members`` related members with display fields
    * ``GET /members/{member_id}/<plural>`` entities of a member with roles
    """

    def __init__(self, *, with_role_schema: type, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.with_role_schema = with_role_schema

    def add_member(
        self,
        service: EntityWithMembersService,
        entity_id: str,
        payload: MemberRelationCreate,
    ) -> RelationEnvelope:
        relation = service.add_member(entity_id, payload.member_id, payload.role)
        return RelationEnvelope(
            message=f"Member added to {self.entity_name} successfully",
            result=RelationRead.model_validate(relation),
        )

    def remove_member(
        self, service: EntityWithMembersService, entity_id: str, member_id: str
    ) -> MessageResponse:
        service.remove_member(entity_id, member_id)
        return MessageResponse(
            message=f"Member removed from {self.entity_name} successfully"
        )

    def get_entity_members(
        self, service: EntityWithMembersService, entity_id: str
    ) -> List[MemberRelationRead]:
        return service.get_entity_members(entity_id)

    def get_member_entities(
        self, service: EntityWithMembersService, member_id: str
    ) -> list:
        return [
            self.with_role_schema.model_validate(entity).model_copy(update={"role": role})
            for entity, role in service.get_member_entities(member_id)
        ]

    def register_extra_routes(self, router: APIRouter) -> None:
        super().register_extra_routes(router)
        Service = Annotated[EntityWithMembersService, Depends(self.service_dependency)]
        name, plural = self.entity_name, self.entity_plural
        EntityId = Annotated[str, id_path(f"{name} id")]
        MemberId = Annotated[str, id_path("Member id")]

        @router.post(
            "/{entity_id}/members",
            response_model=RelationEnvelope,
            status_code=status.HTTP_201_CREATED,
            summary=f"Add member to {name}",
        )
        def add_member(entity_id: EntityId, payload: MemberRelationCreate, service: Service):
            return self.add_member(service, entity_id, payload)

        @router.delete(
            "/{entity_id}/members/{member_id}",
            response_model=MessageResponse,
            summary=f"Remove member from {name}",
        )
        def remove_member(entity_id: EntityId, member_id: MemberId, service: Service):
            return self.remove_member(service, entity_id, member_id)

        @router.get(
            "/{entity_id}/members",
            response_model=List[MemberRelationRead],
            summary=f"List members of {name}",
        )
        def list_entity_members(entity_id: EntityId, service: Service):
            return self.get_entity_members(service, entity_id)

        @router.get(
            f"/members/{{member_id}}/{plural}",
            response_model=List[self.with_role_schema],
            summary=f"List {plural} of a member",
        )
        def list_member_entities(member_id: MemberId, service: Service):
            return self.get_member_entities(service, member_id)
