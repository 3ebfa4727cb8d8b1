from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from app.api.crud import BaseController, PageSize, StartAfter
from app.api.deps import get_member_service
from app.core.config import settings
from app.core.errors import ValidationError
from app.schemas import CursorPage, MemberCreate, MemberRead, MemberSummary, MemberUpdate
from app.services import MemberService

MemberServiceDep = Annotated[MemberService, Depends(get_member_service)]


class MemberController(BaseController):
    def get_available(
        self,
        service: MemberService,
        search_string: Optional[str],
        exclude_from: Optional[str],
        entity_id: Optional[str],
        page_size: int,
        start_after: Optional[str],
    ) -> CursorPage[MemberSummary]:
        if not search_string or not search_string.strip():
            raise ValidationError("The searchString parameter is required")
        page = service.search_available(
            search_string, exclude_from, entity_id, start_after, page_size
        )
        return CursorPage[MemberSummary](
            items=[MemberSummary.model_validate(member) for member in page.items],
            next_start_after=page.last_doc.id if page.last_doc is not None else None,
            has_more=page.has_more,
        )

    def register_extra_routes(self, router: APIRouter) -> None:
        @router.get(
            "/available",
            response_model=CursorPage[MemberSummary],
            summary="Search members not yet assigned to a group, course or event",
        )
        def list_available_members(
            service: MemberServiceDep,
            search_string: Optional[str] = Query(default=None, alias="searchString"),
            exclude_from: Optional[str] = Query(default=None, alias="excludeFrom"),
            entity_id: Optional[str] = Query(default=None, alias="entityId"),
            page_size: PageSize = settings.DEFAULT_PAGE_SIZE,
            start_after: StartAfter = None,
        ):
            return self.get_available(
                service, search_string, exclude_from, entity_id, page_size, start_after
            )


def build_router() -> APIRouter:
    return MemberController(
        service_dependency=get_member_service,
        entity_name="Member",
        entity_plural="members",
        read_schema=MemberRead,
        create_schema=MemberCreate,
        update_schema=MemberUpdate,
    ).build_router()
