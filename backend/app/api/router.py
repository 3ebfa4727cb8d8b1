from fastapi import APIRouter

from app.api.v1 import auth, courses, events, groups, health, members


def build_api_router() -> APIRouter:
    api_router = APIRouter()
    api_router.include_router(health.router, prefix="/health", tags=["health"])
    api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
    api_router.include_router(members.build_router(), prefix="/members", tags=["members"])
    api_router.include_router(groups.build_router(), prefix="/groups", tags=["groups"])
    api_router.include_router(events.build_router(), prefix="/events", tags=["events"])
    api_router.include_router(courses.build_router(), prefix="/courses", tags=["courses"])

    @api_router.get("/test", tags=["health"], summary="Ping")
    def ping() -> dict[str, str]:
        return {"message": "API is working"}

    return api_router
