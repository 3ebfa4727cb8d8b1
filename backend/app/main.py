import logging
import time
import traceback
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.router import build_api_router
from app.core.config import settings
from app.core.errors import ApiError
from app.core.limiter import limiter
from app.core.logging_config import configure_logging
from app.db import init_db

logger = logging.getLogger(__name__)


def error_response(
    status_code: int, message: str, exc: Optional[BaseException] = None
) -> JSONResponse:
    """Uniform error body; the stack is only exposed outside production."""
    content = {"error": message}
    if exc is not None and not settings.is_production:
        content["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
    return JSONResponse(status_code=status_code, content=content)


def format_validation_errors(exc: RequestValidationError) -> str:
    details = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        param = ".".join(location) or "body"
        details.append(f"{error.get('msg')} (param: {param})")
    return "Validation error: " + ", ".join(details)


def create_application() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME, version="0.1.0")
    app.state.limiter = limiter

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path}: {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path}: {exc.message}")
        return error_response(exc.status_code, exc.message, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = format_validation_errors(exc)
        logger.warning(f"{request.method} {request.url.path}: {message}")
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        logger.warning(f"Rate limit exceeded for {request.client.host if request.client else 'unknown'}")
        return error_response(
            status.HTTP_429_TOO_MANY_REQUESTS, f"Rate limit exceeded: {exc.detail}"
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Unexpected server error", exc
        )

    app.include_router(build_api_router(), prefix=settings.API_PREFIX)

    @app.on_event("startup")
    def _startup() -> None:
        init_db()
        logger.info(f"{settings.PROJECT_NAME} started ({settings.ENVIRONMENT})")

    return app


app = create_application()
