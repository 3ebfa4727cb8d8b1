from .config import settings
from .errors import (
    ApiError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
    wrap_store_error,
)
from .security import (
    create_access_token,
    get_password_hash,
    verify_token,
    verify_password,
)

__all__ = [
    "settings",
    "ApiError",
    "ConflictError",
    "InternalError",
    "NotFoundError",
    "ValidationError",
    "wrap_store_error",
    "create_access_token",
    "get_password_hash",
    "verify_token",
    "verify_password",
]
