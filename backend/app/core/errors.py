"""Application error type carried from the store layer up to the HTTP response."""

from __future__ import annotations

from fastapi import status


class ApiError(Exception):
    """Failure that should reach the client with a specific status and message."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.status_code}, {self.message!r})"


class ValidationError(ApiError):
    def __init__(self, message: str) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, message)


class NotFoundError(ApiError):
    def __init__(self, message: str) -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, message)


class ConflictError(ApiError):
    def __init__(self, message: str) -> None:
        super().__init__(status.HTTP_409_CONFLICT, message)


class InternalError(ApiError):
    def __init__(self, message: str) -> None:
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


def wrap_store_error(exc: Exception, message: str) -> ApiError:
    """
    Return an ApiError for a failed store call.

    An ApiError is returned as-is so callers can `raise wrap_store_error(...)`
    without double-wrapping; anything else becomes a 500 that keeps the
    original failure text.
    """
    if isinstance(exc, ApiError):
        return exc
    return InternalError(f"{message}: {exc}")
