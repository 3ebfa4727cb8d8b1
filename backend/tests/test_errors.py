from sqlalchemy.exc import OperationalError

from app.core.errors import (
    ApiError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
    wrap_store_error,
)


def test_api_error_carries_status_and_message():
    error = ApiError(418, "teapot")

    assert error.status_code == 418
    assert error.message == "teapot"
    assert str(error) == "teapot"
    assert repr(error) == "ApiError(418, 'teapot')"


def test_subclasses_map_to_http_statuses():
    assert ValidationError("bad").status_code == 400
    assert NotFoundError("missing").status_code == 404
    assert ConflictError("taken").status_code == 409
    assert InternalError("boom").status_code == 500


def test_wrap_store_error_keeps_api_errors():
    original = NotFoundError("Member not found")

    assert wrap_store_error(original, "Error fetching Member") is original


def test_wrap_store_error_turns_other_failures_into_500():
    failure = OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    error = wrap_store_error(failure, "Error listing Member records")

    assert isinstance(error, InternalError)
    assert error.status_code == 500
    assert error.message.startswith("Error listing Member records: ")
    assert "disk I/O error" in error.message
