import pytest
from fastapi.testclient import TestClient

from app.api.crud import BaseController
from app.core.config import settings
from app.main import create_application
from app.schemas import MemberCreate, MemberRead, MemberUpdate


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


def test_readiness(client):
    response = client.get("/api/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready", "database": "connected"}


def test_ping(client):
    assert client.get("/api/test").json() == {"message": "API is working"}


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_unexpected_errors_become_500():
    application = create_application()

    @application.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    with TestClient(application, raise_server_exceptions=False) as client:
        response = client.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Unexpected server error"
    assert "RuntimeError: kaboom" in body["stack"]


def test_api_errors_include_stack_outside_production(client):
    response = client.get("/api/members/doesnotexist")

    assert response.status_code == 404
    assert "NotFoundError" in response.json()["stack"]


def test_controller_requires_service():
    with pytest.raises(ValueError):
        BaseController(
            service_dependency=None,
            entity_name="Member",
            entity_plural="members",
            read_schema=MemberRead,
            create_schema=MemberCreate,
            update_schema=MemberUpdate,
        )


def test_production_errors_hide_internals(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    application = create_application()

    @application.get("/boom")
    def boom():
        raise RuntimeError("connection string with password")

    with TestClient(application, raise_server_exceptions=False) as client:
        unexpected = client.get("/boom")
        missing = client.get("/api/members/doesnotexist")

    assert unexpected.status_code == 500
    assert unexpected.json() == {"error": "Unexpected server error"}
    assert missing.status_code == 404
    assert missing.json() == {"error": "Member not found"}
