import pytest

CREDENTIALS = {"email": "Pastor@Iglesia.org", "password": "secreto1"}


def _bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def signed_up(client):
    response = client.post("/api/auth/signup", json=CREDENTIALS)
    assert response.status_code == 201, response.text
    return response.json()


def test_sign_up(signed_up):
    assert signed_up["token_type"] == "bearer"
    assert signed_up["access_token"]
    assert signed_up["user"]["email"] == "pastor@iglesia.org"
    assert signed_up["user"]["is_anonymous"] is False
    assert signed_up["user"]["uid"]


def test_sign_up_twice_conflicts(client, signed_up):
    response = client.post(
        "/api/auth/signup", json={"email": "pastor@iglesia.org", "password": "otro123"}
    )

    assert response.status_code == 409
    assert response.json()["error"] == "Email is already registered"


def test_sign_up_validates_input(client):
    short = client.post("/api/auth/signup", json={"email": "a@b.org", "password": "123"})
    bad_email = client.post("/api/auth/signup", json={"email": "nope", "password": "secreto1"})

    assert short.status_code == 400
    assert bad_email.status_code == 400


def test_sign_in(client, signed_up):
    response = client.post("/api/auth/signin", json=CREDENTIALS)

    assert response.status_code == 200
    assert response.json()["user"]["uid"] == signed_up["user"]["uid"]


def test_sign_in_with_wrong_password(client, signed_up):
    response = client.post(
        "/api/auth/signin", json={"email": CREDENTIALS["email"], "password": "wrong"}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Incorrect email or password"


def test_sign_in_unknown_user(client):
    response = client.post("/api/auth/signin", json=CREDENTIALS)

    assert response.status_code == 400


def test_me(client, signed_up):
    response = client.get("/api/auth/me", headers=_bearer(signed_up["access_token"]))

    assert response.status_code == 200
    assert response.json()["uid"] == signed_up["user"]["uid"]


def test_me_without_token(client):
    response = client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["error"] == "No token provided"


def test_me_with_invalid_token(client):
    response = client.get("/api/auth/me", headers=_bearer("garbage"))

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid token"


def test_sign_out_revokes_tokens(client, signed_up):
    token = signed_up["access_token"]

    response = client.post("/api/auth/signout", headers=_bearer(token))
    assert response.status_code == 204

    assert client.get("/api/auth/me", headers=_bearer(token)).status_code == 401

    fresh = client.post("/api/auth/signin", json=CREDENTIALS).json()["access_token"]
    assert client.get("/api/auth/me", headers=_bearer(fresh)).status_code == 200


def test_sign_out_requires_token(client):
    assert client.post("/api/auth/signout").status_code == 401


def test_anonymous_sign_in(client):
    response = client.post("/api/auth/signin/anonymous")

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["is_anonymous"] is True
    assert body["user"]["email"] is None

    me = client.get("/api/auth/me", headers=_bearer(body["access_token"]))
    assert me.json()["uid"] == body["user"]["uid"]
