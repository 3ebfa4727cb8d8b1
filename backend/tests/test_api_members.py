def test_create_member(client):
    response = client.post(
        "/api/members",
        json={
            "Nombre": "  Ana Gomez ",
            "Email": "ANA@Iglesia.org",
            "TipoMiembro": "Miembro",
            "EstadoCivil": "Casado",
            "Extra": "ignored",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"].isalnum()
    assert body["Nombre"] == "Ana Gomez"
    assert body["Email"] == "ana@iglesia.org"
    assert body["EstadoCivil"] == "Casado"
    assert body["Oficio"] == ""
    assert "Extra" not in body
    assert "FechaRegistro" in body


def test_create_member_validation_errors(client):
    response = client.post("/api/members", json={"TipoMiembro": "Miembro"})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error.startswith("Validation error: ")
    assert "(param: Nombre)" in error


def test_create_member_rejects_bad_choices(client):
    response = client.post(
        "/api/members",
        json={"Nombre": "Ana Gomez", "TipoMiembro": "Pastor", "Email": "not-an-email"},
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert "(param: TipoMiembro)" in error
    assert "Email" in error


def test_get_member(client, create_member):
    member = create_member("Ana Gomez")

    response = client.get(f"/api/members/{member['id']}")

    assert response.status_code == 200
    assert response.json() == member


def test_get_missing_member(client):
    response = client.get("/api/members/doesnotexist")

    assert response.status_code == 404
    assert response.json()["error"] == "Member not found"


def test_invalid_path_id_is_rejected(client):
    response = client.get("/api/members/not-valid!")

    assert response.status_code == 400
    assert response.json()["error"].startswith("Validation error: ")


def test_list_members_paginates(client, create_member):
    for name in ("Elena", "Carla", "Ana", "Dario", "Beto"):
        create_member(name)

    first = client.get("/api/members", params={"pageSize": 2}).json()
    assert [m["Nombre"] for m in first["items"]] == ["Ana", "Beto"]
    assert first["hasMore"] is True
    assert first["nextStartAfter"] == first["items"][-1]["id"]

    rest = client.get(
        "/api/members", params={"pageSize": 10, "startAfter": first["nextStartAfter"]}
    ).json()
    assert [m["Nombre"] for m in rest["items"]] == ["Carla", "Dario", "Elena"]
    assert rest["hasMore"] is False


def test_list_members_defaults_and_empty(client):
    body = client.get("/api/members").json()

    assert body == {"items": [], "nextStartAfter": None, "hasMore": False}


def test_list_members_rejects_bad_page_size(client):
    assert client.get("/api/members", params={"pageSize": 0}).status_code == 400
    assert client.get("/api/members", params={"pageSize": 101}).status_code == 400
    assert client.get("/api/members", params={"pageSize": "ten"}).status_code == 400


def test_update_member_is_partial(client, create_member):
    member = create_member("Ana Gomez", Oficio="Maestra")

    response = client.put(
        f"/api/members/{member['id']}", json={"TipoMiembro": "Bautizado"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["TipoMiembro"] == "Bautizado"
    assert body["Nombre"] == "Ana Gomez"
    assert body["Oficio"] == "Maestra"


def test_update_member_requires_data(client, create_member):
    member = create_member("Ana Gomez")

    for payload in ({}, {"Nombre": None}, {"Unknown": "x"}):
        response = client.put(f"/api/members/{member['id']}", json=payload)
        assert response.status_code == 400
        assert "No valid data provided for update" in response.json()["error"]


def test_update_missing_member(client):
    response = client.put("/api/members/doesnotexist", json={"Oficio": "Maestra"})

    assert response.status_code == 404


def test_delete_member_is_idempotent(client, create_member):
    member = create_member("Ana Gomez")

    assert client.delete(f"/api/members/{member['id']}").status_code == 204
    assert client.delete(f"/api/members/{member['id']}").status_code == 204
    assert client.get(f"/api/members/{member['id']}").status_code == 404


def test_search_members(client, create_member):
    for name in ("Maria", "Pedro", "Mario", "Marta"):
        create_member(name)

    by_query = client.get("/api/members/search", params={"searchString": "Mar"})
    by_path = client.get("/api/members/search/Mar")

    assert by_query.status_code == 200
    assert [m["Nombre"] for m in by_query.json()["items"]] == ["Maria", "Mario", "Marta"]
    assert by_path.json() == by_query.json()


def test_search_members_by_email(client, create_member):
    create_member("Ana Gomez", Email="ana@iglesia.org")
    create_member("Beto Ruiz", Email="beto@iglesia.org")

    response = client.get(
        "/api/members/search", params={"searchString": "ana", "searchField": "Email"}
    )

    assert [m["Nombre"] for m in response.json()["items"]] == ["Ana Gomez"]


def test_search_after_deleted_cursor_restarts(client, create_member):
    create_member("Marco")
    create_member("Maria")
    mario = create_member("Mario")
    client.delete(f"/api/members/{mario['id']}")

    response = client.get(
        "/api/members/search", params={"searchString": "Mar", "startAfter": mario["id"]}
    )

    assert response.status_code == 200
    assert [m["Nombre"] for m in response.json()["items"]] == ["Marco", "Maria"]


def test_search_requires_search_string(client):
    for params in ({}, {"searchString": "   "}):
        response = client.get("/api/members/search", params=params)
        assert response.status_code == 400
        assert response.json()["error"] == "The searchString parameter is required"


def test_search_rejects_unsupported_field(client):
    response = client.get(
        "/api/members/search", params={"searchString": "Ma", "searchField": "Oficio"}
    )

    assert response.status_code == 400


def test_available_members(client, create_member):
    ana = create_member("Ana Gomez")
    andrea = create_member("Andrea Diaz")
    group = client.post("/api/groups", json={"Nombre": "Jovenes"}).json()
    client.post(f"/api/groups/{group['id']}/members", json={"memberId": ana["id"]})

    response = client.get(
        "/api/members/available",
        params={"searchString": "An", "excludeFrom": "group", "entityId": group["id"]},
    )

    assert response.status_code == 200
    items = response.json()["items"]
    assert [m["id"] for m in items] == [andrea["id"]]
    assert set(items[0]) == {"id", "Nombre", "TipoMiembro", "Email"}


def test_available_members_rejects_unknown_kind(client, create_member):
    create_member("Ana Gomez")

    response = client.get(
        "/api/members/available",
        params={"searchString": "An", "excludeFrom": "ministry", "entityId": "abc"},
    )

    assert response.status_code == 400
