import datetime

import jwt


def _create(client, headers, **body):
    payload = {"title": "Site", "description": "Personal site", "technologies": "Flask"}
    payload.update(body)
    resp = client.post("/api/projects", json=payload, headers=headers)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


# ---------- auth guard ----------

def test_requires_token(client):
    assert client.get("/api/projects").status_code == 401
    assert client.post("/api/projects", json={"title": "t", "description": "d"}).status_code == 401
    resp = client.get("/api/projects", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "unauthorized"}


def test_expired_token_rejected(client):
    token = jwt.encode(
        {"sub": "user", "exp": datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(minutes=1)},
        "test-secret",
        algorithm="HS256",
    )
    resp = client.get("/api/projects", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def _token(claims):
    return jwt.encode(claims, "test-secret", algorithm="HS256")


def _in_one_hour():
    return datetime.datetime.now(datetime.timezone.utc) + datetime.timedelta(hours=1)


def test_token_without_expiry_rejected(client):
    resp = client.get("/api/projects", headers={"Authorization": f"Bearer {_token({'sub': 'user'})}"})
    assert resp.status_code == 401


def test_token_for_deleted_user_is_not_found(client):
    token = _token({"sub": "ghost", "exp": _in_one_hour()})
    resp = client.get("/api/projects/my", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "user not found"


# ---------- CRUD ----------

def test_create_and_read(client, auth_headers):
    user = auth_headers("user", "user123")
    created = _create(client, user, link="https://example.com")

    assert created["title"] == "Site"
    assert created["link"] == "https://example.com"
    assert created["createdAt"] == created["updatedAt"]
    assert "createdBy" not in created

    resp = client.get(f"/api/projects/{created['id']}", headers=user)
    assert resp.status_code == 200
    assert resp.get_json() == created


def test_non_object_body_is_bad_request(client, auth_headers):
    user = auth_headers("user", "user123")
    resp = client.post("/api/projects", json=["x"], headers=user)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "bad_request"

    created = _create(client, user)
    resp = client.put(f"/api/projects/{created['id']}", json=["x"], headers=user)
    assert resp.status_code == 400
    assert client.get(f"/api/projects/{created['id']}", headers=user).get_json() == created


def test_create_validation(client, auth_headers):
    user = auth_headers("user", "user123")
    resp = client.post("/api/projects", json={"title": "only title"}, headers=user)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "bad_request"


def test_list_all_and_mine(client, auth_headers):
    user = auth_headers("user", "user123")
    other = auth_headers("other", "other123")
    mine = _create(client, user, title="mine")
    theirs = _create(client, other, title="theirs")

    all_ids = [p["id"] for p in client.get("/api/projects", headers=user).get_json()]
    assert all_ids == [mine["id"], theirs["id"]]

    my_ids = [p["id"] for p in client.get("/api/projects/my", headers=user).get_json()]
    assert my_ids == [mine["id"]]


def test_get_missing_project(client, auth_headers):
    resp = client.get("/api/projects/999", headers=auth_headers("user", "user123"))
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "not_found"


def test_update_by_owner(client, auth_headers):
    user = auth_headers("user", "user123")
    created = _create(client, user)

    resp = client.put(
        f"/api/projects/{created['id']}",
        json={"title": "Renamed", "description": "New text"},
        headers=user,
    )
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["title"] == "Renamed"
    assert data["technologies"] is None
    assert data["createdAt"] == created["createdAt"]
    assert data["updatedAt"] > created["updatedAt"]


def test_update_and_delete_by_non_owner_forbidden(client, auth_headers):
    user = auth_headers("user", "user123")
    other = auth_headers("other", "other123")
    created = _create(client, user)

    resp = client.put(
        f"/api/projects/{created['id']}",
        json={"title": "x", "description": "y"},
        headers=other,
    )
    assert resp.status_code == 403
    assert resp.get_json()["error"] == "forbidden"

    assert client.delete(f"/api/projects/{created['id']}", headers=other).status_code == 403
    assert client.get(f"/api/projects/{created['id']}", headers=user).get_json() == created


def test_admin_overrides_ownership(client, auth_headers):
    user = auth_headers("user", "user123")
    admin = auth_headers("admin", "admin123")
    created = _create(client, user)

    resp = client.put(
        f"/api/projects/{created['id']}",
        json={"title": "Moderated", "description": "Edited by admin"},
        headers=admin,
    )
    assert resp.status_code == 200

    # still owned by the original user
    my_ids = [p["id"] for p in client.get("/api/projects/my", headers=user).get_json()]
    assert my_ids == [created["id"]]

    assert client.delete(f"/api/projects/{created['id']}", headers=admin).status_code == 204
    assert client.get("/api/projects", headers=user).get_json() == []


def test_role_claim_in_token_grants_nothing(client, auth_headers):
    created = _create(client, auth_headers("user", "user123"))
    forged = {"Authorization": f"Bearer {_token({'sub': 'other', 'role': 'ADMIN', 'exp': _in_one_hour()})}"}

    assert client.delete(f"/api/projects/{created['id']}", headers=forged).status_code == 403


def test_delete_twice(client, auth_headers):
    user = auth_headers("user", "user123")
    created = _create(client, user)

    resp = client.delete(f"/api/projects/{created['id']}", headers=user)
    assert resp.status_code == 204
    assert resp.data == b""
    assert client.delete(f"/api/projects/{created['id']}", headers=user).status_code == 404


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "not_found"}
