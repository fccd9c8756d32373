"""Bookmark endpoint tests."""


def create_bookmark(client, headers, **overrides):
    payload = {
        "title": "FastAPI docs",
        "description": "Framework reference",
        "link": "https://fastapi.tiangolo.com",
    }
    payload.update(overrides)
    response = client.post("/bookmarks", headers=headers, json=payload)
    assert response.status_code == 201
    return response.json()


def test_create_bookmark(client, auth_headers):
    """Test creating a bookmark."""
    bookmark = create_bookmark(client, auth_headers)
    assert bookmark["title"] == "FastAPI docs"
    assert bookmark["link"] == "https://fastapi.tiangolo.com"
    assert bookmark["user_id"] == auth_headers.user_id


def test_create_bookmark_requires_title_and_link(client, auth_headers):
    response = client.post("/bookmarks", headers=auth_headers, json={"description": "No link"})
    assert response.status_code == 422


def test_bookmarks_require_auth(client):
    """Test that bookmark endpoints require authentication."""
    assert client.get("/bookmarks").status_code == 401
    assert client.post("/bookmarks", json={"title": "x", "link": "y"}).status_code == 401


def test_get_bookmarks_empty(client, auth_headers):
    response = client.get("/bookmarks", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


def test_get_bookmarks(client, auth_headers):
    """Test listing bookmarks returns only the user's own."""
    create_bookmark(client, auth_headers, title="First")
    create_bookmark(client, auth_headers, title="Second")

    response = client.get("/bookmarks", headers=auth_headers)
    assert response.status_code == 200
    titles = {b["title"] for b in response.json()}
    assert titles == {"First", "Second"}


def test_get_bookmarks_scoped_to_owner(client, auth_headers, other_auth_headers):
    create_bookmark(client, auth_headers, title="Mine")
    create_bookmark(client, other_auth_headers, title="Theirs")

    response = client.get("/bookmarks", headers=auth_headers)
    assert [b["title"] for b in response.json()] == ["Mine"]


def test_get_bookmark_by_id(client, auth_headers):
    bookmark = create_bookmark(client, auth_headers)

    response = client.get(f"/bookmarks/{bookmark['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == bookmark["id"]


def test_get_missing_bookmark(client, auth_headers):
    response = client.get("/bookmarks/99999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Bookmark not found"


def test_get_other_users_bookmark(client, auth_headers, other_auth_headers):
    """Another user's bookmark behaves as if it did not exist."""
    bookmark = create_bookmark(client, other_auth_headers)

    response = client.get(f"/bookmarks/{bookmark['id']}", headers=auth_headers)
    assert response.status_code == 404


def test_edit_bookmark(client, auth_headers):
    """Test partial bookmark update."""
    bookmark = create_bookmark(client, auth_headers)

    response = client.patch(
        f"/bookmarks/{bookmark['id']}",
        headers=auth_headers,
        json={"title": "Renamed"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Renamed"
    assert data["link"] == bookmark["link"]
    assert data["description"] == bookmark["description"]


def test_edit_bookmark_clears_description(client, auth_headers):
    bookmark = create_bookmark(client, auth_headers)

    response = client.patch(
        f"/bookmarks/{bookmark['id']}", headers=auth_headers, json={"description": None}
    )
    assert response.status_code == 200
    assert response.json()["description"] is None


def test_edit_other_users_bookmark(client, auth_headers, other_auth_headers):
    bookmark = create_bookmark(client, other_auth_headers)

    response = client.patch(
        f"/bookmarks/{bookmark['id']}", headers=auth_headers, json={"title": "Hijacked"}
    )
    assert response.status_code == 404

    unchanged = client.get(f"/bookmarks/{bookmark['id']}", headers=other_auth_headers)
    assert unchanged.json()["title"] == bookmark["title"]


def test_delete_bookmark(client, auth_headers):
    """Test deleting a bookmark."""
    bookmark = create_bookmark(client, auth_headers)

    response = client.delete(f"/bookmarks/{bookmark['id']}", headers=auth_headers)
    assert response.status_code == 204

    response = client.get(f"/bookmarks/{bookmark['id']}", headers=auth_headers)
    assert response.status_code == 404


def test_delete_other_users_bookmark(client, auth_headers, other_auth_headers):
    bookmark = create_bookmark(client, other_auth_headers)

    response = client.delete(f"/bookmarks/{bookmark['id']}", headers=auth_headers)
    assert response.status_code == 404

    response = client.get(f"/bookmarks/{bookmark['id']}", headers=other_auth_headers)
    assert response.status_code == 200
