from models.chapter import Chapter
from models.comment import Comment
from models.like import Like


def test_create_project_defaults_to_private(client, alice) -> None:
    res = client.post("/projects", json={"title": "Novel", "synopsis": "About things"}, headers=alice.headers)
    assert res.status_code == 201
    body = res.json()
    assert body["visibility"] == "PRIVATE"
    assert body["owner_id"] == alice.id
    assert body["synopsis"] == "About things"


def test_create_project_requires_title(client, alice) -> None:
    res = client.post("/projects", json={"title": "   "}, headers=alice.headers)
    assert res.status_code == 400


def test_create_project_requires_login(client) -> None:
    assert client.post("/projects", json={"title": "Novel"}).status_code == 401


def test_list_projects_only_returns_own(client, alice, bob, make_project) -> None:
    mine = make_project(alice, "Mine")
    make_project(bob, "Theirs")
    res = client.get("/projects", headers=alice.headers)
    assert res.status_code == 200
    assert [p["id"] for p in res.json()["items"]] == [mine["id"]]


def test_list_projects_most_recently_updated_first(client, alice, make_project) -> None:
    first = make_project(alice, "First")
    second = make_project(alice, "Second")
    client.put(f"/projects/{first['id']}", json={"synopsis": "touched"}, headers=alice.headers)
    items = client.get("/projects", headers=alice.headers).json()["items"]
    assert [p["id"] for p in items] == [first["id"], second["id"]]


def test_non_owner_gets_forbidden(client, alice, bob, make_project) -> None:
    proj = make_project(alice)
    assert client.get(f"/projects/{proj['id']}", headers=bob.headers).status_code == 403
    assert client.put(f"/projects/{proj['id']}", json={"title": "x"}, headers=bob.headers).status_code == 403
    assert client.delete(f"/projects/{proj['id']}", headers=bob.headers).status_code == 403


def test_missing_project_is_forbidden_on_owner_routes(client, alice) -> None:
    res = client.get("/projects/does-not-exist", headers=alice.headers)
    assert res.status_code == 403
    assert res.json()["error"] == "FORBIDDEN"


def test_update_project(client, alice, make_project) -> None:
    proj = make_project(alice)
    res = client.put(
        f"/projects/{proj['id']}",
        json={"title": "Renamed", "visibility": "PUBLIC"},
        headers=alice.headers,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["title"] == "Renamed"
    assert body["visibility"] == "PUBLIC"


def test_delete_project_cascades(client, session_factory, alice, bob, make_project, make_chapter) -> None:
    proj = make_project(alice, visibility="PUBLIC")
    ch = make_chapter(alice, proj["id"], status="PUBLISHED")
    client.post(f"/projects/{proj['id']}/likes", headers=bob.headers)
    client.post(f"/chapters/{ch['id']}/likes", headers=bob.headers)
    client.post(f"/chapters/{ch['id']}/comments", json={"content": "Nice"}, headers=bob.headers)

    res = client.delete(f"/projects/{proj['id']}", headers=alice.headers)
    assert res.status_code == 200
    assert res.json() == {"ok": True}

    session = session_factory()
    try:
        assert session.query(Chapter).count() == 0
        assert session.query(Like).count() == 0
        assert session.query(Comment).count() == 0
    finally:
        session.close()
