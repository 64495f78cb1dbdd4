import pytest


@pytest.fixture
def library(client, alice, bob, make_project, make_chapter):
    public = make_project(alice, "Public Story", visibility="PUBLIC", synopsis="Out in the open")
    private = make_project(alice, "Private Story", visibility="PRIVATE")
    doc = {"type": "doc", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Once"}]}]}
    first = make_chapter(alice, public["id"], title="Published One", status="PUBLISHED", content=doc)
    draft = make_chapter(alice, public["id"], title="Draft")
    second = make_chapter(alice, public["id"], title="Published Two", status="PUBLISHED")
    make_chapter(alice, private["id"], title="Hidden", status="PUBLISHED")
    client.post(f"/projects/{public['id']}/likes", headers=bob.headers)
    client.post(f"/projects/{public['id']}/comments", json={"content": "Great"}, headers=bob.headers)
    return {"public": public, "private": private, "first": first, "draft": draft, "second": second}


def test_public_list_shows_only_public_projects(client, library) -> None:
    res = client.get("/public")
    assert res.status_code == 200
    projects = res.json()
    assert [p["id"] for p in projects] == [library["public"]["id"]]
    view = projects[0]
    assert view["owner"]["name"] == "Alice"
    assert "email" not in view["owner"]
    assert view["published_chapter_count"] == 2
    assert view["like_count"] == 1
    assert view["comment_count"] == 1


def test_public_detail_has_published_chapters_in_order(client, library) -> None:
    res = client.get(f"/public/{library['public']['id']}")
    assert res.status_code == 200
    body = res.json()
    assert body["synopsis"] == "Out in the open"
    assert [c["id"] for c in body["chapters"]] == [library["first"]["id"], library["second"]["id"]]
    assert [c["index"] for c in body["chapters"]] == [0, 2]
    assert body["chapters"][0]["content_html"] == "<p>Once</p>"


def test_public_detail_follows_reorder(client, alice, library) -> None:
    ids = [library["second"]["id"], library["draft"]["id"], library["first"]["id"]]
    client.put(
        "/chapters/reorder",
        json={"projectId": library["public"]["id"], "orderedChapterIds": ids},
        headers=alice.headers,
    )
    body = client.get(f"/public/{library['public']['id']}").json()
    assert [c["title"] for c in body["chapters"]] == ["Published Two", "Published One"]


def test_private_project_is_not_found_for_everyone(client, alice, library) -> None:
    url = f"/public/{library['private']['id']}"
    assert client.get(url).status_code == 404
    res = client.get(url, headers=alice.headers)
    assert res.status_code == 404
    assert "Private Story" not in res.text


def test_missing_project_is_not_found(client) -> None:
    res = client.get("/public/does-not-exist")
    assert res.status_code == 404
    assert res.json()["error"] == "NOT_FOUND"
