from models.comment import Comment


def _comment_rows(session_factory) -> int:
    session = session_factory()
    try:
        return session.query(Comment).count()
    finally:
        session.close()


def test_project_comment_is_trimmed_and_has_author(client, alice, bob, make_project) -> None:
    proj = make_project(alice, visibility="PUBLIC")
    res = client.post(f"/projects/{proj['id']}/comments", json={"content": "  Hello  "}, headers=bob.headers)
    assert res.status_code == 201
    body = res.json()
    assert body["content"] == "Hello"
    assert body["chapter_id"] is None
    assert body["user"] == {"id": bob.id, "name": "Bob", "email": bob.email}


def test_whitespace_comment_is_rejected(client, session_factory, alice, bob, make_project) -> None:
    proj = make_project(alice, visibility="PUBLIC")
    res = client.post(f"/projects/{proj['id']}/comments", json={"content": "   "}, headers=bob.headers)
    assert res.status_code == 400
    assert res.json()["error"] == "VALIDATION_ERROR"
    assert _comment_rows(session_factory) == 0


def test_comment_requires_login(client, alice, make_project) -> None:
    proj = make_project(alice, visibility="PUBLIC")
    res = client.post(f"/projects/{proj['id']}/comments", json={"content": "Hi"})
    assert res.status_code == 401


def test_comments_listed_newest_first(client, alice, bob, make_project) -> None:
    proj = make_project(alice, visibility="PUBLIC")
    url = f"/projects/{proj['id']}/comments"
    for text in ("first", "second", "third"):
        assert client.post(url, json={"content": text}, headers=bob.headers).status_code == 201
    res = client.get(url)
    assert res.status_code == 200
    assert [c["content"] for c in res.json()] == ["third", "second", "first"]


def test_chapter_comment_carries_project_and_stays_out_of_project_feed(
    client, alice, bob, make_project, make_chapter
) -> None:
    proj = make_project(alice, visibility="PUBLIC")
    ch = make_chapter(alice, proj["id"], status="PUBLISHED")
    client.post(f"/projects/{proj['id']}/comments", json={"content": "On the book"}, headers=bob.headers)
    res = client.post(f"/chapters/{ch['id']}/comments", json={"content": "On the chapter"}, headers=bob.headers)
    assert res.status_code == 201
    assert res.json()["project_id"] == proj["id"]
    assert res.json()["chapter_id"] == ch["id"]

    project_feed = client.get(f"/projects/{proj['id']}/comments").json()
    chapter_feed = client.get(f"/chapters/{ch['id']}/comments").json()
    assert [c["content"] for c in project_feed] == ["On the book"]
    assert [c["content"] for c in chapter_feed] == ["On the chapter"]


def test_comments_on_private_content_are_not_found(client, session_factory, alice, make_project, make_chapter) -> None:
    proj = make_project(alice, visibility="PRIVATE")
    ch = make_chapter(alice, proj["id"], status="PUBLISHED")
    assert client.get(f"/projects/{proj['id']}/comments").status_code == 404
    assert client.get(f"/chapters/{ch['id']}/comments").status_code == 404
    res = client.post(f"/projects/{proj['id']}/comments", json={"content": "Hi"}, headers=alice.headers)
    assert res.status_code == 404
    res = client.post(f"/chapters/{ch['id']}/comments", json={"content": "Hi"}, headers=alice.headers)
    assert res.status_code == 404
    assert _comment_rows(session_factory) == 0


def test_comments_on_draft_chapter_are_not_found(client, alice, bob, make_project, make_chapter) -> None:
    proj = make_project(alice, visibility="PUBLIC")
    draft = make_chapter(alice, proj["id"])
    assert client.get(f"/chapters/{draft['id']}/comments").status_code == 404
    res = client.post(f"/chapters/{draft['id']}/comments", json={"content": "Early"}, headers=bob.headers)
    assert res.status_code == 404
