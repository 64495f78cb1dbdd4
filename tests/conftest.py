import os
from itertools import count
from types import SimpleNamespace

# Must be set before the app modules build their engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import build_engine, get_db
from main import app
from models.base import Base
from models.chapter import Chapter

_emails = count(1)


@pytest.fixture
def engine():
    eng = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


@pytest.fixture
def db(session_factory):
    """A session for setting up and inspecting rows directly."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    def _make(name: str = "Tester", password: str = "password123"):
        email = f"user{next(_emails)}@example.com"
        res = client.post("/register", json={"email": email, "password": password, "name": name})
        assert res.status_code == 201, res.text
        res = client.post("/auth/login", json={"email": email, "password": password})
        assert res.status_code == 200, res.text
        body = res.json()
        return SimpleNamespace(
            id=body["user"]["id"],
            email=email,
            token=body["access_token"],
            headers={"Authorization": f"Bearer {body['access_token']}"},
        )

    return _make


@pytest.fixture
def alice(make_user):
    return make_user("Alice")


@pytest.fixture
def bob(make_user):
    return make_user("Bob")


@pytest.fixture
def make_project(client):
    def _make(owner, title: str = "My Story", visibility: str = "PRIVATE", **extra):
        res = client.post(
            "/projects",
            json={"title": title, "visibility": visibility, **extra},
            headers=owner.headers,
        )
        assert res.status_code == 201, res.text
        return res.json()

    return _make


@pytest.fixture
def make_chapter(client):
    def _make(owner, project_id: str, title: str = "Chapter", **extra):
        res = client.post(
            "/chapters",
            json={"projectId": project_id, "title": title, **extra},
            headers=owner.headers,
        )
        assert res.status_code == 201, res.text
        return res.json()

    return _make


@pytest.fixture
def chapter_order(session_factory):
    """Current ``{chapter_id: index}`` of a project, read in a fresh session."""
    def _read(project_id: str) -> dict[str, int]:
        session = session_factory()
        try:
            rows = session.query(Chapter).filter(Chapter.project_id == project_id).all()
            return {ch.id: ch.index for ch in rows}
        finally:
            session.close()

    return _read
