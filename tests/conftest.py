"""Shared fixtures: a throwaway SQLite database and fake collaborators for the API tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from ironlog.api.deps import get_coach, get_notifier
from ironlog.db.base import Base
from ironlog.db.session import get_db
from ironlog.main import app
from ironlog.models import *  # noqa: F401, F403 - register all models
from ironlog.services.notifications import NotificationSink


class FakeCoach:
    """Echoes the question; records what the API sent."""

    def __init__(self):
        self.calls = []

    async def send(self, message, context=None):
        self.calls.append((message, context))
        return f"Coach says: {message}"


class RecordingNotifier(NotificationSink):
    def __init__(self):
        self.sent = []

    def deliver(self, user_id, title, body):
        self.sent.append((title, body))


@pytest.fixture
def db_url(tmp_path):
    path = tmp_path / "ironlog-test.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def fake_coach():
    return FakeCoach()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def client(db_url, fake_coach, notifier):
    engine = create_async_engine(db_url, poolclass=NullPool)
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_coach] = lambda: fake_coach
    app.dependency_overrides[get_notifier] = lambda: notifier
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _register(client, email):
    response = client.post("/api/v1/auth/register", json={"email": email, "password": "hunter22"})
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return _register(client, "lifter@example.com")


@pytest.fixture
def other_auth_headers(client):
    return _register(client, "someone.else@example.com")
