"""Shared fixtures: in-memory database, API client, fake chat transports."""
import os

# Must be set before app.config is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy import create_engine

from app.main import app
from app.routes.ai_chat import get_assistant_service
from core.database.db import Base, get_db
from core.database import entities  # noqa: F401
from core.services.assistant.assistant_service import AssistantService
from core.services.auth.credential_store import CredentialStore
from core.services.errors.exceptions import NetworkError
from fakes import FakeTransport


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db_session):
    return CredentialStore(db_session)


class StubAssistant(AssistantService):
    """Assistant that echoes the page and message without a model."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    @property
    def available(self) -> bool:
        return True

    async def reply(self, message, page="home"):
        self.calls.append((message, getattr(page, "value", page)))
        if self.fail:
            raise RuntimeError("model exploded with secret internals")
        return f"[{getattr(page, 'value', page)}] you said: {message}"


@pytest.fixture
def assistant():
    return StubAssistant()


@pytest.fixture
def client(engine, assistant):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_assistant_service] = lambda: assistant
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def failing_transport():
    return FakeTransport(error=NetworkError("connection refused"))
