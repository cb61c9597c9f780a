"""
Shared fixtures for the IdeaSpark API tests.

Tests never touch a real database or provider:
  1. Environment is set BEFORE the app is imported so config picks it up.
  2. An in-memory SQLite engine (StaticPool) replaces the session dependency.
  3. A FakeProvider replaces the configured LLM provider.
"""
import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "10"
os.environ["FREE_DAILY_GENERATIONS"] = "2"
os.environ["TRUST_FORWARDED_FOR"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ideaspark.main import app
from ideaspark.db.base import Base
import ideaspark.db.models  # noqa: F401
from ideaspark.core.auth_dependency import get_db, get_token_service
from ideaspark.core.security import TokenService
from ideaspark.api.routes.content import get_llm_provider

from fakes import FakeProvider


TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db():
    """Fresh schema for each test."""
    Base.metadata.create_all(bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def token_service():
    return TokenService(secret_key="test-secret-key", algorithm="HS256", expires_hours=24)


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def client(db, fake_provider, token_service):
    """TestClient wired to the in-memory database and fake provider."""
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_llm_provider] = lambda: fake_provider
    app.dependency_overrides[get_token_service] = lambda: token_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    """Sign up a user through the API and return its credentials and token."""
    credentials = {"email": "writer@example.com", "password": "testpass123", "fullName": "Test Writer"}
    response = client.post("/api/auth/signup", json=credentials)
    assert response.status_code == 200
    data = response.json()
    return {**credentials, "id": data["user"]["id"], "token": data["token"]}
