# backend/tests/unit/conftest.py
import os

# Point the app at SQLite before projecthub.db builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from projecthub.main import app
from projecthub.db import Base, get_db
from projecthub import models
from projecthub.enums import ProjectStatus
from projecthub.auth import create_access_token, get_password_hash

# One in-memory DB shared across threads (TestClient) via StaticPool
engine = create_engine(
    "sqlite+pysqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# Enforce FKs in SQLite (off by default otherwise)
@event.listens_for(engine, "connect")
def _set_sqlite_pragma(dbapi_connection, _):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base.metadata.create_all(bind=engine)

@pytest.fixture
def connection():
    conn = engine.connect()
    tx = conn.begin()
    try:
        yield conn
    finally:
        tx.rollback()
        conn.close()

@pytest.fixture
def db_session(connection):
    session = TestingSessionLocal(bind=connection)
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def _override_get_db(db_session):
    def _get_db():
        yield db_session
    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client():
    return TestClient(app)

@pytest.fixture
def test_db(db_session):
    """Alias so tests written for `test_db` use the SQLite session."""
    return db_session


def _make_user(db_session, email: str, name: str) -> models.User:
    user = models.User(
        email=email,
        name=name,
        password_hash=get_password_hash("testpass123"),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def headers_for(user: models.User) -> dict:
    token = create_access_token(data={"sub": user.email, "user_id": user.id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def owner(db_session) -> models.User:
    """User who owns the projects under test"""
    return _make_user(db_session, "owner@example.com", "Owner")


@pytest.fixture
def other_user(db_session) -> models.User:
    """A second, unrelated user"""
    return _make_user(db_session, "other@example.com", "Other")


@pytest.fixture
def auth_headers(owner) -> dict:
    return headers_for(owner)


@pytest.fixture
def other_headers(other_user) -> dict:
    return headers_for(other_user)


@pytest.fixture
def make_project(db_session):
    """Insert a project directly, bypassing the service layer"""
    def _make(owner: models.User, **overrides) -> models.Project:
        fields = {
            "name": "Existing Project",
            "description": "Already here.",
            "status": ProjectStatus.ACTIVE,
        }
        fields.update(overrides)
        project = models.Project(owner_id=owner.id, **fields)
        db_session.add(project)
        db_session.commit()
        db_session.refresh(project)
        return project
    return _make
