# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Gives every test its own in-memory SQLite database
# - Routes the API's session dependency to that database
# =============================================================================

import os
import tempfile

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

_TEST_DIR = tempfile.mkdtemp(prefix="movie-api-tests-")

os.environ.setdefault("API_TOKEN", "test-api-token")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TEST_DIR, 'movies.db')}")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.dependencies import get_db_session
from app.main import app
from core.models import tables  # noqa: F401  (registers the ORM tables)
from core.services import seed_database
from lib.database import init_schema


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def engine():
    """Empty in-memory database shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    """Session factory bound to the test engine."""
    return sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
def db_session(engine, session_factory):
    """A session on a database with the schema applied but no rows."""
    init_schema(engine)
    session = session_factory()
    yield session
    session.close()


# =============================================================================
# API Fixtures
# =============================================================================

@pytest.fixture
def client(engine, session_factory):
    """
    TestClient on a seeded database.

    The lifespan is not run; seeding happens here against the test engine.
    """
    seed_database(engine, session_factory)

    def override_get_db_session():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db_session] = override_get_db_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Authorization header carrying the configured API token."""
    return {"Authorization": f"Bearer {settings.API_TOKEN}"}
