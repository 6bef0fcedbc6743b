"""Pytest fixtures and configuration for wpclife tests."""

import os

# Keep the app's module-level engine off disk during tests.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from datetime import datetime, timezone
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from wpclife.database.database import Base, get_db
from wpclife.database import models as _models  # noqa: F401
from wpclife.database.repository import HouseholdRepository
from wpclife.database.family_repository import FamilyRepository
from wpclife.engine.dispatcher import ScheduleDispatcher


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"

# Fixed "now" for deterministic date defaults: 2024-07-04 16:00 UTC (noon in New York)
FIXED_NOW = datetime(2024, 7, 4, 16, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="function")
def db_session(test_family_id):
    """Create a database session for testing.

    Uses an in-memory SQLite database that is created fresh for each test.
    Seeds one family ("Smith") with two members in a fixed join order, plus a
    newer second family so the default-family fallback is deterministic.
    """
    from wpclife.database.models import FamilyDB, UserDB, FamilyMemberDB

    # Create engine with StaticPool for in-memory database
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    session.add(FamilyDB(id=test_family_id, name="Smith", created_at=datetime(2024, 1, 1)))
    session.add(FamilyDB(id="family-jones", name="Jones", created_at=datetime(2024, 6, 1)))
    session.add(UserDB(id="user-vasin", name="Vasin Smith", email="vasin@example.com"))
    session.add(UserDB(id="user-alice", name="Alice", email=None, is_child=True))
    session.add(UserDB(id="user-bob", name="Bob Jones", email="bob@example.com"))
    session.flush()
    session.add(FamilyMemberDB(id="m1", family_id=test_family_id, user_id="user-vasin", joined_at=datetime(2024, 1, 1)))
    session.add(FamilyMemberDB(id="m2", family_id=test_family_id, user_id="user-alice", joined_at=datetime(2024, 1, 2)))
    session.add(FamilyMemberDB(id="m3", family_id="family-jones", user_id="user-bob", joined_at=datetime(2024, 6, 1)))
    session.commit()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_family_id():
    """Family ID of the seeded Smith household."""
    return "family-smith"


@pytest.fixture
def household_repository(db_session: Session):
    """Create a HouseholdRepository instance for testing."""
    return HouseholdRepository(db_session)


@pytest.fixture
def family_repository(db_session: Session):
    """Create a FamilyRepository instance for testing."""
    return FamilyRepository(db_session)


@pytest.fixture
def dispatcher(household_repository, family_repository):
    """Dispatcher bound to the test database with a fixed clock."""
    return ScheduleDispatcher(household_repository, family_repository, clock=lambda: FIXED_NOW)


@pytest.fixture
def stub_client():
    """Completion provider stub.

    Set ``stub_client.complete.return_value`` to the raw text the provider
    should return.
    """
    client = MagicMock()
    client.is_configured = True
    client.complete.return_value = "[]"
    return client


@pytest.fixture
def test_client(db_session: Session):
    """Create a FastAPI test client with overridden database dependency."""
    from wpclife.api.app import app

    # Override the get_db dependency to use our test database session
    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Don't close the session here, let the fixture handle it

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    # Clean up dependency overrides
    app.dependency_overrides.clear()
