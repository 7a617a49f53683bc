"""Pytest fixtures for API and service testing."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from katla.main import app
from katla.core.database import get_db
from katla.core.security import get_password_hash, create_access_token
from katla.core.time import utc_now
from katla.models.base import Base
from katla.models.user import User
from katla.models.hive import StoreHive, StoreHiveSection
from katla.models.category import ProductCategory

# In-memory SQLite for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Override database dependency for testing."""
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    yield db
    db.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Test client with database override.

    Note: db_session already created tables, so we don't need to create them again.
    """
    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_user(db_session):
    """Create a test user."""
    user = User(
        email="test@example.com",
        full_name="Test User",
        password_hash=get_password_hash("testpass123"),
        is_active=True
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def second_user(db_session):
    """Create a second user to tell audit stamps apart."""
    user = User(
        email="second@example.com",
        full_name="Second User",
        password_hash=get_password_hash("secondpass123"),
        is_active=True
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(test_user):
    """Get authorization headers for test user."""
    token = create_access_token(data={"sub": test_user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_hive(db_session, test_user):
    """Factory inserting a hive directly, bypassing the service."""
    def _make_hive(code, name=None, is_deleted=False, user_id=None):
        user_id = user_id or test_user.user_id
        hive = StoreHive(
            code=code,
            name=name or f"Hive {code}",
            is_deleted=is_deleted,
            created_by=user_id,
            last_updated_by=user_id,
            last_updated=utc_now(),
        )
        db_session.add(hive)
        db_session.commit()
        db_session.refresh(hive)
        return hive
    return _make_hive


@pytest.fixture
def make_section(db_session, test_user):
    """Factory inserting a hive section directly, bypassing the service."""
    def _make_section(hive, code, name=None, is_deleted=False, user_id=None):
        user_id = user_id or test_user.user_id
        section = StoreHiveSection(
            code=code,
            name=name or f"Section {code}",
            store_hive_id=hive.hive_id,
            is_deleted=is_deleted,
            created_by=user_id,
            last_updated_by=user_id,
            last_updated=utc_now(),
        )
        db_session.add(section)
        db_session.commit()
        db_session.refresh(section)
        return section
    return _make_section


@pytest.fixture
def categories(db_session):
    """Create a few product categories."""
    items = [
        ProductCategory(name="Bicycles", description="Road and mountain bicycles"),
        ProductCategory(name="Camping", description=None),
    ]
    db_session.add_all(items)
    db_session.commit()
    return items


@pytest.fixture
def commit_counter(db_session, monkeypatch):
    """Count commits issued through the test session."""
    calls = {"count": 0}
    original = db_session.commit

    def counting_commit():
        calls["count"] += 1
        original()

    monkeypatch.setattr(db_session, "commit", counting_commit)
    return calls
