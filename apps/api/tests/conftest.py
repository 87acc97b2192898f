"""
Pytest configuration and fixtures

Tests run against an in-memory SQLite database. The schema is created
before each test and dropped afterwards, so nothing leaks between tests.
"""
import os
import sys
from uuid import uuid4

# Must be set before anything imports core.config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-characters-long")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ["SENTRY_DSN"] = ""

# Add the parent directory to the path so we can import from services
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from fastapi.testclient import TestClient

from core.database import Base, SessionLocal, engine
from core.security import create_access_token
import models
from models import User
from services.theme_store import reset_stores


@pytest.fixture(autouse=True)
def _schema():
    """Fresh schema and empty theme caches for every test."""
    reset_stores()
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(_schema):
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client():
    from main import app

    return TestClient(app)


def _make_user(db_session, role: str) -> User:
    user = User(
        email=f"{role}_{uuid4()}@example.com",
        display_name=f"Test {role.title()}",
        role=role,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def user(db_session):
    return _make_user(db_session, "user")


@pytest.fixture
def other_user(db_session):
    return _make_user(db_session, "user")


@pytest.fixture
def admin_user(db_session):
    return _make_user(db_session, "admin")


def headers_for(user: User) -> dict:
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(user):
    return headers_for(user)


@pytest.fixture
def other_headers(other_user):
    return headers_for(other_user)


@pytest.fixture
def admin_headers(admin_user):
    return headers_for(admin_user)


@pytest.fixture
def program_factory(db_session):
    """Create wellness programs directly in the database."""

    def _create(duration_days: int = 3, program_type: str = "gratitude", title: str = None, **kwargs):
        program = models.WellnessProgram(
            program_type=program_type,
            title=title or f"{duration_days}-Day {program_type.replace('_', ' ').title()}",
            description="Test program",
            duration_days=duration_days,
            is_premium=kwargs.pop("is_premium", False),
            daily_activities=[
                {"day": d, "title": f"Day {d}", "activity": f"Activity {d}"}
                for d in range(1, duration_days + 1)
            ],
            **kwargs,
        )
        db_session.add(program)
        db_session.commit()
        db_session.refresh(program)
        return program

    return _create
