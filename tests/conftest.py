"""
Shared fixtures: an in-memory database and a stubbed notification dispatcher.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("NOTIFICATION_TRANSPORT", "direct")

import pytest
from unittest.mock import AsyncMock, Mock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.domain.models.notification import NotificationResult
from app.infrastructure.db import models  # noqa: F401
from app.infrastructure.db.database import Base, get_db
from app.infrastructure.email import NotificationDispatcher, get_notification_dispatcher


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def dispatcher():
    """Dispatcher stub reporting every notification as skipped."""
    dispatcher = Mock(spec=NotificationDispatcher)
    dispatcher.notify = AsyncMock(return_value=NotificationResult.skipped())
    return dispatcher


@pytest.fixture
def client(session_factory, dispatcher):
    """API client bound to the in-memory database and the stub dispatcher."""
    from app.main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notification_dispatcher] = lambda: dispatcher
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
