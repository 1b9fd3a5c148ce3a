"""Pytest fixtures for queue monitor server tests.

This module provides test fixtures for database sessions, test clients,
settings overrides and job record factories.
"""

from datetime import datetime, timedelta
from typing import Callable, Generator, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.queue_monitor.config import Settings, get_settings
from src.queue_monitor.database.session import Base, get_db
from src.queue_monitor.main import app

# Import all models to ensure they're registered with Base
from src.queue_monitor.database.models import Monitor  # noqa: F401

# Fixed reference clock for window arithmetic
NOW = datetime(2026, 10, 10, 12, 0, 0)


@pytest.fixture(scope="function")
def test_db() -> Generator[Session, None, None]:
    """Create a test database session.

    Creates an in-memory SQLite database for testing that is
    destroyed after each test function completes.

    Yields:
        SQLAlchemy session for testing
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,  # Keep connection alive for in-memory database
    )

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a small page size and metrics enabled."""
    return Settings(per_page=5, show_metrics=True, metrics_time_frame=2)


@pytest.fixture(scope="function")
def client(test_db: Session, test_settings: Settings) -> TestClient:
    """Create a test client with test database and settings.

    Args:
        test_db: Test database session fixture
        test_settings: Settings fixture

    Returns:
        FastAPI TestClient for making test requests
    """

    def override_get_db():
        """Override database dependency with test database."""
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings

    with TestClient(app) as test_client:
        yield test_client

    test_db.rollback()
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client_no_db() -> TestClient:
    """Create a test client without database mocking."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_record(test_db: Session) -> Callable[..., Monitor]:
    """Factory inserting a job record.

    Pass elapsed=None for a running job; otherwise the record is finished
    `elapsed` seconds after it started.
    """

    def _make(
        queue: str = "default",
        started_at: Optional[datetime] = None,
        elapsed: Optional[float] = 1.0,
        failed: bool = False,
        name: str = "ProcessPodcast",
    ) -> Monitor:
        started_at = started_at or NOW - timedelta(hours=1)
        record = Monitor(
            queue=queue,
            name=name,
            started_at=started_at,
            failed=failed,
        )
        if elapsed is not None:
            record.finished_at = started_at + timedelta(seconds=elapsed)
            record.time_elapsed = elapsed
        test_db.add(record)
        test_db.commit()
        test_db.refresh(record)
        return record

    return _make


@pytest.fixture
def mixed_records(make_record) -> list[Monitor]:
    """Running, succeeded and failed records across three queues."""
    base = NOW - timedelta(hours=6)
    return [
        make_record("default", base, elapsed=2.0),
        make_record("default", base + timedelta(minutes=1), elapsed=3.0, failed=True),
        make_record("emails", base + timedelta(minutes=2), elapsed=None),
        make_record("emails", base + timedelta(minutes=3), elapsed=1.5),
        make_record("reports", base + timedelta(minutes=4), elapsed=40.0, failed=True),
        make_record("reports", base + timedelta(minutes=5), elapsed=None),
        make_record("default", base + timedelta(minutes=6), elapsed=0.5),
    ]
