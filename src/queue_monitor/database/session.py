"""SQLAlchemy database session management.

This module provides database engine configuration, session factory,
and dependency injection for FastAPI endpoints.
"""

import logging
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from src.queue_monitor.config import settings

logger = logging.getLogger(__name__)

# SQLAlchemy declarative base for ORM models
Base = declarative_base()

# Global engine instance
_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None


def init_engine() -> Engine:
    """Initialize SQLAlchemy engine.

    Creates the database directory if it doesn't exist and initializes
    the engine with appropriate settings for SQLite.

    Returns:
        Configured SQLAlchemy engine
    """
    global _engine

    if _engine is not None:
        return _engine

    # Ensure database directory exists
    db_dir = settings.get_database_path().parent
    if not db_dir.exists():
        db_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created database directory: {db_dir}")

    _engine = create_engine(
        settings.database_url,
        connect_args={"check_same_thread": False},  # Needed for SQLite
        pool_pre_ping=True,  # Verify connections before using
        echo=settings.debug,  # Log SQL queries in debug mode
    )

    logger.info(f"Database engine initialized: {settings.database_url}")
    return _engine


def get_session_factory() -> sessionmaker:
    """Get SQLAlchemy session factory.

    Returns:
        Configured sessionmaker instance
    """
    global _SessionLocal

    if _SessionLocal is None:
        engine = init_engine()
        _SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=engine,
        )

    return _SessionLocal


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions.

    Provides a database session that is automatically closed after use.

    Yields:
        SQLAlchemy database session

    Example:
        >>> @router.get("/monitor/queues")
        >>> def list_queues(db: Session = Depends(get_db)):
        >>>     return MonitorRepository(db).list_distinct_queues()
    """
    SessionLocal = get_session_factory()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """Create all database tables.

    Creates tables for all models that inherit from Base.
    This should only be used in development; use Alembic migrations
    in production.
    """
    # Register models with Base before create_all
    from src.queue_monitor.database import models  # noqa: F401

    engine = init_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")


def check_database_connection() -> bool:
    """Check if database connection is working.

    Returns:
        True if connection is successful, False otherwise
    """
    try:
        engine = init_engine()
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False
