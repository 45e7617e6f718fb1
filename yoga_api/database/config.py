"""
Database configuration and connection management using SQLModel.
"""

from functools import lru_cache

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool, StaticPool
from sqlmodel import create_engine, SQLModel, Session
import structlog

from ..config.settings import get_settings

logger = structlog.get_logger(__name__)


def build_engine(database_url: str, **pool_options) -> Engine:
    """
    Create an engine for the given URL.

    In-memory SQLite gets a single shared connection so every session sees
    the same database; everything else uses a connection pool.
    """
    if database_url.startswith("sqlite"):
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            return create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
                echo=pool_options.get("echo", False),
            )
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=pool_options.get("echo", False),
        )

    return create_engine(
        database_url,
        poolclass=QueuePool,
        pool_size=pool_options.get("pool_size", 10),
        max_overflow=pool_options.get("max_overflow", 20),
        pool_timeout=pool_options.get("pool_timeout", 30),
        pool_recycle=pool_options.get("pool_recycle", 3600),
        pool_pre_ping=True,
        echo=pool_options.get("echo", False),
    )


@lru_cache()
def get_engine() -> Engine:
    """Get the process-wide engine, created on first use."""
    settings = get_settings()
    return build_engine(
        settings.database_url_computed,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_timeout=settings.pool_timeout,
        pool_recycle=settings.pool_recycle,
        echo=settings.echo_sql,
    )


def get_db():
    """
    Database dependency for FastAPI.

    Yields:
        Session: SQLModel database session
    """
    with Session(get_engine()) as db:
        try:
            yield db
        except Exception as e:
            logger.error("Database session error", error=str(e))
            db.rollback()
            raise


async def init_database() -> None:
    """Initialize database tables."""
    # Import models to register them with SQLModel
    from . import models  # noqa: F401

    try:
        SQLModel.metadata.create_all(bind=get_engine())
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise


def check_database_connection() -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection is working, False otherwise
    """
    try:
        with get_engine().connect() as conn:
            result = conn.execute(text("SELECT 1"))
            return result.fetchone() is not None
    except Exception as e:
        logger.error("Database connection check failed", error=str(e))
        return False
