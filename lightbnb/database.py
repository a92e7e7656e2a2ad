"""
Database connection and session management.
Handles async database operations with SQLAlchemy and connection pooling.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool
from sqlalchemy import Integer, text
from lightbnb.config import settings
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)


def engine_options(url: str, application_name: str = "lightbnb") -> Dict[str, Any]:
    """
    Build engine keyword arguments for the given database URL.

    PostgreSQL gets a sized connection pool; SQLite (used by the test suite)
    shares a single connection so in-memory databases survive between sessions.
    """
    if url.startswith("sqlite"):
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }

    return {
        "pool_size": 10,
        "max_overflow": 20,
        "pool_pre_ping": True,  # Validate connections before use
        "pool_recycle": 3600,
        "pool_timeout": 30,
        "connect_args": {
            "server_settings": {
                "application_name": application_name,
            }
        },
    }


def build_engine(url: str, application_name: str = "lightbnb") -> AsyncEngine:
    """Create an async engine for ``url``."""
    return create_async_engine(url, echo=settings.debug, **engine_options(url, application_name))


engine = build_engine(settings.database_url)

# Create test engine for testing environment
test_engine = None
if settings.is_testing:
    test_engine = build_engine(settings.test_database_url, "lightbnb_test")

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Test session factory
TestAsyncSessionLocal = None
if test_engine:
    TestAsyncSessionLocal = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


class Base(DeclarativeBase):
    """
    Base class for all database models.
    Every LightBnB table uses an auto-incrementing integer primary key.
    """

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


def get_session_factory() -> async_sessionmaker:
    """Return the session factory for the current environment."""
    if settings.is_testing and TestAsyncSessionLocal:
        return TestAsyncSessionLocal
    return AsyncSessionLocal


def get_engine() -> AsyncEngine:
    """Return the engine for the current environment."""
    if settings.is_testing and test_engine:
        return test_engine
    return engine


async def test_database_connection() -> bool:
    """
    Test database connectivity.
    Returns True if connection is successful, False otherwise.
    """
    try:
        async with get_session_factory()() as session:
            result = await session.execute(text("SELECT 1"))
            result.scalar()
            logger.info("Database connection successful")
            return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


async def create_tables():
    """Create all database tables."""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")


async def drop_tables():
    """
    Drop all database tables.
    This should only be used in testing or development.
    """
    if not settings.is_testing and not settings.is_development:
        raise RuntimeError("Cannot drop tables in production environment")

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        logger.info("Database tables dropped successfully")


async def close_db_connection():
    """Close database connections."""
    await engine.dispose()
    if test_engine:
        await test_engine.dispose()
    logger.info("Database connections closed")
