"""Database connection and session management."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from ..config import Settings

# Create base class for models
Base = declarative_base()


def create_engine_for(settings: Settings) -> AsyncEngine:
    """Create an async engine for the configured database URL."""
    url = settings.sqlalchemy_url()
    options = {"echo": settings.debug, "pool_pre_ping": True}
    if url.startswith("mysql"):
        options.update(pool_size=10, max_overflow=20)
    return create_async_engine(url, **options)


def make_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    """Create async session factory."""
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)
