"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for the database, the read cache and
an HTTP client bound to the application with both of them overridden.
"""

import os

import pytest

# Set environment variables for testing before importing app modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("CACHE_REDIS_ENABLED", "false")
os.environ.setdefault("CACHE_INVALIDATE_ON_WRITE", "false")
os.environ.setdefault("LOG_FILE_PATH", "")

from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from catalog.managers.cache_manager import CacheManager  # noqa: E402


@pytest.fixture
async def db_engine():
    """
    Provides an in-memory SQLite engine with the catalog tables created.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.

    Yields:
        AsyncEngine: Engine bound to a fresh database.
    """
    from catalog.models import Author, Book  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """
    Provides a session factory bound to the test engine.

    Args:
        db_engine: In-memory engine fixture.

    Returns:
        sessionmaker: Factory producing AsyncSession instances.
    """
    return sessionmaker(db_engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
async def db_session(session_factory):
    """
    Provides a database session for repository tests.

    Yields:
        AsyncSession: Session on the in-memory database.
    """
    async with session_factory() as session:
        yield session


@pytest.fixture
def cache():
    """
    Provides an isolated memory-only cache.

    Returns:
        CacheManager: Cache with the Redis tier disabled.
    """
    return CacheManager(max_memory_entries=100, default_ttl=60, use_redis=False)


@pytest.fixture
async def client(session_factory, cache):
    """
    Provides an HTTP client for the application.

    The session and cache dependencies are overridden with the in-memory
    database and the isolated cache. The lifespan is not run, so no
    connection to the configured database is attempted.

    Args:
        session_factory: Session factory fixture.
        cache: Cache fixture.

    Yields:
        AsyncClient: Client sending requests straight to the ASGI app.
    """
    from catalog import app
    from catalog.dependencies import get_cache
    from catalog.storage.db import get_session

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_cache] = lambda: cache

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def author_payload():
    """
    Provides a valid author creation payload.

    Returns:
        dict: Author fields as sent by a client.
    """
    return {"name": "John Doe", "bio": "new author", "birth_date": "2000-12-12"}


@pytest.fixture
def book_payload():
    """
    Provides a valid book creation payload (author_id to be filled in).

    Returns:
        dict: Book fields as sent by a client.
    """
    return {
        "author_id": 1,
        "title": "First book",
        "description": "A book about books",
        "publish_date": "2021-01-01",
    }
