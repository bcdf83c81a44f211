"""
Dependency injection configuration for FastAPI.

This module wires database sessions, the read cache, repositories and
resource handlers together with FastAPI's Depends() system. Every piece can
be replaced in tests through ``app.dependency_overrides``.

Example:
    ```python
    from fastapi import APIRouter
    from catalog.dependencies import AuthorHandlerDep

    router = APIRouter()

    @router.get("/authors")
    async def list_authors(handler: AuthorHandlerDep):
        return to_response(await handler.list_all())
    ```
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.handlers.author_handler import AuthorHandler
from catalog.handlers.book_handler import BookHandler
from catalog.managers.cache_manager import get_cache_manager
from catalog.protocols import Cache
from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository
from catalog.storage.db import get_session

# ============================================================================
# Database Session Dependencies
# ============================================================================

SessionDep = Annotated[AsyncSession, Depends(get_session)]


# ============================================================================
# Cache Dependencies
# ============================================================================


def get_cache() -> Cache:
    """
    Get the process-wide read cache.

    Override in tests to hand the handlers an isolated cache instance.

    Returns:
        The global CacheManager instance.
    """
    return get_cache_manager()


CacheDep = Annotated[Cache, Depends(get_cache)]


# ============================================================================
# Repository Dependencies
# ============================================================================


def get_author_repository(session: SessionDep) -> AuthorRepository:
    """
    Get Author repository instance.

    Args:
        session: Database session (injected).

    Returns:
        AuthorRepository instance.
    """
    return AuthorRepository(session)


def get_book_repository(session: SessionDep) -> BookRepository:
    """
    Get Book repository instance.

    Args:
        session: Database session (injected).

    Returns:
        BookRepository instance.
    """
    return BookRepository(session)


AuthorRepoDep = Annotated[AuthorRepository, Depends(get_author_repository)]
BookRepoDep = Annotated[BookRepository, Depends(get_book_repository)]


# ============================================================================
# Handler Dependencies
# ============================================================================


def get_author_handler(repo: AuthorRepoDep, cache: CacheDep) -> AuthorHandler:
    return AuthorHandler(repo, cache)


def get_book_handler(repo: BookRepoDep, cache: CacheDep) -> BookHandler:
    return BookHandler(repo, cache)


AuthorHandlerDep = Annotated[AuthorHandler, Depends(get_author_handler)]
BookHandlerDep = Annotated[BookHandler, Depends(get_book_handler)]
