from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models import Book
from catalog.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """Repository for Book entity operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Book)
