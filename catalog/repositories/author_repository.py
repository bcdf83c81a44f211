"""
Repository for Author entity with specialized query methods.

Example:
    ```python
    from catalog.repositories.author_repository import AuthorRepository
    from catalog.storage.db import async_session

    async with async_session() as session:
        repo = AuthorRepository(session)
        authors = await repo.get_all()
        books = await repo.get_books_with_author_name(1)
    ```
"""

from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.logging import logger
from catalog.models import Author, Book
from catalog.repositories.base import BaseRepository, is_storable_id


class AuthorRepository(BaseRepository[Author]):
    """
    Repository for Author entity operations.

    Provides CRUD operations inherited from BaseRepository plus the
    books-by-author join.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Author repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, Author)

    async def get_books_with_author_name(
        self, author_id: int
    ) -> list[dict[str, Any]]:
        """
        Get the books of an author, each with the author's name attached.

        Joins books to authors on ``books.author_id = authors.id``. Books
        pointing at a missing author are not returned, and an unknown
        author yields an empty list.

        Args:
            author_id: Author whose books are listed.

        Returns:
            One dict per book: every book column plus ``author_name``.

        Raises:
            SQLAlchemyError: If database query fails.
        """
        if not is_storable_id(author_id):
            return []

        try:
            stmt = (
                select(Book, Author.name.label("author_name"))
                .join(Author, Book.author_id == Author.id)
                .where(Book.author_id == author_id)
                .order_by(Book.id)
            )
            result = await self.session.exec(stmt)
            return [
                {**book.model_dump(), "author_name": author_name}
                for book, author_name in result.all()
            ]
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving books of author {author_id}: {e}")
            raise
