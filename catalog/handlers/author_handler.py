from dataclasses import dataclass

from catalog.constants import AUTHOR_CACHE_KEY, AUTHORS_CACHE_KEY
from catalog.handlers.base import ResourceHandler, ResourceMessages
from catalog.models import Author
from catalog.repositories.author_repository import AuthorRepository
from catalog.schemas.author import AuthorCreate, AuthorUpdate
from catalog.schemas.book import AuthorBookRead
from catalog.schemas.result import OperationResult
from catalog.utils.error_handler import handle_errors


@dataclass(frozen=True)
class AuthorMessages(ResourceMessages):
    books_listed: str
    books_error: str


class AuthorHandler(ResourceHandler[Author]):
    """Author CRUD plus the listing of an author's books."""

    model = Author
    create_schema = AuthorCreate
    update_schema = AuthorUpdate
    list_cache_key = AUTHORS_CACHE_KEY
    entity_cache_key = AUTHOR_CACHE_KEY
    messages = AuthorMessages(
        listed="ok",
        created="Author created successfully!",
        fetched="Success",
        not_found="Author not found",
        missing="Author Not Found!",
        updated="Author updated successfully!",
        deleted="Delete successfully!",
        list_error="Error when fetching data",
        save_error="Error saving author to the database",
        fetch_error="Error fetching author",
        update_error="Error while update author data",
        delete_error="Error while delete author data",
        books_listed="Books retrieved successfully",
        books_error="Error fetching books by author",
    )

    repository: AuthorRepository

    @handle_errors("books_error")
    async def list_books(self, author_id: int) -> OperationResult:
        """
        List the books of an author with the author's name on each book.

        Not cached. An unknown author, or one without books, gives an
        empty list.

        Args:
            author_id: Author whose books are listed.

        Returns:
            200 result with the joined rows.
        """
        rows = await self.repository.get_books_with_author_name(author_id)
        data = [
            AuthorBookRead.model_validate(row).model_dump(mode="json")
            for row in rows
        ]
        return OperationResult.ok(data, self.messages.books_listed)
