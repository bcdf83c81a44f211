from catalog.constants import BOOK_CACHE_KEY, BOOKS_CACHE_KEY
from catalog.handlers.base import ResourceHandler, ResourceMessages
from catalog.models import Book
from catalog.schemas.book import BookCreate, BookUpdate


class BookHandler(ResourceHandler[Book]):
    """Book CRUD."""

    model = Book
    create_schema = BookCreate
    update_schema = BookUpdate
    list_cache_key = BOOKS_CACHE_KEY
    entity_cache_key = BOOK_CACHE_KEY
    messages = ResourceMessages(
        listed="ok",
        created="Book created successfully!",
        fetched="Success",
        not_found="Book not found",
        missing="Book Not Found!",
        updated="Book updated successfully!",
        deleted="Delete successfully!",
        list_error="Error when fetching data",
        save_error="Error saving book to the database",
        fetch_error="Error fetching Book",
        update_error="Error while update book data",
        delete_error="Error while delete book data",
    )
