"""Book endpoints."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from catalog.dependencies import BookHandlerDep
from catalog.schemas.response import to_response
from catalog.settings import app_settings
from catalog.utils.request import read_payload

router = APIRouter(prefix=f"{app_settings.API_PREFIX}/books", tags=["books"])


@router.get("", summary="List all books")
async def list_books(handler: BookHandlerDep) -> JSONResponse:
    return to_response(await handler.list_all())


@router.post("", summary="Create a book")
async def create_book(request: Request, handler: BookHandlerDep) -> JSONResponse:
    """
    Create a new book.

    The author is not checked for existence.

    Example:
        POST /api/books
        {
            "author_id": 1,
            "title": "First book",
            "description": "A book",
            "publish_date": "2021-01-01"
        }
    """
    return to_response(await handler.create(await read_payload(request)))


@router.get("/{book_id}", summary="Get a book")
async def get_book(book_id: int, handler: BookHandlerDep) -> JSONResponse:
    return to_response(await handler.get(book_id))


@router.api_route("/{book_id}", methods=["PUT", "PATCH"], summary="Update a book")
async def update_book(
    book_id: int, request: Request, handler: BookHandlerDep
) -> JSONResponse:
    return to_response(await handler.update(book_id, await read_payload(request)))


@router.delete("/{book_id}", summary="Delete a book")
async def delete_book(book_id: int, handler: BookHandlerDep) -> JSONResponse:
    return to_response(await handler.delete(book_id))
