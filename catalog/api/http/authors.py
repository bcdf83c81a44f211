"""
Author endpoints.

Each endpoint delegates to AuthorHandler and maps the returned
OperationResult to the JSON envelope. Request bodies are read as raw JSON
and validated by the handler, so validation errors use the same envelope
and messages as every other result.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from catalog.dependencies import AuthorHandlerDep
from catalog.schemas.response import to_response
from catalog.settings import app_settings
from catalog.utils.request import read_payload

router = APIRouter(prefix=f"{app_settings.API_PREFIX}/authors", tags=["authors"])


@router.get("", summary="List all authors")
async def list_authors(handler: AuthorHandlerDep) -> JSONResponse:
    """
    List every author, ordered by id.

    Results are cached for CACHE_TTL_SECONDS under the ``authors`` key.
    """
    return to_response(await handler.list_all())


@router.post("", summary="Create an author")
async def create_author(
    request: Request, handler: AuthorHandlerDep
) -> JSONResponse:
    """
    Create a new author.

    Example:
        POST /api/authors
        {
            "name": "John Doe",
            "bio": "new author",
            "birth_date": "2000-12-12"
        }
    """
    return to_response(await handler.create(await read_payload(request)))


@router.get("/{author_id}", summary="Get an author")
async def get_author(author_id: int, handler: AuthorHandlerDep) -> JSONResponse:
    return to_response(await handler.get(author_id))


@router.api_route(
    "/{author_id}", methods=["PUT", "PATCH"], summary="Update an author"
)
async def update_author(
    author_id: int, request: Request, handler: AuthorHandlerDep
) -> JSONResponse:
    """
    Partially update an author.

    Only the fields present in the body are changed.
    """
    return to_response(
        await handler.update(author_id, await read_payload(request))
    )


@router.delete("/{author_id}", summary="Delete an author")
async def delete_author(
    author_id: int, handler: AuthorHandlerDep
) -> JSONResponse:
    return to_response(await handler.delete(author_id))


@router.get("/{author_id}/books", summary="List the books of an author")
async def list_author_books(
    author_id: int, handler: AuthorHandlerDep
) -> JSONResponse:
    """
    List the books of an author, each with an ``author_name`` field.

    An unknown author yields an empty list.
    """
    return to_response(await handler.list_books(author_id))
