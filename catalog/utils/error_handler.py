"""
Error handling for resource handlers and the FastAPI application.

``handle_errors`` wraps a handler operation so that any unexpected
exception becomes a generic 500 ``OperationResult`` instead of escaping.
``register_exception_handlers`` makes sure that errors raised by the
framework itself (bad path parameters, unknown routes, uncaught
exceptions) are answered with the same JSON envelope as handler results.
"""

from functools import wraps
from typing import Any, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.exceptions import AppException
from catalog.logging import logger
from catalog.schemas.response import envelope_response
from catalog.schemas.result import VALIDATION_FAILED_MESSAGE, OperationResult
from catalog.utils.validation import format_error

INTERNAL_ERROR_MESSAGE = "Internal server error"


def handle_errors(message_attr: str) -> Callable:
    """
    Decorator converting unexpected exceptions into a 500 result.

    The client-facing message is read from ``self.messages.<message_attr>``
    so that each resource handler keeps its own wording. Exception details
    are logged with traceback and never returned.

    Args:
        message_attr: Name of the attribute of ``self.messages`` holding
            the generic error message of the operation.

    Returns:
        Decorator for async handler methods returning OperationResult.

    Example:
        ```python
        class AuthorHandler(ResourceHandler[Author]):
            @handle_errors("fetch_error")
            async def get(self, author_id: int) -> OperationResult:
                ...
        ```
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(self, *args: Any, **kwargs: Any) -> OperationResult:
            try:
                return await func(self, *args, **kwargs)
            except Exception as ex:
                logger.error(
                    f"Unexpected error in {type(self).__name__}.{func.__name__}: {ex}",
                    extra={"exception_type": type(ex).__name__},
                    exc_info=True,
                )
                return OperationResult.error(getattr(self.messages, message_attr))

        return wrapper

    return decorator


def request_validation_errors(
    exc: RequestValidationError,
) -> dict[str, list[str]]:
    """
    Group framework validation errors by parameter name.

    The location prefix (``path``, ``query``, ``body``) is dropped, so a
    bad ``/api/authors/abc`` yields ``{"author_id": [...]}``.
    """
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("input",)
        field = str(loc[-1])
        errors.setdefault(field, []).append(
            format_error({**error, "loc": (field,)})
        )
    return errors


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = request_validation_errors(exc)
    logger.info(f"Request validation failed for {request.url.path}: {errors}")
    return envelope_response(422, VALIDATION_FAILED_MESSAGE, errors)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return envelope_response(
        exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
    )


async def app_exception_handler(
    request: Request, exc: AppException
) -> JSONResponse:
    logger.warning(
        f"{type(exc).__name__} on {request.url.path}: {exc.message}",
        extra={"exception_type": type(exc).__name__},
    )
    data = exc.data
    if data is None and exc.http_status >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        data = []
    return envelope_response(exc.http_status, exc.message, data)


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    logger.error(
        f"Unhandled error on {request.url.path}: {exc}",
        extra={"exception_type": type(exc).__name__},
        exc_info=exc,
    )
    return envelope_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE, []
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the envelope-producing exception handlers on the application.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
