"""
Outcome of a resource handler operation.

Handlers never raise for expected outcomes. Success, validation failure,
not-found and unexpected failure are all returned as an OperationResult,
which the HTTP layer turns into the response envelope.
"""

from typing import Any

from fastapi import status
from pydantic import BaseModel

VALIDATION_FAILED_MESSAGE = "Validation failed"


class OperationResult(BaseModel):  # type: ignore[misc]
    """
    Result of a single handler operation.

    Attributes:
        status_code: HTTP status code the result maps to.
        message: Human-readable message for the client.
        data: Entity, list of entities, error map, empty list or None.
    """

    status_code: int
    message: str
    data: Any = None

    @property
    def success(self) -> bool:
        """True for 2xx/3xx results."""
        return self.status_code < status.HTTP_400_BAD_REQUEST

    @classmethod
    def ok(cls, data: Any, message: str) -> "OperationResult":
        return cls(status_code=status.HTTP_200_OK, message=message, data=data)

    @classmethod
    def created(cls, data: Any, message: str) -> "OperationResult":
        return cls(
            status_code=status.HTTP_201_CREATED, message=message, data=data
        )

    @classmethod
    def not_found(cls, message: str) -> "OperationResult":
        return cls(
            status_code=status.HTTP_404_NOT_FOUND, message=message, data=None
        )

    @classmethod
    def invalid(
        cls,
        errors: dict[str, list[str]],
        message: str = VALIDATION_FAILED_MESSAGE,
    ) -> "OperationResult":
        return cls(
            status_code=422,
            message=message,
            data=errors,
        )

    @classmethod
    def error(cls, message: str) -> "OperationResult":
        return cls(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=message,
            data=[],
        )
