from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from catalog.schemas.result import OperationResult


class EnvelopeModel(BaseModel):  # type: ignore[misc]
    """
    Uniform JSON body returned by every endpoint.

    ``httpCode`` mirrors the HTTP status of the response and ``status`` is
    true only for successful results.
    """

    model_config = ConfigDict(populate_by_name=True)

    http_code: int = Field(alias="httpCode")
    status: bool
    message: str
    data: Any = None

    @classmethod
    def from_result(cls, result: OperationResult) -> "EnvelopeModel":
        return cls(
            http_code=result.status_code,
            status=result.success,
            message=result.message,
            data=result.data,
        )


def envelope_response(
    status_code: int,
    message: str,
    data: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """
    Build a JSONResponse carrying the envelope.

    Args:
        status_code: HTTP status, mirrored as ``httpCode``.
        message: Human-readable message.
        data: Payload; must already be JSON-serializable.
        headers: Optional extra response headers.

    Returns:
        JSONResponse with the envelope body.
    """
    return to_response(
        OperationResult(status_code=status_code, message=message, data=data),
        headers=headers,
    )


def to_response(
    result: OperationResult, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Map a handler result to the HTTP response."""
    envelope = EnvelopeModel.from_result(result)
    return JSONResponse(
        status_code=result.status_code,
        content=envelope.model_dump(mode="json", by_alias=True),
        headers=headers,
    )
