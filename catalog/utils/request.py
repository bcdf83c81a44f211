from typing import Any

from fastapi import Request

from catalog.logging import logger


async def read_payload(request: Request) -> Any:
    """
    Decode the JSON request body.

    An empty or malformed body is treated as an empty payload, so the
    validation rules report every required field as missing.

    Args:
        request: The incoming HTTP request.

    Returns:
        The decoded JSON value, or ``{}``.
    """
    try:
        return await request.json()
    except ValueError as ex:
        logger.debug(f"Request body is not valid JSON: {ex}")
        return {}
