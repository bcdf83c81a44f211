"""Health check endpoint for monitoring service status."""

from typing import Any

from fastapi import APIRouter, Response, status
from pydantic import BaseModel
from redis.exceptions import RedisError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from catalog.logging import logger
from catalog.managers.cache_manager import get_cache_manager
from catalog.settings import app_settings
from catalog.storage.db import engine
from catalog.storage.redis import get_redis_connection

router = APIRouter()

HEALTHY = "healthy"
UNHEALTHY = "unhealthy"
DISABLED = "disabled"


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str
    database: str
    redis: str
    cache: dict[str, Any]


async def check_database() -> str:
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError, TimeoutError) as e:
        logger.error(f"Database health check failed: {e}")
        return UNHEALTHY
    return HEALTHY


async def check_redis() -> str:
    if not app_settings.CACHE_REDIS_ENABLED:
        return DISABLED

    try:
        r = await get_redis_connection(db=app_settings.MAIN_REDIS_DB)
        if r is None:
            return UNHEALTHY
        await r.ping()
    except (RedisError, ConnectionError, TimeoutError, OSError) as e:
        logger.error(f"Redis health check failed: {e}")
        return UNHEALTHY
    return HEALTHY


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check endpoint",
    tags=["health"],
)
async def health_check(response: Response) -> HealthResponse:
    """
    Check health status of the application and its dependencies.

    This endpoint verifies:
    - Database connectivity
    - Redis connectivity (reported as "disabled" when the Redis cache tier
      is turned off)

    and reports the in-memory cache statistics.

    Returns:
        HealthResponse: Health status of the service and dependencies.
        Returns 503 Service Unavailable if any service is unhealthy.
    """
    db_status = await check_database()
    redis_status = await check_redis()

    overall_status = (
        UNHEALTHY if UNHEALTHY in (db_status, redis_status) else HEALTHY
    )
    if overall_status == UNHEALTHY:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status=overall_status,
        database=db_status,
        redis=redis_status,
        cache=await get_cache_manager().get_stats(),
    )
