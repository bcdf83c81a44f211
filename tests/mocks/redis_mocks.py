"""
Mock factory functions for Redis testing.

Provides pre-configured Redis mocks with the operations used by the cache.
"""

from unittest.mock import AsyncMock


def create_mock_redis_connection():
    """
    Creates a mock Redis connection with common methods.

    Returns:
        AsyncMock: Mocked Redis connection
    """
    redis_mock = AsyncMock()

    # Key-value operations
    redis_mock.get = AsyncMock(return_value=None)
    redis_mock.setex = AsyncMock(return_value=True)
    redis_mock.delete = AsyncMock(return_value=1)
    redis_mock.ttl = AsyncMock(return_value=-2)

    # Connection management
    redis_mock.ping = AsyncMock(return_value=True)
    redis_mock.close = AsyncMock()

    return redis_mock
