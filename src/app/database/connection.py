"""Redis document store connection management.

This module provides:
- Async Redis connection pool management
- Connection lifecycle management via lifespan events
- Health check for the readiness probe
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import redis.asyncio as redis
from redis.asyncio.connection import ConnectionPool

from app.core.config import get_settings
from app.observability.logging import get_logger
from app.schemas.enums import HealthStatus


if TYPE_CHECKING:
    from redis.asyncio import Redis

logger = get_logger(__name__)

# Global connection pool and client
_pool: ConnectionPool[Any] | None = None
_client: Redis[Any] | None = None


async def init_redis_pool() -> None:
    """Initialize the Redis connection pool.

    Should be called during application startup (lifespan).
    """
    global _pool, _client  # noqa: PLW0603

    settings = get_settings()

    logger.info(
        "Initializing Redis connection",
        host=settings.redis.host,
        port=settings.redis.port,
        db=settings.redis.db,
    )

    _pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=settings.redis.max_connections,
        decode_responses=False,
    )
    _client = redis.Redis(connection_pool=_pool)

    # Verify connection
    try:
        await _client.ping()
        logger.info("Redis connection established successfully")
    except redis.ConnectionError:
        logger.exception("Failed to connect to Redis")
        raise


async def close_redis_pool() -> None:
    """Close the Redis connection pool.

    Should be called during application shutdown (lifespan).
    """
    global _pool, _client  # noqa: PLW0603

    logger.info("Closing Redis connection")

    if _client:
        await _client.aclose()
        _client = None

    if _pool:
        await _pool.disconnect()
        _pool = None

    logger.info("Redis connection closed")


def get_redis_client() -> Redis[Any]:
    """Get the document store Redis client.

    Raises:
        RuntimeError: If Redis is not initialized.
    """
    if _client is None:
        msg = "Redis client not initialized. Call init_redis_pool() first."
        raise RuntimeError(msg)
    return _client


async def check_redis_health() -> dict[str, str]:
    """Check health of the Redis connection.

    Returns:
        Dictionary with the health status of the document store.
    """
    if _client is None:
        return {"redis": HealthStatus.NOT_INITIALIZED}

    try:
        await _client.ping()
    except (redis.ConnectionError, redis.TimeoutError):
        logger.warning("Redis health check failed")
        return {"redis": HealthStatus.UNHEALTHY}
    return {"redis": HealthStatus.HEALTHY}
