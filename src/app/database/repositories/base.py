"""Shared plumbing for Redis-backed repositories.

Documents are stored as orjson-encoded camelCase JSON. Keys are namespaced
as ``{key_prefix}:users:{user_id}:{collection}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import orjson

from app.core.config import get_settings
from app.database.connection import get_redis_client


if TYPE_CHECKING:
    from pydantic import BaseModel
    from redis.asyncio import Redis


class RedisRepository:
    """Base class holding the Redis client and key layout."""

    collection: str = ""

    def __init__(
        self,
        client: Redis[Any] | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize repository with optional client.

        Args:
            client: Redis client. If None, uses the global client.
            key_prefix: Namespace for all keys. Defaults to the configured one.
        """
        self._client = client
        self._key_prefix = (
            key_prefix if key_prefix is not None else get_settings().redis.key_prefix
        )

    @property
    def client(self) -> Redis[Any]:
        """Get the Redis client."""
        if self._client is not None:
            return self._client
        return get_redis_client()

    def key(self, user_id: str) -> str:
        """Redis key of this collection for ``user_id``."""
        return f"{self._key_prefix}:users:{user_id}:{self.collection}"

    @staticmethod
    def encode(document: BaseModel) -> bytes:
        return orjson.dumps(document.model_dump(mode="json", by_alias=True))

    @staticmethod
    def decode(raw: bytes | str) -> Any:
        return orjson.loads(raw)
