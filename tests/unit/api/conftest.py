"""API test fixtures.

The app is built with ``create_app`` and driven through httpx's ASGI
transport, so middleware and exception handlers run as in production.
Services are real and backed by an in-memory stand-in for the Redis
commands the repositories use; only the caller's identity is overridden.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from redis.exceptions import ConnectionError as RedisConnectionError

from app.auth.dependencies import CurrentUser, get_current_user
from app.core.config import Settings
from app.core.config.settings import ExportSettings
from app.database.repositories import (
    RecipeRepository,
    SavedListRepository,
    UserListsRepository,
)
from app.factory import create_app
from app.services.recipes import RecipeService
from app.services.saved_lists import SavedListService
from app.services.shopping import ShoppingListExporter, ShoppingListService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI


TEST_USER = CurrentUser(id="user-123", roles=["user"])


class InMemoryRedis:
    """Dict-backed replacement for the Redis commands used by repositories."""

    def __init__(self) -> None:
        self.strings: dict[str, bytes] = {}
        self.hashes: dict[str, dict[bytes, bytes]] = {}
        self.fail_writes = False

    def _check_write(self) -> None:
        if self.fail_writes:
            msg = "Connection refused"
            raise RedisConnectionError(msg)

    async def get(self, key: str) -> bytes | None:
        return self.strings.get(key)

    async def set(self, key: str, value: bytes) -> bool:
        self._check_write()
        self.strings[key] = value
        return True

    async def hget(self, key: str, field: str) -> bytes | None:
        return self.hashes.get(key, {}).get(field.encode())

    async def hgetall(self, key: str) -> dict[bytes, bytes]:
        return dict(self.hashes.get(key, {}))

    async def hset(self, key: str, field: str, value: bytes) -> int:
        self._check_write()
        bucket = self.hashes.setdefault(key, {})
        created = field.encode() not in bucket
        bucket[field.encode()] = value
        return int(created)

    async def hdel(self, key: str, field: str) -> int:
        self._check_write()
        removed = self.hashes.get(key, {}).pop(field.encode(), None)
        return 0 if removed is None else 1


@pytest.fixture
def redis_store() -> InMemoryRedis:
    return InMemoryRedis()


@pytest.fixture
def search_client() -> MagicMock:
    """Mock Spoonacular client; tests set return values per call."""
    return MagicMock()


@pytest.fixture
def app(redis_store: InMemoryRedis, search_client: MagicMock) -> FastAPI:
    """Create the app with store-backed services wired to the in-memory store."""
    application = create_app(Settings())

    client: Any = redis_store
    recipe_repository = RecipeRepository(client, "test")
    exporter = ShoppingListExporter(ExportSettings())
    shopping_list_service = ShoppingListService(
        lists_repository=UserListsRepository(client, "test"),
        recipe_repository=recipe_repository,
        exporter=exporter,
    )
    application.state.recipe_service = RecipeService(recipe_repository)
    application.state.shopping_list_service = shopping_list_service
    application.state.saved_list_service = SavedListService(
        repository=SavedListRepository(client, "test"),
        shopping_service=shopping_list_service,
        exporter=exporter,
    )
    application.state.recipe_search_client = search_client

    async def mock_get_current_user() -> CurrentUser:
        return TEST_USER

    application.dependency_overrides[get_current_user] = mock_get_current_user
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
