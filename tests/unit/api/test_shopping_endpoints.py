"""Unit tests for shopping list endpoints.

Tests cover:
- Full state responses after every mutation
- Confirmation for destructive actions
- Item index errors
- Exports as attachment downloads
- Store failures reported as 503
- Changes written by other workers
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import orjson
import pytest


if TYPE_CHECKING:
    from fastapi import FastAPI
    from httpx import AsyncClient


pytestmark = pytest.mark.unit

BASE = "/api/v1/shopping-list"
LISTS_KEY = "test:users:user-123:lists"


async def _add(client: AsyncClient, *names: str) -> dict[str, object]:
    body: dict[str, object] = {}
    for name in names:
        response = await client.post(f"{BASE}/items", json={"name": name})
        assert response.status_code == 200
        body = response.json()
    return body


class TestGetShoppingList:
    """Tests for GET /shopping-list."""

    async def test_empty_state(self, client: AsyncClient) -> None:
        response = await client.get(BASE)

        assert response.status_code == 200
        assert response.json() == {
            "selectedRecipes": [],
            "ingredientsList": [],
            "shoppingList": [],
            "favoriteList": [],
        }

    async def test_includes_request_id(self, client: AsyncClient) -> None:
        response = await client.get(BASE, headers={"X-Request-ID": "req-42"})

        assert response.headers["x-request-id"] == "req-42"
        assert response.headers["x-process-time"].endswith("ms")


class TestRecipeSelection:
    """Tests for selection toggling and ingredient clearing."""

    @pytest.fixture
    async def recipe_id(self, client: AsyncClient) -> str:
        """Create a recipe through the API and return its id."""
        response = await client.post(
            "/api/v1/recipes",
            json={"title": "Pancakes", "ingredients": ["2 eggs", "1 cup flour"]},
        )
        assert response.status_code == 201
        return response.json()["id"]

    async def test_toggle_derives_ingredients(
        self, client: AsyncClient, recipe_id: str
    ) -> None:
        response = await client.post(f"{BASE}/selected-recipes/{recipe_id}/toggle")

        assert response.status_code == 200
        body = response.json()
        assert body["selectedRecipes"] == [recipe_id]
        assert body["ingredientsList"] == [
            {"name": "2 eggs", "recipeId": recipe_id},
            {"name": "1 cup flour", "recipeId": recipe_id},
        ]

    async def test_toggle_twice_unselects(
        self, client: AsyncClient, recipe_id: str
    ) -> None:
        await client.post(f"{BASE}/selected-recipes/{recipe_id}/toggle")
        response = await client.post(f"{BASE}/selected-recipes/{recipe_id}/toggle")

        assert response.json()["selectedRecipes"] == []
        assert response.json()["ingredientsList"] == []

    async def test_clear_ingredients_requires_confirmation(
        self, client: AsyncClient, recipe_id: str
    ) -> None:
        await client.post(f"{BASE}/selected-recipes/{recipe_id}/toggle")

        refused = await client.delete(f"{BASE}/ingredients")
        assert refused.status_code == 400
        assert refused.json()["error"] == "CONFIRMATION_REQUIRED"

        response = await client.delete(f"{BASE}/ingredients", params={"confirm": "true"})
        assert response.status_code == 200
        assert response.json()["selectedRecipes"] == []
        assert response.json()["ingredientsList"] == []


class TestItems:
    """Tests for adding, removing and clearing items."""

    async def test_add_merges_case_variants(self, client: AsyncClient) -> None:
        body = await _add(client, "Milk", "milk", "MILK", "bread")

        assert body["shoppingList"] == [
            {"name": "Milk", "count": 3},
            {"name": "bread", "count": 1},
        ]

    async def test_add_persists_document(
        self, client: AsyncClient, redis_store: Any
    ) -> None:
        await _add(client, "eggs")

        stored = orjson.loads(redis_store.strings[LISTS_KEY])
        assert stored["shoppingList"] == [{"name": "eggs", "count": 1}]

    async def test_add_rejects_blank_name(self, client: AsyncClient) -> None:
        response = await client.post(f"{BASE}/items", json={"name": ""})

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "VALIDATION_ERROR"
        assert body["details"][0]["field"] == "body.name"

    async def test_remove_decrements_then_deletes(self, client: AsyncClient) -> None:
        await _add(client, "milk", "milk")

        first = await client.delete(f"{BASE}/items/0")
        second = await client.delete(f"{BASE}/items/0")

        assert first.json()["shoppingList"] == [{"name": "milk", "count": 1}]
        assert second.json()["shoppingList"] == []

    async def test_remove_out_of_range_is_404(self, client: AsyncClient) -> None:
        await _add(client, "milk")

        response = await client.delete(f"{BASE}/items/3")

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"
        state = await client.get(BASE)
        assert state.json()["shoppingList"] == [{"name": "milk", "count": 1}]

    async def test_remove_negative_index_is_422(self, client: AsyncClient) -> None:
        response = await client.delete(f"{BASE}/items/-1")

        assert response.status_code == 422

    async def test_clear_requires_confirmation(self, client: AsyncClient) -> None:
        await _add(client, "milk")

        for params in ({}, {"confirm": "false"}):
            refused = await client.delete(f"{BASE}/items", params=params)
            assert refused.status_code == 400

        state = await client.get(BASE)
        assert len(state.json()["shoppingList"]) == 1

    async def test_clear_persists_empty_list(
        self, client: AsyncClient, redis_store: Any
    ) -> None:
        await _add(client, "milk", "eggs")

        response = await client.delete(f"{BASE}/items", params={"confirm": "true"})

        assert response.status_code == 200
        assert response.json()["shoppingList"] == []
        stored = orjson.loads(redis_store.strings[LISTS_KEY])
        assert stored["shoppingList"] == []


class TestFavorites:
    """Tests for favorites endpoints."""

    async def test_toggle_twice_restores(self, client: AsyncClient) -> None:
        first = await client.post(f"{BASE}/favorites/toggle", json={"name": "salt"})
        second = await client.post(f"{BASE}/favorites/toggle", json={"name": "salt"})

        assert first.json()["favoriteList"] == ["salt"]
        assert second.json()["favoriteList"] == []

    async def test_clear_favorites(self, client: AsyncClient) -> None:
        await client.post(f"{BASE}/favorites/toggle", json={"name": "salt"})

        refused = await client.delete(f"{BASE}/favorites")
        response = await client.delete(f"{BASE}/favorites", params={"confirm": "true"})

        assert refused.status_code == 400
        assert response.json()["favoriteList"] == []


class TestExport:
    """Tests for GET /shopping-list/export/{format}."""

    async def test_csv_download(self, client: AsyncClient) -> None:
        await _add(client, "milk", "milk", "bread")

        response = await client.get(f"{BASE}/export/csv")

        assert response.status_code == 200
        assert response.content == b"milk,2\nbread,1"
        assert response.headers["content-type"].startswith("text/csv")
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="shopping_list.csv"'
        )

    @pytest.mark.parametrize(
        ("fmt", "media_type"),
        [
            ("xlsx", "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"),
            ("pdf", "application/pdf"),
            ("png", "image/png"),
        ],
    )
    async def test_binary_download(
        self, client: AsyncClient, fmt: str, media_type: str
    ) -> None:
        await _add(client, "milk")

        response = await client.get(f"{BASE}/export/{fmt}")

        assert response.status_code == 200
        assert response.headers["content-type"] == media_type
        assert f'filename="shopping_list.{fmt}"' in response.headers["content-disposition"]
        assert response.content

    async def test_unknown_format_is_422(self, client: AsyncClient) -> None:
        response = await client.get(f"{BASE}/export/txt")

        assert response.status_code == 422


class TestWritesFromOtherWorkers:
    """Tests for documents changed in the store between requests."""

    async def test_next_mutation_keeps_their_changes(
        self, client: AsyncClient, redis_store: Any
    ) -> None:
        await _add(client, "milk")
        stored = orjson.loads(redis_store.strings[LISTS_KEY])
        stored["shoppingList"].append({"name": "eggs", "count": 1})
        stored["favoriteList"] = ["salt"]
        redis_store.strings[LISTS_KEY] = orjson.dumps(stored)

        body = await _add(client, "bread")

        assert body["shoppingList"] == [
            {"name": "milk", "count": 1},
            {"name": "eggs", "count": 1},
            {"name": "bread", "count": 1},
        ]
        assert body["favoriteList"] == ["salt"]
        stored = orjson.loads(redis_store.strings[LISTS_KEY])
        assert stored["shoppingList"] == body["shoppingList"]

    async def test_read_reflects_their_changes(
        self, client: AsyncClient, redis_store: Any
    ) -> None:
        await _add(client, "milk")
        redis_store.strings[LISTS_KEY] = orjson.dumps({"shoppingList": []})

        response = await client.get(BASE)

        assert response.json()["shoppingList"] == []


class TestStoreFailures:
    """Tests for document store errors."""

    async def test_failed_write_is_503_and_change_is_kept(
        self, client: AsyncClient, redis_store: Any
    ) -> None:
        redis_store.fail_writes = True

        response = await client.post(f"{BASE}/items", json={"name": "milk"})

        assert response.status_code == 503
        body = response.json()
        assert body["error"] == "PERSISTENCE_ERROR"
        assert body["requestId"]

        state = await client.get(BASE)
        assert state.json()["shoppingList"] == [{"name": "milk", "count": 1}]

    async def test_service_not_started_is_503(
        self, app: FastAPI, client: AsyncClient
    ) -> None:
        app.state.shopping_list_service = None

        response = await client.get(BASE)

        assert response.status_code == 503
        assert response.json()["error"] == "SERVICE_UNAVAILABLE"
