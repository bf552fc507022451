"""Unit tests for RecipeService."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.schemas.recipe import RecipeCreateRequest, RecipeUpdateRequest
from app.services.recipes import RecipeService
from app.services.recipes.exceptions import RecipeNotFoundError


if TYPE_CHECKING:
    from collections.abc import Callable

    from app.schemas.recipe import Recipe


pytestmark = pytest.mark.unit


@pytest.fixture
def repository() -> MagicMock:
    repository = MagicMock()
    repository.get_all = AsyncMock(return_value=[])
    repository.get = AsyncMock(return_value=None)
    repository.save = AsyncMock()
    repository.delete = AsyncMock(return_value=True)
    return repository


@pytest.fixture
def service(repository: MagicMock) -> RecipeService:
    return RecipeService(repository)


class TestCreate:
    """Tests for create."""

    async def test_creates_owned_recipe(
        self, service: RecipeService, repository: MagicMock, user_id: str
    ) -> None:
        request = RecipeCreateRequest(
            title="Pancakes",
            ingredients=["2 eggs", "1 cup flour"],
            instructions=["Mix", "Fry"],
            readyInMinutes=20,
            servings=4,
        )

        recipe = await service.create(user_id, request)

        assert recipe.owner_id == user_id
        assert recipe.title == "Pancakes"
        assert recipe.ingredients == ["2 eggs", "1 cup flour"]
        assert recipe.ready_in_minutes == 20
        assert recipe.servings == 4
        assert len(recipe.id) == 32
        repository.save.assert_awaited_once_with(recipe)

    async def test_ids_are_unique(self, service: RecipeService, user_id: str) -> None:
        request = RecipeCreateRequest(title="Toast")

        first = await service.create(user_id, request)
        second = await service.create(user_id, request)

        assert first.id != second.id


class TestRead:
    """Tests for list_recipes and get."""

    async def test_list_delegates(
        self,
        service: RecipeService,
        repository: MagicMock,
        pancakes: Recipe,
        user_id: str,
    ) -> None:
        repository.get_all.return_value = [pancakes]

        assert await service.list_recipes(user_id) == [pancakes]
        repository.get_all.assert_awaited_once_with(user_id)

    async def test_get_existing(
        self,
        service: RecipeService,
        repository: MagicMock,
        pancakes: Recipe,
        user_id: str,
    ) -> None:
        repository.get.return_value = pancakes

        assert await service.get(user_id, "r1") == pancakes
        repository.get.assert_awaited_once_with(user_id, "r1")

    async def test_get_missing(self, service: RecipeService, user_id: str) -> None:
        with pytest.raises(RecipeNotFoundError) as exc_info:
            await service.get(user_id, "nope")

        assert exc_info.value.recipe_id == "nope"

    async def test_other_owner_reads_as_missing(
        self, service: RecipeService, repository: MagicMock, pancakes: Recipe
    ) -> None:
        repository.get.return_value = pancakes

        with pytest.raises(RecipeNotFoundError):
            await service.get("intruder", "r1")


class TestUpdate:
    """Tests for partial updates."""

    async def test_only_sent_fields_change(
        self,
        service: RecipeService,
        repository: MagicMock,
        pancakes: Recipe,
        user_id: str,
    ) -> None:
        repository.get.return_value = pancakes

        updated = await service.update(
            user_id, "r1", RecipeUpdateRequest(title="Fluffy Pancakes")
        )

        assert updated.title == "Fluffy Pancakes"
        assert updated.ingredients == pancakes.ingredients
        assert updated.id == pancakes.id
        assert updated.owner_id == pancakes.owner_id
        assert updated.created_at == pancakes.created_at
        repository.save.assert_awaited_once_with(updated)

    async def test_null_resets_optional_fields(
        self,
        service: RecipeService,
        repository: MagicMock,
        make_recipe: Callable[..., Recipe],
        user_id: str,
    ) -> None:
        recipe = make_recipe("r9", image="https://img/x.png", servings=2)
        repository.get.return_value = recipe

        updated = await service.update(
            user_id, "r9", RecipeUpdateRequest(image=None, servings=None)
        )

        assert updated.image is None
        assert updated.servings is None

    async def test_null_does_not_clear_required_fields(
        self,
        service: RecipeService,
        repository: MagicMock,
        pancakes: Recipe,
        user_id: str,
    ) -> None:
        """Explicit nulls for title or lists should be ignored."""
        repository.get.return_value = pancakes

        updated = await service.update(
            user_id, "r1", RecipeUpdateRequest(title=None, ingredients=None)
        )

        assert updated.title == pancakes.title
        assert updated.ingredients == pancakes.ingredients

    async def test_update_missing(
        self, service: RecipeService, repository: MagicMock, user_id: str
    ) -> None:
        with pytest.raises(RecipeNotFoundError):
            await service.update(user_id, "nope", RecipeUpdateRequest(title="x"))

        repository.save.assert_not_awaited()


class TestDelete:
    """Tests for delete."""

    async def test_delete(
        self,
        service: RecipeService,
        repository: MagicMock,
        pancakes: Recipe,
        user_id: str,
    ) -> None:
        repository.get.return_value = pancakes

        await service.delete(user_id, "r1")

        repository.delete.assert_awaited_once_with(user_id, "r1")

    async def test_delete_missing(
        self, service: RecipeService, repository: MagicMock, user_id: str
    ) -> None:
        with pytest.raises(RecipeNotFoundError):
            await service.delete(user_id, "nope")

        repository.delete.assert_not_awaited()
