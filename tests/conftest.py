"""Shared test fixtures and configuration for the Recipe Shopping service tests.

Tests run with ``APP_ENV=test`` so settings come from
``config/environments/test``: header auth, quiet logging and no metrics.
"""

from __future__ import annotations

import os
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any


os.environ.setdefault("APP_ENV", "test")

import pytest

from app.core.config import get_settings
from app.schemas.recipe import Recipe
from app.schemas.shopping import ShoppingListItem, UserListsDocument


if TYPE_CHECKING:
    from collections.abc import Callable, Generator


TEST_USER_ID = "user-123"
BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None]:
    """Reload settings for every test so env patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def user_id() -> str:
    return TEST_USER_ID


@pytest.fixture
def make_recipe() -> Callable[..., Recipe]:
    """Factory for recipes owned by the test user.

    ``age`` moves ``created_at`` back in minutes so ordering is predictable.
    """

    def _make(
        recipe_id: str,
        ingredients: list[str] | None = None,
        *,
        owner_id: str = TEST_USER_ID,
        age: int = 0,
        **overrides: Any,
    ) -> Recipe:
        return Recipe(
            id=recipe_id,
            title=overrides.pop("title", f"Recipe {recipe_id}"),
            ingredients=ingredients or [],
            owner_id=owner_id,
            created_at=BASE_TIME - timedelta(minutes=age),
            **overrides,
        )

    return _make


@pytest.fixture
def pancakes(make_recipe: Callable[..., Recipe]) -> Recipe:
    return make_recipe("r1", ["2 eggs", "1 cup flour"], title="Pancakes")


@pytest.fixture
def omelette(make_recipe: Callable[..., Recipe]) -> Recipe:
    return make_recipe("r2", ["3 eggs", "cheese"], title="Omelette", age=5)


@pytest.fixture
def sample_items() -> list[ShoppingListItem]:
    return [
        ShoppingListItem(name="Milk", count=1),
        ShoppingListItem(name="Eggs", count=3),
        ShoppingListItem(name="Bread", count=2),
    ]


@pytest.fixture
def sample_document(sample_items: list[ShoppingListItem]) -> UserListsDocument:
    return UserListsDocument(
        selected_recipes=["r1"],
        shopping_list=sample_items,
        favorite_list=["Milk"],
    )
