"""Shopping list service.

The store holds the only durable copy of a user's lists. Every operation
reads the document and the user's recipes, applies its change to a
``ShoppingListState`` and writes the whole document back, all while
holding the per-user lock. Requests in this process therefore never
interleave for one user and each write starts from the latest stored copy,
whichever worker wrote it.

When a write fails the mutated state is kept as unsaved for that user and
used instead of the stored copy until a later write succeeds.
"""

from __future__ import annotations

import asyncio
import weakref
from typing import TYPE_CHECKING, TypeVar

from redis.exceptions import RedisError

from app.observability.logging import get_logger
from app.services.shopping.exceptions import (
    ShoppingListIndexError,
    ShoppingListLoadError,
    ShoppingListPersistenceError,
)
from app.services.shopping.state import ShoppingListState


if TYPE_CHECKING:
    from collections.abc import Callable

    from app.database.repositories.lists import UserListsRepository
    from app.database.repositories.recipes import RecipeRepository
    from app.schemas.enums import ExportFormat
    from app.schemas.recipe import Recipe
    from app.schemas.shopping import UserListsDocument
    from app.services.shopping.exporters import ExportResult, ShoppingListExporter

logger = get_logger(__name__)

T = TypeVar("T")


class ShoppingListService:
    """Operations on the caller's recipe selection, shopping list and favorites."""

    def __init__(
        self,
        lists_repository: UserListsRepository,
        recipe_repository: RecipeRepository,
        exporter: ShoppingListExporter,
    ) -> None:
        """Initialize the service.

        Args:
            lists_repository: Store for the per-user lists document.
            recipe_repository: Store for user recipes, used to derive ingredients.
            exporter: Serializer for list exports.
        """
        self._lists = lists_repository
        self._recipes = recipe_repository
        self._exporter = exporter
        self._unsaved: dict[str, ShoppingListState] = {}
        # Entries disappear once no request holds or waits on the lock
        self._locks: weakref.WeakValueDictionary[str, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    async def shutdown(self) -> None:
        """Drop unsaved states.

        Called during application shutdown.
        """
        if self._unsaved:
            logger.warning(
                "Discarding unsaved shopping lists", users=sorted(self._unsaved)
            )
        self._unsaved.clear()
        logger.info("ShoppingListService shutdown")

    def _lock(self, user_id: str) -> asyncio.Lock:
        lock = self._locks.get(user_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[user_id] = lock
        return lock

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def _load(self, user_id: str) -> tuple[ShoppingListState, list[Recipe]]:
        """Read the user's lists and recipes. Caller holds the user's lock.

        The ingredient list is recomputed from the recipes just read.

        Raises:
            ShoppingListLoadError: If the store could not be read.
        """
        try:
            recipes = await self._recipes.get_all(user_id)
            state = self._unsaved.get(user_id)
            if state is None:
                state = ShoppingListState(await self._lists.get(user_id))
        except RedisError as e:
            logger.exception("Failed to load shopping list", user_id=user_id)
            raise ShoppingListLoadError(
                user_id, "Shopping list could not be loaded"
            ) from e

        state.refresh_ingredients(recipes)
        return state, recipes

    async def get_state(self, user_id: str) -> ShoppingListState:
        """Return the user's current state as stored.

        Raises:
            ShoppingListLoadError: If the store could not be read.
        """
        async with self._lock(user_id):
            state, _ = await self._load(user_id)
        return state

    async def get_document(self, user_id: str) -> UserListsDocument:
        state = await self.get_state(user_id)
        return state.to_document()

    # ------------------------------------------------------------------
    # Recipe selection
    # ------------------------------------------------------------------

    async def toggle_recipe(self, user_id: str, recipe_id: str) -> UserListsDocument:
        """Select or unselect a recipe and recompute the ingredients."""

        def toggle(state: ShoppingListState, recipes: list[Recipe]) -> bool:
            return state.toggle_recipe(recipe_id, recipes)

        selected, document = await self._update(user_id, toggle)
        logger.info(
            "Toggled recipe selection",
            user_id=user_id,
            recipe_id=recipe_id,
            selected=selected,
            ingredients=len(document.ingredients_list),
        )
        return document

    async def clear_ingredients(self, user_id: str) -> UserListsDocument:
        _, document = await self._update(
            user_id, lambda state, _recipes: state.clear_ingredients()
        )
        logger.info("Cleared ingredients", user_id=user_id)
        return document

    # ------------------------------------------------------------------
    # Shopping list
    # ------------------------------------------------------------------

    async def add_item(self, user_id: str, name: str) -> UserListsDocument:
        item, document = await self._update(
            user_id, lambda state, _recipes: state.add_item(name)
        )
        logger.info(
            "Added shopping list item",
            user_id=user_id,
            item=item.name,
            count=item.count,
        )
        return document

    async def remove_item(self, user_id: str, index: int) -> UserListsDocument:
        """Take one unit off the item at ``index``.

        Raises:
            ShoppingListIndexError: If ``index`` is out of range. Nothing is
                written.
        """

        def remove(state: ShoppingListState, _recipes: list[Recipe]) -> int:
            if not 0 <= index < len(state.items):
                raise ShoppingListIndexError(index, len(state.items))
            remaining = state.remove_item(index)
            return remaining.count if remaining else 0

        remaining, document = await self._update(user_id, remove)
        logger.info(
            "Removed shopping list item",
            user_id=user_id,
            index=index,
            remaining=remaining,
        )
        return document

    async def clear_items(self, user_id: str) -> UserListsDocument:
        _, document = await self._update(
            user_id, lambda state, _recipes: state.clear_items()
        )
        logger.info("Cleared shopping list", user_id=user_id)
        return document

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    async def toggle_favorite(self, user_id: str, name: str) -> UserListsDocument:
        favorite, document = await self._update(
            user_id, lambda state, _recipes: state.toggle_favorite(name)
        )
        logger.info("Toggled favorite", user_id=user_id, item=name, favorite=favorite)
        return document

    async def clear_favorites(self, user_id: str) -> UserListsDocument:
        _, document = await self._update(
            user_id, lambda state, _recipes: state.clear_favorites()
        )
        logger.info("Cleared favorites", user_id=user_id)
        return document

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    async def export(self, user_id: str, fmt: ExportFormat) -> ExportResult:
        """Render the current shopping list."""
        state = await self.get_state(user_id)
        return self._exporter.export(state.items, fmt)

    # ------------------------------------------------------------------
    # Read, mutate, write
    # ------------------------------------------------------------------

    async def _update(
        self,
        user_id: str,
        mutate: Callable[[ShoppingListState, list[Recipe]], T],
    ) -> tuple[T, UserListsDocument]:
        """Apply ``mutate`` to the latest state and write the result.

        Raises:
            ShoppingListLoadError: If the store could not be read.
            ShoppingListPersistenceError: If the store rejected the write.
                The mutated state is kept as unsaved.
        """
        async with self._lock(user_id):
            state, recipes = await self._load(user_id)
            result = mutate(state, recipes)
            document = state.to_document()
            try:
                await self._lists.save(user_id, document)
            except RedisError as e:
                self._unsaved[user_id] = state
                logger.exception("Failed to persist shopping list", user_id=user_id)
                raise ShoppingListPersistenceError(
                    user_id, "Shopping list could not be saved"
                ) from e
            self._unsaved.pop(user_id, None)
        return result, document
