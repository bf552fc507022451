"""Saved shopping list service.

Snapshots the caller's current shopping list under a new id and manages
those snapshots afterwards.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.observability.logging import get_logger
from app.schemas.shopping import SavedShoppingList
from app.services.saved_lists.exceptions import (
    EmptyShoppingListError,
    SavedListNotFoundError,
)
from app.services.shopping.state import merge_items


if TYPE_CHECKING:
    from app.database.repositories.saved_lists import SavedListRepository
    from app.schemas.enums import ExportFormat
    from app.schemas.shopping import ShoppingListItem
    from app.services.shopping.exporters import ExportResult, ShoppingListExporter
    from app.services.shopping.service import ShoppingListService

logger = get_logger(__name__)


class SavedListService:
    """Save, list, edit, delete and export shopping list snapshots."""

    def __init__(
        self,
        repository: SavedListRepository,
        shopping_service: ShoppingListService,
        exporter: ShoppingListExporter,
    ) -> None:
        self._repository = repository
        self._shopping = shopping_service
        self._exporter = exporter

    async def save_current(self, user_id: str) -> SavedShoppingList:
        """Store the caller's current shopping list as a new saved list.

        Raises:
            EmptyShoppingListError: If the shopping list has no items.
        """
        state = await self._shopping.get_state(user_id)
        if not state.items:
            raise EmptyShoppingListError("Cannot save an empty shopping list")

        saved = SavedShoppingList(
            id=uuid.uuid4().hex,
            owner_id=user_id,
            items=[item.model_copy() for item in state.items],
            created_at=datetime.now(UTC),
        )
        await self._repository.save(saved)
        logger.info(
            "Saved shopping list",
            user_id=user_id,
            list_id=saved.id,
            items=len(saved.items),
        )
        return saved

    async def list_saved(self, user_id: str) -> list[SavedShoppingList]:
        """The caller's saved lists, newest first."""
        return await self._repository.get_all(user_id)

    async def get(self, user_id: str, list_id: str) -> SavedShoppingList:
        """Fetch one saved list.

        Raises:
            SavedListNotFoundError: If the list does not exist for this user.
        """
        saved = await self._repository.get(user_id, list_id)
        if saved is None or saved.owner_id != user_id:
            raise SavedListNotFoundError(list_id)
        return saved

    async def update_items(
        self,
        user_id: str,
        list_id: str,
        items: list[ShoppingListItem],
    ) -> SavedShoppingList:
        """Replace the items of a saved list.

        Items whose names differ only by case are folded into one entry.
        """
        saved = await self.get(user_id, list_id)
        updated = saved.model_copy(update={"items": merge_items(items)})
        await self._repository.save(updated)
        logger.info(
            "Updated saved shopping list",
            user_id=user_id,
            list_id=list_id,
            items=len(updated.items),
        )
        return updated

    async def delete(self, user_id: str, list_id: str) -> None:
        await self.get(user_id, list_id)
        await self._repository.delete(user_id, list_id)
        logger.info("Deleted saved shopping list", user_id=user_id, list_id=list_id)

    async def export(
        self,
        user_id: str,
        list_id: str,
        fmt: ExportFormat,
    ) -> ExportResult:
        """Render a saved list as ``shopping_list_<id>.<ext>``."""
        saved = await self.get(user_id, list_id)
        return self._exporter.export(saved.items, fmt, list_id=saved.id)
