"""Saved shopping list repository.

Saved lists live in one Redis hash per user, keyed by list id.
"""

from __future__ import annotations

from app.database.repositories.base import RedisRepository
from app.schemas.shopping import SavedShoppingList


class SavedListRepository(RedisRepository):
    """Repository for saved shopping list snapshots."""

    collection = "saved-lists"

    async def get_all(self, user_id: str) -> list[SavedShoppingList]:
        """All saved lists of the user, newest first."""
        raw = await self.client.hgetall(self.key(user_id))
        saved = [
            SavedShoppingList.model_validate(self.decode(value))
            for value in raw.values()
        ]
        return sorted(saved, key=lambda entry: entry.created_at, reverse=True)

    async def get(self, user_id: str, list_id: str) -> SavedShoppingList | None:
        raw = await self.client.hget(self.key(user_id), list_id)
        if raw is None:
            return None
        return SavedShoppingList.model_validate(self.decode(raw))

    async def save(self, saved_list: SavedShoppingList) -> None:
        """Insert or replace a saved list under its owner."""
        await self.client.hset(
            self.key(saved_list.owner_id),
            saved_list.id,
            self.encode(saved_list),
        )

    async def delete(self, user_id: str, list_id: str) -> bool:
        """Delete a saved list. Returns False if it did not exist."""
        removed = await self.client.hdel(self.key(user_id), list_id)
        return bool(removed)
