"""Per-user list document repository.

One JSON document per user holds the selected recipes, the derived
ingredients, the shopping list and the favorites. It is overwritten in full
on every write.
"""

from __future__ import annotations

from app.database.repositories.base import RedisRepository
from app.observability.logging import get_logger
from app.schemas.shopping import UserListsDocument


logger = get_logger(__name__)


class UserListsRepository(RedisRepository):
    """Repository for ``UserListsDocument``."""

    collection = "lists"

    async def get(self, user_id: str) -> UserListsDocument:
        """Load the user's lists.

        A missing document reads as four empty lists.
        """
        raw = await self.client.get(self.key(user_id))
        if raw is None:
            logger.debug("No lists document stored yet", user_id=user_id)
            return UserListsDocument()
        return UserListsDocument.model_validate(self.decode(raw))

    async def save(self, user_id: str, document: UserListsDocument) -> None:
        """Overwrite the user's lists document."""
        await self.client.set(self.key(user_id), self.encode(document))
