"""User recipe repository.

Recipes live in one Redis hash per user, keyed by recipe id.
"""

from __future__ import annotations

from app.database.repositories.base import RedisRepository
from app.schemas.recipe import Recipe


class RecipeRepository(RedisRepository):
    """Repository for user-owned recipes."""

    collection = "recipes"

    async def get_all(self, user_id: str) -> list[Recipe]:
        """All recipes of the user, newest first."""
        raw = await self.client.hgetall(self.key(user_id))
        recipes = [Recipe.model_validate(self.decode(value)) for value in raw.values()]
        return sorted(recipes, key=lambda recipe: recipe.created_at, reverse=True)

    async def get(self, user_id: str, recipe_id: str) -> Recipe | None:
        raw = await self.client.hget(self.key(user_id), recipe_id)
        if raw is None:
            return None
        return Recipe.model_validate(self.decode(raw))

    async def save(self, recipe: Recipe) -> None:
        """Insert or replace a recipe under its owner."""
        await self.client.hset(self.key(recipe.owner_id), recipe.id, self.encode(recipe))

    async def delete(self, user_id: str, recipe_id: str) -> bool:
        """Delete a recipe. Returns False if it did not exist."""
        removed = await self.client.hdel(self.key(user_id), recipe_id)
        return bool(removed)
