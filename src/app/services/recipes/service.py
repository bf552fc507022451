"""User recipe service.

CRUD over the recipes a user owns. Changing recipes never rewrites the
user's shopping list document; ingredients are recomputed on the next
selection change.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.observability.logging import get_logger
from app.schemas.recipe import Recipe
from app.services.recipes.exceptions import RecipeNotFoundError


if TYPE_CHECKING:
    from app.database.repositories.recipes import RecipeRepository
    from app.schemas.recipe import RecipeCreateRequest, RecipeUpdateRequest

logger = get_logger(__name__)

# Fields an update may reset to null
_NULLABLE_FIELDS = frozenset({"image", "ready_in_minutes", "servings"})


class RecipeService:
    """Create, read, update and delete user-owned recipes."""

    def __init__(self, repository: RecipeRepository) -> None:
        self._repository = repository

    async def create(self, user_id: str, request: RecipeCreateRequest) -> Recipe:
        recipe = Recipe(
            id=uuid.uuid4().hex,
            owner_id=user_id,
            created_at=datetime.now(UTC),
            **request.model_dump(by_alias=False),
        )
        await self._repository.save(recipe)
        logger.info("Created recipe", user_id=user_id, recipe_id=recipe.id)
        return recipe

    async def list_recipes(self, user_id: str) -> list[Recipe]:
        """The caller's recipes, newest first."""
        return await self._repository.get_all(user_id)

    async def get(self, user_id: str, recipe_id: str) -> Recipe:
        """Fetch one recipe.

        Raises:
            RecipeNotFoundError: If the recipe does not exist for this user.
        """
        recipe = await self._repository.get(user_id, recipe_id)
        if recipe is None or recipe.owner_id != user_id:
            raise RecipeNotFoundError(recipe_id)
        return recipe

    async def update(
        self,
        user_id: str,
        recipe_id: str,
        request: RecipeUpdateRequest,
    ) -> Recipe:
        """Apply the fields set in ``request``; the rest stay unchanged."""
        recipe = await self.get(user_id, recipe_id)
        submitted = request.model_dump(by_alias=False, exclude_unset=True)
        changes = {
            key: value
            for key, value in submitted.items()
            if value is not None or key in _NULLABLE_FIELDS
        }
        updated = Recipe.model_validate(
            {**recipe.model_dump(by_alias=False), **changes}
        )
        await self._repository.save(updated)
        logger.info(
            "Updated recipe",
            user_id=user_id,
            recipe_id=recipe_id,
            fields=sorted(changes),
        )
        return updated

    async def delete(self, user_id: str, recipe_id: str) -> None:
        await self.get(user_id, recipe_id)
        await self._repository.delete(user_id, recipe_id)
        logger.info("Deleted recipe", user_id=user_id, recipe_id=recipe_id)
