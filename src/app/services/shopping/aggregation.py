"""Ingredient list derivation from the selected recipes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.schemas.shopping import IngredientEntry


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from app.schemas.recipe import Recipe


def derive_ingredients(
    selected_recipe_ids: Sequence[str],
    recipes: Iterable[Recipe],
) -> list[IngredientEntry]:
    """Flatten the ingredients of the selected recipes.

    Entries follow selection order, then ingredient order within each recipe.
    Selected ids with no matching recipe contribute nothing.

    Args:
        selected_recipe_ids: Recipe ids in the order they were selected.
        recipes: The user's recipe collection.

    Returns:
        One entry per ingredient line, tagged with its recipe id.
    """
    by_id = {recipe.id: recipe for recipe in recipes}
    entries: list[IngredientEntry] = []
    for recipe_id in selected_recipe_ids:
        recipe = by_id.get(recipe_id)
        if recipe is None:
            continue
        entries.extend(
            IngredientEntry(name=ingredient, recipe_id=recipe.id)
            for ingredient in recipe.ingredients
        )
    return entries
