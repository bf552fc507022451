"""Recipe-related data mappers.

This module contains functions for transforming Spoonacular payloads into
API response schemas.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from app.schemas.recipe import RecipeDetails, RecipeSearchPage, RecipeSummary


if TYPE_CHECKING:
    from app.clients.spoonacular.schemas import (
        SpoonacularRecipeInformation,
        SpoonacularSearchResponse,
    )

_HTML_TAG = re.compile(r"<[^>]+>")


def build_search_page(response: SpoonacularSearchResponse) -> RecipeSearchPage:
    """Map a complexSearch body to a search page."""
    return RecipeSearchPage(
        results=[
            RecipeSummary(id=hit.id, title=hit.title, image=hit.image)
            for hit in response.results
        ],
        offset=response.offset,
        number=response.number,
        total_results=response.total_results,
    )


def build_recipe_details(info: SpoonacularRecipeInformation) -> RecipeDetails:
    """Map a recipe information body to recipe details.

    Ingredients use the original ingredient line, falling back to the bare
    name. Instructions come from the analyzed steps when present, otherwise
    from the free-text instructions split into lines.
    """
    ingredients = [
        (ingredient.original or ingredient.name).strip()
        for ingredient in info.extended_ingredients
        if (ingredient.original or ingredient.name).strip()
    ]

    instructions = [
        step.step.strip()
        for block in info.analyzed_instructions
        for step in block.steps
        if step.step.strip()
    ]
    if not instructions and info.instructions:
        text = _HTML_TAG.sub("\n", info.instructions)
        instructions = [line.strip() for line in text.splitlines() if line.strip()]

    return RecipeDetails(
        id=info.id,
        title=info.title,
        image=info.image,
        ready_in_minutes=info.ready_in_minutes,
        servings=info.servings,
        ingredients=ingredients,
        instructions=instructions,
        source_url=info.source_url,
    )
