"""Spoonacular recipe search client."""

from app.clients.spoonacular.client import SpoonacularClient
from app.clients.spoonacular.exceptions import (
    RecipeSearchError,
    RecipeSearchNotFoundError,
    RecipeSearchQuotaError,
    RecipeSearchResponseError,
    RecipeSearchTimeoutError,
    RecipeSearchUnavailableError,
)


__all__ = [
    "RecipeSearchError",
    "RecipeSearchNotFoundError",
    "RecipeSearchQuotaError",
    "RecipeSearchResponseError",
    "RecipeSearchTimeoutError",
    "RecipeSearchUnavailableError",
    "SpoonacularClient",
]
