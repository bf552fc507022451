"""Exceptions for the recipe service."""

from __future__ import annotations


class RecipeError(Exception):
    """Base exception for recipe errors."""


class RecipeNotFoundError(RecipeError):
    """Raised when a recipe does not exist or belongs to another user."""

    def __init__(self, recipe_id: str) -> None:
        self.recipe_id = recipe_id
        super().__init__(f"Recipe not found: {recipe_id}")
