"""User recipe service module."""

from app.services.recipes.service import RecipeService


__all__ = ["RecipeService"]
