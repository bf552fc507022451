"""Data mappers for transforming between different schema representations.

This package contains functions for mapping Spoonacular payloads to API
responses.
"""

from app.mappers.recipe import build_recipe_details, build_search_page


__all__ = [
    "build_recipe_details",
    "build_search_page",
]
