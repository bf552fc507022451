"""Recipe schemas.

User-owned recipes are stored as documents and returned as-is by the API.
Search results from Spoonacular are mapped to ``RecipeSearchPage`` and
``RecipeDetails``.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from app.schemas.base import APIRequest, APIResponse, StoredDocument


# =============================================================================
# User Recipes
# =============================================================================


class Recipe(StoredDocument):
    """A recipe saved by a user."""

    id: str = Field(..., description="Recipe identifier")
    title: str = Field(..., min_length=1, description="Recipe title")
    image: str | None = Field(default=None, description="Image URL")
    ingredients: list[str] = Field(
        default_factory=list,
        description="Ingredient lines in recipe order",
    )
    instructions: list[str] = Field(
        default_factory=list,
        description="Instruction steps in order",
    )
    ready_in_minutes: int | None = Field(default=None, ge=0)
    servings: int | None = Field(default=None, ge=1)
    owner_id: str = Field(..., description="User who owns the recipe")
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class RecipeCreateRequest(APIRequest):
    """Request body for creating a recipe."""

    title: str = Field(..., min_length=1, max_length=255)
    image: str | None = None
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    ready_in_minutes: int | None = Field(default=None, ge=0)
    servings: int | None = Field(default=None, ge=1)


class RecipeUpdateRequest(APIRequest):
    """Partial update of a recipe. Omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    image: str | None = None
    ingredients: list[str] | None = None
    instructions: list[str] | None = None
    ready_in_minutes: int | None = Field(default=None, ge=0)
    servings: int | None = Field(default=None, ge=1)


class RecipeListResponse(APIResponse):
    """The caller's recipes."""

    recipes: list[Recipe]


# =============================================================================
# Recipe Search
# =============================================================================


class RecipeSummary(APIResponse):
    """One search hit."""

    id: int
    title: str
    image: str | None = None


class RecipeSearchPage(APIResponse):
    """One page of search results."""

    results: list[RecipeSummary] = Field(default_factory=list)
    offset: int = Field(default=0, ge=0)
    number: int = Field(default=0, ge=0)
    total_results: int = Field(default=0, ge=0)


class RecipeDetails(APIResponse):
    """Full recipe information from the search provider."""

    id: int
    title: str
    image: str | None = None
    ready_in_minutes: int | None = None
    servings: int | None = None
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    source_url: str | None = None
