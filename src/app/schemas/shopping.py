"""Shopping list schemas.

``UserListsDocument`` is the per-user document persisted after every
mutation. Its camelCase wire form is::

    {"selectedRecipes": [...], "ingredientsList": [...],
     "shoppingList": [...], "favoriteList": [...]}
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from app.schemas.base import APIRequest, APIResponse, StoredDocument


class IngredientEntry(StoredDocument):
    """One ingredient line attributed to the recipe it came from."""

    name: str = Field(..., description="Ingredient text as written in the recipe")
    recipe_id: str = Field(..., description="Source recipe identifier")


class ShoppingListItem(StoredDocument):
    """A shopping list entry. Names are unique ignoring case."""

    name: str = Field(..., min_length=1, description="Item name")
    count: int = Field(default=1, ge=1, description="How many times it was added")


class UserListsDocument(StoredDocument):
    """All list state for one user."""

    selected_recipes: list[str] = Field(default_factory=list)
    ingredients_list: list[IngredientEntry] = Field(default_factory=list)
    shopping_list: list[ShoppingListItem] = Field(default_factory=list)
    favorite_list: list[str] = Field(default_factory=list)


class ItemNameRequest(APIRequest):
    """Request body naming a shopping list or favorites item."""

    name: str = Field(..., min_length=1, max_length=255)


# =============================================================================
# Saved Shopping Lists
# =============================================================================


class SavedShoppingList(StoredDocument):
    """A snapshot of a shopping list kept for later."""

    id: str = Field(..., description="Saved list identifier")
    owner_id: str = Field(..., description="User who saved the list")
    items: list[ShoppingListItem] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class SavedShoppingListUpdateRequest(APIRequest):
    """Replacement items for a saved list."""

    items: list[ShoppingListItem]


class SavedShoppingListsResponse(APIResponse):
    """Saved lists, newest first."""

    lists: list[SavedShoppingList]


# =============================================================================
# Responses
# =============================================================================


class ShoppingListResponse(APIResponse):
    """Current list state of the caller."""

    selected_recipes: list[str]
    ingredients_list: list[IngredientEntry]
    shopping_list: list[ShoppingListItem]
    favorite_list: list[str]

    @classmethod
    def from_document(cls, document: UserListsDocument) -> ShoppingListResponse:
        return cls.model_validate(document.model_dump())
