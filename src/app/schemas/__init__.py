"""Pydantic schemas for request/response validation."""

from app.schemas.base import (
    APIRequest,
    APIResponse,
    DownstreamResponse,
    StoredDocument,
)
from app.schemas.enums import ExportFormat, HealthStatus
from app.schemas.health import HealthResponse, ReadinessResponse
from app.schemas.recipe import (
    Recipe,
    RecipeCreateRequest,
    RecipeDetails,
    RecipeListResponse,
    RecipeSearchPage,
    RecipeSummary,
    RecipeUpdateRequest,
)
from app.schemas.root import RootResponse
from app.schemas.shopping import (
    IngredientEntry,
    ItemNameRequest,
    SavedShoppingList,
    SavedShoppingListsResponse,
    SavedShoppingListUpdateRequest,
    ShoppingListItem,
    ShoppingListResponse,
    UserListsDocument,
)


__all__ = [
    "APIRequest",
    "APIResponse",
    "DownstreamResponse",
    "ExportFormat",
    "HealthResponse",
    "HealthStatus",
    "IngredientEntry",
    "ItemNameRequest",
    "ReadinessResponse",
    "Recipe",
    "RecipeCreateRequest",
    "RecipeDetails",
    "RecipeListResponse",
    "RecipeSearchPage",
    "RecipeSummary",
    "RecipeUpdateRequest",
    "RootResponse",
    "SavedShoppingList",
    "SavedShoppingListUpdateRequest",
    "SavedShoppingListsResponse",
    "ShoppingListItem",
    "ShoppingListResponse",
    "StoredDocument",
    "UserListsDocument",
]
