"""Shopping list endpoints.

Provides:
- GET /shopping-list for the caller's selection, ingredients, list and favorites
- Recipe selection toggling and ingredient clearing
- Shopping list add/remove/clear
- Favorites toggle/clear
- GET /shopping-list/export/{format} for CSV, XLSX, DOCX, PDF and PNG downloads

Every mutation returns the full list state after the change.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, Depends, Path, Query, Response

from app.api.dependencies import get_shopping_list_service
from app.api.responses import download_response
from app.auth.dependencies import CurrentUser, get_current_user
from app.core.exceptions import (
    ConfirmationRequiredError,
    NotFoundError,
    PersistenceError,
    ServiceUnavailableError,
)
from app.schemas.enums import ExportFormat
from app.schemas.shopping import ItemNameRequest, ShoppingListResponse
from app.services.shopping import ShoppingListService  # noqa: TC001
from app.services.shopping.exceptions import (
    ShoppingListIndexError,
    ShoppingListLoadError,
    ShoppingListPersistenceError,
)


if TYPE_CHECKING:
    from collections.abc import Awaitable

    from app.schemas.shopping import UserListsDocument


router = APIRouter(prefix="/shopping-list", tags=["Shopping List"])

_CONFIRM_DESCRIPTION = "Must be true to perform this destructive action"

_Confirm = Annotated[bool, Query(description=_CONFIRM_DESCRIPTION)]

_MUTATION_RESPONSES: dict[int | str, dict[str, str]] = {
    401: {"description": "Authentication required"},
    503: {"description": "Change applied but could not be saved"},
}


async def _apply(operation: Awaitable[UserListsDocument]) -> ShoppingListResponse:
    """Await a service call and translate its errors to API errors."""
    try:
        document = await operation
    except ShoppingListPersistenceError:
        raise PersistenceError() from None
    except ShoppingListLoadError:
        raise ServiceUnavailableError("Shopping list could not be loaded") from None
    return ShoppingListResponse.from_document(document)


@router.get(
    "",
    response_model=ShoppingListResponse,
    summary="Get my shopping list",
)
async def get_shopping_list(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
) -> ShoppingListResponse:
    return await _apply(service.get_document(user.id))


# =============================================================================
# Recipe Selection
# =============================================================================


@router.post(
    "/selected-recipes/{recipeId}/toggle",
    response_model=ShoppingListResponse,
    summary="Select or unselect a recipe",
    description=(
        "Toggles the recipe in the selection and recomputes the ingredient "
        "list from the selected recipes."
    ),
    responses=_MUTATION_RESPONSES,
)
async def toggle_selected_recipe(
    recipe_id: Annotated[str, Path(alias="recipeId")],
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
) -> ShoppingListResponse:
    return await _apply(service.toggle_recipe(user.id, recipe_id))


@router.delete(
    "/ingredients",
    response_model=ShoppingListResponse,
    summary="Clear ingredients",
    description="Unselects every recipe and empties the ingredient list.",
    responses={400: {"description": "Confirmation missing"}, **_MUTATION_RESPONSES},
)
async def clear_ingredients(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
    confirm: _Confirm = False,
) -> ShoppingListResponse:
    if not confirm:
        raise ConfirmationRequiredError("clear ingredients")
    return await _apply(service.clear_ingredients(user.id))


# =============================================================================
# Shopping List Items
# =============================================================================


@router.post(
    "/items",
    response_model=ShoppingListResponse,
    summary="Add an item",
    description=(
        "Adds one unit of the item. A name matching an existing entry "
        "ignoring case increments that entry instead."
    ),
    responses=_MUTATION_RESPONSES,
)
async def add_item(
    request_body: ItemNameRequest,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
) -> ShoppingListResponse:
    return await _apply(service.add_item(user.id, request_body.name))


@router.delete(
    "/items/{index}",
    response_model=ShoppingListResponse,
    summary="Remove one unit of an item",
    description="Decrements the count, removing the entry when it reaches zero.",
    responses={
        404: {"description": "No item at this position"},
        **_MUTATION_RESPONSES,
    },
)
async def remove_item(
    index: Annotated[int, Path(ge=0, description="Zero-based item position")],
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
) -> ShoppingListResponse:
    try:
        return await _apply(service.remove_item(user.id, index))
    except ShoppingListIndexError:
        raise NotFoundError("Shopping list item", index) from None


@router.delete(
    "/items",
    response_model=ShoppingListResponse,
    summary="Clear the shopping list",
    responses={400: {"description": "Confirmation missing"}, **_MUTATION_RESPONSES},
)
async def clear_items(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
    confirm: _Confirm = False,
) -> ShoppingListResponse:
    if not confirm:
        raise ConfirmationRequiredError("clear shopping list")
    return await _apply(service.clear_items(user.id))


# =============================================================================
# Favorites
# =============================================================================


@router.post(
    "/favorites/toggle",
    response_model=ShoppingListResponse,
    summary="Add or remove a favorite",
    responses=_MUTATION_RESPONSES,
)
async def toggle_favorite(
    request_body: ItemNameRequest,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
) -> ShoppingListResponse:
    return await _apply(service.toggle_favorite(user.id, request_body.name))


@router.delete(
    "/favorites",
    response_model=ShoppingListResponse,
    summary="Clear favorites",
    responses={400: {"description": "Confirmation missing"}, **_MUTATION_RESPONSES},
)
async def clear_favorites(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
    confirm: _Confirm = False,
) -> ShoppingListResponse:
    if not confirm:
        raise ConfirmationRequiredError("clear favorites")
    return await _apply(service.clear_favorites(user.id))


# =============================================================================
# Export
# =============================================================================


@router.get(
    "/export/{format}",
    summary="Export the shopping list",
    description="Downloads the shopping list as csv, xlsx, docx, pdf or png.",
    response_class=Response,
    responses={
        200: {"description": "The exported file as an attachment"},
        401: {"description": "Authentication required"},
    },
)
async def export_shopping_list(
    fmt: Annotated[ExportFormat, Path(alias="format")],
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
) -> Response:
    try:
        result = await service.export(user.id, fmt)
    except ShoppingListLoadError:
        raise ServiceUnavailableError("Shopping list could not be loaded") from None
    return download_response(result)
